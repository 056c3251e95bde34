"""
목적: 벡터 엔진 구현체를 노출한다.
설명: 테스트/로컬용 인메모리 엔진과 파일 기반 LanceDB 엔진을 제공한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/integrations/vector/engines/memory.py, src/f1_chat/integrations/vector/engines/lancedb/engine.py
"""

from f1_chat.integrations.vector.engines.lancedb import LanceDBVectorEngine
from f1_chat.integrations.vector.engines.memory import InMemoryVectorEngine

__all__ = ["InMemoryVectorEngine", "LanceDBVectorEngine"]
