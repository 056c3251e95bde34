"""
목적: LanceDB 엔진 공개 API를 제공한다.
설명: 엔진과 스키마 어댑터를 노출한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/integrations/vector/engines/lancedb/engine.py, src/f1_chat/integrations/vector/engines/lancedb/schema_adapter.py
"""

from f1_chat.integrations.vector.engines.lancedb.engine import LanceDBVectorEngine
from f1_chat.integrations.vector.engines.lancedb.schema_adapter import LanceSchemaAdapter

__all__ = ["LanceDBVectorEngine", "LanceSchemaAdapter"]
