"""
목적: LLM 연동 공개 API를 제공한다.
설명: 로깅 래퍼 클라이언트와 설정 기반 팩토리를 노출한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/integrations/llm/client.py, src/f1_chat/integrations/llm/factory.py
"""

from f1_chat.integrations.llm.client import LLMClient
from f1_chat.integrations.llm.factory import build_chat_model, create_llm_client

__all__ = ["LLMClient", "build_chat_model", "create_llm_client"]
