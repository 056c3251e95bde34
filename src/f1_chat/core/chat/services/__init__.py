"""
목적: Chat 서비스 공개 API를 제공한다.
설명: 검색기, 프롬프트 조립기, 생성 오케스트레이터, 검색 도구 에이전트를 노출한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/core/chat/services/generation.py, src/f1_chat/core/chat/services/agent.py
"""

from f1_chat.core.chat.services.agent import (
    AgentAnswer,
    F1KnowledgeAgent,
    SEARCH_TOOL_NAME,
    build_search_tool,
)
from f1_chat.core.chat.services.generation import (
    ChatRequest,
    GenerationOrchestrator,
    PreparedGeneration,
    TranscriptAccumulator,
    extract_text,
)
from f1_chat.core.chat.services.prompt_assembler import PromptAssembler
from f1_chat.core.chat.services.retriever import RetrievalResult, Retriever

__all__ = [
    "AgentAnswer",
    "ChatRequest",
    "F1KnowledgeAgent",
    "GenerationOrchestrator",
    "PreparedGeneration",
    "PromptAssembler",
    "RetrievalResult",
    "Retriever",
    "SEARCH_TOOL_NAME",
    "TranscriptAccumulator",
    "build_search_tool",
    "extract_text",
]
