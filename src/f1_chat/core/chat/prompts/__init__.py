"""
목적: Chat 프롬프트 공개 API를 제공한다.
설명: 그라운딩 프롬프트, 언어 안내 블록 프롬프트, 검색 에이전트 프롬프트를 노출한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/core/chat/prompts/grounding_prompt.py, src/f1_chat/core/chat/prompts/agent_prompt.py
"""

from f1_chat.core.chat.prompts.agent_prompt import AGENT_FALLBACK_ANSWER, AGENT_SYSTEM_PROMPT
from f1_chat.core.chat.prompts.grounding_prompt import GROUNDING_PROMPT, LANGUAGE_BLOCK_PROMPT

__all__ = ["AGENT_FALLBACK_ANSWER", "AGENT_SYSTEM_PROMPT", "GROUNDING_PROMPT", "LANGUAGE_BLOCK_PROMPT"]
