"""
목적: 그라운딩 프롬프트 조립기를 제공한다.
설명: 검색 컨텍스트, 질문, 선택적 언어 안내로 시스템 지시문을 만들고 이전 대화 턴 앞에 붙인다.
디자인 패턴: 빌더
참조: src/f1_chat/core/chat/prompts/grounding_prompt.py, src/f1_chat/core/chat/models/entities.py
"""

from __future__ import annotations

from typing import Iterable, Optional

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.prompts import PromptTemplate

from f1_chat.core.chat.models import ChatRole, ConversationTurn
from f1_chat.core.chat.prompts import GROUNDING_PROMPT, LANGUAGE_BLOCK_PROMPT


class PromptAssembler:
    """시스템 지시문 + 대화 이력 메시지 조립기.

    Args:
        template: 그라운딩 프롬프트 템플릿.
        language_template: 언어 안내 블록 템플릿.
        default_locale: 요청에 locale이 없을 때 쓸 기본값. None이면 블록을 생략한다.
    """

    def __init__(
        self,
        template: PromptTemplate = GROUNDING_PROMPT,
        language_template: PromptTemplate = LANGUAGE_BLOCK_PROMPT,
        default_locale: Optional[str] = None,
    ) -> None:
        self._template = template
        self._language_template = language_template
        self._default_locale = default_locale

    def build_system_prompt(self, question: str, context: str, locale: Optional[str] = None) -> str:
        """시스템 지시문 문자열을 만든다."""

        resolved_locale = (locale or self._default_locale or "").strip()
        language_block = (
            self._language_template.format(locale=resolved_locale) if resolved_locale else ""
        )
        return self._template.format(
            language_block=language_block,
            context=context,
            question=question,
        )

    def build_messages(
        self,
        history: Iterable[ConversationTurn],
        question: str,
        context: str,
        locale: Optional[str] = None,
    ) -> list[BaseMessage]:
        """시스템 지시문을 맨 앞에 두고 이력 턴을 순서대로 변환한다.

        history에는 마지막 사용자 질문까지 포함되어야 한다.
        """

        messages: list[BaseMessage] = [
            SystemMessage(content=self.build_system_prompt(question, context, locale))
        ]
        for turn in history:
            if turn.role == ChatRole.USER:
                messages.append(HumanMessage(content=turn.content))
            else:
                messages.append(AIMessage(content=turn.content))
        return messages
