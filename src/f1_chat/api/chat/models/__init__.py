"""
목적: Chat API 요청/응답 모델을 제공한다.
설명: 스트리밍 채팅 요청과 세션 조회 응답 DTO를 정의한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/f1_chat/api/chat/routers/stream_chat.py, src/f1_chat/api/chat/routers/get_session.py
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from f1_chat.core.chat.models import ChatRole, ConversationTurn
from f1_chat.core.chat.services import ChatRequest


class ChatMessageIn(BaseModel):
    """요청 대화 메시지 모델."""

    role: Literal["user", "assistant"]
    content: str = Field(..., description="메시지 본문")

    def to_turn(self) -> ConversationTurn:
        return ConversationTurn(role=ChatRole(self.role), content=self.content)


class ChatStreamRequest(BaseModel):
    """채팅 스트리밍 요청 모델."""

    messages: list[ChatMessageIn] = Field(..., min_length=1, description="대화 이력(마지막은 사용자 질문)")
    session_id: str | None = Field(default=None, description="세션 식별자(없으면 기록하지 않음)")
    locale: str | None = Field(default=None, description="브라우저 언어 힌트(예: ko-KR)")
    regenerate: bool = Field(default=False, description="마지막 사용자 질문에 대한 재생성 여부")

    def to_chat_request(self) -> ChatRequest:
        """도메인 요청으로 변환한다."""

        return ChatRequest(
            messages=[message.to_turn() for message in self.messages],
            session_id=self.session_id,
            locale=self.locale,
            regenerate=self.regenerate,
        )


class SessionTurnResponse(BaseModel):
    """세션 턴 응답 모델."""

    role: ChatRole
    content: str
    timestamp: datetime


class SessionTurnsResponse(BaseModel):
    """세션 대화 기록 응답 모델."""

    session_id: str
    turns: list[SessionTurnResponse]


__all__ = [
    "ChatMessageIn",
    "ChatStreamRequest",
    "SessionTurnResponse",
    "SessionTurnsResponse",
]
