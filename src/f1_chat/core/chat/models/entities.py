"""
목적: Chat 도메인 엔티티 모델을 정의한다.
설명: 대화 역할과 불변 대화 턴을 Pydantic 기반으로 제공한다.
디자인 패턴: 엔티티 패턴
참조: src/f1_chat/shared/chat/memory/session_store.py, src/f1_chat/core/chat/services/generation.py
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """UTC 기준 timezone-aware 현재 시각을 반환한다."""

    return datetime.now(timezone.utc)


class ChatRole(str, Enum):
    """대화 메시지 역할 타입."""

    USER = "user"
    ASSISTANT = "assistant"


class ConversationTurn(BaseModel):
    """대화 턴 엔티티. 한 번 만들어지면 바뀌지 않는다."""

    model_config = ConfigDict(frozen=True)

    role: ChatRole
    content: str
    timestamp: datetime = Field(default_factory=utc_now)

    @classmethod
    def user(cls, content: str) -> "ConversationTurn":
        """사용자 턴을 생성한다."""

        return cls(role=ChatRole.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "ConversationTurn":
        """어시스턴트 턴을 생성한다."""

        return cls(role=ChatRole.ASSISTANT, content=content)
