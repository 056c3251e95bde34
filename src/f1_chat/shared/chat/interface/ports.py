"""
목적: Chat 실행 계층 공통 추상체를 정의한다.
설명: 세션 저장소, 임베더, 코퍼스 검색 인터페이스를 Protocol로 제공한다.
디자인 패턴: 포트-어댑터(Port/Protocol)
참조: src/f1_chat/shared/chat/memory, src/f1_chat/core/chat/services/retriever.py
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from f1_chat.core.chat.models import ConversationTurn
from f1_chat.integrations.vector import VectorMatch


class SessionStorePort(Protocol):
    """TTL이 있는 append-only 세션 로그 포트."""

    def append(self, session_id: str, turn: ConversationTurn) -> None:
        """턴을 원자적으로 추가하고 TTL을 갱신한다."""

    def get(self, session_id: str) -> list[ConversationTurn]:
        """도착 순서대로 턴을 반환한다. 없거나 만료되면 빈 리스트."""

    def exists(self, session_id: str) -> bool:
        """세션 존재 여부를 반환한다."""

    def close(self) -> None:
        """자원을 정리한다."""


class EmbedderPort(Protocol):
    """텍스트 임베딩 포트."""

    def embed(self, text: str) -> list[float]:
        """텍스트를 벡터로 변환한다."""

    async def aembed(self, text: str) -> list[float]:
        """텍스트를 비동기로 벡터로 변환한다."""


class NearestNeighborPort(Protocol):
    """최근접 검색 포트."""

    def nearest_neighbors(self, vector: Sequence[float], k: int) -> list[VectorMatch]:
        """유사도 내림차순 최대 k건을 반환한다."""
