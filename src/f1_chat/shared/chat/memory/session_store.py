"""
목적: 인메모리 Chat 세션 저장소를 제공한다.
설명: 세션별 append-only 턴 목록을 보관하고 마지막 추가 시점 기준 TTL이 지나면 세션을 폐기한다.
디자인 패턴: 저장소 패턴
참조: src/f1_chat/shared/chat/interface/ports.py, src/f1_chat/core/chat/models/entities.py
"""

from __future__ import annotations

import heapq
import threading
import time
from collections import deque
from typing import Callable, Optional

from f1_chat.core.chat.models import ConversationTurn
from f1_chat.shared.logging import Logger, create_default_logger


class InMemorySessionStore:
    """세션 메시지 메모리 저장소.

    Args:
        ttl_seconds: 세션 유지 시간(초). 추가할 때마다 갱신된다.
        max_turns: 세션별 최대 보관 턴 수. None이면 무제한.
        clock: 단조 시계 함수(테스트 주입용).
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        ttl_seconds: float = 86400,
        max_turns: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
        logger: Optional[Logger] = None,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds는 0보다 커야 합니다.")
        self._ttl_seconds = ttl_seconds
        self._max_turns = max_turns
        self._clock = clock
        self._logger = logger or create_default_logger("InMemorySessionStore")
        self._lock = threading.RLock()
        self._sessions: dict[str, deque[ConversationTurn]] = {}
        self._expires_at: dict[str, float] = {}
        # (만료 시각, session_id) 최소 힙. 갱신된 세션의 이전 항목은 꺼낼 때 무시한다.
        self._expiry_heap: list[tuple[float, str]] = []

    def append(self, session_id: str, turn: ConversationTurn) -> None:
        """세션 리스트 우측에 턴을 추가하고 TTL을 갱신한다.

        추가할 때마다 만료된 다른 세션도 함께 정리한다.
        """

        with self._lock:
            self._sweep_expired()
            bucket = self._sessions.get(session_id)
            if bucket is None:
                bucket = deque(maxlen=self._max_turns)
                self._sessions[session_id] = bucket
            bucket.append(turn)
            expires_at = self._clock() + self._ttl_seconds
            self._expires_at[session_id] = expires_at
            heapq.heappush(self._expiry_heap, (expires_at, session_id))

    def get(self, session_id: str) -> list[ConversationTurn]:
        """도착 순서대로 턴을 반환한다."""

        with self._lock:
            self._evict_if_expired(session_id)
            return list(self._sessions.get(session_id, ()))

    def exists(self, session_id: str) -> bool:
        """세션 보유 여부를 반환한다."""

        with self._lock:
            self._evict_if_expired(session_id)
            return session_id in self._sessions

    def size(self) -> int:
        """보관 중인 세션 수를 반환한다. 만료됐지만 아직 정리되지 않은 세션도 포함한다."""

        with self._lock:
            return len(self._sessions)

    def close(self) -> None:
        with self._lock:
            self._sessions.clear()
            self._expires_at.clear()
            self._expiry_heap.clear()

    def _evict_if_expired(self, session_id: str) -> None:
        expires_at = self._expires_at.get(session_id)
        if expires_at is None or self._clock() < expires_at:
            return
        self._sessions.pop(session_id, None)
        self._expires_at.pop(session_id, None)
        self._logger.debug(f"session.expired: session_id={session_id}")

    def _sweep_expired(self) -> None:
        now = self._clock()
        swept = 0
        while self._expiry_heap and self._expiry_heap[0][0] <= now:
            expires_at, session_id = heapq.heappop(self._expiry_heap)
            if self._expires_at.get(session_id) != expires_at:
                continue
            self._sessions.pop(session_id, None)
            self._expires_at.pop(session_id, None)
            swept += 1
        if swept:
            self._logger.debug(f"session.swept: count={swept}")
