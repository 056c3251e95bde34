"""
목적: Redis 기반 Chat 세션 저장소를 제공한다.
설명: 세션별 Redis 리스트에 턴 JSON을 RPUSH하고 같은 트랜잭션에서 EXPIRE로 TTL을 갱신한다.
디자인 패턴: 저장소 패턴, 어댑터 패턴
참조: src/f1_chat/shared/chat/memory/session_store.py, src/f1_chat/core/chat/models/entities.py
"""

from __future__ import annotations

from typing import Any, Optional

import redis

from f1_chat.core.chat.models import ConversationTurn
from f1_chat.shared.exceptions import BaseAppException, ErrorKind, ExceptionDetail
from f1_chat.shared.logging import Logger, create_default_logger


class RedisSessionStore:
    """Redis 리스트 기반 세션 저장소.

    Args:
        url: Redis 접속 URL. client가 없을 때 사용한다.
        key_prefix: 세션 키 접두사.
        ttl_seconds: 세션 유지 시간(초).
        client: 주입할 Redis 클라이언트(테스트/공유 연결용).
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        url: str = "redis://localhost:6379",
        key_prefix: str = "f1chat:session",
        ttl_seconds: int = 86400,
        client: Optional[Any] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds는 0보다 커야 합니다.")
        self._url = url
        self._key_prefix = key_prefix.rstrip(":")
        self._ttl_seconds = int(ttl_seconds)
        self._client = client
        self._logger = logger or create_default_logger("RedisSessionStore")

    def key(self, session_id: str) -> str:
        """세션의 Redis 키를 반환한다."""

        return f"{self._key_prefix}:{session_id}"

    def append(self, session_id: str, turn: ConversationTurn) -> None:
        """턴을 추가하고 TTL을 갱신한다."""

        key = self.key(session_id)
        try:
            pipeline = self._require_client().pipeline(transaction=True)
            pipeline.rpush(key, turn.model_dump_json())
            pipeline.expire(key, self._ttl_seconds)
            pipeline.execute()
        except redis.RedisError as error:
            raise _store_error("append", session_id, error) from error
        self._logger.debug(f"session.append: session_id={session_id}, role={turn.role.value}")

    def get(self, session_id: str) -> list[ConversationTurn]:
        """도착 순서대로 턴을 반환한다."""

        try:
            raw_items = self._require_client().lrange(self.key(session_id), 0, -1)
        except redis.RedisError as error:
            raise _store_error("get", session_id, error) from error
        turns: list[ConversationTurn] = []
        for raw in raw_items or []:
            if isinstance(raw, (bytes, bytearray)):
                raw = bytes(raw).decode("utf-8")
            turns.append(ConversationTurn.model_validate_json(raw))
        return turns

    def exists(self, session_id: str) -> bool:
        """세션 키 존재 여부를 반환한다."""

        try:
            return int(self._require_client().exists(self.key(session_id))) > 0
        except redis.RedisError as error:
            raise _store_error("exists", session_id, error) from error

    def close(self) -> None:
        """Redis 연결을 종료한다."""

        if self._client is None:
            return
        close = getattr(self._client, "close", None)
        if callable(close):
            close()
        self._client = None

    def _require_client(self) -> Any:
        if self._client is None:
            self._client = redis.Redis.from_url(self._url)
            self._logger.info("Redis 세션 저장소 연결이 초기화되었습니다.")
        return self._client


def _store_error(action: str, session_id: str, error: Exception) -> BaseAppException:
    return BaseAppException(
        "세션 저장소 요청에 실패했습니다.",
        ExceptionDetail(
            code="SESSION_STORE_ERROR",
            kind=ErrorKind.UPSTREAM,
            cause=str(error),
            metadata={"action": action, "session_id": session_id},
        ),
        error,
    )
