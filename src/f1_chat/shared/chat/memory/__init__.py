"""
목적: 세션 저장소 공개 API를 제공한다.
설명: 인메모리/Redis 세션 저장소를 노출한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/shared/chat/memory/session_store.py, src/f1_chat/shared/chat/memory/redis_session_store.py
"""

from f1_chat.shared.chat.memory.redis_session_store import RedisSessionStore
from f1_chat.shared.chat.memory.session_store import InMemorySessionStore

__all__ = ["InMemorySessionStore", "RedisSessionStore"]
