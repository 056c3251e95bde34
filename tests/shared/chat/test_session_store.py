"""
목적: 인메모리 세션 저장소 동작을 검증한다.
설명: 추가 순서 보존, TTL 만료와 갱신, 최대 턴 제한을 가짜 시계로 확인한다.
디자인 패턴: 테스트 케이스
참조: src/f1_chat/shared/chat/memory/session_store.py
"""

from __future__ import annotations

from f1_chat.core.chat.models import ChatRole, ConversationTurn
from f1_chat.shared.chat.memory import InMemorySessionStore


class _FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_turns_are_returned_in_arrival_order_until_ttl() -> None:
    """사용자/어시스턴트 턴이 순서대로 조회되고 TTL 이후 사라지는지 검증한다."""

    clock = _FakeClock()
    store = InMemorySessionStore(ttl_seconds=60, clock=clock)

    store.append("s1", ConversationTurn.user("Who won?"))
    store.append("s1", ConversationTurn.assistant("Lewis Hamilton."))

    turns = store.get("s1")
    assert [turn.role for turn in turns] == [ChatRole.USER, ChatRole.ASSISTANT]
    assert [turn.content for turn in turns] == ["Who won?", "Lewis Hamilton."]
    assert store.exists("s1") is True

    clock.now += 61
    assert store.get("s1") == []
    assert store.exists("s1") is False


def test_append_refreshes_ttl() -> None:
    """추가할 때마다 TTL이 갱신되는지 검증한다."""

    clock = _FakeClock()
    store = InMemorySessionStore(ttl_seconds=60, clock=clock)

    store.append("s1", ConversationTurn.user("first"))
    clock.now += 50
    store.append("s1", ConversationTurn.user("second"))
    clock.now += 50

    assert [turn.content for turn in store.get("s1")] == ["first", "second"]


def test_max_turns_keeps_latest() -> None:
    """최대 턴 수를 넘으면 오래된 턴부터 버리는지 검증한다."""

    store = InMemorySessionStore(max_turns=2)
    for content in ("a", "b", "c"):
        store.append("s1", ConversationTurn.user(content))

    assert [turn.content for turn in store.get("s1")] == ["b", "c"]


def test_unknown_session_is_empty() -> None:
    """없는 세션은 빈 목록인지 검증한다."""

    assert InMemorySessionStore().get("missing") == []


def test_append_sweeps_untouched_expired_sessions() -> None:
    """다시 조회되지 않은 만료 세션도 추가 시점에 정리되는지 검증한다."""

    clock = _FakeClock()
    store = InMemorySessionStore(ttl_seconds=60, clock=clock)
    for index in range(1000):
        store.append(f"old-{index}", ConversationTurn.user("Who won?"))

    clock.now = 10000.0
    store.append("fresh", ConversationTurn.user("And in 2024?"))

    assert store.size() == 1
    assert store.exists("fresh") is True


def test_refreshed_session_survives_sweep() -> None:
    """TTL이 갱신된 세션은 이전 만료 시각으로 정리되지 않는지 검증한다."""

    clock = _FakeClock()
    store = InMemorySessionStore(ttl_seconds=60, clock=clock)
    store.append("s1", ConversationTurn.user("Who won?"))
    clock.now += 50
    store.append("s1", ConversationTurn.assistant("Lewis."))

    clock.now += 20
    store.append("s2", ConversationTurn.user("Hi"))

    assert store.size() == 2
    assert len(store.get("s1")) == 2
