"""
목적: 인메모리 큐 동작을 검증한다.
설명: 적재/조회, 타임아웃, 종료 신호, 미완료 작업 수 집계를 확인한다.
디자인 패턴: 테스트 케이스
참조: src/f1_chat/shared/runtime/queue/in_memory_queue.py
"""

from __future__ import annotations

import queue as queue_module

import pytest

from f1_chat.shared.runtime.queue import InMemoryQueue, QueueClosedError, QueueConfig


def test_put_and_get_round_trip() -> None:
    """적재한 아이템을 그대로 꺼내는지 검증한다."""

    queue = InMemoryQueue()
    item = queue.put({"job": 1})

    fetched = queue.get(timeout=0.1)

    assert fetched is not None
    assert fetched.item_id == item.item_id
    assert fetched.payload == {"job": 1}
    assert queue.pending() == 1
    queue.task_done()
    assert queue.pending() == 0


def test_get_returns_none_on_timeout() -> None:
    """빈 큐 조회는 타임아웃 후 None인지 검증한다."""

    assert InMemoryQueue().get(timeout=0.01) is None


def test_full_queue_raises_after_timeout() -> None:
    """가득 찬 큐 적재가 Full을 던지는지 검증한다."""

    queue = InMemoryQueue(QueueConfig(max_size=1))
    queue.put("a")

    with pytest.raises(queue_module.Full):
        queue.put("b", timeout=0.01)


def test_closed_queue_rejects_put_and_drains_sentinel() -> None:
    """닫힌 큐는 쓰기를 거부하고 종료 신호를 None으로 돌려주는지 검증한다."""

    queue = InMemoryQueue()
    queue.close()

    with pytest.raises(QueueClosedError):
        queue.put("late")
    assert queue.get(timeout=0.01) is None
    assert queue.is_closed() is True
    assert queue.pending() == 0
