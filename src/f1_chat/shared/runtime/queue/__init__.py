"""
목적: 런타임 큐 공개 API를 제공한다.
설명: 큐 구현체와 모델을 노출한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/shared/runtime/queue/in_memory_queue.py, src/f1_chat/shared/runtime/queue/model.py
"""

from f1_chat.shared.runtime.queue.in_memory_queue import InMemoryQueue, QueueClosedError
from f1_chat.shared.runtime.queue.model import QueueConfig, QueueItem

__all__ = ["InMemoryQueue", "QueueClosedError", "QueueConfig", "QueueItem"]
