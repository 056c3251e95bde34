"""
목적: 인메모리 런타임 큐를 제공한다.
설명: 수집 요청과 백그라운드 워커 사이의 작업 전달에 쓰며 블로킹/타임아웃/종료 신호를 지원한다.
디자인 패턴: 어댑터 패턴
참조: src/f1_chat/shared/runtime/queue/model.py, src/f1_chat/core/ingestion/executor.py
"""

from __future__ import annotations

import queue as queue_module
from typing import Optional

from f1_chat.shared.logging import Logger, create_default_logger
from f1_chat.shared.runtime.queue.model import QueueConfig, QueueItem


class QueueClosedError(RuntimeError):
    """닫힌 큐에 쓰기를 시도했을 때 발생한다."""


class InMemoryQueue:
    """인메모리 큐 구현체."""

    _SENTINEL = object()

    def __init__(
        self,
        config: Optional[QueueConfig] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._config = config or QueueConfig()
        self._queue: queue_module.Queue = queue_module.Queue(maxsize=self._config.max_size)
        self._logger = logger or create_default_logger("InMemoryQueue")
        self._closed = False

    @property
    def config(self) -> QueueConfig:
        """큐 설정을 반환한다."""

        return self._config

    def put(self, payload: object, timeout: Optional[float] = None) -> QueueItem:
        """큐에 아이템을 추가한다.

        Raises:
            QueueClosedError: 이미 닫힌 큐일 때.
            queue.Full: 제한 시간 안에 빈 자리가 나지 않을 때.
        """

        if self._closed:
            raise QueueClosedError("이미 닫힌 큐입니다.")
        item = QueueItem(payload=payload)
        self._queue.put(item, block=True, timeout=self._resolve_timeout(timeout))
        self._logger.debug(f"queue.put: item_id={item.item_id}, size={self.size()}")
        return item

    def get(self, timeout: Optional[float] = None) -> Optional[QueueItem]:
        """큐에서 아이템을 가져온다. 타임아웃이나 종료 신호면 None."""

        if self._closed and self._queue.empty():
            return None
        try:
            item = self._queue.get(block=True, timeout=self._resolve_timeout(timeout))
        except queue_module.Empty:
            return None
        if item is self._SENTINEL:
            self._queue.task_done()
            return None
        return item

    def size(self) -> int:
        """현재 큐 크기를 반환한다."""

        return self._queue.qsize()

    def task_done(self) -> None:
        """꺼낸 아이템의 처리 완료를 알린다."""

        self._queue.task_done()

    def pending(self) -> int:
        """처리 완료되지 않은 아이템 수(대기 + 처리 중)를 반환한다."""

        return self._queue.unfinished_tasks

    def close(self) -> None:
        """큐를 닫고 종료 신호를 전달한다."""

        if self._closed:
            return
        self._closed = True
        try:
            self._queue.put(self._SENTINEL, block=False)
        except queue_module.Full:
            self._logger.warning("큐가 가득 차 종료 신호를 전달하지 못했습니다.")

    def is_closed(self) -> bool:
        """큐가 닫혔는지 여부를 반환한다."""

        return self._closed

    def _resolve_timeout(self, timeout: Optional[float]) -> Optional[float]:
        if timeout is None:
            return self._config.default_timeout
        return timeout
