"""
목적: 수집 작업 실행기를 제공한다.
설명: 요청 스레드는 작업을 큐에 넣고 즉시 반환하며, 단일 워커 스레드가 큐를 소비해 파이프라인을 실행한다.
디자인 패턴: 생산자-소비자, 커맨드 패턴
참조: src/f1_chat/shared/runtime/queue/in_memory_queue.py, src/f1_chat/shared/runtime/worker/worker.py, src/f1_chat/core/ingestion/pipeline.py
"""

from __future__ import annotations

import queue as queue_module
from typing import Iterable, List, Optional

from f1_chat.core.ingestion.models import IngestJob, IngestReport
from f1_chat.core.ingestion.pipeline import IngestionPipeline
from f1_chat.core.ingestion.status import IngestStatusStore
from f1_chat.integrations.web import normalize_url
from f1_chat.shared.exceptions import BaseAppException, ErrorKind, ExceptionDetail
from f1_chat.shared.logging import Logger, create_default_logger
from f1_chat.shared.runtime.queue import InMemoryQueue, QueueClosedError, QueueConfig, QueueItem
from f1_chat.shared.runtime.worker import Worker, WorkerConfig


class IngestionExecutor:
    """수집 작업 큐 전달과 백그라운드 실행을 담당한다.

    Args:
        pipeline: 수집 파이프라인.
        status: 수집 상태 저장소.
        queue: 작업 큐. 없으면 새로 만든다.
        poll_timeout: 워커 폴링 타임아웃(초).
        enqueue_timeout: 큐 적재 대기 시간(초).
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        pipeline: IngestionPipeline,
        status: IngestStatusStore,
        queue: Optional[InMemoryQueue] = None,
        poll_timeout: float = 0.5,
        enqueue_timeout: float = 1.0,
        logger: Optional[Logger] = None,
    ) -> None:
        self._pipeline = pipeline
        self._status = status
        self._logger = logger or create_default_logger("IngestionExecutor")
        self._queue = queue or InMemoryQueue(QueueConfig(max_size=8), logger=self._logger)
        self._enqueue_timeout = enqueue_timeout
        self._worker = Worker(
            self._queue,
            config=WorkerConfig(name="ingest-worker", poll_timeout=poll_timeout),
            logger=self._logger,
        )
        self._worker.register(self._handle)
        self._last_report: Optional[IngestReport] = None

    @property
    def last_report(self) -> Optional[IngestReport]:
        """마지막으로 끝난 작업 보고서를 반환한다."""

        return self._last_report

    def start(self) -> None:
        """워커를 시작한다."""

        self._worker.start()

    def stop(self) -> None:
        """워커를 중지한다."""

        self._worker.stop()

    def is_running(self) -> bool:
        """워커 스레드가 살아 있는지 반환한다."""

        return self._worker.is_alive()

    def wait_idle(self, timeout: Optional[float] = None) -> bool:
        """대기/진행 중인 작업이 끝날 때까지 기다린다."""

        return self._worker.wait_idle(timeout)

    def submit(self, urls: Iterable[str]) -> IngestJob:
        """수집 작업을 등록하고 즉시 반환한다.

        Raises:
            BaseAppException: URL 목록이 비었을 때(INGEST_URLS_EMPTY),
                이미 진행 중일 때(INGEST_ALREADY_RUNNING), 큐 적재 실패 시(INGEST_QUEUE_FAILED).
        """

        normalized = prepare_urls(urls)
        job = IngestJob(urls=normalized)
        self._status.begin(job.job_id, urls_total=len(normalized))
        try:
            self._queue.put(job, timeout=self._enqueue_timeout)
        except (queue_module.Full, QueueClosedError) as error:
            self._status.fail(job.job_id, "수집 작업을 대기열에 넣지 못했습니다.")
            raise BaseAppException(
                "수집 작업을 대기열에 넣지 못했습니다.",
                ExceptionDetail(
                    code="INGEST_QUEUE_FAILED",
                    kind=ErrorKind.INTERNAL,
                    cause=repr(error),
                    metadata={"job_id": job.job_id},
                ),
                error,
            ) from error
        self._logger.info(f"ingest.exec.queued: job_id={job.job_id}, urls={len(normalized)}")
        return job

    def run_sync(self, urls: Iterable[str]) -> IngestReport:
        """큐를 거치지 않고 현재 스레드에서 작업을 실행한다(CLI용)."""

        normalized = prepare_urls(urls)
        job = IngestJob(urls=normalized)
        self._status.begin(job.job_id, urls_total=len(normalized))
        report = self._pipeline.run(job)
        self._last_report = report
        return report

    def _handle(self, item: QueueItem) -> None:
        job = item.payload
        if not isinstance(job, IngestJob):
            self._logger.error(f"ingest.exec.invalid_payload: item_id={item.item_id}")
            return
        self._logger.info(f"ingest.exec.start: job_id={job.job_id}, attempt={item.attempts}")
        self._last_report = self._pipeline.run(job)


def prepare_urls(urls: Iterable[str]) -> List[str]:
    """URL을 정규화하고 순서를 유지한 채 중복을 제거한다."""

    seen: set[str] = set()
    prepared: List[str] = []
    for raw in urls or []:
        if not isinstance(raw, str) or not raw.strip():
            continue
        url = normalize_url(raw)
        if url in seen:
            continue
        seen.add(url)
        prepared.append(url)
    if not prepared:
        raise BaseAppException(
            "수집할 URL이 없습니다.",
            ExceptionDetail(
                code="INGEST_URLS_EMPTY",
                kind=ErrorKind.CLIENT,
                hint="urls에 하나 이상의 URL을 전달하세요.",
            ),
        )
    return prepared
