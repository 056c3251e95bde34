"""
목적: 수집 작업 상태 저장소를 제공한다.
설명: 활성 작업 하나만 쓰고 여러 요청이 읽는 상태 객체이다. 읽기는 복사본 스냅샷을 반환한다.
디자인 패턴: 상태 객체, 단일 작성자
참조: src/f1_chat/core/ingestion/models.py, src/f1_chat/core/ingestion/pipeline.py, src/f1_chat/api/ingest/routers/status.py
"""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Any, Optional

from f1_chat.core.ingestion.models import IngestState, IngestStatus
from f1_chat.shared.exceptions import BaseAppException, ErrorKind, ExceptionDetail
from f1_chat.shared.logging import Logger, create_default_logger


class IngestStatusStore:
    """프로세스 전역 수집 상태 저장소."""

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._lock = threading.Lock()
        self._status = IngestStatus()
        self._logger = logger or create_default_logger("IngestStatusStore")

    def snapshot(self) -> IngestStatus:
        """현재 상태의 복사본을 반환한다."""

        with self._lock:
            return self._status.model_copy(deep=True)

    def is_running(self) -> bool:
        """작업이 진행 중인지 반환한다."""

        with self._lock:
            return self._status.status == IngestState.PROCESSING

    def begin(self, job_id: str, urls_total: int, message: str = "수집 작업이 대기열에 등록되었습니다.") -> IngestStatus:
        """새 작업으로 상태를 초기화한다.

        Raises:
            BaseAppException: 이미 진행 중인 작업이 있을 때(INGEST_ALREADY_RUNNING).
        """

        with self._lock:
            if self._status.status == IngestState.PROCESSING:
                raise BaseAppException(
                    "이미 진행 중인 수집 작업이 있습니다.",
                    ExceptionDetail(
                        code="INGEST_ALREADY_RUNNING",
                        kind=ErrorKind.CONFLICT,
                        cause=f"active_job_id={self._status.job_id}",
                        hint="GET /api/ingest/status로 진행 상황을 확인한 뒤 다시 요청하세요.",
                        metadata={"job_id": self._status.job_id},
                    ),
                )
            self._status = IngestStatus(
                status=IngestState.PROCESSING,
                message=message,
                progress=0,
                start_time=datetime.now(timezone.utc),
                job_id=job_id,
                urls_total=urls_total,
            )
            self._logger.info(f"ingest.status.begin: job_id={job_id}, urls={urls_total}")
            return self._status.model_copy(deep=True)

    def update(self, job_id: str, **changes: Any) -> None:
        """진행 중인 작업의 필드를 갱신한다. 다른 작업의 갱신은 무시한다."""

        with self._lock:
            if not self._owns(job_id):
                return
            if "progress" in changes:
                changes["progress"] = max(0, min(99, int(changes["progress"])))
            self._status = self._status.model_copy(update=changes)

    def complete(self, job_id: str, message: str, **changes: Any) -> None:
        """작업을 완료 상태로 바꾼다."""

        with self._lock:
            if not self._owns(job_id):
                return
            self._status = self._status.model_copy(
                update={
                    **changes,
                    "status": IngestState.COMPLETED,
                    "message": message,
                    "progress": 100,
                    "finish_time": datetime.now(timezone.utc),
                }
            )
        self._logger.info(f"ingest.status.completed: job_id={job_id}")

    def fail(self, job_id: str, message: str, **changes: Any) -> None:
        """작업을 오류 상태로 바꾼다."""

        with self._lock:
            if not self._owns(job_id):
                return
            self._status = self._status.model_copy(
                update={
                    **changes,
                    "status": IngestState.ERROR,
                    "message": message,
                    "finish_time": datetime.now(timezone.utc),
                }
            )
        self._logger.error(f"ingest.status.failed: job_id={job_id}, message={message}")

    def _owns(self, job_id: str) -> bool:
        return self._status.job_id == job_id and self._status.status == IngestState.PROCESSING
