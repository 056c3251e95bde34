"""
목적: 수집 작업 제출 라우터를 제공한다.
설명: URL 목록을 수집 큐에 넣고 작업 식별자를 즉시 반환한다.
디자인 패턴: 라우터 패턴
참조: src/f1_chat/core/ingestion/executor.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from f1_chat.api.common import to_http_exception
from f1_chat.api.ingest.models import IngestAcceptedResponse, IngestRequest
from f1_chat.api.runtime import AppRuntime, get_runtime
from f1_chat.shared.exceptions import BaseAppException

router = APIRouter()


@router.post(
    "/ingest",
    response_model=IngestAcceptedResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="URL 수집 작업을 등록합니다.",
)
def submit_ingest(
    request: IngestRequest,
    runtime: AppRuntime = Depends(get_runtime),
) -> IngestAcceptedResponse:
    """수집 작업을 큐에 넣는다. 이미 진행 중이면 409를 반환한다."""

    try:
        job = runtime.executor.submit(request.urls)
    except BaseAppException as error:
        raise to_http_exception(error) from error
    return IngestAcceptedResponse(job_id=job.job_id, urls=job.urls)
