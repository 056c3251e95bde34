"""
목적: 수집 상태 조회 라우터를 제공한다.
설명: 프로세스 전역 수집 상태 스냅샷을 반환한다. 실행 이력이 없으면 idle이다.
디자인 패턴: 라우터 패턴
참조: src/f1_chat/core/ingestion/status.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from f1_chat.api.ingest.models import IngestStatusResponse
from f1_chat.api.runtime import AppRuntime, get_runtime

router = APIRouter()


@router.get(
    "/ingest/status",
    response_model=IngestStatusResponse,
    summary="수집 작업 상태를 조회합니다.",
)
def get_ingest_status(runtime: AppRuntime = Depends(get_runtime)) -> IngestStatusResponse:
    """현재 수집 상태를 반환한다."""

    return IngestStatusResponse.from_status(runtime.status.snapshot())
