"""
목적: 헬스체크 라우터를 제공한다.
설명: 프로세스 생존 여부와 함께 수집 워커 상태, 현재 수집 상태를 돌려준다.
디자인 패턴: 라우터 패턴
참조: src/f1_chat/api/main.py, src/f1_chat/core/ingestion/executor.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from f1_chat.api.runtime import AppRuntime, get_runtime

router = APIRouter()


class HealthResponse(BaseModel):
    """헬스체크 응답 모델."""

    status: str = "ok"
    worker_alive: bool
    ingest_status: str
    collection: str


@router.get("/health", response_model=HealthResponse, summary="서버의 상태를 조회합니다.")
def health_check(runtime: AppRuntime = Depends(get_runtime)) -> HealthResponse:
    """서버가 요청을 받을 수 있으면 ok를 반환한다."""

    return HealthResponse(
        worker_alive=runtime.executor.is_running(),
        ingest_status=runtime.status.snapshot().status.value,
        collection=runtime.corpus.schema.name,
    )
