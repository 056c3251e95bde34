"""
목적: Ingest API 요청/응답 모델을 제공한다.
설명: 수집 요청, 접수 응답, 상태 조회 응답 DTO를 정의한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/f1_chat/api/ingest/routers/submit_ingest.py, src/f1_chat/core/ingestion/models.py
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from f1_chat.core.ingestion import IngestState, IngestStatus


class IngestRequest(BaseModel):
    """수집 요청 모델."""

    urls: list[str] = Field(..., description="수집할 URL 목록")


class IngestAcceptedResponse(BaseModel):
    """수집 접수 응답 모델."""

    job_id: str
    status: Literal["accepted"] = "accepted"
    urls: list[str]


class IngestStatusResponse(BaseModel):
    """수집 상태 응답 모델."""

    status: IngestState
    message: str
    progress: int
    start_time: datetime | None = None
    finish_time: datetime | None = None
    job_id: str | None = None
    urls_total: int = 0
    urls_processed: int = 0
    chunks_inserted: int = 0
    chunks_failed: int = 0
    failed_urls: list[str] = Field(default_factory=list)

    @classmethod
    def from_status(cls, status: IngestStatus) -> "IngestStatusResponse":
        return cls.model_validate(status.model_dump())


__all__ = ["IngestAcceptedResponse", "IngestRequest", "IngestStatusResponse"]
