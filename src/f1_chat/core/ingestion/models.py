"""
목적: 수집 파이프라인 도메인 모델을 정의한다.
설명: 작업 상태, 원문 문서, 청크, 작업 요청, 실행 보고서를 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/f1_chat/core/ingestion/status.py, src/f1_chat/core/ingestion/pipeline.py
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field


def _utc_now() -> datetime:
    """UTC 기준의 timezone-aware 시간을 반환한다."""

    return datetime.now(timezone.utc)


class IngestState(str, Enum):
    """수집 작업 상태."""

    IDLE = "idle"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class IngestStatus(BaseModel):
    """프로세스 전역 수집 상태 스냅샷.

    Args:
        status: 현재 상태.
        message: 사람이 읽는 진행 메시지.
        progress: 0~100 진행률.
        start_time: 작업 시작 시각.
        finish_time: 작업 종료 시각.
        job_id: 현재(또는 마지막) 작업 식별자.
        urls_total: 처리 대상 URL 수.
        urls_processed: 처리 완료(성공/건너뜀 포함) URL 수.
        chunks_inserted: 저장된 청크 수.
        chunks_failed: 임베딩/저장 실패로 건너뛴 청크 수.
        failed_urls: 수집 실패로 건너뛴 URL 목록.
    """

    status: IngestState = IngestState.IDLE
    message: str = ""
    progress: int = Field(default=0, ge=0, le=100)
    start_time: Optional[datetime] = None
    finish_time: Optional[datetime] = None
    job_id: Optional[str] = None
    urls_total: int = 0
    urls_processed: int = 0
    chunks_inserted: int = 0
    chunks_failed: int = 0
    failed_urls: List[str] = Field(default_factory=list)


class SourceDocument(BaseModel):
    """수집한 원문 문서. 저장하지 않는다."""

    url: str
    raw_content: str


class TextChunk(BaseModel):
    """분할된 텍스트 조각과 원문 내 위치."""

    text: str
    index: int = Field(ge=0)
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    source_url: Optional[str] = None


class IngestJob(BaseModel):
    """큐로 전달되는 수집 작업."""

    job_id: str = Field(default_factory=lambda: uuid4().hex)
    urls: List[str]
    requested_at: datetime = Field(default_factory=_utc_now)


class IngestReport(BaseModel):
    """수집 실행 결과 요약."""

    job_id: str
    state: IngestState
    urls_total: int = 0
    urls_succeeded: int = 0
    failed_urls: List[str] = Field(default_factory=list)
    chunks_total: int = 0
    chunks_inserted: int = 0
    chunks_failed: int = 0
    error: Optional[str] = None
