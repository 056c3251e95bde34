"""
목적: 런타임 큐 모델을 정의한다.
설명: 수집 큐의 크기/대기 설정과 큐에 실려 다니는 작업 봉투를 정의한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/f1_chat/shared/runtime/queue/in_memory_queue.py, src/f1_chat/core/ingestion/executor.py
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from pydantic import BaseModel, Field


class QueueConfig(BaseModel):
    """큐 용량과 기본 대기 시간.

    Args:
        max_size: 동시에 쌓일 수 있는 작업 수. 0이면 제한 없음.
        default_timeout: put/get에 시간을 주지 않았을 때의 대기 시간(초). None이면 무한 대기.
    """

    max_size: int = Field(default=0, ge=0)
    default_timeout: Optional[float] = Field(default=None, ge=0)


class QueueItem(BaseModel):
    """큐에 실리는 작업 봉투.

    payload는 수집 작업(IngestJob) 같은 임의 객체이며, attempts는 워커가 처리할 때마다 올린다.
    """

    item_id: str = Field(default_factory=lambda: uuid4().hex)
    payload: Any
    enqueued_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    attempts: int = Field(default=0, ge=0)
