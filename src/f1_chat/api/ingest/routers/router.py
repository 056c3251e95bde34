"""
목적: Ingest API 라우터 집계를 제공한다.
설명: 수집 제출과 상태 조회 라우터를 하나로 묶는다.
디자인 패턴: 컴포지트 패턴
참조: src/f1_chat/api/ingest/routers/*.py
"""

from __future__ import annotations

from fastapi import APIRouter

from f1_chat.api.ingest.routers.get_status import router as get_status_router
from f1_chat.api.ingest.routers.submit_ingest import router as submit_ingest_router

router = APIRouter(tags=["ingest"])
router.include_router(submit_ingest_router)
router.include_router(get_status_router)
