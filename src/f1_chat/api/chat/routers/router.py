"""
목적: Chat API 라우터 집계를 제공한다.
설명: 스트리밍 채팅과 세션 조회 라우터를 하나의 Chat 라우터로 묶는다.
디자인 패턴: 컴포지트 패턴
참조: src/f1_chat/api/chat/routers/*.py
"""

from __future__ import annotations

from fastapi import APIRouter

from f1_chat.api.chat.routers.get_session import router as get_session_router
from f1_chat.api.chat.routers.stream_chat import router as stream_chat_router

router = APIRouter(tags=["chat"])
router.include_router(stream_chat_router)
router.include_router(get_session_router)
