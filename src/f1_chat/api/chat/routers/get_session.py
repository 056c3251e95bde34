"""
목적: 세션 대화 기록 조회 라우터를 제공한다.
설명: 세션 저장소의 append-only 턴 목록을 순서대로 반환한다.
디자인 패턴: 라우터 패턴
참조: src/f1_chat/shared/chat/memory/session_store.py
"""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends

from f1_chat.api.chat.models import SessionTurnResponse, SessionTurnsResponse
from f1_chat.api.common import to_http_exception
from f1_chat.api.runtime import AppRuntime, get_runtime
from f1_chat.shared.exceptions import BaseAppException, ErrorKind, ExceptionDetail

router = APIRouter()


@router.get(
    "/chat/sessions/{session_id}",
    response_model=SessionTurnsResponse,
    summary="세션 대화 기록을 조회합니다.",
)
async def get_session(
    session_id: str,
    runtime: AppRuntime = Depends(get_runtime),
) -> SessionTurnsResponse:
    """세션 턴 목록을 반환한다."""

    try:
        turns = await asyncio.to_thread(runtime.session_store.get, session_id)
        if not turns:
            raise BaseAppException(
                "요청한 세션을 찾을 수 없습니다.",
                ExceptionDetail(
                    code="CHAT_SESSION_NOT_FOUND",
                    kind=ErrorKind.NOT_FOUND,
                    cause=f"session_id={session_id}",
                ),
            )
    except BaseAppException as error:
        raise to_http_exception(error) from error
    return SessionTurnsResponse(
        session_id=session_id,
        turns=[
            SessionTurnResponse(role=turn.role, content=turn.content, timestamp=turn.timestamp)
            for turn in turns
        ],
    )
