"""
목적: 채팅 스트리밍 라우터를 제공한다.
설명: 검색 증강 프롬프트를 준비한 뒤 LLM 토큰을 text/plain 본문으로 흘려보낸다.
    준비 단계 오류는 HTTP 오류로, 스트리밍 도중 오류는 불완전 응답으로 끝난다.
디자인 패턴: 라우터 패턴
참조: src/f1_chat/core/chat/services/generation.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from f1_chat.api.chat.models import ChatStreamRequest
from f1_chat.api.common import to_http_exception
from f1_chat.api.const import ApiConst
from f1_chat.api.runtime import AppRuntime, get_runtime
from f1_chat.shared.exceptions import BaseAppException

router = APIRouter()


@router.post("/chat", summary="질문을 전송하고 스트리밍 응답을 수신합니다.")
async def stream_chat(
    request: ChatStreamRequest,
    runtime: AppRuntime = Depends(get_runtime),
) -> StreamingResponse:
    """채팅 스트림을 시작한다."""

    orchestrator = runtime.orchestrator
    try:
        prepared = await orchestrator.prepare(request.to_chat_request())
    except BaseAppException as error:
        raise to_http_exception(error) from error
    return StreamingResponse(
        orchestrator.astream(prepared),
        media_type=ApiConst.STREAM_MEDIA_TYPE,
        headers=ApiConst.STREAM_HEADERS,
    )
