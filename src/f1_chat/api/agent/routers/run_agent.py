"""
목적: 에이전트 질의 라우터를 제공한다.
설명: 검색 도구를 쓰는 에이전트를 끝까지 실행하고 최종 답변을 JSON으로 반환한다.
디자인 패턴: 라우터 패턴
참조: src/f1_chat/core/chat/services/agent.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from f1_chat.api.agent.models import AgentRequest, AgentResponse
from f1_chat.api.common import to_http_exception
from f1_chat.api.runtime import AppRuntime, get_runtime
from f1_chat.shared.exceptions import BaseAppException

router = APIRouter()


@router.post("/agent", response_model=AgentResponse, summary="검색 도구 에이전트에게 질문합니다.")
async def run_agent(
    request: AgentRequest,
    runtime: AppRuntime = Depends(get_runtime),
) -> AgentResponse:
    """에이전트 답변을 반환한다."""

    try:
        answer = await runtime.agent.arun(request.prompt)
    except BaseAppException as error:
        raise to_http_exception(error) from error
    return AgentResponse(response=answer.response, searches=answer.searches)
