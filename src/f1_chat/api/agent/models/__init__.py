"""
목적: Agent API 요청/응답 모델을 제공한다.
설명: 비스트리밍 에이전트 질의 요청과 답변 응답 DTO를 정의한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/f1_chat/api/agent/routers/run_agent.py
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class AgentRequest(BaseModel):
    """에이전트 질의 요청 모델."""

    prompt: str = Field(..., description="사용자 질문")


class AgentResponse(BaseModel):
    """에이전트 답변 응답 모델."""

    response: str
    searches: list[str] = Field(default_factory=list, description="모델이 실행한 검색 질의")


__all__ = ["AgentRequest", "AgentResponse"]
