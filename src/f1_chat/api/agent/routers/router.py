"""
목적: Agent API 라우터 집계를 제공한다.
설명: 에이전트 질의 라우터를 하나의 Agent 라우터로 묶는다.
디자인 패턴: 컴포지트 패턴
참조: src/f1_chat/api/agent/routers/*.py
"""

from __future__ import annotations

from fastapi import APIRouter

from f1_chat.api.agent.routers.run_agent import router as run_agent_router

router = APIRouter(tags=["agent"])
router.include_router(run_agent_router)
