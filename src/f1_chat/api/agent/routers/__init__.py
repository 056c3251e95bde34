"""
목적: Agent 라우터 패키지 진입점을 제공한다.
설명: 집계 라우터를 외부에 노출한다.
디자인 패턴: 파사드
참조: src/f1_chat/api/agent/routers/router.py
"""

from f1_chat.api.agent.routers.router import router

__all__ = ["router"]
