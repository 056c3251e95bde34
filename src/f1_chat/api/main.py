"""
목적: FastAPI 앱 엔트리 포인트를 제공한다.
설명: 런타임 환경 파일 로드 -> 설정 검증 -> 런타임 조립 순서로 앱 수명주기를 관리하고
    헬스체크/수집/채팅/에이전트 라우터를 등록한다.
디자인 패턴: 애플리케이션 팩토리
참조: src/f1_chat/api/runtime.py, src/f1_chat/shared/config/runtime_env_loader.py
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse

from f1_chat import __version__
from f1_chat.api.agent.routers import router as agent_router
from f1_chat.api.chat.routers import router as chat_router
from f1_chat.api.common import request_validation_handler
from f1_chat.api.const import ApiConst
from f1_chat.api.health.routers import router as health_router
from f1_chat.api.ingest.routers import router as ingest_router
from f1_chat.api.runtime import AppRuntime, build_runtime, set_runtime, shutdown_runtime
from f1_chat.shared.config import RuntimeEnvironmentLoader, load_settings


def create_app(runtime: Optional[AppRuntime] = None) -> FastAPI:
    """FastAPI 앱을 생성한다. runtime을 주면 설정 로드 없이 그대로 사용한다."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """시작 시 런타임을 조립하고 종료 시 자원을 정리한다."""
        current = runtime
        if current is None:
            # 런타임 환경(local/dev/stg/prod)을 판별해 환경 파일을 먼저 로드한다.
            RuntimeEnvironmentLoader().load()
            settings = load_settings()
            settings.validate_required()
            current = build_runtime(settings)
        set_runtime(current)
        current.start()
        try:
            yield
        finally:
            shutdown_runtime()

    app = FastAPI(title="F1 Chat", version=__version__, lifespan=lifespan)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(health_router)
    app.include_router(ingest_router, prefix=ApiConst.API_PREFIX)
    app.include_router(chat_router, prefix=ApiConst.API_PREFIX)
    app.include_router(agent_router, prefix=ApiConst.API_PREFIX)

    @app.get("/", include_in_schema=False)
    def redirect_to_docs():
        """기본 접속 시 문서 페이지로 리다이렉트한다."""
        return RedirectResponse(url="/docs")

    return app


app = create_app()


def run() -> None:
    """uvicorn으로 API 서버를 실행한다."""

    import uvicorn

    uvicorn.run(
        "f1_chat.api.main:app",
        host=os.getenv("API_HOST", "0.0.0.0"),
        port=int(os.getenv("API_PORT", "8000")),
    )


if __name__ == "__main__":
    run()
