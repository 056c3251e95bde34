"""
목적: API 공통 오류 변환 유틸을 제공한다.
설명: 도메인 예외를 오류 분류 기준 HTTP 예외로, 요청 검증 오류를 같은 구조의 JSON 응답으로 변환한다.
디자인 패턴: 유틸리티 모듈
참조: src/f1_chat/shared/exceptions/models.py, src/f1_chat/api/main.py
"""

from __future__ import annotations

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from f1_chat.shared.exceptions import BaseAppException, ErrorKind, ExceptionDetail

_STATUS_BY_KIND = {
    ErrorKind.CLIENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UPSTREAM: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.CONFIG: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.DATA_CONTRACT: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_http_exception(error: BaseAppException) -> HTTPException:
    """도메인 예외를 HTTP 예외로 변환한다."""

    status_code = _STATUS_BY_KIND.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=status_code, detail=error.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 오류를 400 구조화 응답으로 바꾼다."""

    errors = [
        {
            "loc": [str(part) for part in item.get("loc", ())],
            "msg": str(item.get("msg", "")),
            "type": str(item.get("type", "")),
        }
        for item in exc.errors()
    ]
    error = BaseAppException(
        "요청 형식이 올바르지 않습니다.",
        ExceptionDetail(
            code="REQUEST_INVALID",
            kind=ErrorKind.CLIENT,
            cause=f"{request.method} {request.url.path}",
            metadata={"errors": errors},
        ),
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": error.to_dict()})
