"""
목적: 공통 예외 모델을 정의한다.
설명: 에러 코드/분류/원인/힌트/메타데이터를 포함하는 Pydantic 모델을 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/f1_chat/shared/exceptions/base.py, src/f1_chat/api/common.py
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ErrorKind(str, Enum):
    """오류 분류 열거형.

    API 계층은 이 값으로 HTTP 상태 코드를 결정한다.
    """

    CLIENT = "client"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    UPSTREAM = "upstream"
    CONFIG = "config"
    DATA_CONTRACT = "data_contract"
    INTERNAL = "internal"


class ExceptionDetail(BaseModel):
    """예외 상세 정보를 담는 모델이다.

    Args:
        code: 시스템 전반에서 일관되게 사용하는 에러 코드.
        kind: 오류 분류.
        cause: 에러의 직접 원인 설명.
        hint: 해결을 위한 힌트.
        metadata: 추가적인 구조화 메타데이터.
    """

    code: str = Field(..., description="에러 코드")
    kind: ErrorKind = Field(default=ErrorKind.INTERNAL, description="오류 분류")
    cause: Optional[str] = Field(default=None, description="에러 원인")
    hint: Optional[str] = Field(default=None, description="해결 힌트")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="추가 메타데이터")
