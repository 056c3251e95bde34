"""
목적: 로깅 모듈 공개 API를 제공한다.
설명: 로거 인터페이스, 기본 구현체, 로그 모델을 노출한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/shared/logging/logger.py, src/f1_chat/shared/logging/models.py
"""

from f1_chat.shared.logging.logger import (
    InMemoryLogger,
    InMemoryLogRepository,
    Logger,
    LogRepository,
    create_default_logger,
)
from f1_chat.shared.logging.models import LogContext, LogLevel, LogRecord

__all__ = [
    "InMemoryLogger",
    "InMemoryLogRepository",
    "LogContext",
    "LogLevel",
    "LogRecord",
    "LogRepository",
    "Logger",
    "create_default_logger",
]
