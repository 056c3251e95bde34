"""
목적: 로거 인터페이스와 기본 구현체를 제공한다.
설명: 크기 제한이 있는 인메모리 저장소 기반 로거이며 `LOG_LEVEL`, `LOG_STDOUT` 환경 변수로 동작을 조정한다.
디자인 패턴: 전략 패턴, 저장소 패턴
참조: src/f1_chat/shared/logging/models.py
"""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from collections import deque
from datetime import timezone
from typing import Any, List, Optional

from f1_chat.shared.logging.models import LogContext, LogLevel, LogRecord

_DEFAULT_REPOSITORY_SIZE = 2000


class LogRepository(ABC):
    """로그 저장소 인터페이스."""

    @abstractmethod
    def add(self, record: LogRecord) -> None:
        """로그 레코드를 저장한다."""

    @abstractmethod
    def list(self) -> List[LogRecord]:
        """저장된 로그를 반환한다."""


class InMemoryLogRepository(LogRepository):
    """인메모리 로그 저장소 구현체.

    오래된 레코드부터 버리는 고정 크기 링 버퍼로 동작한다.
    """

    def __init__(self, max_records: int = _DEFAULT_REPOSITORY_SIZE) -> None:
        self._records: deque[LogRecord] = deque(maxlen=max(1, max_records))

    def add(self, record: LogRecord) -> None:
        self._records.append(record)

    def list(self) -> List[LogRecord]:
        return list(self._records)


class Logger(ABC):
    """로거 인터페이스."""

    @abstractmethod
    def log(
        self,
        level: LogLevel,
        message: str,
        context: Optional[LogContext] = None,
        metadata: Optional[dict] = None,
    ) -> None:
        """로그를 기록한다."""

    @abstractmethod
    def with_context(self, context: LogContext) -> "Logger":
        """컨텍스트가 합쳐진 새 로거를 반환한다."""

    def debug(self, message: str, context: Optional[LogContext] = None, **metadata: Any) -> None:
        """DEBUG 레벨 로그를 기록한다."""

        self.log(LogLevel.DEBUG, message, context, metadata or None)

    def info(self, message: str, context: Optional[LogContext] = None, **metadata: Any) -> None:
        """INFO 레벨 로그를 기록한다."""

        self.log(LogLevel.INFO, message, context, metadata or None)

    def warning(self, message: str, context: Optional[LogContext] = None, **metadata: Any) -> None:
        """WARNING 레벨 로그를 기록한다."""

        self.log(LogLevel.WARNING, message, context, metadata or None)

    def error(self, message: str, context: Optional[LogContext] = None, **metadata: Any) -> None:
        """ERROR 레벨 로그를 기록한다."""

        self.log(LogLevel.ERROR, message, context, metadata or None)

    def critical(self, message: str, context: Optional[LogContext] = None, **metadata: Any) -> None:
        """CRITICAL 레벨 로그를 기록한다."""

        self.log(LogLevel.CRITICAL, message, context, metadata or None)


class InMemoryLogger(Logger):
    """인메모리 로거 구현체."""

    def __init__(
        self,
        name: str,
        repository: Optional[LogRepository] = None,
        base_context: Optional[LogContext] = None,
        emit_stdout: Optional[bool] = None,
        min_level: Optional[LogLevel] = None,
    ) -> None:
        self._name = name
        self._repository = repository or InMemoryLogRepository()
        self._base_context = base_context
        self._emit_stdout = _read_emit_stdout_env() if emit_stdout is None else emit_stdout
        self._min_level = min_level or _read_min_level_env()

    @property
    def name(self) -> str:
        """로거 이름을 반환한다."""

        return self._name

    @property
    def repository(self) -> LogRepository:
        """저장소를 반환한다."""

        return self._repository

    def log(
        self,
        level: LogLevel,
        message: str,
        context: Optional[LogContext] = None,
        metadata: Optional[dict] = None,
    ) -> None:
        if level.severity < self._min_level.severity:
            return
        record = LogRecord(
            level=level,
            message=message,
            logger_name=self._name,
            context=self._merge_context(context),
            metadata=metadata or {},
        )
        self._repository.add(record)
        if self._emit_stdout:
            self._write_stdout(record)

    def with_context(self, context: LogContext) -> "Logger":
        return InMemoryLogger(
            name=self._name,
            repository=self._repository,
            base_context=self._merge_context(context),
            emit_stdout=self._emit_stdout,
            min_level=self._min_level,
        )

    def _merge_context(self, context: Optional[LogContext]) -> Optional[LogContext]:
        if self._base_context is None:
            return context
        if context is None:
            return self._base_context
        return LogContext(
            request_id=context.request_id or self._base_context.request_id,
            session_id=context.session_id or self._base_context.session_id,
            job_id=context.job_id or self._base_context.job_id,
            tags={**self._base_context.tags, **context.tags},
        )

    def _write_stdout(self, record: LogRecord) -> None:
        payload: dict[str, object] = {
            "timestamp": record.timestamp.astimezone(timezone.utc).isoformat(),
            "level": record.level.value,
            "logger": record.logger_name,
            "message": record.message,
        }
        if record.context is not None:
            payload["context"] = record.context.model_dump(exclude_none=True)
        if record.metadata:
            payload["metadata"] = record.metadata
        print(json.dumps(payload, ensure_ascii=False, default=str), flush=True)


def _read_emit_stdout_env() -> bool:
    raw = os.getenv("LOG_STDOUT")
    if raw is None:
        return False
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _read_min_level_env() -> LogLevel:
    raw = (os.getenv("LOG_LEVEL") or "").strip().upper()
    if raw == "WARN":
        raw = "WARNING"
    try:
        return LogLevel(raw)
    except ValueError:
        return LogLevel.DEBUG


def create_default_logger(name: str) -> InMemoryLogger:
    """기본 인메모리 로거를 생성한다."""

    return InMemoryLogger(name=name)
