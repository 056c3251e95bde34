"""
목적: 인메모리 로거 동작을 검증한다.
설명: 레벨 필터, 컨텍스트 병합, 저장소 크기 제한을 확인한다.
디자인 패턴: 테스트 케이스
참조: src/f1_chat/shared/logging/logger.py
"""

from __future__ import annotations

import json

from f1_chat.shared.logging import InMemoryLogger, InMemoryLogRepository, LogContext, LogLevel


def test_logger_filters_by_min_level() -> None:
    """최소 레벨 미만 로그는 저장하지 않는지 검증한다."""

    logger = InMemoryLogger("unit", emit_stdout=False, min_level=LogLevel.INFO)

    logger.debug("hidden")
    logger.info("ingest.run.started", urls=2)

    records = logger.repository.list()
    assert [record.message for record in records] == ["ingest.run.started"]
    assert records[0].metadata == {"urls": 2}


def test_with_context_merges_base_context() -> None:
    """with_context 로거가 기본 컨텍스트를 합치는지 검증한다."""

    repository = InMemoryLogRepository()
    logger = InMemoryLogger("unit", repository=repository, emit_stdout=False, min_level=LogLevel.DEBUG)
    scoped = logger.with_context(LogContext(job_id="job-1", tags={"stage": "fetch"}))

    scoped.warning("ingest.url.skipped", LogContext(session_id="s1", tags={"url": "a.com"}))

    record = repository.list()[0]
    assert record.context is not None
    assert record.context.job_id == "job-1"
    assert record.context.session_id == "s1"
    assert record.context.tags == {"stage": "fetch", "url": "a.com"}


def test_repository_keeps_latest_records() -> None:
    """저장소가 최근 레코드만 유지하는지 검증한다."""

    logger = InMemoryLogger(
        "unit",
        repository=InMemoryLogRepository(max_records=2),
        emit_stdout=False,
        min_level=LogLevel.DEBUG,
    )

    for index in range(3):
        logger.info(f"event-{index}")

    assert [record.message for record in logger.repository.list()] == ["event-1", "event-2"]


def test_stdout_emits_json_lines(capsys) -> None:
    """stdout 출력이 JSON 한 줄인지 검증한다."""

    logger = InMemoryLogger("unit", emit_stdout=True, min_level=LogLevel.DEBUG)

    logger.error("chat.stream.failed", code="X")

    line = capsys.readouterr().out.strip()
    payload = json.loads(line)
    assert payload["level"] == "ERROR"
    assert payload["logger"] == "unit"
    assert payload["metadata"] == {"code": "X"}
