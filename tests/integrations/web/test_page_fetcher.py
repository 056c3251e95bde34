"""
목적: 페이지 수집기 재시도 동작을 검증한다.
설명: httpx.MockTransport로 성공/일시 실패/영구 실패와 User-Agent 헤더를 확인한다.
디자인 패턴: 테스트 더블
참조: src/f1_chat/integrations/web/fetcher.py
"""

from __future__ import annotations

import httpx
import pytest

from f1_chat.integrations.web import PageFetcher, normalize_url
from f1_chat.shared.exceptions import BaseAppException, ErrorKind


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler), headers={"User-Agent": "unit-agent"})


def test_fetch_retries_transient_failures_with_backoff() -> None:
    """일시 실패 후 성공하면 본문과 시도 횟수를 반환하는지 검증한다."""

    calls: list[str] = []
    sleeps: list[float] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.headers["User-Agent"])
        if len(calls) < 3:
            return httpx.Response(503, text="busy")
        return httpx.Response(200, text="<html><body>Lewis Hamilton won the race.</body></html>")

    fetcher = PageFetcher(max_attempts=3, backoff_seconds=2.0, client=_client(handler), sleep=sleeps.append)

    page = fetcher.fetch("a.com/page1")

    assert page.url == "https://a.com/page1"
    assert page.status_code == 200
    assert page.attempts == 3
    assert "Lewis Hamilton" in page.content
    assert sleeps == [2.0, 4.0]
    assert calls == ["unit-agent"] * 3


def test_fetch_raises_after_exhausting_attempts() -> None:
    """모든 시도가 실패하면 INGEST_FETCH_FAILED인지 검증한다."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    fetcher = PageFetcher(max_attempts=2, backoff_seconds=0, client=_client(handler), sleep=lambda _: None)

    with pytest.raises(BaseAppException) as exc_info:
        fetcher.fetch("https://down.example")

    assert exc_info.value.code == "INGEST_FETCH_FAILED"
    assert exc_info.value.kind == ErrorKind.UPSTREAM
    assert exc_info.value.detail.metadata == {"url": "https://down.example", "attempts": 2}


def test_normalize_url() -> None:
    """URL 정규화 규칙을 검증한다."""

    assert normalize_url("  a.com/page1 ") == "https://a.com/page1"
    assert normalize_url("http://a.com") == "http://a.com"
    with pytest.raises(ValueError):
        normalize_url("   ")
