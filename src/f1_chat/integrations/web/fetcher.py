"""
목적: 웹 문서 수집 클라이언트를 제공한다.
설명: httpx 동기 클라이언트로 페이지를 가져오며 타임아웃, 최대 시도 횟수, 지수 백오프 재시도를 적용한다.
디자인 패턴: 어댑터 패턴
참조: src/f1_chat/core/ingestion/pipeline.py, src/f1_chat/shared/config/settings.py
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

import httpx

from f1_chat.shared.exceptions import BaseAppException, ErrorKind, ExceptionDetail
from f1_chat.shared.logging import Logger, create_default_logger


@dataclass(frozen=True)
class FetchedPage:
    """수집된 페이지."""

    url: str
    final_url: str
    status_code: int
    content: str
    attempts: int


class PageFetcher:
    """재시도 정책을 가진 페이지 수집기.

    Args:
        timeout_seconds: 요청 타임아웃(초).
        max_attempts: 최대 시도 횟수.
        backoff_seconds: 첫 재시도 대기 시간. 이후 시도마다 두 배가 된다.
        user_agent: 요청 User-Agent 헤더.
        client: 주입할 httpx 클라이언트(테스트용 MockTransport 등).
        sleep: 대기 함수(테스트 주입용).
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        timeout_seconds: float = 10.0,
        max_attempts: int = 3,
        backoff_seconds: float = 2.0,
        user_agent: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        sleep: Callable[[float], None] = time.sleep,
        logger: Optional[Logger] = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts는 1 이상이어야 합니다.")
        headers = {"User-Agent": user_agent} if user_agent else None
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(timeout_seconds),
            headers=headers,
            follow_redirects=True,
        )
        self._max_attempts = max_attempts
        self._backoff_seconds = backoff_seconds
        self._sleep = sleep
        self._logger = logger or create_default_logger("PageFetcher")

    def fetch(self, url: str) -> FetchedPage:
        """페이지를 가져온다.

        Raises:
            BaseAppException: 모든 시도가 실패했을 때(INGEST_FETCH_FAILED).
        """

        target = normalize_url(url)
        last_error: Optional[Exception] = None
        for attempt in range(1, self._max_attempts + 1):
            try:
                response = self._client.get(target)
                response.raise_for_status()
                return FetchedPage(
                    url=target,
                    final_url=str(response.url),
                    status_code=response.status_code,
                    content=response.text,
                    attempts=attempt,
                )
            except httpx.HTTPError as error:
                last_error = error
                self._logger.warning(
                    f"fetch.attempt.failed: url={target}, attempt={attempt}/{self._max_attempts}, error={error}"
                )
                if attempt < self._max_attempts:
                    self._sleep(self._backoff_seconds * (2 ** (attempt - 1)))
        raise BaseAppException(
            "페이지 수집에 실패했습니다.",
            ExceptionDetail(
                code="INGEST_FETCH_FAILED",
                kind=ErrorKind.UPSTREAM,
                cause=str(last_error),
                metadata={"url": target, "attempts": self._max_attempts},
            ),
            last_error,
        )

    def close(self) -> None:
        """소유한 httpx 클라이언트를 닫는다."""

        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "PageFetcher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def normalize_url(url: str) -> str:
    """앞뒤 공백을 제거하고 스킴이 없으면 https://를 붙인다."""

    cleaned = (url or "").strip()
    if not cleaned:
        raise ValueError("url은 비어 있을 수 없습니다.")
    if "://" not in cleaned:
        cleaned = f"https://{cleaned}"
    return cleaned
