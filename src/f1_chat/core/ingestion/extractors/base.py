"""
목적: 콘텐츠 추출 전략 인터페이스와 레지스트리를 제공한다.
설명: URL 패턴으로 구조화 추출기를 고르고, 결과가 비면 본문 텍스트 추출기로 대체한다.
디자인 패턴: 전략 패턴, 레지스트리
참조: src/f1_chat/core/ingestion/extractors/body_text.py, src/f1_chat/core/ingestion/extractors/race_results.py
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol

from f1_chat.shared.logging import Logger, create_default_logger


class ContentExtractor(Protocol):
    """HTML에서 색인할 텍스트를 뽑는 전략."""

    name: str

    def matches(self, url: str) -> bool:
        """이 추출기가 처리할 URL인지 반환한다."""

    def extract(self, html: str, url: str) -> str:
        """정제된 텍스트를 반환한다. 추출할 것이 없으면 빈 문자열."""


class ExtractorRegistry:
    """등록 순서대로 추출기를 고르는 레지스트리.

    Args:
        extractors: 구조화 추출기 목록(먼저 일치하는 것을 사용).
        fallback: 일치하는 것이 없거나 결과가 비었을 때 쓰는 추출기.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        extractors: Iterable[ContentExtractor],
        fallback: ContentExtractor,
        logger: Optional[Logger] = None,
    ) -> None:
        self._extractors: List[ContentExtractor] = list(extractors)
        self._fallback = fallback
        self._logger = logger or create_default_logger("ExtractorRegistry")

    def register(self, extractor: ContentExtractor) -> None:
        """구조화 추출기를 추가한다."""

        self._extractors.append(extractor)

    def select(self, url: str) -> ContentExtractor:
        """URL에 맞는 추출기를 반환한다."""

        for extractor in self._extractors:
            if extractor.matches(url):
                return extractor
        return self._fallback

    def extract(self, html: str, url: str) -> str:
        """선택된 추출기로 텍스트를 뽑는다."""

        extractor = self.select(url)
        text = extractor.extract(html, url)
        if text or extractor is self._fallback:
            return text
        self._logger.info(f"extract.fallback: url={url}, extractor={extractor.name}")
        return self._fallback.extract(html, url)
