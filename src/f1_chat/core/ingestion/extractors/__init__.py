"""
목적: 콘텐츠 추출기 공개 API를 제공한다.
설명: 추출 전략, 레지스트리, 기본 레지스트리 생성 함수를 노출한다.
디자인 패턴: 퍼사드, 팩토리 함수
참조: src/f1_chat/core/ingestion/extractors/base.py
"""

from typing import Optional

from f1_chat.core.ingestion.extractors.base import ContentExtractor, ExtractorRegistry
from f1_chat.core.ingestion.extractors.body_text import BodyTextExtractor, collapse_whitespace
from f1_chat.core.ingestion.extractors.race_results import RaceResultsExtractor
from f1_chat.shared.logging import Logger


def create_default_registry(logger: Optional[Logger] = None) -> ExtractorRegistry:
    """결과 표 추출기와 본문 추출기로 구성된 기본 레지스트리를 생성한다."""

    return ExtractorRegistry([RaceResultsExtractor()], fallback=BodyTextExtractor(), logger=logger)


__all__ = [
    "BodyTextExtractor",
    "ContentExtractor",
    "ExtractorRegistry",
    "RaceResultsExtractor",
    "collapse_whitespace",
    "create_default_registry",
]
