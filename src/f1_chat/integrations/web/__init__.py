"""
목적: 웹 수집 공개 API를 제공한다.
설명: 페이지 수집기와 URL 정규화 함수를 노출한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/integrations/web/fetcher.py
"""

from f1_chat.integrations.web.fetcher import FetchedPage, PageFetcher, normalize_url

__all__ = ["FetchedPage", "PageFetcher", "normalize_url"]
