"""
목적: 일반 HTML 본문 텍스트 추출기를 제공한다.
설명: script/style/noscript/iframe/svg를 제거하고 body 텍스트의 공백을 하나로 접는다.
디자인 패턴: 전략 패턴
참조: src/f1_chat/core/ingestion/extractors/base.py
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

_WHITESPACE = re.compile(r"\s+")
_NON_CONTENT_TAGS = ("script", "style", "noscript", "iframe", "svg")


class BodyTextExtractor:
    """마크업을 걷어낸 본문 텍스트 추출기."""

    name = "body_text"

    def matches(self, url: str) -> bool:
        return True

    def extract(self, html: str, url: str) -> str:
        soup = BeautifulSoup(html or "", "html.parser")
        for tag in soup(_NON_CONTENT_TAGS):
            tag.decompose()
        root = soup.body or soup
        return collapse_whitespace(root.get_text(" "))


def collapse_whitespace(text: str) -> str:
    """연속 공백을 하나로 접고 앞뒤 공백을 제거한다."""

    return _WHITESPACE.sub(" ", text or "").strip()
