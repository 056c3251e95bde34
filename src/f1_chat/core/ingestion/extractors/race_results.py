"""
목적: formula1.com 결과 표 추출기를 제공한다.
설명: 결과 표의 각 행(헤더 제외)을 대회/날짜/우승자/팀/기록이 담긴 한 문장으로 바꾼다.
    시즌 연도는 URL의 `/results/<year>/` 경로에서 얻는다.
디자인 패턴: 전략 패턴
참조: src/f1_chat/core/ingestion/extractors/base.py, src/f1_chat/core/ingestion/extractors/body_text.py
"""

from __future__ import annotations

import re
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from f1_chat.core.ingestion.extractors.body_text import collapse_whitespace

_SEASON_PATTERN = re.compile(r"/results/(\d{4})(?:/|$)")
_GRAND_PRIX_TAIL = re.compile(r"Grand Prix.*", re.DOTALL)
_MIN_SENTENCE_LENGTH = 20


class RaceResultsExtractor:
    """레이스 결과 표를 의미 문장으로 변환하는 추출기.

    Args:
        url_marker: 이 추출기를 적용할 URL 부분 문자열.
    """

    name = "race_results"

    def __init__(self, url_marker: str = "formula1.com/en/results") -> None:
        self._url_marker = url_marker

    def matches(self, url: str) -> bool:
        return self._url_marker in (url or "")

    def extract(self, html: str, url: str) -> str:
        soup = BeautifulSoup(html or "", "html.parser")
        season = _season_from_url(url)
        lines: List[str] = []
        for row in soup.find_all("tr")[1:]:
            sentence = self._row_to_sentence(row, season)
            if sentence and len(sentence) > _MIN_SENTENCE_LENGTH:
                lines.append(sentence)
        return "\n".join(lines)

    def _row_to_sentence(self, row: Tag, season: Optional[str]) -> str:
        cols = row.find_all("td")
        if len(cols) < 4:
            return ""
        grand_prix = _clean_grand_prix(_cell_text(cols[0]))
        date = _cell_text(cols[1])
        winner = _preferred_text(cols[2])
        team = _preferred_text(cols[3])
        race_time = _cell_text(cols[5]) if len(cols) > 5 else ""
        season_label = f"the {season} F1 Season" if season else "the F1 Season"
        return (
            f"In {season_label}, at the {grand_prix} on {date}, the winner was {winner} "
            f"driving for {team} with a time of {race_time}."
        )


def _season_from_url(url: str) -> Optional[str]:
    match = _SEASON_PATTERN.search(url or "")
    return match.group(1) if match else None


def _cell_text(cell: Tag) -> str:
    return collapse_whitespace(cell.get_text(" "))


def _preferred_text(cell: Tag) -> str:
    # 모바일 축약 표기 대신 전체 이름이 담긴 요소를 우선한다.
    full = cell.select_one(".hide-for-mobile")
    if full is not None:
        text = collapse_whitespace(full.get_text(" "))
        if text:
            return text
    return _cell_text(cell)


def _clean_grand_prix(text: str) -> str:
    cleaned = text.replace("Flag of ", "")
    return _GRAND_PRIX_TAIL.sub("Grand Prix", cleaned).strip()
