"""
목적: 원문 텍스트를 겹치는 고정 길이 청크로 분할한다.
설명: 문단 -> 줄 -> 문장 -> 단어 경계 순으로 분할 지점을 찾고 없으면 최대 길이에서 자른다.
    다음 청크는 이전 청크의 마지막 overlap 글자에서 시작하되 단어 중간이면 다음 단어 시작으로 당긴다.
    분할 전에 공백 연속 구간을 정규화하므로 청크 위치는 정규화된 텍스트 기준이다.
디자인 패턴: 전략 객체
참조: src/f1_chat/core/ingestion/pipeline.py, src/f1_chat/core/ingestion/models.py
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from f1_chat.core.ingestion.models import TextChunk

DEFAULT_SEPARATORS: tuple[str, ...] = ("\n\n", "\n", ". ", "! ", "? ", " ")

_HORIZONTAL_SPACE = re.compile(r"[^\S\n]+")
_LINE_EDGE_SPACE = re.compile(r" ?\n ?")
_BLANK_LINES = re.compile(r"\n{3,}")


class TextChunker:
    """겹침 청크 분할기.

    Args:
        chunk_size: 청크 최대 글자 수(S).
        chunk_overlap: 인접 청크 겹침 글자 수(O). 0 <= O < S.
        separators: 우선순위 순 분할 경계 후보.
    """

    def __init__(
        self,
        chunk_size: int = 512,
        chunk_overlap: int = 200,
        separators: Sequence[str] = DEFAULT_SEPARATORS,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size는 0보다 커야 합니다.")
        if chunk_overlap < 0 or chunk_overlap >= chunk_size:
            raise ValueError("chunk_overlap은 0 이상 chunk_size 미만이어야 합니다.")
        self._chunk_size = chunk_size
        self._chunk_overlap = chunk_overlap
        self._separators = tuple(sep for sep in separators if sep)

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def chunk_overlap(self) -> int:
        return self._chunk_overlap

    def split(self, text: object) -> List[str]:
        """텍스트를 청크 문자열 목록으로 분할한다."""

        return [chunk.text for chunk in self.split_chunks(text)]

    def split_chunks(self, text: object, source_url: Optional[str] = None) -> List[TextChunk]:
        """텍스트를 위치 정보가 있는 청크 목록으로 분할한다.

        빈 입력이나 공백뿐인 입력은 빈 리스트를 반환하며 예외를 던지지 않는다.
        """

        normalized = _normalize(text)
        if not normalized:
            return []
        if len(normalized) <= self._chunk_size:
            return [TextChunk(text=normalized, index=0, start=0, end=len(normalized), source_url=source_url)]

        chunks: List[TextChunk] = []
        length = len(normalized)
        start = 0
        while start < length:
            hard_end = start + self._chunk_size
            if hard_end >= length:
                end = length
            else:
                end = self._find_breakpoint(normalized, start, hard_end)
            piece = normalized[start:end]
            if piece.strip():
                chunks.append(
                    TextChunk(
                        text=piece,
                        index=len(chunks),
                        start=start,
                        end=end,
                        source_url=source_url,
                    )
                )
            if end >= length:
                break
            start = self._next_start(normalized, end)
        return chunks

    def _find_breakpoint(self, text: str, start: int, hard_end: int) -> int:
        # 경계 뒤 위치가 start + overlap 보다 커야 다음 시작점이 앞으로 나아간다.
        minimum_end = start + self._chunk_overlap
        for separator in self._separators:
            position = text.rfind(separator, start, hard_end)
            if position == -1:
                continue
            candidate = position + len(separator)
            if candidate > minimum_end:
                return candidate
        return hard_end

    def _next_start(self, text: str, end: int) -> int:
        if self._chunk_overlap == 0:
            return end
        next_start = end - self._chunk_overlap
        if text[next_start - 1].isspace():
            return next_start
        for position in range(next_start, end):
            if text[position].isspace():
                return position + 1
        return next_start


def _normalize(text: object) -> str:
    if text is None:
        return ""
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    # 공백 연속 구간은 최대 문단 구분(\n\n)까지만 남겨 공백뿐인 조각이 생기지 않게 한다.
    normalized = str(text).replace("\r\n", "\n").replace("\r", "\n")
    normalized = _HORIZONTAL_SPACE.sub(" ", normalized)
    normalized = _LINE_EDGE_SPACE.sub("\n", normalized)
    normalized = _BLANK_LINES.sub("\n\n", normalized)
    return normalized.strip()
