"""
목적: 텍스트 청크 분할 규칙을 검증한다.
설명: 짧은 문서, 경계 선호 분할, 겹침 길이, 빈 입력 처리를 확인한다.
디자인 패턴: 테스트 케이스
참조: src/f1_chat/core/ingestion/chunking.py
"""

from __future__ import annotations

import pytest

from f1_chat.core.ingestion import TextChunker

_PARAGRAPH = (
    "Lewis Hamilton won the British Grand Prix at Silverstone. "
    "Max Verstappen finished second after a late safety car. "
    "Ferrari struggled with tyre degradation in the final stint.\n\n"
)


def test_short_document_is_single_trimmed_chunk() -> None:
    """S 이하 문서는 공백을 정리한 단일 청크인지 검증한다."""

    chunker = TextChunker(chunk_size=512, chunk_overlap=200)

    assert chunker.split("  Lewis Hamilton won the race.  \n") == ["Lewis Hamilton won the race."]


@pytest.mark.parametrize("text", [None, "", "   \n\t ", b"  "])
def test_empty_input_yields_no_chunks(text) -> None:
    """빈 입력은 예외 없이 빈 목록인지 검증한다."""

    assert TextChunker().split(text) == []


def test_bytes_input_is_decoded() -> None:
    """bytes 입력을 UTF-8로 해석하는지 검증한다."""

    assert TextChunker().split("Kimi Räikkönen".encode("utf-8")) == ["Kimi Räikkönen"]


def test_text_without_whitespace_overlaps_exactly() -> None:
    """경계가 없는 텍스트는 S 크기로 자르고 겹침이 정확히 O인지 검증한다."""

    text = "x" * 1200
    chunks = TextChunker(chunk_size=512, chunk_overlap=200).split_chunks(text)

    assert [(chunk.start, chunk.end) for chunk in chunks] == [(0, 512), (312, 824), (624, 1136), (936, 1200)]
    for previous, current in zip(chunks, chunks[1:]):
        assert previous.end - current.start == 200
        assert previous.text[-200:] == current.text[:200]


def test_long_document_respects_size_and_overlap_bounds() -> None:
    """긴 문서의 청크가 S 이하이고 겹침이 O 이하이며 원문을 모두 덮는지 검증한다."""

    text = (_PARAGRAPH * 12).strip()
    chunker = TextChunker(chunk_size=300, chunk_overlap=80)

    chunks = chunker.split_chunks(text, source_url="https://a.com/page1")

    assert len(chunks) > 1
    assert chunks[0].start == 0
    assert chunks[-1].end == len(text)
    for chunk in chunks:
        assert len(chunk.text) <= 300
        assert chunk.text == text[chunk.start : chunk.end]
        assert chunk.source_url == "https://a.com/page1"
    for previous, current in zip(chunks, chunks[1:]):
        overlap = previous.end - current.start
        assert 0 <= overlap <= 80
        assert current.start > previous.start


def test_breakpoints_prefer_sentence_and_paragraph_ends() -> None:
    """경계 후보가 있으면 문단/문장 끝에서 자르는지 검증한다."""

    text = (_PARAGRAPH * 12).strip()
    chunks = TextChunker(chunk_size=300, chunk_overlap=80).split(text)

    for chunk in chunks[:-1]:
        assert chunk.endswith(("\n\n", ". ", "\n"))


def test_zero_overlap_chunks_are_contiguous() -> None:
    """O=0이면 청크가 이어 붙는지 검증한다."""

    text = "abcdefghij" * 30
    chunks = TextChunker(chunk_size=100, chunk_overlap=0).split(text)

    assert "".join(chunks) == text


@pytest.mark.parametrize("size, overlap", [(0, 0), (100, 100), (100, -1)])
def test_invalid_parameters_are_rejected(size: int, overlap: int) -> None:
    """0 <= O < S 를 벗어나면 ValueError인지 검증한다."""

    with pytest.raises(ValueError):
        TextChunker(chunk_size=size, chunk_overlap=overlap)


def test_whitespace_runs_are_collapsed() -> None:
    """가로 공백 연속과 3줄 이상의 빈 줄이 정규화되는지 검증한다."""

    text = "Lewis   Hamilton\t won .  \n\n\n\n  Max Verstappen \r\n second."

    assert TextChunker().split(text) == ["Lewis Hamilton won .\n\nMax Verstappen\nsecond."]


def test_whitespace_runs_do_not_break_overlap() -> None:
    """긴 공백 구간이 있어도 청크 사이에 빈틈이 생기지 않는지 검증한다."""

    text = ("Lewis Hamilton won." + " " * 40 + "Max Verstappen was second.\n\n\n\n\n\n") * 10
    chunks = TextChunker(chunk_size=30, chunk_overlap=10).split_chunks(text)

    assert len(chunks) > 1
    assert chunks[0].start == 0
    for chunk in chunks:
        assert chunk.text.strip()
        assert len(chunk.text) <= 30
    for previous, current in zip(chunks, chunks[1:]):
        overlap = previous.end - current.start
        assert 0 <= overlap <= 10
        assert current.start > previous.start
