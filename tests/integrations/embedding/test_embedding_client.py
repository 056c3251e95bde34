"""
목적: 임베딩 클라이언트 동작을 검증한다.
설명: 재시도, 차원 검사, 빈 입력, 비동기 위임과 공급자 설정 오류를 확인한다.
디자인 패턴: 테스트 케이스
참조: src/f1_chat/integrations/embedding/client.py, src/f1_chat/integrations/embedding/factory.py
"""

from __future__ import annotations

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding, Embeddings

from f1_chat.integrations.embedding import EmbeddingClient, build_embeddings
from f1_chat.shared.config import EmbeddingSettings
from f1_chat.shared.exceptions import BaseAppException, ErrorKind


class _FlakyEmbeddings(Embeddings):
    def __init__(self, failures: int) -> None:
        self.failures = failures
        self.calls = 0

    def embed_query(self, text: str) -> list[float]:
        self.calls += 1
        if self.calls <= self.failures:
            raise TimeoutError("read timeout")
        return [0.5, 0.5, 0.5]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self.embed_query(text) for text in texts]


def test_embed_retries_then_succeeds() -> None:
    """일시 실패를 재시도해 벡터를 반환하는지 검증한다."""

    sleeps: list[float] = []
    embeddings = _FlakyEmbeddings(failures=2)
    client = EmbeddingClient(embeddings, dimension=3, max_attempts=3, backoff_seconds=0.5, sleep=sleeps.append)

    assert client.embed("Lewis Hamilton") == [0.5, 0.5, 0.5]
    assert embeddings.calls == 3
    assert sleeps == [0.5, 1.0]


def test_embed_raises_upstream_after_exhausting_attempts() -> None:
    """재시도 소진 시 EMBEDDING_REQUEST_FAILED인지 검증한다."""

    client = EmbeddingClient(_FlakyEmbeddings(failures=5), dimension=3, max_attempts=2, sleep=lambda _: None)

    with pytest.raises(BaseAppException) as exc_info:
        client.embed("text")

    assert exc_info.value.code == "EMBEDDING_REQUEST_FAILED"
    assert exc_info.value.kind == ErrorKind.UPSTREAM


def test_embed_checks_dimension_and_empty_input() -> None:
    """차원 불일치와 빈 입력 오류를 검증한다."""

    client = EmbeddingClient(DeterministicFakeEmbedding(size=8), dimension=384)

    with pytest.raises(BaseAppException) as mismatch:
        client.embed("Max Verstappen")
    assert mismatch.value.code == "EMBEDDING_DIMENSION_MISMATCH"
    assert mismatch.value.kind == ErrorKind.DATA_CONTRACT

    with pytest.raises(BaseAppException) as empty:
        client.embed("   ")
    assert empty.value.code == "EMBEDDING_INPUT_EMPTY"
    assert empty.value.kind == ErrorKind.CLIENT


@pytest.mark.asyncio
async def test_aembed_matches_embed() -> None:
    """비동기 임베딩이 동기 결과와 같은지 검증한다."""

    client = EmbeddingClient(DeterministicFakeEmbedding(size=384), dimension=384)

    vector = await client.aembed("Who won?")

    assert len(vector) == 384
    assert vector == client.embed("Who won?")


def test_build_embeddings_requires_api_key() -> None:
    """키가 필요한 공급자에 키가 없으면 config 오류인지 검증한다."""

    with pytest.raises(BaseAppException) as exc_info:
        build_embeddings(EmbeddingSettings(provider="huggingface"), dimension=384)

    assert exc_info.value.code == "EMBEDDING_CONFIG_ERROR"
    assert exc_info.value.kind == ErrorKind.CONFIG
