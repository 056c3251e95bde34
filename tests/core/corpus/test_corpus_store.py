"""
목적: 코퍼스 저장소 동작을 검증한다.
설명: 재생성, 차원 검사, 빈 컬렉션/차원 불일치 질의의 빈 결과를 확인한다.
디자인 패턴: 테스트 케이스
참조: src/f1_chat/core/corpus/store.py
"""

from __future__ import annotations

import pytest

from f1_chat.core.corpus import CorpusStore
from f1_chat.integrations.vector import (
    CollectionSchema,
    InMemoryVectorEngine,
    SimilarityMetric,
    VectorMatch,
    VectorRecord,
)
from f1_chat.shared.exceptions import BaseAppException, ErrorKind


def _store(dimension: int = 3) -> CorpusStore:
    return CorpusStore(InMemoryVectorEngine(), CollectionSchema(name="f1_corpus", dimension=dimension))


def test_nearest_neighbors_on_missing_or_empty_collection_is_empty() -> None:
    """컬렉션이 없거나 비어 있으면 빈 리스트인지 검증한다."""

    store = _store()

    assert store.nearest_neighbors([1.0, 0.0, 0.0], 3) == []
    assert store.count() == 0

    store.recreate()

    assert store.nearest_neighbors([1.0, 0.0, 0.0], 3) == []


def test_recreate_drops_previous_records() -> None:
    """재생성하면 이전 레코드가 사라지는지 검증한다."""

    store = _store()
    store.recreate()
    store.insert(VectorRecord(text="old", vector=[1.0, 0.0, 0.0]))
    store.insert(VectorRecord(text="old", vector=[1.0, 0.0, 0.0]))
    assert store.count() == 2

    schema = store.recreate(metric=SimilarityMetric.DOT_PRODUCT)

    assert schema.dimension == 3
    assert schema.metric == SimilarityMetric.DOT_PRODUCT
    assert store.count() == 0


def test_insert_rejects_dimension_mismatch() -> None:
    """컬렉션 차원과 다른 벡터는 data_contract 오류인지 검증한다."""

    store = _store()
    store.recreate()

    with pytest.raises(BaseAppException) as exc_info:
        store.insert(VectorRecord(text="bad", vector=[1.0, 0.0]))

    assert exc_info.value.code == "CORPUS_DIMENSION_MISMATCH"
    assert exc_info.value.kind == ErrorKind.DATA_CONTRACT


def test_insert_without_collection_is_insert_failure() -> None:
    """컬렉션 없이 추가하면 엔진 오류가 그대로 전달되는지 검증한다."""

    store = _store()

    with pytest.raises(BaseAppException) as exc_info:
        store.insert(VectorRecord(text="x", vector=[1.0, 0.0, 0.0]))

    assert exc_info.value.code == "VECTOR_COLLECTION_NOT_FOUND"


def test_nearest_neighbors_limits_and_orders() -> None:
    """유사도 내림차순으로 최대 k건을 반환하는지 검증한다."""

    store = _store()
    store.recreate()
    store.insert_many(
        [
            VectorRecord(record_id="a", text="a", vector=[1.0, 0.0, 0.0]),
            VectorRecord(record_id="b", text="b", vector=[0.0, 1.0, 0.0]),
            VectorRecord(record_id="c", text="c", vector=[0.8, 0.2, 0.0]),
        ]
    )

    matches = store.nearest_neighbors([1.0, 0.0, 0.0], 2)

    assert [match.record_id for match in matches] == ["a", "c"]
    assert store.nearest_neighbors([1.0, 0.0], 2) == []
    assert store.nearest_neighbors([1.0, 0.0, 0.0], 0) == []


class _DroppingEngine(InMemoryVectorEngine):
    """건수 확인 직후 재수집이 컬렉션을 지운 상황을 흉내 낸다."""

    def count(self, name: str) -> int:
        total = super().count(name)
        self.drop_collection(name)
        return total


def test_nearest_neighbors_degrades_when_collection_disappears() -> None:
    """검사 이후 컬렉션이 사라져도 예외 없이 빈 리스트인지 검증한다."""

    store = CorpusStore(_DroppingEngine(), CollectionSchema(name="f1_corpus", dimension=3))
    store.recreate()
    store.insert(VectorRecord(text="Lewis Hamilton won the race.", vector=[1.0, 0.0, 0.0]))

    matches: list[VectorMatch] = store.nearest_neighbors([1.0, 0.0, 0.0], 3)

    assert matches == []


def test_recreate_keeps_configured_dimension() -> None:
    """재생성 후에도 임베딩과 공유하는 차원이 유지되는지 검증한다."""

    store = _store(dimension=384)

    schema = store.recreate()

    assert schema.dimension == 384
    assert store.dimension == 384
