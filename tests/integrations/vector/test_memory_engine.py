"""
목적: 인메모리 벡터 엔진 동작을 검증한다.
설명: 컬렉션 수명주기, 지표별 정렬, 차원 검사를 확인한다.
디자인 패턴: 테스트 케이스
참조: src/f1_chat/integrations/vector/engines/memory.py
"""

from __future__ import annotations

import pytest

from f1_chat.integrations.vector import (
    CollectionSchema,
    InMemoryVectorEngine,
    SimilarityMetric,
    VectorRecord,
)
from f1_chat.shared.exceptions import BaseAppException


def _records() -> list[VectorRecord]:
    return [
        VectorRecord(record_id="doc-1", text="고양이", vector=[1.0, 0.0, 0.0]),
        VectorRecord(record_id="doc-2", text="강아지", vector=[0.0, 1.0, 0.0]),
        VectorRecord(record_id="doc-3", text="고양이와 강아지", vector=[0.7, 0.7, 0.0]),
    ]


@pytest.mark.parametrize(
    "metric",
    [SimilarityMetric.COSINE, SimilarityMetric.DOT_PRODUCT, SimilarityMetric.EUCLIDEAN],
)
def test_search_orders_by_similarity(metric: SimilarityMetric) -> None:
    """지표와 무관하게 가장 가까운 레코드가 먼저 오는지 검증한다."""

    engine = InMemoryVectorEngine()
    schema = CollectionSchema(name="vectors", dimension=3, metric=metric)
    engine.create_collection(schema)
    engine.insert(schema, _records())

    matches = engine.search(schema, [0.9, 0.1, 0.0], top_k=2)

    assert [match.record_id for match in matches][0] in {"doc-1", "doc-3"}
    assert len(matches) == 2
    assert matches[0].score >= matches[1].score


def test_collection_lifecycle() -> None:
    """생성/개수/삭제와 없는 컬렉션 오류를 검증한다."""

    engine = InMemoryVectorEngine()
    schema = CollectionSchema(name="vectors", dimension=3)
    engine.create_collection(schema)
    engine.insert(schema, _records())

    assert engine.has_collection("vectors") is True
    assert engine.count("vectors") == 3
    with pytest.raises(ValueError):
        engine.create_collection(schema)

    engine.drop_collection("vectors")

    assert engine.has_collection("vectors") is False
    with pytest.raises(BaseAppException) as exc_info:
        engine.count("vectors")
    assert exc_info.value.code == "VECTOR_COLLECTION_NOT_FOUND"


def test_insert_rejects_wrong_dimension() -> None:
    """차원이 다른 레코드는 거부하는지 검증한다."""

    engine = InMemoryVectorEngine()
    schema = CollectionSchema(name="vectors", dimension=3)
    engine.create_collection(schema)

    with pytest.raises(ValueError):
        engine.insert(schema, [VectorRecord(text="짧은 벡터", vector=[1.0, 0.0])])
    assert engine.count("vectors") == 0
