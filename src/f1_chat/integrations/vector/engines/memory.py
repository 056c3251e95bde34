"""
목적: 인메모리 벡터 엔진을 제공한다.
설명: numpy 행렬 연산으로 코사인/내적/유클리드 유사도를 계산한다. 로컬 실행과 테스트에 사용한다.
디자인 패턴: 전략 패턴
참조: src/f1_chat/integrations/vector/base/engine.py
"""

from __future__ import annotations

import threading
from typing import Dict, List, Sequence

import numpy as np

from f1_chat.integrations.vector.base import (
    BaseVectorEngine,
    CollectionSchema,
    SimilarityMetric,
    VectorMatch,
    VectorRecord,
    collection_not_found,
)


class _Collection:
    def __init__(self, schema: CollectionSchema) -> None:
        self.schema = schema
        self.records: List[VectorRecord] = []


class InMemoryVectorEngine(BaseVectorEngine):
    """프로세스 메모리에 컬렉션을 보관하는 엔진."""

    def __init__(self) -> None:
        self._collections: Dict[str, _Collection] = {}
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "memory"

    def connect(self) -> None:
        return None

    def close(self) -> None:
        return None

    def has_collection(self, name: str) -> bool:
        with self._lock:
            return name in self._collections

    def create_collection(self, schema: CollectionSchema) -> None:
        with self._lock:
            if schema.name in self._collections:
                raise ValueError(f"이미 존재하는 컬렉션입니다: {schema.name}")
            self._collections[schema.name] = _Collection(schema)

    def drop_collection(self, name: str) -> None:
        with self._lock:
            if self._collections.pop(name, None) is None:
                raise collection_not_found(self.name, name)

    def insert(self, schema: CollectionSchema, records: Sequence[VectorRecord]) -> None:
        with self._lock:
            collection = self._collections.get(schema.name)
            if collection is None:
                raise collection_not_found(self.name, schema.name)
            for record in records:
                if len(record.vector) != collection.schema.dimension:
                    raise ValueError(
                        "벡터 차원이 일치하지 않습니다. "
                        f"expected={collection.schema.dimension}, actual={len(record.vector)}"
                    )
            collection.records.extend(records)

    def search(
        self,
        schema: CollectionSchema,
        vector: Sequence[float],
        top_k: int,
    ) -> List[VectorMatch]:
        with self._lock:
            collection = self._collections.get(schema.name)
            if collection is None:
                raise collection_not_found(self.name, schema.name)
            records = list(collection.records)
            metric = collection.schema.metric
        if not records or top_k <= 0:
            return []
        matrix = np.asarray([record.vector for record in records], dtype=np.float32)
        query = np.asarray(vector, dtype=np.float32)
        scores = _score(matrix, query, metric)
        order = np.argsort(-scores, kind="stable")[:top_k]
        return [
            VectorMatch(
                record_id=records[index].record_id,
                text=records[index].text,
                score=float(scores[index]),
                source_url=records[index].source_url,
            )
            for index in order
        ]

    def count(self, name: str) -> int:
        with self._lock:
            collection = self._collections.get(name)
            if collection is None:
                raise collection_not_found(self.name, name)
            return len(collection.records)


def _score(matrix: np.ndarray, query: np.ndarray, metric: SimilarityMetric) -> np.ndarray:
    if metric == SimilarityMetric.DOT_PRODUCT:
        return matrix @ query
    if metric == SimilarityMetric.EUCLIDEAN:
        distances = np.linalg.norm(matrix - query, axis=1)
        return 1.0 / (1.0 + distances)
    norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
    dots = matrix @ query
    # 영벡터는 유사도 0으로 취급한다.
    return np.divide(dots, norms, out=np.zeros_like(dots), where=norms > 0)
