"""
목적: LanceDB 기반 벡터 엔진을 제공한다.
설명: 로컬 디렉터리(또는 원격 URI)에 테이블을 만들고 지표별 거리 값을 "클수록 유사" 점수로 변환한다.
디자인 패턴: 전략 패턴, 어댑터 패턴
참조: src/f1_chat/integrations/vector/engines/lancedb/schema_adapter.py, src/f1_chat/integrations/vector/base/engine.py
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

import lancedb

from f1_chat.integrations.vector.base import (
    BaseVectorEngine,
    CollectionSchema,
    SimilarityMetric,
    VectorMatch,
    VectorRecord,
    collection_not_found,
)
from f1_chat.integrations.vector.engines.lancedb.schema_adapter import LanceSchemaAdapter
from f1_chat.shared.logging import Logger, create_default_logger

_DISTANCE_TYPES = {
    SimilarityMetric.COSINE: "cosine",
    SimilarityMetric.DOT_PRODUCT: "dot",
    SimilarityMetric.EUCLIDEAN: "l2",
}


class LanceDBVectorEngine(BaseVectorEngine):
    """LanceDB 엔진 구현체.

    Args:
        uri: LanceDB 데이터베이스 경로 또는 URI.
        schema_adapter: Arrow 스키마 어댑터.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        uri: str,
        schema_adapter: Optional[LanceSchemaAdapter] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._uri = uri
        self._adapter = schema_adapter or LanceSchemaAdapter()
        self._logger = logger or create_default_logger("LanceDBVectorEngine")
        self._db: Any = None

    @property
    def name(self) -> str:
        return "lancedb"

    def connect(self) -> None:
        if self._db is not None:
            return
        self._db = lancedb.connect(self._uri)
        self._logger.info(f"LanceDB 연결 완료: uri={self._uri}")

    def close(self) -> None:
        self._db = None

    def has_collection(self, name: str) -> bool:
        return name in self._table_names()

    def create_collection(self, schema: CollectionSchema) -> None:
        arrow_schema = self._adapter.build_arrow_schema(schema)
        self._connection().create_table(schema.name, schema=arrow_schema, mode="create")
        self._logger.info(
            f"LanceDB 테이블 생성: name={schema.name}, dimension={schema.dimension}, metric={schema.metric.value}"
        )

    def drop_collection(self, name: str) -> None:
        if not self.has_collection(name):
            raise collection_not_found(self.name, name)
        self._connection().drop_table(name)

    def insert(self, schema: CollectionSchema, records: Sequence[VectorRecord]) -> None:
        if not records:
            return
        table = self._open(schema.name)
        table.add([self._adapter.to_row(record, schema) for record in records])

    def search(
        self,
        schema: CollectionSchema,
        vector: Sequence[float],
        top_k: int,
    ) -> List[VectorMatch]:
        if top_k <= 0:
            return []
        table = self._open(schema.name)
        query = self._adapter.coerce_vector(list(vector), schema.dimension)
        rows = (
            table.search(query, vector_column_name=LanceSchemaAdapter.VECTOR_FIELD)
            .distance_type(_DISTANCE_TYPES[schema.metric])
            .limit(top_k)
            .to_list()
        )
        matches = [
            VectorMatch(
                record_id=str(row.get("record_id")),
                text=str(row.get("text") or ""),
                score=_to_similarity(float(row.get("_distance", 0.0)), schema.metric),
                source_url=row.get("source_url"),
            )
            for row in rows
        ]
        matches.sort(key=lambda match: match.score, reverse=True)
        return matches

    def count(self, name: str) -> int:
        return int(self._open(name).count_rows())

    def _connection(self) -> Any:
        if self._db is None:
            self.connect()
        return self._db

    def _table_names(self) -> list[str]:
        result = self._connection().list_tables()
        if isinstance(result, list):
            return [str(name) for name in result]
        tables = getattr(result, "tables", None)
        if isinstance(tables, list):
            return [str(name) for name in tables]
        return []

    def _open(self, name: str) -> Any:
        if not self.has_collection(name):
            raise collection_not_found(self.name, name)
        return self._connection().open_table(name)


def _to_similarity(distance: float, metric: SimilarityMetric) -> float:
    # LanceDB: cosine = 1 - cos, dot = 1 - dot, l2 = 제곱 거리
    if metric == SimilarityMetric.EUCLIDEAN:
        return 1.0 / (1.0 + distance)
    return 1.0 - distance
