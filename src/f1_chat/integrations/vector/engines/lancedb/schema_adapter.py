"""
목적: LanceDB 스키마/행 변환 어댑터를 제공한다.
설명: CollectionSchema를 PyArrow 스키마로 변환하고 VectorRecord를 스키마 타입의 row로 정규화한다.
디자인 패턴: 어댑터 패턴
참조: src/f1_chat/integrations/vector/base/models.py
"""

from __future__ import annotations

import json
from typing import Any

import pyarrow as pa

from f1_chat.integrations.vector.base import CollectionSchema, VectorRecord


class LanceSchemaAdapter:
    """LanceDB 스키마/행 변환 어댑터."""

    VECTOR_FIELD = "vector"

    def build_arrow_schema(self, schema: CollectionSchema) -> pa.Schema:
        """컬렉션 스키마를 고정 길이 float32 벡터 컬럼을 가진 Arrow 스키마로 변환한다."""

        return pa.schema(
            [
                pa.field("record_id", pa.string(), nullable=False),
                pa.field("text", pa.string(), nullable=False),
                pa.field("source_url", pa.string(), nullable=True),
                pa.field("metadata", pa.string(), nullable=True),
                pa.field(
                    self.VECTOR_FIELD,
                    pa.list_(pa.float32(), int(schema.dimension)),
                    nullable=False,
                ),
            ]
        )

    def to_row(self, record: VectorRecord, schema: CollectionSchema) -> dict[str, Any]:
        """레코드를 Arrow 스키마에 맞는 row로 변환한다."""

        return {
            "record_id": record.record_id,
            "text": record.text,
            "source_url": record.source_url,
            "metadata": json.dumps(record.metadata, ensure_ascii=False) if record.metadata else None,
            self.VECTOR_FIELD: self.coerce_vector(record.vector, schema.dimension),
        }

    def coerce_vector(self, value: Any, dimension: int) -> list[float]:
        """벡터를 float 리스트로 바꾸고 차원을 검사한다."""

        if isinstance(value, str):
            decoded = json.loads(value)
            if not isinstance(decoded, list):
                raise ValueError("벡터 문자열은 JSON 배열이어야 합니다.")
            value = decoded
        values = [float(item) for item in value]
        if len(values) != dimension:
            raise ValueError(
                f"벡터 차원이 일치하지 않습니다. expected={dimension}, actual={len(values)}"
            )
        return values
