"""
목적: 벡터 컬렉션/레코드/검색 결과 모델을 정의한다.
설명: 컬렉션은 생성 시 차원과 유사도 지표가 고정되며 모든 레코드 벡터는 그 차원을 따라야 한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/f1_chat/integrations/vector/base/engine.py
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator


class SimilarityMetric(str, Enum):
    """유사도 지표 열거형."""

    COSINE = "cosine"
    DOT_PRODUCT = "dot_product"
    EUCLIDEAN = "euclidean"


class CollectionSchema(BaseModel):
    """벡터 컬렉션 스키마.

    Args:
        name: 컬렉션 이름.
        dimension: 벡터 차원.
        metric: 유사도 지표.
    """

    name: str = Field(..., min_length=1)
    dimension: int = Field(..., gt=0)
    metric: SimilarityMetric = SimilarityMetric.COSINE


class VectorRecord(BaseModel):
    """저장 단위 레코드(텍스트 + 벡터)."""

    record_id: str = Field(default_factory=lambda: uuid4().hex)
    text: str
    vector: List[float]
    source_url: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("vector")
    @classmethod
    def _not_empty(cls, value: List[float]) -> List[float]:
        if not value:
            raise ValueError("vector는 비어 있을 수 없습니다.")
        return value


class VectorMatch(BaseModel):
    """최근접 검색 결과 한 건.

    score는 지표와 무관하게 클수록 더 유사하다.
    """

    record_id: str
    text: str
    score: float
    source_url: Optional[str] = None
