"""
목적: 벡터 엔진 공개 API를 제공한다.
설명: 컬렉션 스키마/레코드 모델, 엔진 인터페이스, 엔진 구현체를 노출한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/integrations/vector/base, src/f1_chat/integrations/vector/engines
"""

from f1_chat.integrations.vector.base import (
    BaseVectorEngine,
    CollectionSchema,
    SimilarityMetric,
    VectorMatch,
    VectorRecord,
)
from f1_chat.integrations.vector.engines import InMemoryVectorEngine, LanceDBVectorEngine

__all__ = [
    "BaseVectorEngine",
    "CollectionSchema",
    "InMemoryVectorEngine",
    "LanceDBVectorEngine",
    "SimilarityMetric",
    "VectorMatch",
    "VectorRecord",
]
