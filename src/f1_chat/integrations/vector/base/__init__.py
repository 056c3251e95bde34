"""
목적: 벡터 엔진 기반 타입을 노출한다.
설명: 모델과 추상 엔진을 한 곳에서 가져올 수 있게 한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/integrations/vector/base/models.py, src/f1_chat/integrations/vector/base/engine.py
"""

from f1_chat.integrations.vector.base.engine import BaseVectorEngine, collection_not_found
from f1_chat.integrations.vector.base.models import (
    CollectionSchema,
    SimilarityMetric,
    VectorMatch,
    VectorRecord,
)

__all__ = [
    "BaseVectorEngine",
    "CollectionSchema",
    "SimilarityMetric",
    "VectorMatch",
    "VectorRecord",
    "collection_not_found",
]
