"""
목적: 벡터 엔진 추상 인터페이스를 정의한다.
설명: 컬렉션 생성/삭제, 레코드 추가, 최근접 검색을 위한 표준 메서드를 제공한다.
디자인 패턴: 전략 패턴
참조: src/f1_chat/integrations/vector/base/models.py, src/f1_chat/core/corpus/store.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from f1_chat.integrations.vector.base.models import CollectionSchema, VectorMatch, VectorRecord
from f1_chat.shared.exceptions import BaseAppException, ErrorKind, ExceptionDetail


class BaseVectorEngine(ABC):
    """벡터 엔진 인터페이스."""

    @property
    @abstractmethod
    def name(self) -> str:
        """엔진 이름을 반환한다."""

    @abstractmethod
    def connect(self) -> None:
        """연결을 초기화한다."""

    @abstractmethod
    def close(self) -> None:
        """연결을 종료한다."""

    @abstractmethod
    def has_collection(self, name: str) -> bool:
        """컬렉션 존재 여부를 반환한다."""

    @abstractmethod
    def create_collection(self, schema: CollectionSchema) -> None:
        """컬렉션을 생성한다. 이미 있으면 예외를 던진다."""

    @abstractmethod
    def drop_collection(self, name: str) -> None:
        """컬렉션을 삭제한다. 없으면 예외를 던진다."""

    @abstractmethod
    def insert(self, schema: CollectionSchema, records: Sequence[VectorRecord]) -> None:
        """레코드를 추가한다. 중복을 허용한다."""

    @abstractmethod
    def search(
        self,
        schema: CollectionSchema,
        vector: Sequence[float],
        top_k: int,
    ) -> List[VectorMatch]:
        """유사도 내림차순으로 최대 top_k건을 반환한다."""

    @abstractmethod
    def count(self, name: str) -> int:
        """컬렉션 레코드 수를 반환한다."""


def collection_not_found(engine: str, name: str) -> BaseAppException:
    """컬렉션 미존재 예외를 생성한다."""

    return BaseAppException(
        "벡터 컬렉션을 찾을 수 없습니다.",
        ExceptionDetail(
            code="VECTOR_COLLECTION_NOT_FOUND",
            kind=ErrorKind.DATA_CONTRACT,
            cause=f"engine={engine}, collection={name}",
            hint="수집(ingest)을 먼저 실행해 컬렉션을 생성하세요.",
            metadata={"collection": name},
        ),
    )
