"""
목적: 코퍼스 저장소를 제공한다.
설명: 설정된 컬렉션 하나에 대해 재생성/추가/최근접 검색을 제공하며 질의 시 데이터 계약 위반은 빈 결과로 완화한다.
디자인 패턴: 저장소 패턴, 퍼사드
참조: src/f1_chat/integrations/vector/base/engine.py, src/f1_chat/core/ingestion/pipeline.py, src/f1_chat/core/chat/services/retriever.py
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from f1_chat.integrations.vector import (
    BaseVectorEngine,
    CollectionSchema,
    SimilarityMetric,
    VectorMatch,
    VectorRecord,
)
from f1_chat.shared.exceptions import BaseAppException, ErrorKind, ExceptionDetail
from f1_chat.shared.logging import Logger, create_default_logger


class CorpusStore:
    """단일 코퍼스 컬렉션 저장소.

    Args:
        engine: 벡터 엔진.
        schema: 컬렉션 이름/차원/지표.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        engine: BaseVectorEngine,
        schema: CollectionSchema,
        logger: Optional[Logger] = None,
    ) -> None:
        self._engine = engine
        self._schema = schema
        self._logger = logger or create_default_logger("CorpusStore")

    @property
    def schema(self) -> CollectionSchema:
        """현재 컬렉션 스키마를 반환한다."""

        return self._schema

    @property
    def dimension(self) -> int:
        """컬렉션 벡터 차원을 반환한다."""

        return self._schema.dimension

    def recreate(self, metric: Optional[SimilarityMetric] = None) -> CollectionSchema:
        """컬렉션을 삭제 후 다시 만든다.

        차원은 설정으로 고정되어 임베딩 클라이언트와 공유되므로 바꿀 수 없다.
        삭제 실패는 기록만 하고 넘어간다. 생성 실패는 CORPUS_RECREATE_FAILED로 전파한다.
        """

        schema = CollectionSchema(
            name=self._schema.name,
            dimension=self._schema.dimension,
            metric=metric or self._schema.metric,
        )
        try:
            self._engine.drop_collection(schema.name)
            self._logger.info(f"corpus.dropped: collection={schema.name}")
        except Exception as error:  # noqa: BLE001 - 없는 컬렉션 삭제 등은 무시한다
            self._logger.warning(f"corpus.drop.skipped: collection={schema.name}, error={error}")
        try:
            self._engine.create_collection(schema)
        except Exception as error:  # noqa: BLE001 - 엔진 오류를 도메인 예외로 변환
            raise BaseAppException(
                "코퍼스 컬렉션 생성에 실패했습니다.",
                ExceptionDetail(
                    code="CORPUS_RECREATE_FAILED",
                    kind=ErrorKind.UPSTREAM,
                    cause=str(error),
                    metadata={"collection": schema.name, "engine": self._engine.name},
                ),
                error,
            ) from error
        self._schema = schema
        self._logger.info(
            f"corpus.created: collection={schema.name}, dimension={schema.dimension}, metric={schema.metric.value}"
        )
        return schema

    def insert(self, record: VectorRecord) -> None:
        """레코드 한 건을 추가한다. 중복을 허용한다.

        Raises:
            BaseAppException: 차원 불일치(CORPUS_DIMENSION_MISMATCH) 또는 엔진 오류(CORPUS_INSERT_FAILED).
        """

        self.insert_many([record])

    def insert_many(self, records: Sequence[VectorRecord]) -> None:
        """여러 레코드를 추가한다."""

        for record in records:
            if len(record.vector) != self._schema.dimension:
                raise BaseAppException(
                    "벡터 차원이 컬렉션 차원과 일치하지 않습니다.",
                    ExceptionDetail(
                        code="CORPUS_DIMENSION_MISMATCH",
                        kind=ErrorKind.DATA_CONTRACT,
                        cause=f"expected={self._schema.dimension}, actual={len(record.vector)}",
                        metadata={"collection": self._schema.name},
                    ),
                )
        try:
            self._engine.insert(self._schema, records)
        except BaseAppException:
            raise
        except Exception as error:  # noqa: BLE001 - 엔진 오류를 도메인 예외로 변환
            raise BaseAppException(
                "코퍼스 레코드 추가에 실패했습니다.",
                ExceptionDetail(
                    code="CORPUS_INSERT_FAILED",
                    kind=ErrorKind.UPSTREAM,
                    cause=str(error),
                    metadata={"collection": self._schema.name, "count": len(records)},
                ),
                error,
            ) from error

    def count(self) -> int:
        """레코드 수를 반환한다. 컬렉션이 없으면 0."""

        if not self._engine.has_collection(self._schema.name):
            return 0
        return self._engine.count(self._schema.name)

    def nearest_neighbors(self, vector: Sequence[float], k: int) -> List[VectorMatch]:
        """유사도 내림차순으로 최대 k건을 반환한다.

        컬렉션이 없거나 비어 있거나 질의 차원이 다르면 예외 없이 빈 리스트를 반환한다.
        """

        if k <= 0:
            return []
        if len(vector) != self._schema.dimension:
            self._logger.warning(
                f"corpus.query.dimension_mismatch: expected={self._schema.dimension}, actual={len(vector)}"
            )
            return []
        if not self._engine.has_collection(self._schema.name):
            self._logger.warning(f"corpus.query.missing_collection: collection={self._schema.name}")
            return []
        try:
            if self._engine.count(self._schema.name) == 0:
                return []
            return self._engine.search(self._schema, vector, k)
        except BaseAppException as error:
            # 재수집이 컬렉션을 다시 만드는 중이면 검사 이후에 사라질 수 있다.
            if error.kind != ErrorKind.DATA_CONTRACT:
                raise
            self._logger.warning(
                f"corpus.query.degraded: collection={self._schema.name}, code={error.code}"
            )
            return []
