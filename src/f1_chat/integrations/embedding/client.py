"""
목적: 임베딩 클라이언트를 제공한다.
설명: LangChain Embeddings를 감싸 재시도/백오프, 차원 검사, 예외 변환, 로깅을 통합한다.
디자인 패턴: 프록시
참조: src/f1_chat/integrations/embedding/factory.py, src/f1_chat/core/ingestion/pipeline.py, src/f1_chat/core/chat/services/retriever.py
"""

from __future__ import annotations

import asyncio
import time
from typing import Callable, List, Optional

from langchain_core.embeddings import Embeddings

from f1_chat.shared.exceptions import BaseAppException, ErrorKind, ExceptionDetail
from f1_chat.shared.logging import Logger, create_default_logger


class EmbeddingClient:
    """텍스트 한 건을 고정 차원 벡터로 변환하는 클라이언트.

    수집과 질의는 반드시 같은 인스턴스(같은 모델 설정)를 사용해야 한다.

    Args:
        embeddings: LangChain 임베딩 구현체.
        dimension: 기대 벡터 차원. None이면 검사하지 않는다.
        max_attempts: 일시 오류에 대한 최대 시도 횟수.
        backoff_seconds: 첫 재시도 대기 시간. 시도마다 두 배로 늘어난다.
        model_name: 로그/오류 메타데이터용 모델 이름.
        logger: 주입 가능한 로거.
        sleep: 대기 함수(테스트 주입용).
    """

    def __init__(
        self,
        embeddings: Embeddings,
        dimension: Optional[int] = None,
        max_attempts: int = 3,
        backoff_seconds: float = 0.5,
        model_name: str = "",
        logger: Optional[Logger] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts는 1 이상이어야 합니다.")
        self._embeddings = embeddings
        self._dimension = dimension
        self._max_attempts = max_attempts
        self._backoff_seconds = backoff_seconds
        self._model_name = model_name
        self._logger = logger or create_default_logger("EmbeddingClient")
        self._sleep = sleep

    @property
    def dimension(self) -> Optional[int]:
        """기대 벡터 차원을 반환한다."""

        return self._dimension

    @property
    def model_name(self) -> str:
        """모델 이름을 반환한다."""

        return self._model_name

    def embed(self, text: str) -> List[float]:
        """텍스트를 벡터로 변환한다.

        Raises:
            BaseAppException: 재시도 소진(EMBEDDING_REQUEST_FAILED) 또는
                차원 불일치(EMBEDDING_DIMENSION_MISMATCH).
        """

        if not text or not text.strip():
            raise BaseAppException(
                "임베딩할 텍스트가 비어 있습니다.",
                ExceptionDetail(code="EMBEDDING_INPUT_EMPTY", kind=ErrorKind.CLIENT),
            )
        last_error: Optional[Exception] = None
        for attempt in range(1, self._max_attempts + 1):
            try:
                vector = self._embeddings.embed_query(text)
            except Exception as error:  # noqa: BLE001 - 외부 공급자 오류 캡처
                last_error = error
                self._logger.warning(
                    f"embedding.attempt.failed: attempt={attempt}/{self._max_attempts}, error={error}"
                )
                if attempt < self._max_attempts:
                    self._sleep(self._backoff_seconds * (2 ** (attempt - 1)))
                continue
            return self._check_dimension(vector)
        raise BaseAppException(
            "임베딩 요청에 실패했습니다.",
            ExceptionDetail(
                code="EMBEDDING_REQUEST_FAILED",
                kind=ErrorKind.UPSTREAM,
                cause=str(last_error),
                metadata={"model": self._model_name, "attempts": self._max_attempts},
            ),
            last_error,
        )

    async def aembed(self, text: str) -> List[float]:
        """이벤트 루프를 막지 않도록 스레드에서 embed를 실행한다."""

        return await asyncio.to_thread(self.embed, text)

    def _check_dimension(self, vector: List[float]) -> List[float]:
        values = [float(value) for value in vector]
        if self._dimension is not None and len(values) != self._dimension:
            raise BaseAppException(
                "임베딩 차원이 컬렉션 차원과 일치하지 않습니다.",
                ExceptionDetail(
                    code="EMBEDDING_DIMENSION_MISMATCH",
                    kind=ErrorKind.DATA_CONTRACT,
                    cause=f"expected={self._dimension}, actual={len(values)}",
                    hint="임베딩 모델을 바꿨다면 컬렉션 차원을 맞추고 재수집하세요.",
                    metadata={"expected": self._dimension, "actual": len(values)},
                ),
            )
        return values
