"""
목적: 질의 검색기를 제공한다.
설명: 질의를 수집과 같은 임베딩 설정으로 벡터화하고 상위 K개 구절을 유사도 순으로 모아 컨텍스트 문자열을 만든다.
디자인 패턴: 서비스 객체
참조: src/f1_chat/core/corpus/store.py, src/f1_chat/integrations/embedding/client.py
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import List, Optional

from f1_chat.integrations.vector import VectorMatch
from f1_chat.shared.chat.interface import EmbedderPort, NearestNeighborPort
from f1_chat.shared.exceptions import BaseAppException, ErrorKind
from f1_chat.shared.logging import Logger, create_default_logger


@dataclass(frozen=True)
class RetrievalResult:
    """검색 결과. passages는 가장 유사한 것부터 정렬된다."""

    query: str
    passages: List[VectorMatch] = field(default_factory=list)
    context: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.passages


class Retriever:
    """임베딩 + 최근접 검색 기반 검색기.

    질의 임베딩은 캐시하지 않는다.

    Args:
        embedder: 임베딩 클라이언트.
        corpus: 최근접 검색을 제공하는 코퍼스 저장소.
        top_k: 기본 검색 개수.
        separator: 구절 사이 구분자.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        embedder: EmbedderPort,
        corpus: NearestNeighborPort,
        top_k: int = 3,
        separator: str = "\n\n",
        logger: Optional[Logger] = None,
    ) -> None:
        self._embedder = embedder
        self._corpus = corpus
        self._top_k = top_k
        self._separator = separator
        self._logger = logger or create_default_logger("Retriever")

    def search(self, query: str, k: Optional[int] = None) -> List[VectorMatch]:
        """질의와 가장 유사한 구절을 최대 k개 반환한다.

        데이터 계약 위반(차원 불일치 등)은 빈 결과로 완화하고, 상위 서비스 오류는 그대로 전파한다.
        """

        limit = self._top_k if k is None else k
        if not query or not query.strip() or limit <= 0:
            return []
        try:
            vector = self._embedder.embed(query)
        except BaseAppException as error:
            if error.kind != ErrorKind.DATA_CONTRACT:
                raise
            self._logger.warning(f"retrieve.degraded: code={error.code}, cause={error.detail.cause}")
            return []
        matches = self._corpus.nearest_neighbors(vector, limit)
        self._logger.debug(f"retrieve.done: k={limit}, hits={len(matches)}")
        return matches

    def retrieve(self, query: str, k: Optional[int] = None) -> RetrievalResult:
        """검색 결과와 구분자로 이어 붙인 컨텍스트를 반환한다."""

        passages = self.search(query, k)
        context = self._separator.join(match.text for match in passages)
        return RetrievalResult(query=query, passages=passages, context=context)

    async def aretrieve(self, query: str, k: Optional[int] = None) -> RetrievalResult:
        """이벤트 루프를 막지 않도록 스레드에서 retrieve를 실행한다."""

        return await asyncio.to_thread(self.retrieve, query, k)
