"""
목적: API 런타임 조립 인스턴스를 제공한다.
설명: 설정으로 벡터 엔진, 임베딩, LLM, 세션 저장소, 수집 실행기, 생성 오케스트레이터와 에이전트를 조립하고
    라우터가 Depends로 꺼내 쓰는 모듈 레벨 싱글턴을 관리한다.
디자인 패턴: 모듈 조립 + 싱글턴, 컴포지션 루트
참조: src/f1_chat/api/main.py, src/f1_chat/shared/config/settings.py
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseChatModel

from f1_chat.core.chat.services import (
    F1KnowledgeAgent,
    GenerationOrchestrator,
    PromptAssembler,
    Retriever,
)
from f1_chat.core.corpus import CorpusStore
from f1_chat.core.ingestion import (
    IngestionExecutor,
    IngestionPipeline,
    IngestStatusStore,
    TextChunker,
)
from f1_chat.integrations.embedding import EmbeddingClient, create_embedding_client
from f1_chat.integrations.llm import LLMClient, create_llm_client
from f1_chat.integrations.vector import (
    BaseVectorEngine,
    CollectionSchema,
    InMemoryVectorEngine,
    LanceDBVectorEngine,
    SimilarityMetric,
)
from f1_chat.integrations.web import PageFetcher
from f1_chat.shared.chat.interface import SessionStorePort
from f1_chat.shared.chat.memory import InMemorySessionStore, RedisSessionStore
from f1_chat.shared.config import AppSettings
from f1_chat.shared.exceptions import BaseAppException, ErrorKind, ExceptionDetail
from f1_chat.shared.logging import Logger, create_default_logger
from f1_chat.shared.runtime.queue import InMemoryQueue, QueueConfig


@dataclass
class AppRuntime:
    """조립된 애플리케이션 구성요소 묶음."""

    settings: AppSettings
    engine: BaseVectorEngine
    corpus: CorpusStore
    embedder: EmbeddingClient
    fetcher: PageFetcher
    status: IngestStatusStore
    executor: IngestionExecutor
    retriever: Retriever
    orchestrator: GenerationOrchestrator
    agent: F1KnowledgeAgent
    session_store: SessionStorePort
    logger: Logger

    def start(self) -> None:
        """연결을 열고 수집 워커를 시작한다."""

        self.engine.connect()
        self.executor.start()
        self.logger.info("runtime.started")

    def close(self) -> None:
        """워커를 멈추고 자원을 정리한다."""

        self.executor.stop()
        self.fetcher.close()
        self.session_store.close()
        self.engine.close()
        self.logger.info("runtime.closed")


def build_runtime(
    settings: AppSettings,
    *,
    embeddings: Optional[Embeddings] = None,
    chat_model: Optional[BaseChatModel] = None,
    engine: Optional[BaseVectorEngine] = None,
    session_store: Optional[SessionStorePort] = None,
    fetcher: Optional[PageFetcher] = None,
    logger: Optional[Logger] = None,
) -> AppRuntime:
    """설정으로 런타임을 조립한다. 키워드 인자로 외부 연동을 교체할 수 있다."""

    logger = logger or create_default_logger("F1ChatRuntime")

    # 1) 코퍼스
    engine = engine or _build_engine(settings)
    corpus = build_corpus_store(settings, engine)

    # 2) 임베딩/LLM. 수집과 질의는 같은 EmbeddingClient를 공유한다.
    embedder = build_embedder(settings, embeddings)
    llm = LLMClient(chat_model, name="chat-llm") if chat_model is not None else create_llm_client(settings.llm)

    # 3) 세션
    session_store = session_store or _build_session_store(settings)

    # 4) 수집
    ingestion = settings.ingestion
    status = IngestStatusStore()
    fetcher = fetcher or PageFetcher(
        timeout_seconds=ingestion.fetch_timeout_seconds,
        max_attempts=ingestion.fetch_max_attempts,
        backoff_seconds=ingestion.fetch_backoff_seconds,
        user_agent=ingestion.user_agent,
    )
    pipeline = IngestionPipeline(
        corpus=corpus,
        embedder=embedder,
        fetcher=fetcher,
        status=status,
        chunker=TextChunker(ingestion.chunk_size, ingestion.chunk_overlap),
    )
    executor = IngestionExecutor(
        pipeline,
        status,
        queue=InMemoryQueue(QueueConfig(max_size=ingestion.queue_max_size)),
        poll_timeout=ingestion.poll_timeout_seconds,
    )

    # 5) 채팅
    retriever = Retriever(
        embedder,
        corpus,
        top_k=settings.retrieval.top_k,
        separator=settings.retrieval.separator,
    )
    orchestrator = GenerationOrchestrator(
        llm,
        retriever,
        PromptAssembler(default_locale=settings.chat.default_locale),
        session_store=session_store,
        persist_max_attempts=settings.chat.persist_max_attempts,
    )
    agent = F1KnowledgeAgent(llm, retriever, max_tool_rounds=settings.chat.agent_max_tool_rounds)
    return AppRuntime(
        settings=settings,
        engine=engine,
        corpus=corpus,
        embedder=embedder,
        fetcher=fetcher,
        status=status,
        executor=executor,
        retriever=retriever,
        orchestrator=orchestrator,
        agent=agent,
        session_store=session_store,
        logger=logger,
    )


def build_corpus_store(settings: AppSettings, engine: Optional[BaseVectorEngine] = None) -> CorpusStore:
    """설정의 컬렉션 스키마로 코퍼스 저장소를 만든다."""

    schema = CollectionSchema(
        name=settings.corpus.collection,
        dimension=settings.corpus.dimension,
        metric=SimilarityMetric(settings.corpus.metric),
    )
    return CorpusStore(engine or _build_engine(settings), schema)


def build_embedder(settings: AppSettings, embeddings: Optional[Embeddings] = None) -> EmbeddingClient:
    """임베딩 클라이언트를 만든다. embeddings를 주면 공급자 생성 없이 감싼다."""

    dimension = settings.corpus.dimension
    if embeddings is None:
        return create_embedding_client(settings.embedding, dimension=dimension)
    return EmbeddingClient(
        embeddings,
        dimension=dimension,
        max_attempts=settings.embedding.max_attempts,
        backoff_seconds=settings.embedding.backoff_seconds,
        model_name=settings.embedding.model,
    )


def _build_engine(settings: AppSettings) -> BaseVectorEngine:
    if settings.corpus.backend == "memory":
        return InMemoryVectorEngine()
    return LanceDBVectorEngine(settings.corpus.uri)


def _build_session_store(settings: AppSettings) -> SessionStorePort:
    session = settings.session
    if session.backend == "memory":
        return InMemorySessionStore(ttl_seconds=session.ttl_seconds)
    return RedisSessionStore(
        url=session.redis_url,
        key_prefix=session.key_prefix,
        ttl_seconds=session.ttl_seconds,
    )


_runtime: Optional[AppRuntime] = None


def set_runtime(runtime: Optional[AppRuntime]) -> None:
    """모듈 레벨 런타임을 교체한다."""

    global _runtime
    _runtime = runtime


def get_runtime() -> AppRuntime:
    """FastAPI Depends용 런타임 접근자."""

    if _runtime is None:
        raise BaseAppException(
            "런타임이 초기화되지 않았습니다.",
            ExceptionDetail(code="RUNTIME_NOT_READY", kind=ErrorKind.INTERNAL),
        )
    return _runtime


def shutdown_runtime() -> None:
    """런타임 자원을 정리하고 싱글턴을 비운다."""

    global _runtime
    if _runtime is None:
        return
    try:
        _runtime.close()
    finally:
        _runtime = None
