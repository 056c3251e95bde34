"""
목적: pytest 공통 픽스처와 로깅 훅을 제공한다.
설명: 키워드 기반 스텁 임베딩, 가짜 채팅 모델, 인메모리 설정/런타임을 제공해
    외부 서비스 없이 수집/검색/생성 흐름을 검증한다.
디자인 패턴: 테스트 픽스처, 테스트 훅
참조: pyproject.toml, src/f1_chat/api/runtime.py
"""

from __future__ import annotations

import asyncio
import itertools
import logging
import re
from typing import Any, AsyncIterator, Iterator

import pytest
from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseChatModel
from langchain_core.language_models.fake_chat_models import GenericFakeChatModel
from langchain_core.messages import AIMessage, AIMessageChunk, BaseMessage, ToolMessage
from langchain_core.outputs import ChatGeneration, ChatGenerationChunk, ChatResult

from f1_chat.shared.config import AppSettings, load_settings

_LOGGER = logging.getLogger("tests")

EMBEDDING_DIMENSION = 384

# 어휘 인덱스 0은 모든 텍스트에 공통인 편향 축이다.
_VOCABULARY = (
    "lewis",
    "hamilton",
    "max",
    "verstappen",
    "won",
    "win",
    "race",
    "season",
    "team",
    "ferrari",
    "mercedes",
    "grand",
    "prix",
    "driver",
)


class KeywordEmbeddings(Embeddings):
    """키워드 출현 횟수로 384차원 벡터를 만드는 결정적 스텁 임베딩."""

    def __init__(self, dimension: int = EMBEDDING_DIMENSION, fail_on: str | None = None) -> None:
        self.dimension = dimension
        self.fail_on = fail_on
        self.calls: list[str] = []

    def embed_query(self, text: str) -> list[float]:
        self.calls.append(text)
        if self.fail_on and self.fail_on in text:
            raise RuntimeError(f"embedding backend unavailable: {self.fail_on}")
        vector = [0.0] * self.dimension
        vector[0] = 0.1
        for token in re.findall(r"[a-z]+", text.lower()):
            if token in _VOCABULARY:
                vector[1 + _VOCABULARY.index(token)] += 1.0
        return vector

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self.embed_query(text) for text in texts]


class InterruptingChatModel(BaseChatModel):
    """지정한 토큰을 흘려보낸 뒤 연결이 끊긴 것처럼 실패하는 채팅 모델."""

    tokens: list[str] = ["Lewis"]
    closed: bool = False

    @property
    def _llm_type(self) -> str:
        return "interrupting-fake"

    def _generate(self, messages: list[BaseMessage], stop=None, run_manager=None, **kwargs: Any) -> ChatResult:
        raise RuntimeError("connection reset")

    async def _astream(
        self,
        messages: list[BaseMessage],
        stop=None,
        run_manager=None,
        **kwargs: Any,
    ) -> AsyncIterator[ChatGenerationChunk]:
        try:
            for token in self.tokens:
                yield ChatGenerationChunk(message=AIMessageChunk(content=token))
            raise RuntimeError("connection reset")
        finally:
            self.closed = True


class TrackedStreamingChatModel(BaseChatModel):
    """토큰을 하나씩 흘려보내며 상위 스트림이 닫혔는지 기록하는 채팅 모델."""

    tokens: list[str] = ["Lewis", " Hamilton", " won", " the", " 2008", " title."]
    emitted: int = 0
    closed: bool = False

    @property
    def _llm_type(self) -> str:
        return "tracked-fake"

    def _generate(self, messages: list[BaseMessage], stop=None, run_manager=None, **kwargs: Any) -> ChatResult:
        return ChatResult(generations=[ChatGeneration(message=AIMessage(content="".join(self.tokens)))])

    async def _astream(
        self,
        messages: list[BaseMessage],
        stop=None,
        run_manager=None,
        **kwargs: Any,
    ) -> AsyncIterator[ChatGenerationChunk]:
        try:
            for token in self.tokens:
                await asyncio.sleep(0)
                self.emitted += 1
                yield ChatGenerationChunk(message=AIMessageChunk(content=token))
        finally:
            self.closed = True


class ToolCallingChatModel(BaseChatModel):
    """검색 도구를 요청하고 도구 결과를 받으면 그 내용으로 답하는 채팅 모델.

    always_call이 True면 도구 결과를 받아도 계속 도구를 요청한다.
    """

    query: str = "2008 champion"
    always_call: bool = False
    bound_tools: list[str] = []
    calls: int = 0

    @property
    def _llm_type(self) -> str:
        return "tool-calling-fake"

    def _generate(self, messages: list[BaseMessage], stop=None, run_manager=None, **kwargs: Any) -> ChatResult:
        self.calls += 1
        self.bound_tools = [tool["function"]["name"] for tool in kwargs.get("tools", [])]
        results = [message for message in messages if isinstance(message, ToolMessage)]
        if results and not self.always_call:
            message = AIMessage(content=f"From the search: {results[-1].content}")
        else:
            message = AIMessage(
                content="",
                tool_calls=[
                    {"name": "search_f1_knowledge", "args": {"query": self.query}, "id": f"call-{self.calls}"}
                ],
            )
        return ChatResult(generations=[ChatGeneration(message=message)])


def make_chat_model(*answers: str) -> GenericFakeChatModel:
    """주어진 답변을 순환하며 스트리밍하는 가짜 채팅 모델을 만든다."""

    messages: Iterator[AIMessage] = itertools.cycle([AIMessage(content=answer) for answer in answers])
    return GenericFakeChatModel(messages=messages)


@pytest.fixture
def keyword_embeddings() -> KeywordEmbeddings:
    """키워드 스텁 임베딩을 반환한다."""

    return KeywordEmbeddings()


@pytest.fixture
def embeddings_factory():
    """실패 키워드를 지정할 수 있는 스텁 임베딩 생성기를 반환한다."""

    return KeywordEmbeddings


@pytest.fixture
def chat_model_factory():
    """가짜 스트리밍 채팅 모델 생성기를 반환한다."""

    return make_chat_model


@pytest.fixture
def interrupting_chat_model() -> InterruptingChatModel:
    """첫 토큰 이후 끊기는 채팅 모델을 반환한다."""

    return InterruptingChatModel()


@pytest.fixture
def tracked_chat_model() -> TrackedStreamingChatModel:
    """닫힘 여부를 기록하는 스트리밍 채팅 모델을 반환한다."""

    return TrackedStreamingChatModel()


@pytest.fixture
def tool_calling_chat_model() -> ToolCallingChatModel:
    """검색 도구를 호출하는 채팅 모델을 반환한다."""

    return ToolCallingChatModel()


@pytest.fixture
def memory_settings() -> AppSettings:
    """외부 서비스 없이 동작하는 설정을 반환한다."""

    return load_settings(
        overrides={
            "corpus": {"backend": "memory"},
            "session": {"backend": "memory"},
            "embedding": {"max_attempts": 1, "backoff_seconds": 0},
            "ingestion": {"fetch_max_attempts": 1, "fetch_backoff_seconds": 0, "poll_timeout_seconds": 0.05},
        },
        environ={},
    )


def pytest_sessionstart(session) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 시작을 로깅한다."""

    _LOGGER.info("테스트 세션 시작")


def pytest_runtest_logreport(report) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 결과를 로깅한다."""

    if report.when != "call":
        return
    if report.passed:
        _LOGGER.info("테스트 완료: %s", report.nodeid)
        return
    if report.skipped:
        _LOGGER.warning("테스트 스킵: %s", report.nodeid)
        return
    _LOGGER.error("테스트 실패: %s", report.nodeid)
