"""
목적: 스트리밍 응답 생성 오케스트레이터를 제공한다.
설명: 요청 검증 -> 사용자 턴 기록 -> 검색 -> 프롬프트 조립 후 LLM 토큰을 호출자에게 흘려보내며 동시에 전체 응답을 누적한다.
    스트림이 정상 종료된 경우에만 어시스턴트 턴을 세션에 기록한다.
디자인 패턴: 오케스트레이터, 티(tee) 스트림
참조: src/f1_chat/core/chat/services/retriever.py, src/f1_chat/core/chat/services/prompt_assembler.py, src/f1_chat/shared/chat/memory/session_store.py
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import AsyncIterator, List, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage

from f1_chat.core.chat.models import ChatRole, ConversationTurn
from f1_chat.core.chat.services.prompt_assembler import PromptAssembler
from f1_chat.core.chat.services.retriever import RetrievalResult, Retriever
from f1_chat.shared.chat.interface import SessionStorePort
from f1_chat.shared.exceptions import BaseAppException, ErrorKind, ExceptionDetail
from f1_chat.shared.logging import LogContext, Logger, create_default_logger


@dataclass
class ChatRequest:
    """채팅 요청.

    Args:
        messages: 호출자가 가진 대화 이력. 마지막 항목이 사용자 질문이다.
        session_id: 세션 식별자. 없으면 세션에 기록하지 않는다.
        locale: 브라우저 언어 등 응답 언어 힌트.
        regenerate: 재생성 요청 여부. True면 사용자 턴을 다시 기록하지 않는다.
    """

    messages: List[ConversationTurn]
    session_id: Optional[str] = None
    locale: Optional[str] = None
    regenerate: bool = False


@dataclass
class PreparedGeneration:
    """스트리밍 직전까지 준비된 생성 입력."""

    question: str
    messages: List[BaseMessage]
    retrieval: RetrievalResult
    session_id: Optional[str] = None


@dataclass
class TranscriptAccumulator:
    """스트림으로 흘려보낸 조각을 누적한다."""

    parts: List[str] = field(default_factory=list)

    def append(self, text: str) -> None:
        self.parts.append(text)

    @property
    def text(self) -> str:
        return "".join(self.parts)

    @property
    def emitted_chars(self) -> int:
        return sum(len(part) for part in self.parts)


class GenerationOrchestrator:
    """검색 증강 스트리밍 생성 오케스트레이터.

    요청 사이에 상태를 보관하지 않는다.

    Args:
        llm: LangChain 채팅 모델(LLMClient 권장).
        retriever: 검색기.
        assembler: 프롬프트 조립기.
        session_store: 세션 저장소. None이면 기록하지 않는다.
        persist_max_attempts: 어시스턴트 턴 기록 최대 시도 횟수.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        llm: BaseChatModel,
        retriever: Retriever,
        assembler: Optional[PromptAssembler] = None,
        session_store: Optional[SessionStorePort] = None,
        persist_max_attempts: int = 2,
        logger: Optional[Logger] = None,
    ) -> None:
        self._llm = llm
        self._retriever = retriever
        self._assembler = assembler or PromptAssembler()
        self._session_store = session_store
        self._persist_max_attempts = max(1, persist_max_attempts)
        self._logger = logger or create_default_logger("GenerationOrchestrator")

    async def prepare(self, request: ChatRequest) -> PreparedGeneration:
        """요청을 검증하고 검색/프롬프트 조립까지 수행한다.

        Raises:
            BaseAppException: 요청이 잘못됐을 때(client) 또는 상위 서비스 오류(upstream).
        """

        question = _validate(request)
        logger = self._request_logger(request.session_id)
        if request.session_id and self._session_store is not None and not request.regenerate:
            await asyncio.to_thread(
                self._session_store.append,
                request.session_id,
                ConversationTurn.user(question),
            )
        retrieval = await self._retriever.aretrieve(question)
        logger.info(f"chat.prepare.done: passages={len(retrieval.passages)}, regenerate={request.regenerate}")
        messages = self._assembler.build_messages(
            request.messages,
            question=question,
            context=retrieval.context,
            locale=request.locale,
        )
        return PreparedGeneration(
            question=question,
            messages=messages,
            retrieval=retrieval,
            session_id=request.session_id,
        )

    async def astream(self, prepared: PreparedGeneration) -> AsyncIterator[str]:
        """LLM 토큰을 흘려보내며 전체 응답을 누적한다.

        도중 오류는 이미 보낸 내용을 되돌리지 않고 GENERATION_STREAM_FAILED로 종료한다.
        호출자가 중단하면 상위 모델 스트림을 즉시 닫고 아무것도 기록하지 않는다.
        """

        logger = self._request_logger(prepared.session_id)
        accumulator = TranscriptAccumulator()
        stream = self._llm.astream(prepared.messages)
        try:
            async for chunk in stream:
                text = extract_text(chunk)
                if text:
                    accumulator.append(text)
                    yield text
        except Exception as error:
            logger.error(
                f"chat.stream.failed: emitted_chars={accumulator.emitted_chars}, error={error}"
            )
            raise BaseAppException(
                "응답 스트리밍이 중단되었습니다.",
                ExceptionDetail(
                    code="GENERATION_STREAM_FAILED",
                    kind=ErrorKind.UPSTREAM,
                    cause=str(error),
                    metadata={"emitted_chars": accumulator.emitted_chars},
                ),
                error,
            ) from error
        finally:
            await _aclose(stream)

        logger.info(f"chat.stream.completed: chars={accumulator.emitted_chars}")
        await self._persist(prepared.session_id, accumulator.text, logger)

    async def stream_request(self, request: ChatRequest) -> AsyncIterator[str]:
        """prepare와 astream을 한 번에 수행한다."""

        prepared = await self.prepare(request)
        async for text in self.astream(prepared):
            yield text

    async def agenerate(self, request: ChatRequest) -> str:
        """스트림을 끝까지 모아 전체 응답을 반환한다."""

        parts = [text async for text in self.stream_request(request)]
        return "".join(parts)

    async def _persist(self, session_id: Optional[str], content: str, logger: Logger) -> None:
        if not session_id or self._session_store is None:
            return
        if not content.strip():
            logger.warning("chat.persist.skipped: empty response")
            return
        turn = ConversationTurn.assistant(content)
        for attempt in range(1, self._persist_max_attempts + 1):
            try:
                await asyncio.to_thread(self._session_store.append, session_id, turn)
                return
            except BaseAppException as error:
                logger.error(
                    f"chat.persist.failed: attempt={attempt}/{self._persist_max_attempts}, code={error.code}"
                )

    def _request_logger(self, session_id: Optional[str]) -> Logger:
        if not session_id:
            return self._logger
        return self._logger.with_context(LogContext(session_id=session_id))


def _validate(request: ChatRequest) -> str:
    if not request.messages:
        raise BaseAppException(
            "messages가 비어 있습니다.",
            ExceptionDetail(code="CHAT_MESSAGES_EMPTY", kind=ErrorKind.CLIENT),
        )
    last = request.messages[-1]
    if last.role != ChatRole.USER:
        raise BaseAppException(
            "마지막 메시지는 사용자 메시지여야 합니다.",
            ExceptionDetail(
                code="CHAT_LAST_MESSAGE_NOT_USER",
                kind=ErrorKind.CLIENT,
                hint="재생성 요청은 마지막 사용자 메시지까지 잘라서 보내세요.",
            ),
        )
    question = last.content.strip()
    if not question:
        raise BaseAppException(
            "질문 내용이 비어 있습니다.",
            ExceptionDetail(code="CHAT_QUESTION_EMPTY", kind=ErrorKind.CLIENT),
        )
    return question


async def _aclose(stream: object) -> None:
    aclose = getattr(stream, "aclose", None)
    if callable(aclose):
        await aclose()


def extract_text(message: object) -> str:
    """LangChain 메시지 청크에서 텍스트만 꺼낸다."""

    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: List[str] = []
        for item in content:
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, dict) and item.get("type", "text") == "text":
                text = item.get("text")
                if text:
                    parts.append(str(text))
        return "".join(parts)
    return ""
