"""
목적: LangChain BaseChatModel 기반 LLM 클라이언트를 제공한다.
설명: 기존 메서드(invoke/ainvoke/stream/astream)를 유지하면서 로깅과 예외 변환을 통합한다.
    도구 바인딩은 감싼 모델의 도구 형식을 빌려 이 래퍼에 묶으므로 도구 호출도 같은 로깅을 거친다.
디자인 패턴: 프록시, 데코레이터
참조: src/f1_chat/shared/logging, src/f1_chat/shared/exceptions, src/f1_chat/integrations/llm/factory.py
"""

from __future__ import annotations

import time
from typing import Any, AsyncIterator, Callable, Iterator, Optional, Sequence

from langchain_core.callbacks import (
    AsyncCallbackManagerForLLMRun,
    CallbackManagerForLLMRun,
)
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.outputs import ChatGenerationChunk, ChatResult
from langchain_core.runnables import Runnable, RunnableBinding
from langchain_core.tools import BaseTool
from langchain_core.utils.function_calling import convert_to_openai_tool
from pydantic import ConfigDict, PrivateAttr

from f1_chat.shared.exceptions import BaseAppException, ErrorKind, ExceptionDetail
from f1_chat.shared.logging import Logger, create_default_logger


class LLMClient(BaseChatModel):
    """로깅/예외 처리를 포함한 LLM 클라이언트 래퍼이다.

    Args:
        model: 실제 호출할 LangChain 채팅 모델.
        name: 로거 이름.
        logger: 주입 가능한 로거.
        log_payload: 요청 메시지 수/길이를 로그에 남길지 여부.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _model: BaseChatModel = PrivateAttr()
    _logger: Logger = PrivateAttr()
    _name: str = PrivateAttr()
    _log_payload: bool = PrivateAttr(default=False)

    def __init__(
        self,
        model: BaseChatModel,
        name: str = "llm-client",
        logger: Optional[Logger] = None,
        log_payload: bool = False,
    ) -> None:
        super().__init__()
        self._model = model
        self._name = name
        self._logger = logger or create_default_logger(name)
        self._log_payload = log_payload

    @property
    def model(self) -> BaseChatModel:
        """감싼 원본 모델을 반환한다."""

        return self._model

    @property
    def _llm_type(self) -> str:
        base_type = getattr(self._model, "_llm_type", None)
        if base_type:
            return f"logged-{base_type}"
        return "logged-chat-model"

    def _generate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: CallbackManagerForLLMRun | None = None,
        **kwargs: Any,
    ) -> ChatResult:
        start = time.monotonic()
        self._log_start("invoke", messages)
        try:
            result = self._model._generate(messages, stop=stop, run_manager=run_manager, **kwargs)
        except Exception as error:  # noqa: BLE001 - 외부 라이브러리 오류 캡처
            self._log_error("invoke", error, start)
            raise _upstream_error("LLM_INVOKE_ERROR", "LLM 호출에 실패했습니다.", error) from error
        self._log_success("invoke", start)
        return result

    async def _agenerate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: AsyncCallbackManagerForLLMRun | None = None,
        **kwargs: Any,
    ) -> ChatResult:
        start = time.monotonic()
        self._log_start("ainvoke", messages)
        try:
            result = await self._model._agenerate(
                messages, stop=stop, run_manager=run_manager, **kwargs
            )
        except Exception as error:  # noqa: BLE001 - 외부 라이브러리 오류 캡처
            self._log_error("ainvoke", error, start)
            raise _upstream_error(
                "LLM_AINVOKE_ERROR", "LLM 비동기 호출에 실패했습니다.", error
            ) from error
        self._log_success("ainvoke", start)
        return result

    def _stream(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: CallbackManagerForLLMRun | None = None,
        **kwargs: Any,
    ) -> Iterator[ChatGenerationChunk]:
        start = time.monotonic()
        self._log_start("stream", messages)
        iterator = self._model._stream(messages, stop=stop, run_manager=run_manager, **kwargs)
        try:
            for chunk in iterator:
                yield chunk
        except Exception as error:  # noqa: BLE001 - 외부 라이브러리 오류 캡처
            self._log_error("stream", error, start)
            raise _upstream_error(
                "LLM_STREAM_ERROR", "LLM 스트리밍 호출에 실패했습니다.", error
            ) from error
        finally:
            close = getattr(iterator, "close", None)
            if callable(close):
                close()
        self._log_success("stream", start)

    async def _astream(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: AsyncCallbackManagerForLLMRun | None = None,
        **kwargs: Any,
    ) -> AsyncIterator[ChatGenerationChunk]:
        start = time.monotonic()
        self._log_start("astream", messages)
        async_iterator = self._model._astream(
            messages, stop=stop, run_manager=run_manager, **kwargs
        )
        try:
            async for chunk in async_iterator:
                yield chunk
        except Exception as error:  # noqa: BLE001 - 외부 라이브러리 오류 캡처
            self._log_error("astream", error, start)
            raise _upstream_error(
                "LLM_ASTREAM_ERROR", "LLM 비동기 스트리밍 호출에 실패했습니다.", error
            ) from error
        finally:
            # 호출자가 중단해도 상위 연결을 즉시 반납한다.
            aclose = getattr(async_iterator, "aclose", None)
            if callable(aclose):
                await aclose()
        self._log_success("astream", start)

    def bind_tools(
        self,
        tools: Sequence[dict[str, Any] | type | Callable[..., Any] | BaseTool],
        *,
        tool_choice: str | None = None,
        **kwargs: Any,
    ) -> Runnable[Any, AIMessage]:
        """도구를 바인딩한 실행 객체를 반환한다.

        감싼 모델이 bind_tools를 지원하면 그 모델이 만든 호출 인자(공급자 형식)를 재사용하고,
        지원하지 않으면 OpenAI 도구 형식으로 변환해 tools 인자로 넘긴다.
        """

        if tool_choice is not None:
            kwargs["tool_choice"] = tool_choice
        try:
            bound = self._model.bind_tools(tools, **kwargs)
        except NotImplementedError:
            bound = None
        if isinstance(bound, RunnableBinding):
            return self.bind(**bound.kwargs)
        formatted = [convert_to_openai_tool(tool) for tool in tools]
        return self.bind(tools=formatted, **kwargs)

    def _log_start(self, action: str, messages: list[BaseMessage]) -> None:
        if self._log_payload:
            total_chars = sum(len(str(message.content)) for message in messages)
            self._logger.debug(
                f"llm.{action}.start: messages={len(messages)}, chars={total_chars}"
            )
            return
        self._logger.debug(f"llm.{action}.start")

    def _log_success(self, action: str, start: float) -> None:
        elapsed_ms = int((time.monotonic() - start) * 1000)
        self._logger.info(f"llm.{action}.done: elapsed_ms={elapsed_ms}")

    def _log_error(self, action: str, error: Exception, start: float) -> None:
        elapsed_ms = int((time.monotonic() - start) * 1000)
        self._logger.error(f"llm.{action}.failed: elapsed_ms={elapsed_ms}, error={error}")


def _upstream_error(code: str, message: str, error: Exception) -> BaseAppException:
    if isinstance(error, BaseAppException):
        return error
    detail = ExceptionDetail(code=code, kind=ErrorKind.UPSTREAM, cause=str(error))
    return BaseAppException(message, detail, error)
