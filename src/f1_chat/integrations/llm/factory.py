"""
목적: 설정 기반 채팅 모델 팩토리를 제공한다.
설명: 공급자(openai 호환/gemini/ollama)에 맞는 LangChain 채팅 모델을 지연 import로 생성하고 LLMClient로 감싼다.
디자인 패턴: 팩토리 메서드
참조: src/f1_chat/integrations/llm/client.py, src/f1_chat/shared/config/settings.py
"""

from __future__ import annotations

from typing import Optional

from langchain_core.language_models import BaseChatModel

from f1_chat.integrations.llm.client import LLMClient
from f1_chat.shared.config import LLMSettings
from f1_chat.shared.exceptions import BaseAppException, ErrorKind, ExceptionDetail
from f1_chat.shared.logging import Logger


def create_llm_client(settings: LLMSettings, logger: Optional[Logger] = None) -> LLMClient:
    """설정으로 LLMClient를 생성한다."""

    return LLMClient(model=build_chat_model(settings), name="chat-llm", logger=logger)


def build_chat_model(settings: LLMSettings) -> BaseChatModel:
    """공급자별 LangChain 채팅 모델을 생성한다.

    Raises:
        BaseAppException: 자격 증명 누락, 의존성 누락, 지원하지 않는 공급자일 때.
    """

    provider = settings.provider
    if provider == "openai":
        _require_api_key(settings)
        try:
            from langchain_openai import ChatOpenAI
        except ImportError as error:
            raise _dependency_error("langchain_openai", error) from error
        # base_url을 바꾸면 Hugging Face 라우터, Groq 등 OpenAI 호환 엔드포인트를 쓸 수 있다.
        return ChatOpenAI(
            model=settings.model,
            api_key=settings.api_key,
            base_url=settings.base_url or None,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
            timeout=settings.timeout_seconds,
        )

    if provider == "gemini":
        _require_api_key(settings)
        try:
            from langchain_google_genai import ChatGoogleGenerativeAI
        except ImportError as error:
            raise _dependency_error("langchain_google_genai", error) from error
        return ChatGoogleGenerativeAI(
            model=settings.model,
            google_api_key=settings.api_key,
            temperature=settings.temperature,
            max_output_tokens=settings.max_tokens,
        )

    if provider == "ollama":
        try:
            from langchain_ollama import ChatOllama
        except ImportError as error:
            raise _dependency_error("langchain_ollama", error) from error
        kwargs = {"model": settings.model, "temperature": settings.temperature}
        if settings.base_url:
            kwargs["base_url"] = settings.base_url
        return ChatOllama(num_predict=settings.max_tokens, **kwargs)

    raise BaseAppException(
        "지원하지 않는 LLM 공급자입니다. openai, gemini, ollama 중 하나를 사용하세요.",
        ExceptionDetail(
            code="CHAT_LLM_PROVIDER_INVALID",
            kind=ErrorKind.CONFIG,
            cause=f"provider={provider}",
        ),
    )


def _require_api_key(settings: LLMSettings) -> None:
    if settings.api_key:
        return
    raise BaseAppException(
        "LLM API 키가 필요합니다.",
        ExceptionDetail(
            code="CHAT_LLM_CONFIG_ERROR",
            kind=ErrorKind.CONFIG,
            cause=f"provider={settings.provider}, api_key is missing",
            hint="F1CHAT__LLM__API_KEY 또는 공급자별 API 키 환경 변수를 설정하세요.",
        ),
    )


def _dependency_error(package: str, error: ImportError) -> BaseAppException:
    return BaseAppException(
        f"{package} 의존성이 필요합니다.",
        ExceptionDetail(
            code="CHAT_LLM_DEPENDENCY_ERROR",
            kind=ErrorKind.CONFIG,
            cause=f"{package} is not installed",
        ),
        error,
    )
