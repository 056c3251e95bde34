"""
목적: 설정 기반 임베딩 팩토리를 제공한다.
설명: 공급자(huggingface/openai/ollama)에 맞는 LangChain Embeddings를 지연 import로 생성하고 EmbeddingClient로 감싼다.
디자인 패턴: 팩토리 메서드
참조: src/f1_chat/integrations/embedding/client.py, src/f1_chat/shared/config/settings.py
"""

from __future__ import annotations

from typing import Optional

from langchain_core.embeddings import Embeddings

from f1_chat.integrations.embedding.client import EmbeddingClient
from f1_chat.shared.config import EmbeddingSettings
from f1_chat.shared.exceptions import BaseAppException, ErrorKind, ExceptionDetail
from f1_chat.shared.logging import Logger


def create_embedding_client(
    settings: EmbeddingSettings,
    dimension: int,
    logger: Optional[Logger] = None,
) -> EmbeddingClient:
    """설정으로 EmbeddingClient를 생성한다."""

    return EmbeddingClient(
        embeddings=build_embeddings(settings, dimension),
        dimension=dimension,
        max_attempts=settings.max_attempts,
        backoff_seconds=settings.backoff_seconds,
        model_name=settings.model,
        logger=logger,
    )


def build_embeddings(settings: EmbeddingSettings, dimension: int) -> Embeddings:
    """공급자별 LangChain Embeddings를 생성한다."""

    provider = settings.provider
    if provider == "huggingface":
        _require_api_key(settings)
        try:
            from langchain_huggingface import HuggingFaceEndpointEmbeddings
        except ImportError as error:
            raise _dependency_error("langchain_huggingface", error) from error
        return HuggingFaceEndpointEmbeddings(
            model=settings.model,
            task="feature-extraction",
            huggingfacehub_api_token=settings.api_key,
        )

    if provider == "openai":
        _require_api_key(settings)
        try:
            from langchain_openai import OpenAIEmbeddings
        except ImportError as error:
            raise _dependency_error("langchain_openai", error) from error
        kwargs = {"model": settings.model, "api_key": settings.api_key, "dimensions": dimension}
        if settings.base_url:
            kwargs["base_url"] = settings.base_url
        return OpenAIEmbeddings(**kwargs)

    if provider == "ollama":
        try:
            from langchain_ollama import OllamaEmbeddings
        except ImportError as error:
            raise _dependency_error("langchain_ollama", error) from error
        kwargs = {"model": settings.model}
        if settings.base_url:
            kwargs["base_url"] = settings.base_url
        return OllamaEmbeddings(**kwargs)

    raise BaseAppException(
        "지원하지 않는 임베딩 공급자입니다.",
        ExceptionDetail(
            code="EMBEDDING_PROVIDER_INVALID",
            kind=ErrorKind.CONFIG,
            cause=f"provider={provider}",
        ),
    )


def _require_api_key(settings: EmbeddingSettings) -> None:
    if settings.api_key:
        return
    raise BaseAppException(
        "임베딩 API 키가 필요합니다.",
        ExceptionDetail(
            code="EMBEDDING_CONFIG_ERROR",
            kind=ErrorKind.CONFIG,
            cause=f"provider={settings.provider}, api_key is missing",
            hint="HUGGINGFACE_API_KEY 또는 F1CHAT__EMBEDDING__API_KEY를 설정하세요.",
        ),
    )


def _dependency_error(package: str, error: ImportError) -> BaseAppException:
    return BaseAppException(
        f"{package} 의존성이 필요합니다.",
        ExceptionDetail(
            code="EMBEDDING_DEPENDENCY_ERROR",
            kind=ErrorKind.CONFIG,
            cause=f"{package} is not installed",
        ),
        error,
    )
