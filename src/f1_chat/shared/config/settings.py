"""
목적: 애플리케이션 설정 모델을 정의한다.
설명: ConfigLoader가 병합한 사전을 섹션별 Pydantic 모델로 검증하고 필수 값 누락을 조기에 보고한다.
디자인 패턴: 설정 객체, 팩토리 함수
참조: src/f1_chat/shared/config/loader.py, src/f1_chat/api/runtime.py
"""

from __future__ import annotations

import os
from typing import Any, List, Literal, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from f1_chat.shared.const import SharedConst
from f1_chat.shared.config.loader import ConfigLoader
from f1_chat.shared.exceptions import BaseAppException, ErrorKind, ExceptionDetail

DEFAULT_SOURCE_URLS: List[str] = [
    "https://en.wikipedia.org/wiki/2024_Formula_One_World_Championship",
    "https://en.wikipedia.org/wiki/2025_Formula_One_World_Championship",
    "https://www.formula1.com/en/teams.html",
    "https://www.formula1.com/en/drivers.html",
    "https://www.formula1.com/en/results/2025/races",
    "https://www.formula1.com/en/results/2024/races",
    "https://www.skysports.com/f1",
    "https://www.skysports.com/f1/news/12433/13071399/f1-2024-cars-launched-ferrari-mercedes-red-bull-and-more-revealed-for-new-formula-1-season",
]

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

# 관례적 환경 변수 -> 설정 경로
ENV_ALIASES = {
    "HUGGINGFACE_API_KEY": "embedding.api_key",
    "HF_TOKEN": "embedding.api_key",
    "REDIS_URL": "session.redis_url",
    "LANCEDB_URI": "corpus.uri",
}

_LLM_KEY_ENV = {
    "openai": ("LLM_API_KEY", "HUGGINGFACE_API_KEY", "OPENAI_API_KEY"),
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    "ollama": (),
}


class CorpusSettings(BaseModel):
    """코퍼스 저장소 설정."""

    backend: Literal["lancedb", "memory"] = "lancedb"
    uri: str = "data/db/vector"
    collection: str = "f1_corpus"
    dimension: int = Field(default=384, gt=0)
    metric: Literal["cosine", "dot_product", "euclidean"] = "cosine"


class EmbeddingSettings(BaseModel):
    """임베딩 공급자 설정.

    수집과 질의가 같은 설정을 공유해야 한다. 모델을 바꾸면 재수집이 필요하다.
    """

    provider: Literal["huggingface", "openai", "ollama"] = "huggingface"
    model: str = "sentence-transformers/all-MiniLM-L6-v2"
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    max_attempts: int = Field(default=3, ge=1)
    backoff_seconds: float = Field(default=0.5, ge=0)


class LLMSettings(BaseModel):
    """생성 모델 설정."""

    provider: Literal["openai", "gemini", "ollama"] = "openai"
    model: str = "Qwen/Qwen2.5-72B-Instruct"
    api_key: Optional[str] = None
    base_url: Optional[str] = "https://router.huggingface.co/v1"
    temperature: float = Field(default=0.7, ge=0)
    max_tokens: int = Field(default=4000, gt=0)
    timeout_seconds: float = Field(default=120.0, gt=0)


class IngestionSettings(BaseModel):
    """수집 파이프라인 설정."""

    chunk_size: int = Field(default=512, gt=0)
    chunk_overlap: int = Field(default=200, ge=0)
    fetch_timeout_seconds: float = Field(default=10.0, gt=0)
    fetch_max_attempts: int = Field(default=3, ge=1)
    fetch_backoff_seconds: float = Field(default=2.0, ge=0)
    user_agent: str = DEFAULT_USER_AGENT
    queue_max_size: int = Field(default=8, ge=0)
    poll_timeout_seconds: float = Field(default=0.5, gt=0)

    @model_validator(mode="after")
    def _check_overlap(self) -> "IngestionSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunk_overlap은 chunk_size보다 작아야 합니다.")
        return self


class SessionSettings(BaseModel):
    """세션 저장소 설정."""

    backend: Literal["redis", "memory"] = "redis"
    redis_url: str = "redis://localhost:6379"
    key_prefix: str = "f1chat:session"
    ttl_seconds: int = Field(default=86400, gt=0)


class RetrievalSettings(BaseModel):
    """검색 설정."""

    top_k: int = Field(default=3, gt=0)
    separator: str = "\n\n"


class ChatSettings(BaseModel):
    """채팅 오케스트레이션 설정."""

    default_locale: Optional[str] = None
    persist_max_attempts: int = Field(default=2, ge=1)
    agent_max_tool_rounds: int = Field(default=3, ge=1)


class AppSettings(BaseModel):
    """애플리케이션 전체 설정 모델."""

    corpus: CorpusSettings = Field(default_factory=CorpusSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)
    ingestion: IngestionSettings = Field(default_factory=IngestionSettings)
    session: SessionSettings = Field(default_factory=SessionSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)
    chat: ChatSettings = Field(default_factory=ChatSettings)
    sources: List[str] = Field(default_factory=lambda: list(DEFAULT_SOURCE_URLS))

    def validate_required(self) -> "AppSettings":
        """외부 공급자 자격 증명/엔드포인트 누락을 검사한다.

        Raises:
            BaseAppException: 필수 값이 없을 때(CONFIG_MISSING).
        """

        missing: list[str] = []
        if self.embedding.provider in {"huggingface", "openai"} and not self.embedding.api_key:
            missing.append("embedding.api_key")
        if self.llm.provider in {"openai", "gemini"} and not self.llm.api_key:
            missing.append("llm.api_key")
        if self.llm.provider == "ollama" and not self.llm.base_url:
            missing.append("llm.base_url")
        if self.session.backend == "redis" and not self.session.redis_url:
            missing.append("session.redis_url")
        if missing:
            raise BaseAppException(
                "필수 설정 값이 누락되었습니다.",
                ExceptionDetail(
                    code="CONFIG_MISSING",
                    kind=ErrorKind.CONFIG,
                    cause=", ".join(missing),
                    hint=".env 또는 F1CHAT__ 접두사 환경 변수를 확인하세요.",
                    metadata={"missing": missing},
                ),
            )
        return self


def load_settings(
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
    loader: Optional[ConfigLoader] = None,
) -> AppSettings:
    """환경 변수와 설정 파일로부터 AppSettings를 생성한다.

    우선순위(낮음 -> 높음): 모델 기본값, JSON 파일, 관례적 변수, `F1CHAT__` 변수, overrides.
    """

    env = os.environ if environ is None else environ
    loader = loader or ConfigLoader(environ=env)
    aliases = dict(ENV_ALIASES)
    payload = (
        loader.add_json_file(env.get(SharedConst.CONFIG_FILE_ENV))
        .add_env_aliases(aliases)
        .add_env(prefix=SharedConst.ENV_PREFIX)
        .build(overrides)
    )
    llm_section = payload.get("llm") if isinstance(payload.get("llm"), dict) else {}
    if not llm_section.get("api_key"):
        provider = llm_section.get("provider", LLMSettings().provider)
        for env_name in _LLM_KEY_ENV.get(str(provider), ()):
            value = env.get(env_name)
            if value and value.strip():
                payload.setdefault("llm", {})["api_key"] = value.strip()
                break
    try:
        return AppSettings.model_validate(payload)
    except ValidationError as error:
        raise BaseAppException(
            "설정 값 검증에 실패했습니다.",
            ExceptionDetail(
                code="CONFIG_INVALID",
                kind=ErrorKind.CONFIG,
                cause=str(error),
                hint="설정 키와 값의 형식을 확인하세요.",
            ),
            error,
        ) from error
