"""
목적: 설정 모듈 공개 API를 제공한다.
설명: 설정 로더, 런타임 환경 로더, 설정 모델을 노출한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/shared/config/loader.py, src/f1_chat/shared/config/settings.py
"""

from f1_chat.shared.config.loader import ConfigLoader
from f1_chat.shared.config.runtime_env_loader import RuntimeEnvironmentLoader
from f1_chat.shared.config.settings import (
    DEFAULT_SOURCE_URLS,
    AppSettings,
    ChatSettings,
    CorpusSettings,
    EmbeddingSettings,
    IngestionSettings,
    LLMSettings,
    RetrievalSettings,
    SessionSettings,
    load_settings,
)

__all__ = [
    "AppSettings",
    "ChatSettings",
    "ConfigLoader",
    "CorpusSettings",
    "DEFAULT_SOURCE_URLS",
    "EmbeddingSettings",
    "IngestionSettings",
    "LLMSettings",
    "RetrievalSettings",
    "RuntimeEnvironmentLoader",
    "SessionSettings",
    "load_settings",
]
