"""
목적: 애플리케이션 설정 모델을 검증한다.
설명: 기본값, 관례적 자격 증명 변수, 필수 값 검사, 잘못된 값 보고를 확인한다.
디자인 패턴: 테스트 케이스
참조: src/f1_chat/shared/config/settings.py
"""

from __future__ import annotations

import pytest

from f1_chat.shared.config import DEFAULT_SOURCE_URLS, load_settings
from f1_chat.shared.exceptions import BaseAppException, ErrorKind


def test_defaults_match_reference_deployment() -> None:
    """기본 설정 값을 검증한다."""

    settings = load_settings(environ={})

    assert settings.corpus.dimension == 384
    assert settings.corpus.metric == "cosine"
    assert settings.embedding.model == "sentence-transformers/all-MiniLM-L6-v2"
    assert settings.llm.model == "Qwen/Qwen2.5-72B-Instruct"
    assert settings.llm.base_url == "https://router.huggingface.co/v1"
    assert settings.llm.temperature == 0.7
    assert settings.llm.max_tokens == 4000
    assert settings.ingestion.chunk_size == 512
    assert settings.ingestion.chunk_overlap == 200
    assert settings.session.ttl_seconds == 86400
    assert settings.retrieval.top_k == 3
    assert settings.sources == DEFAULT_SOURCE_URLS


def test_conventional_variables_fill_credentials() -> None:
    """관례적 환경 변수가 자격 증명/주소를 채우는지 검증한다."""

    settings = load_settings(
        environ={
            "HUGGINGFACE_API_KEY": "hf_key",
            "REDIS_URL": "redis://cache:6379/1",
            "LANCEDB_URI": "/tmp/lance",
        }
    )

    assert settings.embedding.api_key == "hf_key"
    assert settings.llm.api_key == "hf_key"
    assert settings.session.redis_url == "redis://cache:6379/1"
    assert settings.corpus.uri == "/tmp/lance"
    assert settings.validate_required() is settings


def test_gemini_provider_reads_google_key() -> None:
    """Gemini 공급자는 GEMINI/GOOGLE 키를 사용하는지 검증한다."""

    settings = load_settings(
        environ={
            "F1CHAT__LLM__PROVIDER": "gemini",
            "GOOGLE_API_KEY": "g_key",
            "OPENAI_API_KEY": "o_key",
        }
    )

    assert settings.llm.api_key == "g_key"


def test_validate_required_reports_missing_credentials() -> None:
    """필수 자격 증명 누락이 config 오류로 보고되는지 검증한다."""

    settings = load_settings(environ={})

    with pytest.raises(BaseAppException) as exc_info:
        settings.validate_required()

    assert exc_info.value.code == "CONFIG_MISSING"
    assert exc_info.value.kind == ErrorKind.CONFIG
    assert set(exc_info.value.detail.metadata["missing"]) == {"embedding.api_key", "llm.api_key"}


def test_invalid_overlap_is_config_error() -> None:
    """overlap이 chunk_size 이상이면 설정 오류인지 검증한다."""

    with pytest.raises(BaseAppException) as exc_info:
        load_settings(overrides={"ingestion": {"chunk_size": 100, "chunk_overlap": 100}}, environ={})

    assert exc_info.value.code == "CONFIG_INVALID"
    assert exc_info.value.kind == ErrorKind.CONFIG
