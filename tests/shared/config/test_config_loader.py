"""
목적: 설정 로더 병합 규칙을 검증한다.
설명: dict/JSON 파일/접두사 환경 변수/별칭의 우선순위와 값 해석을 확인한다.
디자인 패턴: 테스트 케이스
참조: src/f1_chat/shared/config/loader.py
"""

from __future__ import annotations

import json

import pytest

from f1_chat.shared.config import ConfigLoader


def test_env_values_are_nested_and_parsed() -> None:
    """접두사 환경 변수가 중첩 키와 타입으로 해석되는지 검증한다."""

    environ = {
        "F1CHAT__CORPUS__DIMENSION": "768",
        "F1CHAT__LLM__TEMPERATURE": "0.2",
        "F1CHAT__CHAT__DEFAULT_LOCALE": "ko-KR",
        "F1CHAT__SESSION__BACKEND": "memory",
        "F1CHAT__SOURCES": '["https://a.com"]',
        "UNRELATED": "1",
    }

    payload = ConfigLoader(environ=environ).add_env().build()

    assert payload == {
        "corpus": {"dimension": 768},
        "llm": {"temperature": 0.2},
        "chat": {"default_locale": "ko-KR"},
        "session": {"backend": "memory"},
        "sources": ["https://a.com"],
    }


def test_later_sources_override_earlier_ones(tmp_path) -> None:
    """나중에 추가한 소스와 overrides가 우선하는지 검증한다."""

    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"corpus": {"collection": "from_file", "dimension": 16}}), encoding="utf-8")

    payload = (
        ConfigLoader(environ={"F1CHAT__CORPUS__COLLECTION": "from_env"})
        .add_dict({"corpus": {"collection": "from_dict", "uri": "data/x"}})
        .add_json_file(str(config_path))
        .add_env()
        .build({"corpus": {"dimension": 32}})
    )

    assert payload["corpus"] == {"collection": "from_env", "uri": "data/x", "dimension": 32}


def test_missing_json_file_is_skipped_unless_required(tmp_path) -> None:
    """없는 설정 파일은 선택일 때만 건너뛰는지 검증한다."""

    missing = str(tmp_path / "missing.json")

    assert ConfigLoader(environ={}).add_json_file(missing).build() == {}
    with pytest.raises(FileNotFoundError):
        ConfigLoader(environ={}).add_json_file(missing, required=True)


def test_env_aliases_keep_first_value_as_string() -> None:
    """별칭은 먼저 발견된 값을 문자열 그대로 쓰는지 검증한다."""

    environ = {"HUGGINGFACE_API_KEY": " 12345 ", "HF_TOKEN": "hf_other"}
    aliases = {"HUGGINGFACE_API_KEY": "embedding.api_key", "HF_TOKEN": "embedding.api_key"}

    payload = ConfigLoader(environ=environ).add_env_aliases(aliases).build()

    assert payload == {"embedding": {"api_key": "12345"}}
