"""
목적: 런타임 환경 파일 로더를 검증한다.
설명: ENV 값에 따른 리소스 .env 선택과 잘못된 값 보고를 확인한다.
디자인 패턴: 테스트 케이스
참조: src/f1_chat/shared/config/runtime_env_loader.py
"""

from __future__ import annotations

import os

import pytest

from f1_chat.shared.config import RuntimeEnvironmentLoader


def _loader(tmp_path) -> RuntimeEnvironmentLoader:
    resources = tmp_path / "resources"
    (resources / "stg").mkdir(parents=True)
    (resources / "stg" / ".env").write_text("F1CHAT_TEST_STAGE_VALUE=from-stg\n", encoding="utf-8")
    return RuntimeEnvironmentLoader(project_root=tmp_path, resources_root=resources)


def test_local_env_skips_resource_file(tmp_path, monkeypatch) -> None:
    """ENV가 없으면 local로 판별하는지 검증한다."""

    for key in ("ENV", "APP_ENV", "APP_STAGE", "env", "app_env", "app_stage"):
        monkeypatch.setenv(key, "")
    monkeypatch.delenv("F1CHAT_TEST_STAGE_VALUE", raising=False)

    assert _loader(tmp_path).load() == "local"
    assert "F1CHAT_TEST_STAGE_VALUE" not in os.environ


def test_stage_alias_loads_resource_file(tmp_path, monkeypatch) -> None:
    """staging 별칭이 stg 리소스 파일을 로드하는지 검증한다."""

    monkeypatch.setenv("ENV", "staging")
    monkeypatch.delenv("F1CHAT_TEST_STAGE_VALUE", raising=False)

    assert _loader(tmp_path).load() == "stg"
    assert os.environ["F1CHAT_TEST_STAGE_VALUE"] == "from-stg"
    monkeypatch.delenv("F1CHAT_TEST_STAGE_VALUE")


def test_unknown_env_is_rejected(tmp_path, monkeypatch) -> None:
    """지원하지 않는 ENV 값은 ValueError인지 검증한다."""

    monkeypatch.setenv("ENV", "qa")

    with pytest.raises(ValueError):
        _loader(tmp_path).load()
