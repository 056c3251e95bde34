"""
목적: LLMClient 래퍼 동작을 검증한다.
설명: 가짜 채팅 모델로 호출/스트리밍 위임과 오류 변환, 도구 바인딩, 공급자 설정 오류를 확인한다.
디자인 패턴: 테스트 더블
참조: src/f1_chat/integrations/llm/client.py, src/f1_chat/integrations/llm/factory.py
"""

from __future__ import annotations

import pytest
from langchain_core.runnables import RunnableBinding
from langchain_core.tools import tool

from f1_chat.integrations.llm import LLMClient, build_chat_model
from f1_chat.shared.config import LLMSettings
from f1_chat.shared.exceptions import BaseAppException, ErrorKind


def test_invoke_delegates_to_wrapped_model(chat_model_factory) -> None:
    """invoke가 원본 모델 응답을 그대로 돌려주는지 검증한다."""

    client = LLMClient(chat_model_factory("Lewis Hamilton won."))

    assert client.invoke("Who won?").content == "Lewis Hamilton won."


@pytest.mark.asyncio
async def test_astream_yields_all_chunks(chat_model_factory) -> None:
    """비동기 스트림 조각을 이어 붙이면 전체 응답인지 검증한다."""

    client = LLMClient(chat_model_factory("Lewis Hamilton won the race."))

    parts = [chunk.content async for chunk in client.astream("Who won?")]

    assert len(parts) > 1
    assert "".join(parts) == "Lewis Hamilton won the race."


@pytest.mark.asyncio
async def test_astream_failure_becomes_upstream_error(interrupting_chat_model) -> None:
    """스트리밍 도중 실패가 LLM_ASTREAM_ERROR로 변환되는지 검증한다."""

    client = LLMClient(interrupting_chat_model)
    received: list[str] = []

    with pytest.raises(BaseAppException) as exc_info:
        async for chunk in client.astream("Who won?"):
            received.append(chunk.content)

    assert received == ["Lewis"]
    assert exc_info.value.code == "LLM_ASTREAM_ERROR"
    assert exc_info.value.kind == ErrorKind.UPSTREAM
    assert interrupting_chat_model.closed is True


def test_build_chat_model_requires_api_key() -> None:
    """OpenAI 호환 공급자에 키가 없으면 config 오류인지 검증한다."""

    with pytest.raises(BaseAppException) as exc_info:
        build_chat_model(LLMSettings(provider="openai", api_key=None))

    assert exc_info.value.code == "CHAT_LLM_CONFIG_ERROR"
    assert exc_info.value.kind == ErrorKind.CONFIG


@tool
def search_f1_knowledge(query: str) -> str:
    """Search for specific information about Formula 1."""

    return query


def test_bind_tools_falls_back_to_openai_format(chat_model_factory) -> None:
    """도구 바인딩을 모르는 모델이면 OpenAI 형식 tools 인자로 이 래퍼에 묶이는지 검증한다."""

    client = LLMClient(chat_model_factory("Lewis Hamilton won."))

    bound = client.bind_tools([search_f1_knowledge])

    assert isinstance(bound, RunnableBinding)
    assert bound.bound is client
    assert [item["function"]["name"] for item in bound.kwargs["tools"]] == ["search_f1_knowledge"]


def test_bind_tools_reuses_provider_format() -> None:
    """공급자 모델의 도구 인자를 재사용하면서 호출은 래퍼를 거치는지 검증한다."""

    client = LLMClient(build_chat_model(LLMSettings(provider="openai", api_key="sk-test")))

    bound = client.bind_tools([search_f1_knowledge], tool_choice="auto")

    assert isinstance(bound, RunnableBinding)
    assert bound.bound is client
    assert [item["function"]["name"] for item in bound.kwargs["tools"]] == ["search_f1_knowledge"]
    assert bound.kwargs["tool_choice"] == "auto"
