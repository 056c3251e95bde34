"""
목적: 검색 도구를 쓰는 비스트리밍 F1 에이전트를 제공한다.
설명: 검색기를 LangChain 도구(search_f1_knowledge)로 감싸 모델에 바인딩하고,
    모델이 도구 호출을 멈출 때까지 호출 -> 도구 실행 -> 재호출을 반복해 최종 답변 문자열을 반환한다.
    세션에는 기록하지 않는다.
디자인 패턴: 에이전트 루프, 어댑터(검색기 -> 도구)
참조: src/f1_chat/core/chat/services/retriever.py, src/f1_chat/core/chat/prompts/agent_prompt.py, src/f1_chat/integrations/llm/client.py
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage, ToolMessage
from langchain_core.tools import BaseTool, StructuredTool
from pydantic import BaseModel, Field

from f1_chat.core.chat.prompts import AGENT_FALLBACK_ANSWER, AGENT_SYSTEM_PROMPT
from f1_chat.core.chat.services.generation import extract_text
from f1_chat.core.chat.services.retriever import Retriever
from f1_chat.shared.exceptions import BaseAppException, ErrorKind, ExceptionDetail
from f1_chat.shared.logging import Logger, create_default_logger

SEARCH_TOOL_NAME = "search_f1_knowledge"
NO_RESULTS_TEXT = "No relevant F1 information was found."


class SearchF1KnowledgeInput(BaseModel):
    """검색 도구 입력 스키마."""

    query: str = Field(..., description="The search query to find relevant F1 information.")


@dataclass(frozen=True)
class AgentAnswer:
    """에이전트 실행 결과."""

    response: str
    searches: List[str] = field(default_factory=list)


def build_search_tool(retriever: Retriever, logger: Optional[Logger] = None) -> BaseTool:
    """검색기를 search_f1_knowledge 도구로 감싼다.

    검색 실패는 예외 대신 오류 문장으로 돌려줘 모델이 모른다고 답할 수 있게 한다.
    """

    logger = logger or create_default_logger("F1KnowledgeTool")

    def _render(query: str, context: str) -> str:
        logger.debug(f"agent.tool.done: query_chars={len(query)}, context_chars={len(context)}")
        return context or NO_RESULTS_TEXT

    def search(query: str) -> str:
        try:
            result = retriever.retrieve(query)
        except BaseAppException as error:
            logger.warning(f"agent.tool.failed: code={error.code}")
            return f"Search failed: {error.message}"
        return _render(query, result.context)

    async def asearch(query: str) -> str:
        try:
            result = await retriever.aretrieve(query)
        except BaseAppException as error:
            logger.warning(f"agent.tool.failed: code={error.code}")
            return f"Search failed: {error.message}"
        return _render(query, result.context)

    return StructuredTool.from_function(
        func=search,
        coroutine=asearch,
        name=SEARCH_TOOL_NAME,
        description=(
            "Search for specific information about Formula 1, including drivers, teams, races, "
            "and championships. Use this whenever the user asks a question about F1 facts."
        ),
        args_schema=SearchF1KnowledgeInput,
    )


class F1KnowledgeAgent:
    """도구 호출 기반 F1 질의응답 에이전트.

    Args:
        llm: 도구 바인딩을 지원하는 채팅 모델(LLMClient 권장).
        retriever: 검색기.
        max_tool_rounds: 도구 호출 최대 반복 횟수. 넘으면 모른다는 답변으로 끝낸다.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        llm: BaseChatModel,
        retriever: Retriever,
        max_tool_rounds: int = 3,
        logger: Optional[Logger] = None,
    ) -> None:
        self._logger = logger or create_default_logger("F1KnowledgeAgent")
        self._tool = build_search_tool(retriever, self._logger)
        self._model = llm.bind_tools([self._tool])
        self._max_tool_rounds = max(1, max_tool_rounds)

    @property
    def tool(self) -> BaseTool:
        return self._tool

    async def arun(self, prompt: str) -> AgentAnswer:
        """질문에 대한 최종 답변을 반환한다.

        Raises:
            BaseAppException: 질문이 비었을 때(AGENT_PROMPT_EMPTY) 또는 모델 호출 실패(upstream).
        """

        question = (prompt or "").strip()
        if not question:
            raise BaseAppException(
                "prompt가 비어 있습니다.",
                ExceptionDetail(
                    code="AGENT_PROMPT_EMPTY",
                    kind=ErrorKind.CLIENT,
                    hint="prompt에 질문을 전달하세요.",
                ),
            )
        messages: List[BaseMessage] = [SystemMessage(AGENT_SYSTEM_PROMPT), HumanMessage(question)]
        searches: List[str] = []
        for round_index in range(1, self._max_tool_rounds + 1):
            reply = await self._model.ainvoke(messages)
            messages.append(reply)
            tool_calls = reply.tool_calls if isinstance(reply, AIMessage) else []
            if not tool_calls:
                answer = extract_text(reply).strip() or AGENT_FALLBACK_ANSWER
                self._logger.info(f"agent.run.done: rounds={round_index}, searches={len(searches)}")
                return AgentAnswer(response=answer, searches=searches)
            for call in tool_calls:
                messages.append(await self._run_tool(call, searches))

        self._logger.warning(f"agent.run.exhausted: rounds={self._max_tool_rounds}, searches={len(searches)}")
        return AgentAnswer(response=AGENT_FALLBACK_ANSWER, searches=searches)

    async def _run_tool(self, call: Mapping[str, Any], searches: List[str]) -> ToolMessage:
        name = call.get("name")
        call_id = call.get("id") or ""
        if name != self._tool.name:
            self._logger.warning(f"agent.tool.unknown: name={name}")
            return ToolMessage(content=f"Unknown tool: {name}", tool_call_id=call_id, status="error")
        args = dict(call.get("args") or {})
        searches.append(str(args.get("query", "")))
        output = await self._tool.ainvoke(args)
        return ToolMessage(content=str(output), tool_call_id=call_id, name=self._tool.name)
