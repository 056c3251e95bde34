"""
목적: F1 검색 에이전트 시스템 프롬프트를 정의한다.
설명: 검색 도구 사용을 지시하고 검색 결과가 부족하면 모른다고 답하도록 한다.
디자인 패턴: 모듈 싱글턴
참조: src/f1_chat/core/chat/services/agent.py
"""

from __future__ import annotations

import textwrap

AGENT_SYSTEM_PROMPT = textwrap.dedent(
"""
You are an expert F1 assistant.
- Use the 'search_f1_knowledge' tool to answer questions about F1.
- If the search results are not sufficient, admit you don't know rather than hallucinating.
- Keep answers concise and engaging.
"""
).strip()

AGENT_FALLBACK_ANSWER = "I don't know the answer to that based on the F1 knowledge I could find."
