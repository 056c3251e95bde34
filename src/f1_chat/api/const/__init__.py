"""
목적: API 계층 상수를 제공한다.
설명: 경로 접두사와 스트리밍 응답 헤더 값을 정의한다.
디자인 패턴: 상수 객체
참조: src/f1_chat/api/chat/routers/stream_chat.py, src/f1_chat/api/ingest/routers/router.py
"""


class ApiConst:
    """API 계층 상수 집합이다.

    Attributes:
        API_PREFIX: 모든 업무 라우터의 경로 접두사.
        STREAM_MEDIA_TYPE: 채팅 스트림 응답 미디어 타입.
        STREAM_HEADERS: 프록시 버퍼링을 끄는 스트리밍 헤더.
    """

    API_PREFIX = "/api"
    STREAM_MEDIA_TYPE = "text/plain; charset=utf-8"
    STREAM_HEADERS = {
        "Cache-Control": "no-cache",
        "X-Accel-Buffering": "no",
    }


__all__ = ["ApiConst"]
