"""
목적: HTTP API 패키지를 정의한다.
설명: FastAPI 앱, 런타임 조립, 채팅/수집/헬스 라우터를 포함한다.
디자인 패턴: 패키지 루트
참조: src/f1_chat/api/main.py, src/f1_chat/api/runtime.py
"""
