"""
목적: F1 지식 챗봇 패키지 루트를 정의한다.
설명: 수집(ingestion)과 검색 증강 생성(RAG) 채팅 서비스를 구성하는 하위 패키지를 묶는다.
디자인 패턴: 패키지 루트
참조: src/f1_chat/api/main.py
"""

__version__ = "0.1.0"
