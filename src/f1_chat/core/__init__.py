"""
목적: 도메인 코어 패키지를 정의한다.
설명: 채팅(검색/프롬프트/생성), 코퍼스 저장소, 수집 파이프라인을 포함한다.
디자인 패턴: 패키지 루트
참조: src/f1_chat/core/chat, src/f1_chat/core/corpus, src/f1_chat/core/ingestion
"""
