"""
목적: 채팅 도메인 패키지를 정의한다.
설명: 대화 엔티티, 프롬프트, 검색/조립/생성 서비스를 포함한다.
디자인 패턴: 패키지 루트
참조: src/f1_chat/core/chat/models, src/f1_chat/core/chat/services
"""
