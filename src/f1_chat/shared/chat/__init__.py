"""
목적: Chat 공통 인프라 패키지를 정의한다.
설명: 세션 저장소 포트와 구현체를 포함한다.
디자인 패턴: 패키지 루트
참조: src/f1_chat/shared/chat/interface/ports.py, src/f1_chat/shared/chat/memory
"""
