"""
목적: 명령행 도구 패키지를 제공한다.
설명: 코퍼스 적재(f1chat-load)와 코퍼스 질의(f1chat-query) 진입점을 담는다.
디자인 패턴: 스크립트 오케스트레이션
참조: src/f1_chat/cli/load_corpus.py, src/f1_chat/cli/query_corpus.py
"""
