"""
목적: 외부 시스템 연동 모듈 묶음을 제공한다.
설명: 임베딩/LLM 공급자, 벡터 엔진, 세션 저장소, 웹 수집 클라이언트를 포함한다.
디자인 패턴: 패키지 퍼사드
참조: src/f1_chat/integrations/vector, src/f1_chat/integrations/session
"""
