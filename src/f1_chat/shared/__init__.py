"""
목적: 공통 인프라 모듈 묶음을 제공한다.
설명: 설정, 상수, 예외, 로깅, 런타임 큐/워커를 포함한다.
디자인 패턴: 패키지 퍼사드
참조: src/f1_chat/shared/config, src/f1_chat/shared/logging
"""
