"""
목적: 런타임 실행 구성요소 묶음을 제공한다.
설명: 백그라운드 작업 전달에 쓰는 큐와 워커를 포함한다.
디자인 패턴: 패키지 퍼사드
참조: src/f1_chat/shared/runtime/queue, src/f1_chat/shared/runtime/worker
"""
