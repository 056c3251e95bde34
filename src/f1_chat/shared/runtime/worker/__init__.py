"""
목적: 워커 공개 API를 제공한다.
설명: 워커 구현체와 설정/상태 모델을 노출한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/shared/runtime/worker/worker.py, src/f1_chat/shared/runtime/worker/model.py
"""

from f1_chat.shared.runtime.worker.model import WorkerConfig, WorkerState
from f1_chat.shared.runtime.worker.worker import Worker

__all__ = ["Worker", "WorkerConfig", "WorkerState"]
