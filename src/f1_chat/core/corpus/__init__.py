"""
목적: 코퍼스 저장소 공개 API를 제공한다.
설명: CorpusStore를 노출한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/core/corpus/store.py
"""

from f1_chat.core.corpus.store import CorpusStore

__all__ = ["CorpusStore"]
