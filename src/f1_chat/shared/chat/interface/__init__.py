"""
목적: Chat 포트 공개 API를 제공한다.
설명: Protocol 인터페이스를 노출한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/shared/chat/interface/ports.py
"""

from f1_chat.shared.chat.interface.ports import EmbedderPort, NearestNeighborPort, SessionStorePort

__all__ = ["EmbedderPort", "NearestNeighborPort", "SessionStorePort"]
