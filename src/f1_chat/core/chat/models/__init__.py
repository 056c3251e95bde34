"""
목적: Chat 모델 공개 API를 제공한다.
설명: 엔티티를 노출한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/core/chat/models/entities.py
"""

from f1_chat.core.chat.models.entities import ChatRole, ConversationTurn, utc_now

__all__ = ["ChatRole", "ConversationTurn", "utc_now"]
