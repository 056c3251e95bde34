"""
목적: 임베딩 연동 공개 API를 제공한다.
설명: 임베딩 클라이언트와 설정 기반 팩토리를 노출한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/integrations/embedding/client.py, src/f1_chat/integrations/embedding/factory.py
"""

from f1_chat.integrations.embedding.client import EmbeddingClient
from f1_chat.integrations.embedding.factory import build_embeddings, create_embedding_client

__all__ = ["EmbeddingClient", "build_embeddings", "create_embedding_client"]
