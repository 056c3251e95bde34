"""
목적: 수집 도메인 공개 API를 제공한다.
설명: 모델, 청크 분할기, 상태 저장소, 파이프라인, 실행기를 노출한다.
디자인 패턴: 퍼사드
참조: src/f1_chat/core/ingestion/pipeline.py, src/f1_chat/core/ingestion/executor.py
"""

from f1_chat.core.ingestion.chunking import TextChunker
from f1_chat.core.ingestion.executor import IngestionExecutor, prepare_urls
from f1_chat.core.ingestion.models import (
    IngestJob,
    IngestReport,
    IngestState,
    IngestStatus,
    SourceDocument,
    TextChunk,
)
from f1_chat.core.ingestion.pipeline import IngestionPipeline
from f1_chat.core.ingestion.status import IngestStatusStore

__all__ = [
    "IngestJob",
    "IngestReport",
    "IngestState",
    "IngestStatus",
    "IngestStatusStore",
    "IngestionExecutor",
    "IngestionPipeline",
    "SourceDocument",
    "TextChunk",
    "TextChunker",
    "prepare_urls",
]
