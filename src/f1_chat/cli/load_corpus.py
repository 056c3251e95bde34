"""
목적: 코퍼스 적재 명령행 도구를 제공한다.
설명: 기본 F1 소스(또는 지정 URL)를 수집 -> 청킹 -> 임베딩 -> 벡터 저장 순서로 현재 프로세스에서 처리한다.
    실행할 때마다 컬렉션을 다시 만든다.
디자인 패턴: 스크립트 오케스트레이션
참조: src/f1_chat/core/ingestion/executor.py, src/f1_chat/api/runtime.py
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from f1_chat.api.runtime import build_corpus_store, build_embedder
from f1_chat.core.ingestion import (
    IngestionExecutor,
    IngestionPipeline,
    IngestState,
    IngestStatusStore,
    TextChunker,
)
from f1_chat.integrations.web import PageFetcher
from f1_chat.shared.config import RuntimeEnvironmentLoader, load_settings
from f1_chat.shared.exceptions import BaseAppException


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="F1 코퍼스 적재 실행")
    parser.add_argument(
        "--url",
        dest="urls",
        action="append",
        default=None,
        help="수집할 URL (여러 번 지정 가능, 없으면 설정의 기본 소스 사용)",
    )
    parser.add_argument(
        "--memory",
        action="store_true",
        help="LanceDB 대신 인메모리 벡터 엔진 사용(동작 확인용)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    RuntimeEnvironmentLoader().load()

    overrides = {"corpus": {"backend": "memory"}} if args.memory else None
    try:
        settings = load_settings(overrides=overrides)
        urls = args.urls or settings.sources
        print(
            f"[진행][load] 시작: urls={len(urls)}, collection={settings.corpus.collection}, "
            f"backend={settings.corpus.backend}"
        )
        corpus = build_corpus_store(settings)
        embedder = build_embedder(settings)
    except BaseAppException as error:
        print(f"[오류][load] 초기화 실패: code={error.code}, message={error.message}", file=sys.stderr)
        return 1

    ingestion = settings.ingestion
    status = IngestStatusStore()
    with PageFetcher(
        timeout_seconds=ingestion.fetch_timeout_seconds,
        max_attempts=ingestion.fetch_max_attempts,
        backoff_seconds=ingestion.fetch_backoff_seconds,
        user_agent=ingestion.user_agent,
    ) as fetcher:
        pipeline = IngestionPipeline(
            corpus=corpus,
            embedder=embedder,
            fetcher=fetcher,
            status=status,
            chunker=TextChunker(ingestion.chunk_size, ingestion.chunk_overlap),
        )
        executor = IngestionExecutor(pipeline, status)
        report = executor.run_sync(urls)

    for url in report.failed_urls:
        print(f"[진행][load] 건너뜀: url={url}")
    print(
        f"[진행][load] 완료: state={report.state.value}, urls={report.urls_succeeded}/{report.urls_total}, "
        f"chunks={report.chunks_inserted}/{report.chunks_total}, failed_chunks={report.chunks_failed}"
    )
    if report.state == IngestState.ERROR:
        print(f"[오류][load] 실행 중단: {report.error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
