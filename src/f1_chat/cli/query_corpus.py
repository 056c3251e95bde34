"""
목적: 코퍼스 질의 명령행 도구를 제공한다.
설명: 질의문을 임베딩해 가장 가까운 청크를 유사도 점수와 함께 출력한다.
디자인 패턴: 절차형 유틸 스크립트
참조: src/f1_chat/core/chat/services/retriever.py
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from f1_chat.api.runtime import build_corpus_store, build_embedder
from f1_chat.core.chat.services import Retriever
from f1_chat.shared.config import RuntimeEnvironmentLoader, load_settings
from f1_chat.shared.exceptions import BaseAppException

_PREVIEW_CHARS = 200


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="F1 코퍼스 질의")
    parser.add_argument("query", help="검색할 질의문")
    parser.add_argument("-k", "--top-k", type=int, default=None, help="반환할 최대 결과 수")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    RuntimeEnvironmentLoader().load()

    try:
        settings = load_settings()
        corpus = build_corpus_store(settings)
        retriever = Retriever(build_embedder(settings), corpus, top_k=settings.retrieval.top_k)
        total = corpus.count()
        matches = retriever.search(args.query, args.top_k)
    except BaseAppException as error:
        print(f"[오류][query] code={error.code}, message={error.message}", file=sys.stderr)
        return 1

    print(f"[진행][query] collection={corpus.schema.name}, rows={total}, matches={len(matches)}")
    for rank, match in enumerate(matches, start=1):
        preview = match.text[:_PREVIEW_CHARS].replace("\n", " ")
        print(f"{rank}. score={match.score:.4f} url={match.source_url or '-'}")
        print(f"   {preview}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
