"""
목적: 수집 파이프라인을 제공한다.
설명: 컬렉션 재생성 후 URL을 순서대로 수집 -> 추출 -> 청크 분할 -> 임베딩 -> 저장한다.
    URL/청크 단위 실패는 기록하고 건너뛰며, 컬렉션 재생성 실패와 차원 불일치만 실행 전체를 실패시킨다.
디자인 패턴: 파이프라인, 템플릿 메서드
참조: src/f1_chat/core/ingestion/status.py, src/f1_chat/core/corpus/store.py, src/f1_chat/integrations/web/fetcher.py
"""

from __future__ import annotations

from typing import Optional, Protocol

from f1_chat.core.corpus import CorpusStore
from f1_chat.core.ingestion.chunking import TextChunker
from f1_chat.core.ingestion.extractors import ExtractorRegistry, create_default_registry
from f1_chat.core.ingestion.models import IngestJob, IngestReport, IngestState, SourceDocument
from f1_chat.core.ingestion.status import IngestStatusStore
from f1_chat.integrations.vector import VectorRecord
from f1_chat.integrations.web import FetchedPage
from f1_chat.shared.chat.interface import EmbedderPort
from f1_chat.shared.exceptions import BaseAppException
from f1_chat.shared.logging import LogContext, Logger, create_default_logger

# 실행 전체를 중단시키는 데이터 계약 위반 코드
FATAL_CODES = frozenset({"EMBEDDING_DIMENSION_MISMATCH", "CORPUS_DIMENSION_MISMATCH"})


class FetcherPort(Protocol):
    """페이지 수집 포트."""

    def fetch(self, url: str) -> FetchedPage:
        """페이지를 가져온다. 재시도 소진 시 예외를 던진다."""


class _RunAborted(Exception):
    def __init__(self, error: BaseAppException) -> None:
        super().__init__(error.message)
        self.error = error


class IngestionPipeline:
    """URL 목록을 코퍼스 레코드로 바꾸는 수집 파이프라인.

    Args:
        corpus: 코퍼스 저장소.
        embedder: 임베딩 클라이언트. 질의 경로와 같은 설정이어야 한다.
        fetcher: 페이지 수집기.
        status: 수집 상태 저장소.
        chunker: 청크 분할기.
        extractors: 콘텐츠 추출기 레지스트리.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        corpus: CorpusStore,
        embedder: EmbedderPort,
        fetcher: FetcherPort,
        status: IngestStatusStore,
        chunker: Optional[TextChunker] = None,
        extractors: Optional[ExtractorRegistry] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._corpus = corpus
        self._embedder = embedder
        self._fetcher = fetcher
        self._status = status
        self._chunker = chunker or TextChunker()
        self._logger = logger or create_default_logger("IngestionPipeline")
        self._extractors = extractors or create_default_registry(self._logger)

    def run(self, job: IngestJob) -> IngestReport:
        """작업을 실행하고 결과 보고서를 반환한다.

        상태 저장소에는 이미 begin()으로 작업이 등록되어 있어야 한다.
        예상하지 못한 예외는 상태를 error로 바꾼 뒤 다시 던진다.
        """

        report = IngestReport(job_id=job.job_id, state=IngestState.PROCESSING, urls_total=len(job.urls))
        logger = self._logger.with_context(LogContext(job_id=job.job_id))
        logger.info(f"ingest.run.start: urls={len(job.urls)}")
        try:
            self._execute(job, report, logger)
        except _RunAborted as aborted:
            report.state = IngestState.ERROR
            report.error = aborted.error.message
            self._status.fail(job.job_id, aborted.error.message, **self._counters(report))
            logger.error(f"ingest.run.aborted: code={aborted.error.code}, cause={aborted.error.detail.cause}")
            return report
        except Exception as error:
            report.state = IngestState.ERROR
            report.error = str(error)
            self._status.fail(job.job_id, f"수집 중 예기치 않은 오류가 발생했습니다: {error}", **self._counters(report))
            raise

        report.state = IngestState.COMPLETED
        message = (
            f"수집 완료: URL {report.urls_succeeded}/{report.urls_total}개, "
            f"청크 {report.chunks_inserted}개 저장, {report.chunks_failed}개 실패"
        )
        self._status.complete(job.job_id, message, **self._counters(report))
        logger.info(f"ingest.run.completed: {message}")
        return report

    def _execute(self, job: IngestJob, report: IngestReport, logger: Logger) -> None:
        self._status.update(job.job_id, message="컬렉션을 재생성하는 중입니다.", progress=0)
        try:
            self._corpus.recreate()
        except BaseAppException as error:
            raise _RunAborted(error) from error

        total = len(job.urls)
        for index, url in enumerate(job.urls):
            self._status.update(
                job.job_id,
                message=f"처리 중 ({index + 1}/{total}): {url}",
                progress=_progress(index, 0.0, total),
            )
            self._process_url(job, url, index, report, logger)
            report_counters = self._counters(report)
            self._status.update(job.job_id, progress=_progress(index, 1.0, total), **report_counters)

    def _process_url(
        self,
        job: IngestJob,
        url: str,
        index: int,
        report: IngestReport,
        logger: Logger,
    ) -> None:
        try:
            page = self._fetcher.fetch(url)
            document = SourceDocument(url=page.url, raw_content=page.content)
            text = self._extractors.extract(document.raw_content, document.url)
        except Exception as error:  # noqa: BLE001 - URL 단위 실패는 건너뛴다
            report.failed_urls.append(url)
            logger.warning(f"ingest.url.skipped: url={url}, error={error}")
            return

        chunks = self._chunker.split_chunks(text, source_url=document.url)
        if not chunks:
            logger.warning(f"ingest.url.empty: url={url}")
        report.chunks_total += len(chunks)
        for position, chunk in enumerate(chunks, start=1):
            try:
                vector = self._embedder.embed(chunk.text)
                self._corpus.insert(
                    VectorRecord(text=chunk.text, vector=vector, source_url=chunk.source_url)
                )
                report.chunks_inserted += 1
            except BaseAppException as error:
                if error.code in FATAL_CODES:
                    raise _RunAborted(error) from error
                report.chunks_failed += 1
                logger.warning(
                    f"ingest.chunk.skipped: url={url}, chunk={chunk.index}, code={error.code}, error={error.message}"
                )
            self._status.update(
                job.job_id,
                progress=_progress(index, position / len(chunks), len(job.urls)),
                chunks_inserted=report.chunks_inserted,
                chunks_failed=report.chunks_failed,
            )
        report.urls_succeeded += 1
        logger.info(f"ingest.url.done: url={url}, chunks={len(chunks)}")

    def _counters(self, report: IngestReport) -> dict:
        return {
            "urls_processed": report.urls_succeeded + len(report.failed_urls),
            "chunks_inserted": report.chunks_inserted,
            "chunks_failed": report.chunks_failed,
            "failed_urls": list(report.failed_urls),
        }


def _progress(url_index: int, fraction: float, total: int) -> int:
    if total <= 0:
        return 0
    return int(100 * (url_index + fraction) / total)
