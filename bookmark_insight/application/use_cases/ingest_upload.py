from dataclasses import dataclass
from datetime import datetime, timezone
from time import perf_counter

from bookmark_insight.analysis.domain.aggregator import TOP_DOMAINS_LIMIT
from bookmark_insight.application.contracts import IngestReportRecord, IngestResult
from bookmark_insight.application.errors import (
    BookmarkIngestError,
    FileTooLargeError,
    UnsupportedFileError,
)
from bookmark_insight.application.ports import BookmarkSinkPort, BookmarkStorePort, ReportSinkPort
from bookmark_insight.application.workflows.ingest_pipeline import IngestPipeline, PipelineConfig
from bookmark_insight.classification.domain.rules import CLASSIFICATION_STRATEGY_VERSION
from bookmark_insight.config.logger_config import logger
from bookmark_insight.config.settings import DEFAULT_MAX_UPLOAD_BYTES

HTML_CONTENT_TYPE = "text/html"
HTML_SUFFIXES = (".html", ".htm")


@dataclass(frozen=True)
class IngestUploadCommand:
    filename: str
    content: bytes
    content_type: str | None = None
    show_progress: bool = False


@dataclass(frozen=True)
class IngestUploadResult:
    success: bool
    message: str
    bookmarks_count: int
    result: IngestResult


class IngestUploadUseCase:
    """Validate an uploaded export, ingest it, then replace the stored batch.

    The store is only touched after the pipeline succeeds, so a rejected
    upload leaves the previous batch in place.
    """

    def __init__(
        self,
        pipeline: IngestPipeline,
        store: BookmarkStorePort,
        sink: BookmarkSinkPort | None = None,
        report_sink: ReportSinkPort | None = None,
        max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
        top_domains_limit: int = TOP_DOMAINS_LIMIT,
    ) -> None:
        self.pipeline = pipeline
        self.store = store
        self.sink = sink
        self.report_sink = report_sink
        self.max_upload_bytes = max_upload_bytes
        self.top_domains_limit = top_domains_limit

    def execute(self, command: IngestUploadCommand) -> IngestUploadResult:
        started = perf_counter()
        logger.info(
            "Ingest upload started: filename={}, content_type={}, size_bytes={}",
            command.filename,
            command.content_type,
            len(command.content),
        )
        try:
            self._validate(command)
            config = PipelineConfig(top_domains_limit=self.top_domains_limit, show_progress=command.show_progress)
            result = self.pipeline.run(command.content, config)
        except BookmarkIngestError as exc:
            logger.warning("Ingest upload rejected: filename={}, error={}:{}", command.filename, type(exc).__name__, exc)
            raise

        self.store.replace(result)
        self._export(result, command.filename, started)

        count = result.stats.total_bookmarks
        logger.info("Ingest upload completed: filename={}, bookmarks_count={}", command.filename, count)
        return IngestUploadResult(
            success=True,
            message=f"Successfully processed {count} bookmarks",
            bookmarks_count=count,
            result=result,
        )

    def _validate(self, command: IngestUploadCommand) -> None:
        is_html_type = (command.content_type or "").split(";")[0].strip().lower() == HTML_CONTENT_TYPE
        is_html_name = command.filename.lower().endswith(HTML_SUFFIXES)
        if not (is_html_type or is_html_name):
            raise UnsupportedFileError(f"Only HTML files are allowed: {command.filename}")
        if len(command.content) > self.max_upload_bytes:
            raise FileTooLargeError(size=len(command.content), limit=self.max_upload_bytes)

    def _export(self, result: IngestResult, source_name: str, started: float) -> None:
        if self.sink is not None:
            try:
                for bookmark in result.bookmarks:
                    self.sink.write_bookmark(bookmark)
            finally:
                self.sink.close()
        if self.report_sink is not None:
            self.report_sink.write_report(
                IngestReportRecord(
                    source_name=source_name,
                    stats=result.stats,
                    categories=result.categories,
                    top_domains=result.top_domains,
                    strategy_version=CLASSIFICATION_STRATEGY_VERSION,
                    duration_ms=int((perf_counter() - started) * 1000),
                    generated_at=datetime.now(timezone.utc).isoformat(),
                )
            )
