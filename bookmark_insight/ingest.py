from pathlib import Path

from bookmark_insight.application.contracts import IngestResult
from bookmark_insight.application.use_cases.ingest_upload import (
    IngestUploadCommand,
    IngestUploadResult,
    IngestUploadUseCase,
)
from bookmark_insight.application.workflows.ingest_pipeline import IngestPipeline, PipelineConfig
from bookmark_insight.classification.domain.classifier import KeywordClassifier
from bookmark_insight.config.logger_config import logger
from bookmark_insight.config.settings import Settings, settings as default_settings
from bookmark_insight.extraction.application.extractor import BookmarkExtractor
from bookmark_insight.extraction.infrastructure.soup_document import SoupDocumentParser
from bookmark_insight.infrastructure.sinks.categorized_json_sink import CategorizedJsonSink
from bookmark_insight.infrastructure.sinks.composite_sink import CompositeBookmarkSink
from bookmark_insight.infrastructure.sinks.jsonl_sink import JsonlBookmarkSink
from bookmark_insight.infrastructure.sinks.report_sink import JsonReportSink
from bookmark_insight.infrastructure.storage.memory_store import InMemoryBookmarkStore


def build_pipeline(settings: Settings = default_settings) -> IngestPipeline:
    return IngestPipeline(
        parser=SoupDocumentParser(features=settings.html_parser),
        extractor=BookmarkExtractor(favicon_service=settings.favicon_service),
        classifier=KeywordClassifier(),
    )


def ingest(raw_html: str | bytes, settings: Settings = default_settings) -> IngestResult:
    return build_pipeline(settings).run(
        raw_html,
        PipelineConfig(top_domains_limit=settings.top_domains_limit),
    )


def run_ingest(
    input_path: str,
    output_dir: str | None = "artifacts/bookmarks",
    store: InMemoryBookmarkStore | None = None,
    show_progress: bool = True,
    settings: Settings = default_settings,
) -> IngestUploadResult:
    path = Path(input_path)
    content = path.read_bytes()

    sink = None
    report_sink = None
    if output_dir is not None:
        output_root = Path(output_dir)
        sink = CompositeBookmarkSink(
            primary=JsonlBookmarkSink(bookmarks_path=str(output_root / "bookmarks.jsonl")),
            secondary=CategorizedJsonSink(categorized_root=str(output_root / "categories")),
        )
        report_sink = JsonReportSink(report_path=str(output_root / "analysis_report.json"))
    else:
        logger.info("No output directory given, ingest results are kept in memory only")

    use_case = IngestUploadUseCase(
        pipeline=build_pipeline(settings),
        store=store if store is not None else InMemoryBookmarkStore(page_size=settings.page_size),
        sink=sink,
        report_sink=report_sink,
        max_upload_bytes=settings.max_upload_bytes,
        top_domains_limit=settings.top_domains_limit,
    )
    return use_case.execute(
        IngestUploadCommand(
            filename=path.name,
            content=content,
            show_progress=show_progress,
        )
    )
