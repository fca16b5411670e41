from dataclasses import dataclass
from time import perf_counter

from tqdm import tqdm

from bookmark_insight.analysis.domain.aggregator import TOP_DOMAINS_LIMIT, aggregate
from bookmark_insight.application.contracts import IngestResult
from bookmark_insight.application.errors import EmptyResultError, MalformedInputError
from bookmark_insight.classification.domain.classifier import KeywordClassifier
from bookmark_insight.config.logger_config import logger
from bookmark_insight.extraction.application.extractor import BookmarkExtractor
from bookmark_insight.extraction.application.ports import DocumentParserPort


@dataclass(frozen=True)
class PipelineConfig:
    top_domains_limit: int = TOP_DOMAINS_LIMIT
    show_progress: bool = False


class IngestPipeline:
    """parse -> extract -> classify -> aggregate, all or nothing."""

    def __init__(
        self,
        parser: DocumentParserPort,
        extractor: BookmarkExtractor,
        classifier: KeywordClassifier,
    ) -> None:
        self.parser = parser
        self.extractor = extractor
        self.classifier = classifier

    def run(self, raw_html: str | bytes, config: PipelineConfig | None = None) -> IngestResult:
        config = config or PipelineConfig()
        started = perf_counter()
        text = decode_markup(raw_html)

        root = self.parser.parse(text)
        parsed = self.extractor.extract(root)
        if not parsed:
            logger.warning("Ingest rejected, no bookmarks extracted: input_chars={}", len(text))
            raise EmptyResultError()
        logger.info("Bookmarks extracted: count={}, input_chars={}", len(parsed), len(text))

        classified = tuple(
            self.classifier.classify_bookmark(bookmark)
            for bookmark in tqdm(
                parsed,
                total=len(parsed),
                desc="Classifying bookmarks",
                unit="bookmark",
                leave=True,
                disable=not config.show_progress,
            )
        )
        analysis = aggregate(classified, top_domains_limit=config.top_domains_limit)

        duration_ms = int((perf_counter() - started) * 1000)
        logger.info(
            "Ingest pipeline completed: duration_ms={}, total_bookmarks={}, total_categories={}, total_domains={}, duplicates={}",
            duration_ms,
            analysis.stats.total_bookmarks,
            analysis.stats.total_categories,
            analysis.stats.total_domains,
            analysis.stats.duplicates,
        )
        return IngestResult(
            bookmarks=classified,
            categories=analysis.categories,
            top_domains=analysis.top_domains,
            stats=analysis.stats,
        )


def decode_markup(raw_html: str | bytes) -> str:
    if isinstance(raw_html, str):
        return raw_html
    if isinstance(raw_html, (bytes, bytearray)):
        try:
            return bytes(raw_html).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise MalformedInputError(f"Bookmark file is not valid UTF-8: {exc.reason} at byte {exc.start}") from exc
    raise MalformedInputError(f"Unsupported bookmark input type: {type(raw_html).__name__}")
