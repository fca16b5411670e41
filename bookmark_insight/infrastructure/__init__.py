"""Infrastructure adapters: export sinks and the in-memory bookmark store."""

from bookmark_insight.infrastructure.sinks.categorized_json_sink import CategorizedJsonSink
from bookmark_insight.infrastructure.sinks.composite_sink import CompositeBookmarkSink
from bookmark_insight.infrastructure.sinks.jsonl_sink import JsonlBookmarkSink
from bookmark_insight.infrastructure.sinks.report_sink import JsonReportSink
from bookmark_insight.infrastructure.storage.memory_store import InMemoryBookmarkStore

__all__ = [
    "CategorizedJsonSink",
    "CompositeBookmarkSink",
    "InMemoryBookmarkStore",
    "JsonlBookmarkSink",
    "JsonReportSink",
]
