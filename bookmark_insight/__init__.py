"""Bookmark export ingestion: extract, classify and summarise browser bookmarks."""

from bookmark_insight.application.contracts import IngestResult
from bookmark_insight.application.errors import (
    BookmarkIngestError,
    EmptyResultError,
    FileTooLargeError,
    MalformedInputError,
    UnsupportedFileError,
)
from bookmark_insight.ingest import build_pipeline, ingest, run_ingest

__all__ = [
    "BookmarkIngestError",
    "build_pipeline",
    "EmptyResultError",
    "FileTooLargeError",
    "ingest",
    "IngestResult",
    "MalformedInputError",
    "run_ingest",
    "UnsupportedFileError",
]
