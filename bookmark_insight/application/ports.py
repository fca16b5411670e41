from typing import Protocol, runtime_checkable

from bookmark_insight.application.contracts import IngestReportRecord, IngestResult
from bookmark_insight.classification.domain.entities import ClassifiedBookmark


@runtime_checkable
class BookmarkSinkPort(Protocol):
    def write_bookmark(self, bookmark: ClassifiedBookmark) -> None: ...
    """Write one classified bookmark."""

    def close(self) -> None: ...
    """Flush and release resources."""


@runtime_checkable
class ReportSinkPort(Protocol):
    def write_report(self, report: IngestReportRecord) -> None: ...
    """Persist the aggregate ingest report."""


@runtime_checkable
class BookmarkStorePort(Protocol):
    def replace(self, result: IngestResult) -> None: ...
    """Swap the stored batch for a new one."""
