import math
import threading
from dataclasses import dataclass
from typing import Any

from bookmark_insight.analysis.domain.models import AnalysisSummary, DomainSummary
from bookmark_insight.application.contracts import IngestResult
from bookmark_insight.application.ports import BookmarkStorePort
from bookmark_insight.config.logger_config import logger

ALL_CATEGORIES = "all"
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class StoredBookmark:
    id: int
    title: str
    url: str
    domain: str
    category: str
    folder: str
    favicon: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "url": self.url,
            "domain": self.domain,
            "category": self.category,
            "folder": self.folder,
            "favicon": self.favicon,
        }


@dataclass(frozen=True)
class StoredCategory:
    id: int
    name: str
    count: int
    color: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "count": self.count, "color": self.color}


@dataclass(frozen=True)
class AnalysisData:
    stats: AnalysisSummary
    categories: tuple[StoredCategory, ...]
    top_domains: tuple[DomainSummary, ...]
    bookmarks: tuple[StoredBookmark, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "stats": self.stats.to_dict(),
            "categories": [c.to_dict() for c in self.categories],
            "topDomains": [d.to_dict() for d in self.top_domains],
            "bookmarks": [b.to_dict() for b in self.bookmarks],
        }


_EMPTY_DATA = AnalysisData(
    stats=AnalysisSummary(total_bookmarks=0, total_categories=0, total_domains=0, duplicates=0),
    categories=(),
    top_domains=(),
    bookmarks=(),
)


@dataclass(frozen=True)
class BookmarkQuery:
    category: str | None = None
    search: str | None = None
    page: int = 1
    limit: int | None = None


@dataclass(frozen=True)
class BookmarkPage:
    bookmarks: tuple[StoredBookmark, ...]
    page: int
    limit: int
    total: int
    total_pages: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "bookmarks": [b.to_dict() for b in self.bookmarks],
            "pagination": {
                "page": self.page,
                "limit": self.limit,
                "total": self.total,
                "totalPages": self.total_pages,
            },
        }


class InMemoryBookmarkStore(BookmarkStorePort):
    """Volatile store holding the latest ingested batch.

    Each ``replace`` builds a complete immutable snapshot and swaps it in one
    assignment, so readers observe either the previous batch or the new one.
    Identifiers restart at 1 for every batch.
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.page_size = page_size
        self._lock = threading.Lock()
        self._data = _EMPTY_DATA

    def replace(self, result: IngestResult) -> AnalysisData:
        bookmarks = tuple(
            StoredBookmark(
                id=index,
                title=b.title,
                url=b.url,
                domain=b.domain,
                category=b.category,
                folder=b.folder,
                favicon=b.favicon,
            )
            for index, b in enumerate(result.bookmarks, start=1)
        )
        categories = tuple(
            StoredCategory(id=index, name=c.name, count=c.count, color=c.color)
            for index, c in enumerate(result.categories, start=1)
        )
        snapshot = AnalysisData(
            stats=result.stats,
            categories=categories,
            top_domains=result.top_domains,
            bookmarks=bookmarks,
        )
        with self._lock:
            previous_count = len(self._data.bookmarks)
            self._data = snapshot
        logger.info(
            "Bookmark store replaced: previous_count={}, bookmark_count={}, category_count={}",
            previous_count,
            len(bookmarks),
            len(categories),
        )
        return snapshot

    def clear(self) -> None:
        with self._lock:
            self._data = _EMPTY_DATA

    def get_analysis_data(self) -> AnalysisData:
        return self._data

    def get_bookmarks(self) -> tuple[StoredBookmark, ...]:
        return self._data.bookmarks

    def get_categories(self) -> tuple[StoredCategory, ...]:
        return self._data.categories

    def get_bookmarks_by_category(self, category: str) -> tuple[StoredBookmark, ...]:
        return tuple(b for b in self._data.bookmarks if b.category == category)

    def search_bookmarks(self, term: str) -> tuple[StoredBookmark, ...]:
        return tuple(b for b in self._data.bookmarks if _matches_search(b, term.lower()))

    def query(self, query: BookmarkQuery) -> BookmarkPage:
        if query.page < 1:
            raise ValueError(f"page must be >= 1, got {query.page}")
        limit = query.limit if query.limit is not None else self.page_size
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")

        # One snapshot for the whole query.
        bookmarks = self._data.bookmarks
        if query.category and query.category != ALL_CATEGORIES:
            bookmarks = tuple(b for b in bookmarks if b.category == query.category)
        if query.search:
            term = query.search.lower()
            bookmarks = tuple(b for b in bookmarks if _matches_search(b, term))

        start = (query.page - 1) * limit
        return BookmarkPage(
            bookmarks=bookmarks[start : start + limit],
            page=query.page,
            limit=limit,
            total=len(bookmarks),
            total_pages=math.ceil(len(bookmarks) / limit),
        )


def _matches_search(bookmark: StoredBookmark, term: str) -> bool:
    return term in bookmark.title.lower() or term in bookmark.url.lower() or term in bookmark.domain.lower()
