"""Bookmark extraction package."""

from bookmark_insight.extraction.application.extractor import BookmarkExtractor, extract_bookmarks
from bookmark_insight.extraction.domain.models import ParsedBookmark, RawLink
from bookmark_insight.extraction.domain.rules import normalize_domain

__all__ = [
    "BookmarkExtractor",
    "extract_bookmarks",
    "normalize_domain",
    "ParsedBookmark",
    "RawLink",
]
