"""Domain models and deterministic rules for bookmark extraction."""

from bookmark_insight.extraction.domain.models import ParsedBookmark, RawLink
from bookmark_insight.extraction.domain.rules import (
    ROOT_FOLDER,
    UNKNOWN_DOMAIN,
    build_favicon_url,
    is_bookmarkable_href,
    normalize_domain,
)

__all__ = [
    "build_favicon_url",
    "is_bookmarkable_href",
    "normalize_domain",
    "ParsedBookmark",
    "RawLink",
    "ROOT_FOLDER",
    "UNKNOWN_DOMAIN",
]
