"""Infrastructure adapters for bookmark extraction."""

from bookmark_insight.extraction.infrastructure.soup_document import SoupDocumentParser, SoupNode

__all__ = ["SoupDocumentParser", "SoupNode"]
