from dataclasses import dataclass
from typing import Any

from bookmark_insight.extraction.domain.models import ParsedBookmark


@dataclass(frozen=True)
class ClassifiedBookmark:
    title: str
    url: str
    domain: str
    folder: str
    favicon: str
    category: str

    @classmethod
    def from_parsed(cls, bookmark: ParsedBookmark, category: str) -> "ClassifiedBookmark":
        return cls(
            title=bookmark.title,
            url=bookmark.url,
            domain=bookmark.domain,
            folder=bookmark.folder,
            favicon=bookmark.favicon,
            category=category,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "domain": self.domain,
            "category": self.category,
            "folder": self.folder,
            "favicon": self.favicon,
        }
