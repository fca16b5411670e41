from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CategorySummary:
    name: str
    count: int
    color: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "count": self.count, "color": self.color}


@dataclass(frozen=True)
class DomainSummary:
    domain: str
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"domain": self.domain, "count": self.count}


@dataclass(frozen=True)
class AnalysisSummary:
    total_bookmarks: int
    total_categories: int
    total_domains: int
    duplicates: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalBookmarks": self.total_bookmarks,
            "totalCategories": self.total_categories,
            "totalDomains": self.total_domains,
            "duplicates": self.duplicates,
        }


@dataclass(frozen=True)
class BookmarkAnalysis:
    categories: tuple[CategorySummary, ...]
    top_domains: tuple[DomainSummary, ...]
    stats: AnalysisSummary
