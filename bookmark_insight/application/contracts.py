from dataclasses import dataclass
from typing import Any

from bookmark_insight.analysis.domain.models import AnalysisSummary, CategorySummary, DomainSummary
from bookmark_insight.classification.domain.entities import ClassifiedBookmark


@dataclass(frozen=True)
class IngestResult:
    bookmarks: tuple[ClassifiedBookmark, ...]
    categories: tuple[CategorySummary, ...]
    top_domains: tuple[DomainSummary, ...]
    stats: AnalysisSummary

    def to_dict(self) -> dict[str, Any]:
        return {
            "bookmarks": [b.to_dict() for b in self.bookmarks],
            "categories": [c.to_dict() for c in self.categories],
            "topDomains": [d.to_dict() for d in self.top_domains],
            "stats": self.stats.to_dict(),
        }


@dataclass(frozen=True)
class IngestReportRecord:
    source_name: str
    stats: AnalysisSummary
    categories: tuple[CategorySummary, ...]
    top_domains: tuple[DomainSummary, ...]
    strategy_version: str
    duration_ms: int
    generated_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "source_name": self.source_name,
            "stats": self.stats.to_dict(),
            "categories": [c.to_dict() for c in self.categories],
            "top_domains": [d.to_dict() for d in self.top_domains],
            "strategy_version": self.strategy_version,
            "duration_ms": self.duration_ms,
            "generated_at": self.generated_at,
        }
