from typing import Sequence

from bookmark_insight.analysis.domain.models import (
    AnalysisSummary,
    BookmarkAnalysis,
    CategorySummary,
    DomainSummary,
)
from bookmark_insight.classification.domain.entities import ClassifiedBookmark
from bookmark_insight.classification.domain.rules import color_for

TOP_DOMAINS_LIMIT = 10


def count_categories(bookmarks: Sequence[ClassifiedBookmark]) -> tuple[CategorySummary, ...]:
    # dict keeps first-seen order of categories.
    counts: dict[str, int] = {}
    for bookmark in bookmarks:
        counts[bookmark.category] = counts.get(bookmark.category, 0) + 1
    return tuple(CategorySummary(name=name, count=count, color=color_for(name)) for name, count in counts.items())


def count_domains(bookmarks: Sequence[ClassifiedBookmark]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for bookmark in bookmarks:
        counts[bookmark.domain] = counts.get(bookmark.domain, 0) + 1
    return counts


def rank_domains(domain_counts: dict[str, int], limit: int = TOP_DOMAINS_LIMIT) -> tuple[DomainSummary, ...]:
    # sorted() is stable, so equal counts keep first-seen order.
    ordered = sorted(domain_counts.items(), key=lambda item: -item[1])
    return tuple(DomainSummary(domain=domain, count=count) for domain, count in ordered[:limit])


def count_duplicates(bookmarks: Sequence[ClassifiedBookmark]) -> int:
    """Every occurrence of a URL beyond its first counts once."""
    return len(bookmarks) - len({bookmark.url for bookmark in bookmarks})


def aggregate(bookmarks: Sequence[ClassifiedBookmark], top_domains_limit: int = TOP_DOMAINS_LIMIT) -> BookmarkAnalysis:
    categories = count_categories(bookmarks)
    domain_counts = count_domains(bookmarks)
    stats = AnalysisSummary(
        total_bookmarks=len(bookmarks),
        total_categories=len(categories),
        total_domains=len(domain_counts),
        duplicates=count_duplicates(bookmarks),
    )
    return BookmarkAnalysis(
        categories=categories,
        top_domains=rank_domains(domain_counts, limit=top_domains_limit),
        stats=stats,
    )
