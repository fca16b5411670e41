"""Aggregate statistics over classified bookmarks."""

from bookmark_insight.analysis.domain.aggregator import aggregate
from bookmark_insight.analysis.domain.models import (
    AnalysisSummary,
    BookmarkAnalysis,
    CategorySummary,
    DomainSummary,
)

__all__ = ["aggregate", "AnalysisSummary", "BookmarkAnalysis", "CategorySummary", "DomainSummary"]
