"""Keyword-based bookmark classification."""

from bookmark_insight.classification.domain.classifier import KeywordClassifier, classify
from bookmark_insight.classification.domain.entities import ClassifiedBookmark
from bookmark_insight.classification.domain.rules import CATEGORY_COLORS, CATEGORY_RULES, OTHER_CATEGORY

__all__ = [
    "CATEGORY_COLORS",
    "CATEGORY_RULES",
    "classify",
    "ClassifiedBookmark",
    "KeywordClassifier",
    "OTHER_CATEGORY",
]
