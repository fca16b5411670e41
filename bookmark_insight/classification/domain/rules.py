from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

CLASSIFICATION_STRATEGY_VERSION = "1.0.0"
OTHER_CATEGORY = "Other"
OTHER_COLOR = "#9E9E9E"


@dataclass(frozen=True)
class CategoryRule:
    name: str
    keywords: tuple[str, ...]
    color: str


# Declaration order is the match order: the first rule with any keyword hit wins.
# Keywords are plain substrings of "title url folder", lowercased; no word boundaries.
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        "Development",
        (
            "github",
            "stackoverflow",
            "codepen",
            "dev.to",
            "programming",
            "code",
            "developer",
            "api",
            "documentation",
            "tutorial",
        ),
        "#1976D2",
    ),
    CategoryRule(
        "News & Media",
        ("news", "bbc", "cnn", "reuters", "medium", "blog", "article", "press"),
        "#FF5722",
    ),
    CategoryRule(
        "Recipes",
        ("recipe", "cooking", "food", "kitchen", "chef", "culinary", "restaurant", "dinner"),
        "#FFC107",
    ),
    CategoryRule(
        "Certification",
        ("certification", "course", "training", "udemy", "coursera", "aws", "certified", "exams", "examination"),
        "#4CAF50",
    ),
    CategoryRule(
        "Shopping",
        ("amazon", "shop", "store", "buy", "purchase", "retail", "ecommerce"),
        "#9C27B0",
    ),
    CategoryRule(
        "Social Media",
        ("facebook", "twitter", "instagram", "linkedin", "social", "reddit"),
        "#2196F3",
    ),
    CategoryRule(
        "Entertainment",
        ("youtube", "netflix", "entertainment", "movie", "video", "music", "game"),
        "#F44336",
    ),
    CategoryRule(
        "Reference",
        ("wikipedia", "reference", "documentation", "manual", "guide"),
        "#607D8B",
    ),
)

CATEGORY_NAMES: tuple[str, ...] = tuple(rule.name for rule in CATEGORY_RULES) + (OTHER_CATEGORY,)

CATEGORY_COLORS: Mapping[str, str] = MappingProxyType(
    {**{rule.name: rule.color for rule in CATEGORY_RULES}, OTHER_CATEGORY: OTHER_COLOR}
)


def color_for(category: str) -> str:
    return CATEGORY_COLORS.get(category, OTHER_COLOR)
