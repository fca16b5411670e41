from bookmark_insight.classification.domain.entities import ClassifiedBookmark
from bookmark_insight.classification.domain.rules import CATEGORY_RULES, OTHER_CATEGORY, CategoryRule
from bookmark_insight.extraction.domain.models import ParsedBookmark


class KeywordClassifier:
    def __init__(self, rules: tuple[CategoryRule, ...] = CATEGORY_RULES) -> None:
        self.rules = rules

    def classify(self, title: str, url: str, folder: str | None = None) -> str:
        text = f"{title} {url} {folder or ''}".lower()
        for rule in self.rules:
            if any(keyword in text for keyword in rule.keywords):
                return rule.name
        return OTHER_CATEGORY

    def classify_bookmark(self, bookmark: ParsedBookmark) -> ClassifiedBookmark:
        category = self.classify(bookmark.title, bookmark.url, bookmark.folder)
        return ClassifiedBookmark.from_parsed(bookmark, category)


_DEFAULT_CLASSIFIER = KeywordClassifier()


def classify(title: str, url: str, folder: str | None = None) -> str:
    return _DEFAULT_CLASSIFIER.classify(title, url, folder)
