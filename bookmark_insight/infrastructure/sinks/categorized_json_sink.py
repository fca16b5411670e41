import json
from pathlib import Path

from pathvalidate import sanitize_filename as lib_sanitize

from bookmark_insight.application.ports import BookmarkSinkPort
from bookmark_insight.classification.domain.entities import ClassifiedBookmark
from bookmark_insight.config.logger_config import logger


def category_filename(category: str) -> str:
    safe_name = lib_sanitize(category.replace(" ", "_"), replacement_text="_")
    if not safe_name:
        return "uncategorized.json"
    return f"{safe_name}.json"


class CategorizedJsonSink(BookmarkSinkPort):
    """Collect bookmarks per category and write one JSON array per category on close."""

    def __init__(self, categorized_root: str) -> None:
        self.categorized_root = Path(categorized_root)
        self._by_category: dict[str, list[dict]] = {}
        logger.info("Categorized JSON sink initialized: categorized_root={}", str(self.categorized_root))

    def write_bookmark(self, bookmark: ClassifiedBookmark) -> None:
        self._by_category.setdefault(bookmark.category, []).append(bookmark.to_dict())

    def close(self) -> None:
        if self._by_category:
            self.categorized_root.mkdir(parents=True, exist_ok=True)
        for category, rows in self._by_category.items():
            target_path = self.categorized_root / category_filename(category)
            with target_path.open("w", encoding="utf-8") as fp:
                json.dump({"category": category, "count": len(rows), "bookmarks": rows}, fp, ensure_ascii=False, indent=2)
                fp.write("\n")
        logger.info(
            "Categorized JSON sink closed: categorized_root={}, by_category={}",
            str(self.categorized_root),
            {category: len(rows) for category, rows in self._by_category.items()},
        )
