import json
from pathlib import Path
from typing import TextIO

from bookmark_insight.application.ports import BookmarkSinkPort
from bookmark_insight.classification.domain.entities import ClassifiedBookmark
from bookmark_insight.config.logger_config import logger


class JsonlBookmarkSink(BookmarkSinkPort):
    """Write one JSON line per bookmark.

    The target file is opened on the first write, so a sink that is closed
    without receiving anything leaves an existing export untouched.
    """

    def __init__(self, bookmarks_path: str) -> None:
        self.bookmarks_path = Path(bookmarks_path)
        self._fp: TextIO | None = None
        self.written_count = 0
        logger.info("Bookmark sink initialized: bookmarks_path={}", bookmarks_path)

    def write_bookmark(self, bookmark: ClassifiedBookmark) -> None:
        if self._fp is None:
            self.bookmarks_path.parent.mkdir(parents=True, exist_ok=True)
            self._fp = self.bookmarks_path.open("w", encoding="utf-8")
        self._fp.write(json.dumps(bookmark.to_dict(), ensure_ascii=False) + "\n")
        self.written_count += 1

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None
        logger.info("Bookmark sink closed: written_count={}", self.written_count)
