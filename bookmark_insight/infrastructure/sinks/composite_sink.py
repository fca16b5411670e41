from bookmark_insight.application.ports import BookmarkSinkPort
from bookmark_insight.classification.domain.entities import ClassifiedBookmark


class CompositeBookmarkSink(BookmarkSinkPort):
    def __init__(self, primary: BookmarkSinkPort, secondary: BookmarkSinkPort) -> None:
        self.primary = primary
        self.secondary = secondary

    def write_bookmark(self, bookmark: ClassifiedBookmark) -> None:
        self.primary.write_bookmark(bookmark)
        self.secondary.write_bookmark(bookmark)

    def close(self) -> None:
        try:
            self.primary.close()
        finally:
            self.secondary.close()
