class BookmarkIngestError(Exception):
    """Base class for conditions that reject a whole ingest."""


class EmptyResultError(BookmarkIngestError):
    def __init__(self, message: str = "No bookmarks found in the uploaded file") -> None:
        super().__init__(message)


class MalformedInputError(BookmarkIngestError):
    pass


class UnsupportedFileError(BookmarkIngestError):
    pass


class FileTooLargeError(BookmarkIngestError):
    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"File is {size} bytes, limit is {limit} bytes")
        self.size = size
        self.limit = limit
