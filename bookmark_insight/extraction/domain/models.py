from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RawLink:
    title: str
    href: str
    folder: str | None = None


@dataclass(frozen=True)
class ParsedBookmark:
    title: str
    url: str
    domain: str
    folder: str
    favicon: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "domain": self.domain,
            "folder": self.folder,
            "favicon": self.favicon,
        }
