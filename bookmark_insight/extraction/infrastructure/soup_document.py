from bs4 import BeautifulSoup, Tag

from bookmark_insight.extraction.application.ports import DocumentNode, DocumentParserPort


class SoupNode(DocumentNode):
    """DocumentNode view over a BeautifulSoup element."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    @property
    def tag_name(self) -> str:
        return (self._tag.name or "").lower()

    @property
    def text(self) -> str:
        return self._tag.get_text()

    @property
    def children(self) -> list["SoupNode"]:
        return [SoupNode(child) for child in self._tag.children if isinstance(child, Tag)]

    @property
    def next_sibling(self) -> "SoupNode | None":
        sibling = self._tag.find_next_sibling()
        return SoupNode(sibling) if sibling is not None else None

    def get_attribute(self, name: str) -> str | None:
        value = self._tag.get(name)
        if value is None:
            return None
        # Multi-valued attributes (class, rel) come back as lists.
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def __repr__(self) -> str:
        return f"SoupNode(<{self.tag_name}>)"


class SoupDocumentParser(DocumentParserPort):
    def __init__(self, features: str = "lxml") -> None:
        self.features = features

    def parse(self, raw_html: str) -> SoupNode:
        soup = BeautifulSoup(raw_html, self.features)
        # Traversal starts at <body> like a browser export viewer; fragments without one use the whole tree.
        body = soup.body
        return SoupNode(body if body is not None else soup)
