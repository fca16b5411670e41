from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class DocumentNode(Protocol):
    @property
    def tag_name(self) -> str: ...
    """Lower-case element name, e.g. "dt", "dl", "a"."""

    @property
    def text(self) -> str: ...
    """Concatenated text content of the element and its descendants."""

    @property
    def children(self) -> Sequence["DocumentNode"]: ...
    """Direct element children in document order (text nodes excluded)."""

    @property
    def next_sibling(self) -> "DocumentNode | None": ...
    """Following element sibling, or None for the last child."""

    def get_attribute(self, name: str) -> str | None: ...


@runtime_checkable
class DocumentParserPort(Protocol):
    def parse(self, raw_html: str) -> DocumentNode: ...
    """Parse raw markup and return the node traversal should start from."""
