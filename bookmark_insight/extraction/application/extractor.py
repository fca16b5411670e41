from bookmark_insight.config.logger_config import logger
from bookmark_insight.config.settings import DEFAULT_FAVICON_SERVICE
from bookmark_insight.extraction.application.ports import DocumentNode
from bookmark_insight.extraction.domain.models import ParsedBookmark, RawLink
from bookmark_insight.extraction.domain.rules import (
    ROOT_FOLDER,
    build_favicon_url,
    is_bookmarkable_href,
    normalize_domain,
)

FOLDER_LIST_TAG = "dl"
FOLDER_HEADING_TAGS = frozenset({"h3"})
LINK_TAG = "a"


class BookmarkExtractor:
    """Walk a bookmark-export document and emit one record per link.

    Folders follow the Netscape export convention: an ``<h3>`` heading
    followed by a ``<dl>`` holding the folder's entries. Exports never close
    their ``<dt>`` tags, so parsers disagree on where the heading and the list
    end up: lxml nests each ``<dt>`` inside the previous one and leaves the
    ``<dl>`` as a sibling of the outermost, html.parser keeps the ``<dl>``
    inside the heading's ``<dt>``. The walk therefore runs in document order
    and gives each ``<dl>`` to the heading that directly precedes it,
    whatever the tree shape.

    Every link is owned by its nearest enclosing folder only, so a link is
    never emitted twice regardless of nesting depth.
    """

    def __init__(self, favicon_service: str = DEFAULT_FAVICON_SERVICE, root_folder: str = ROOT_FOLDER) -> None:
        self.favicon_service = favicon_service
        self.root_folder = root_folder

    def extract(self, root: DocumentNode) -> list[ParsedBookmark]:
        bookmarks: list[ParsedBookmark] = []
        for link in self.collect_links(root):
            domain = normalize_domain(link.href)
            bookmarks.append(
                ParsedBookmark(
                    title=link.title,
                    url=link.href,
                    domain=domain,
                    folder=link.folder or self.root_folder,
                    favicon=build_favicon_url(domain, self.favicon_service),
                )
            )
        return bookmarks

    def collect_links(self, root: DocumentNode) -> list[RawLink]:
        links: list[RawLink] = []
        dropped_count = 0
        # Heading seen in document order whose <dl> has not started yet.
        pending_folder = ""
        # Explicit stack: unclosed <dt> tags can nest one level per entry.
        stack: list[tuple[DocumentNode, str]] = [(root, self.root_folder)]
        while stack:
            node, folder = stack.pop()
            tag_name = node.tag_name
            if tag_name in FOLDER_HEADING_TAGS:
                pending_folder = node.text.strip()
                continue
            if tag_name == LINK_TAG:
                # A link between a heading and a list means the heading had no list.
                pending_folder = ""
                link = self._to_raw_link(node, folder)
                if link is None:
                    dropped_count += 1
                else:
                    links.append(link)
                continue
            if tag_name == FOLDER_LIST_TAG and pending_folder:
                folder = pending_folder
                pending_folder = ""
            stack.extend((child, folder) for child in reversed(list(node.children)))

        logger.debug("Bookmark links collected: kept={}, dropped={}", len(links), dropped_count)
        return links

    @staticmethod
    def _to_raw_link(anchor: DocumentNode, folder: str) -> RawLink | None:
        title = anchor.text.strip()
        href = (anchor.get_attribute("href") or "").strip()
        if not title:
            logger.debug("Skip anchor without text: href={}", href)
            return None
        if not is_bookmarkable_href(href):
            logger.debug("Skip anchor with non-http href: title={}, href={}", title, href)
            return None
        return RawLink(title=title, href=href, folder=folder)


def extract_bookmarks(root: DocumentNode, favicon_service: str = DEFAULT_FAVICON_SERVICE) -> list[ParsedBookmark]:
    return BookmarkExtractor(favicon_service=favicon_service).extract(root)
