from urllib.parse import quote, urlsplit

from bookmark_insight.config.settings import DEFAULT_FAVICON_SERVICE

ROOT_FOLDER = "Bookmarks"
UNKNOWN_DOMAIN = "unknown"
BOOKMARKABLE_SCHEMES = ("http://", "https://")


def normalize_domain(url: str) -> str:
    try:
        hostname = urlsplit(url).hostname
    except (TypeError, ValueError, AttributeError):
        return UNKNOWN_DOMAIN
    if not hostname:
        return UNKNOWN_DOMAIN
    if hostname.startswith("www."):
        hostname = hostname[len("www.") :]
    return hostname or UNKNOWN_DOMAIN


def is_bookmarkable_href(href: str | None) -> bool:
    if not href:
        return False
    return href.strip().lower().startswith(BOOKMARKABLE_SCHEMES)


def build_favicon_url(domain: str, service: str = DEFAULT_FAVICON_SERVICE) -> str:
    return service.format(domain=quote(domain, safe=".-:"))
