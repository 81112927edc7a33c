"""URL cleanup and exact-article identity checks."""

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from ..models import NewsItem

TRACKING_PARAMS = {
    "utm_source",
    "utm_medium",
    "utm_campaign",
    "utm_term",
    "utm_content",
    "ref",
    "src",
}


def clean_url(url: str) -> str:
    """
    Strip tracking query parameters from a URL.

    Lowercases scheme and host. Anything that does not look like an absolute
    URL is returned stripped but otherwise unchanged.
    """
    url = (url or "").strip()
    try:
        parts = urlsplit(url)
    except ValueError:
        return url

    if not parts.scheme or not parts.netloc:
        return url

    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k not in TRACKING_PARAMS]
    return urlunsplit((
        parts.scheme.lower(),
        parts.netloc.lower(),
        parts.path or "/",
        urlencode(query, doseq=True),
        parts.fragment,
    ))


def _host_and_path(url: str):
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None
    return (parts.hostname or "", parts.path or "/")


def is_same_article(item1: NewsItem, item2: NewsItem) -> bool:
    """Check whether two items point at the same underlying article."""
    if item1.canonical_url and item2.canonical_url:
        return item1.canonical_url == item2.canonical_url

    if not item1.url or not item2.url:
        return False

    url1 = clean_url(item1.url)
    url2 = clean_url(item2.url)
    if url1 == url2:
        return True

    # Same host and path, ignoring the query string
    location1 = _host_and_path(url1)
    location2 = _host_and_path(url2)
    return location1 is not None and location1 == location2
