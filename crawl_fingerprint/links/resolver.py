# crawl_fingerprint/links/resolver.py
"""
URL resolution for links found on crawled pages.
"""
from __future__ import annotations

from typing import Optional
from urllib.parse import urljoin, urlsplit

from crawl_fingerprint.logger import DebugSink

NAVIGABLE_SCHEMES = ("http", "https")

# URL parsers ignore these anywhere inside a URL
_IGNORED_CHARS = str.maketrans("", "", "\t\r\n")


def _strip_fragment(url: str) -> str:
    return url.split("#", 1)[0]


def resolve_url(reference: str, base: str, *, debug: Optional[DebugSink] = None) -> Optional[str]:
    """
    Resolve an ``href``/``src`` value to an absolute http(s) URL without fragment.

    Returns None for empty references, in-page anchors (``#...``), references
    with any scheme other than http/https, and references the URL parser rejects.
    Tab, CR and LF characters inside the reference are dropped.
    Absolute http(s) references are returned as written, minus the fragment.
    """
    url = reference.strip().translate(_IGNORED_CHARS)
    if not url or url.startswith("#"):
        return None

    try:
        scheme = urlsplit(url).scheme
        if scheme in NAVIGABLE_SCHEMES:
            return _strip_fragment(url)
        if scheme:
            if debug is not None:
                debug(f"Skipping non-navigable reference {url}")
            return None
        resolved = _strip_fragment(urljoin(base, url))
    except ValueError as exc:
        if debug is not None:
            debug(f"Cannot parse reference {url!r}: {exc}")
        return None

    if debug is not None:
        debug(f"Resolved {url} against {base} -> {resolved}")
    return resolved
