# crawl_fingerprint/links/extractor.py
"""
Link extraction from anchor and iframe tags.
"""
from __future__ import annotations

from typing import Iterator, List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from crawl_fingerprint.links.models import PageData
from crawl_fingerprint.links.resolver import resolve_url
from crawl_fingerprint.logger import DebugSink

#: tag name -> attribute holding the navigation target
LINK_ATTRIBUTES = {"a": "href", "iframe": "src"}


def _raw_references(soup: BeautifulSoup) -> Iterator[str]:
    for tag in soup.find_all(list(LINK_ATTRIBUTES)):
        if not isinstance(tag, Tag):
            continue
        value = tag.get(LINK_ATTRIBUTES[tag.name])
        if isinstance(value, str):
            yield value


def _document_base(soup: BeautifulSoup, page_url: str) -> str:
    base_tag = soup.find("base", href=True)
    if isinstance(base_tag, Tag):
        href = base_tag.get("href")
        if isinstance(href, str):
            resolved = resolve_url(href, page_url)
            if resolved:
                return resolved
    return page_url


def extract_links(page: PageData, *, debug: Optional[DebugSink] = None) -> List[str]:
    """
    Extract navigable links from ``<a href>`` and ``<iframe src>`` tags.

    Links are resolved against the page URL (or its ``<base href>``), stripped
    of fragments and returned in document order without duplicates.
    """
    # bytes go in undecoded so bs4 can pick the charset from BOM or <meta>
    soup = BeautifulSoup(page.content, "html.parser")
    base = _document_base(soup, page.url)

    links: List[str] = []
    seen: set[str] = set()
    for raw in _raw_references(soup):
        url = resolve_url(raw, base, debug=debug)
        if url is None or url in seen:
            continue
        seen.add(url)
        links.append(url)

    if debug is not None:
        debug(f"Extracted {len(links)} links from {page.url}")
    return links
