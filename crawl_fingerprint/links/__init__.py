"""crawl_fingerprint.links: разрешение и извлечение ссылок со страниц."""

from __future__ import annotations

from crawl_fingerprint.links.extractor import extract_links
from crawl_fingerprint.links.models import PageData
from crawl_fingerprint.links.resolver import resolve_url

__all__ = ["PageData", "extract_links", "resolve_url"]
