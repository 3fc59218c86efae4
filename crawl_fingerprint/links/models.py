# crawl_fingerprint/links/models.py
"""
Data models for link discovery.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(slots=True)
class PageData:
    """Holds URL and content of a fetched page (text or binary)."""

    url: str
    content: Union[str, bytes]
