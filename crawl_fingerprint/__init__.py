"""
crawl_fingerprint package initializer.
Defines package version and exposes the public helpers.
"""
__version__ = "0.1.0"

from crawl_fingerprint.canonical import OMITTED_HASH_FIELDS, canonicalize, decode_canonical
from crawl_fingerprint.exceptions import CrawlFingerprintError, InvalidConfig
from crawl_fingerprint.keys import KEY_LENGTH, generate_key, hash_content
from crawl_fingerprint.links.resolver import resolve_url
from crawl_fingerprint.logger import debug_browser, debug_request
from crawl_fingerprint.utils import delay

__all__ = [
    "OMITTED_HASH_FIELDS",
    "KEY_LENGTH",
    "CrawlFingerprintError",
    "InvalidConfig",
    "canonicalize",
    "decode_canonical",
    "generate_key",
    "hash_content",
    "resolve_url",
    "debug_request",
    "debug_browser",
    "delay",
]
