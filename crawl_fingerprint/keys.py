# File: crawl_fingerprint/keys.py
"""
Content hashing and request-key generation.

Keys are the first :data:`KEY_LENGTH` hex characters of the MD5 digest of a
config's canonical form. Ten hex characters carry 40 bits, so two different
configs can collide; callers that must tell such configs apart compare the
canonical bytes as well.
"""
from __future__ import annotations

import hashlib
from typing import Any, Final, Optional, Sequence, Union

from crawl_fingerprint.canonical import canonicalize
from crawl_fingerprint.logger import DebugSink

__all__: Sequence[str] = ("KEY_LENGTH", "hash_content", "generate_key")

KEY_LENGTH: Final[int] = 10


def hash_content(src: Union[bytes, bytearray, str]) -> str:
    """Return the full 32-character lowercase MD5 hex digest of *src*.

    Text is hashed as UTF-8; lone surrogates are passed through as their
    UTF-8 byte pattern rather than rejected.
    """
    if isinstance(src, str):
        src = src.encode("utf-8", errors="surrogatepass")
    return hashlib.md5(src).hexdigest()


def generate_key(config: Any, *, debug: Optional[DebugSink] = None) -> str:
    """
    Build a short cache/deduplication key for a request config.

    Raises :class:`~crawl_fingerprint.exceptions.InvalidConfig` when the
    config holds values that cannot be serialized.
    """
    payload = canonicalize(config)
    key = hash_content(payload)[:KEY_LENGTH]
    if debug is not None:
        debug(f"Generated key {key} from {payload.decode('utf-8')}")
    return key
