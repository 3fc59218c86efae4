# File: crawl_fingerprint/exceptions.py
"""Исключения пакета crawl_fingerprint."""


class CrawlFingerprintError(Exception):
    """Base class for all errors raised by crawl_fingerprint."""


class InvalidConfig(CrawlFingerprintError, ValueError):
    """Request config cannot be serialized into a canonical form."""

    def __init__(self, message: str, path: str = "$") -> None:
        super().__init__(f"{message} (at {path})")
        self.path = path
