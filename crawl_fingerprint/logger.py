# === FILE: crawl_fingerprint/logger.py ===
"""Project-wide logging configuration for **crawl_fingerprint**.

Highlights
----------
* Unified format for console and optional file output (with rotation).
* Single, importable instance :data:`logger` – simply::

      from crawl_fingerprint.logger import logger
      logger.info("Key generated")
* Re‑configurable at runtime via :func:`configure`.
* Two debug channels, ``request`` and ``browser``, silent until enabled
  with :func:`enable_debug`.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable, Dict, Final, Iterable, Optional, TextIO, Union

# --------------------------------------------------------------------------- #
# Constants & basic types                                                     #
# --------------------------------------------------------------------------- #

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "CrawlFingerprint"
DEBUG_CHANNELS: Final[tuple[str, ...]] = ("request", "browser")

_LevelT = Union[int, str]

#: Anything accepting a single message string, e.g. a :class:`DebugChannel`.
DebugSink = Callable[[str], None]


# --------------------------------------------------------------------------- #
# Helper builders                                                             #
# --------------------------------------------------------------------------- #


def _console_handler(fmt: str, stream: Optional[TextIO] = None) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout if stream is None else stream)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(file: Path | str, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """(Re)configure the global project logger.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Path to a logfile. *None* → console‑only output.
    log_format
        Format string for :class:`logging.Formatter`.
    replace_handlers
        *True* – remove existing handlers; *False* – just append new one(s).
    stream
        Console stream; *None* → :data:`sys.stdout`.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)

    if replace_handlers:
        lg.handlers.clear()

    lg.addHandler(_console_handler(log_format, stream))

    if log_file is not None:
        lg.addHandler(_file_handler(log_file, log_format))

    lg.propagate = False
    return lg


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Shortcut used by the CLI: configure and replace existing handlers."""
    return configure(
        level=level,
        log_file=log_file,
        log_format=log_format,
        replace_handlers=True,
        stream=stream,
    )


class DebugChannel:
    """Named one-way debug sink, a no-op until enabled.

    Messages go to the ``CrawlFingerprint.<name>`` logger at DEBUG level.
    """

    __slots__ = ("name", "enabled", "logger")

    def __init__(self, name: str, *, enabled: bool = False) -> None:
        self.name = name
        self.enabled = enabled
        self.logger = logging.getLogger(f"{LOGGER_NAME}.{name}")

    def __call__(self, msg: str) -> None:
        if self.enabled:
            self.logger.debug(msg)

    def __repr__(self) -> str:
        state = "on" if self.enabled else "off"
        return f"DebugChannel({self.name!r}, {state})"


# --------------------------------------------------------------------------- #
# Ready‑to‑use instances                                                      #
# --------------------------------------------------------------------------- #

logger: logging.Logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_channels: Dict[str, DebugChannel] = {name: DebugChannel(name) for name in DEBUG_CHANNELS}

debug_request: DebugChannel = _channels["request"]
debug_browser: DebugChannel = _channels["browser"]


def get_channel(name: str) -> DebugChannel:
    try:
        return _channels[name]
    except KeyError:
        raise ValueError(
            f"Unknown debug channel {name!r}; expected one of {', '.join(DEBUG_CHANNELS)}"
        ) from None


def enable_debug(channels: Iterable[str]) -> None:
    """Switch on the given channels.

    Channel loggers get their own DEBUG level so enabling them does not make
    the rest of the project logger verbose.
    """
    for name in channels:
        channel = get_channel(name)
        channel.enabled = True
        channel.logger.setLevel(logging.DEBUG)


def disable_debug(channels: Optional[Iterable[str]] = None) -> None:
    """Switch channels back to no-op; all of them when *channels* is None."""
    names = DEBUG_CHANNELS if channels is None else channels
    for name in names:
        get_channel(name).enabled = False


__all__ = [
    "logger",
    "configure",
    "init_logging",
    "DebugChannel",
    "DebugSink",
    "debug_request",
    "debug_browser",
    "get_channel",
    "enable_debug",
    "disable_debug",
]
