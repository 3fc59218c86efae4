# File: crawl_fingerprint/utils.py
"""crawl_fingerprint.utils: вспомогательные функции планировщика."""

from __future__ import annotations

import asyncio
from typing import Sequence

__all__: Sequence[str] = ("delay",)


async def delay(milliseconds: float) -> None:
    """Ждёт указанное число миллисекунд."""
    await asyncio.sleep(max(milliseconds, 0) / 1000)
