# File: tests/test_utils.py
import time

import pytest

from crawl_fingerprint.utils import delay


@pytest.mark.asyncio()
async def test_delay_waits_at_least_given_time():
    start = time.monotonic()
    await delay(50)
    assert time.monotonic() - start >= 0.045


@pytest.mark.asyncio()
async def test_delay_zero_and_negative_return_immediately():
    start = time.monotonic()
    await delay(0)
    await delay(-10)
    assert time.monotonic() - start < 0.5
