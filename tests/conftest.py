# File: tests/conftest.py
import logging

import pytest

from crawl_fingerprint.links.models import PageData
from crawl_fingerprint.logger import LOGGER_NAME, disable_debug


@pytest.fixture(autouse=True)
def reset_logging():
    """
    Restore the quiet default logger state after each test:
    no handlers besides NullHandler, debug channels off.
    """
    yield
    disable_debug()
    lg = logging.getLogger(LOGGER_NAME)
    lg.handlers.clear()
    lg.addHandler(logging.NullHandler())
    lg.setLevel(logging.NOTSET)
    lg.propagate = True


@pytest.fixture()
def request_config() -> dict:
    """
    A request config mixing identity fields with operational ones.
    """
    return {
        "url": "https://example.com/products",
        "method": "GET",
        "extraHeaders": {"Accept-Language": "en", "X-Trace": "1"},
        "viewport": {"width": 1280, "height": 720},
        "maxDepth": 2,
        "obeyRobotsTxt": True,
        "skipRequestedRedirect": None,
        "cookies": [{"name": "sid", "value": "abc"}, {"name": "lang", "value": "en"}],
        "priority": 3,
        "retryCount": 5,
        "timeout": 30000,
        "waitUntil": "networkidle0",
    }


@pytest.fixture()
def mock_page_data() -> PageData:
    """
    Provide a simple PageData instance with HTML content.
    """
    html = (
        "<html><body>"
        '<a href="/link1">L1</a>'
        '<a href="http://external.com/x#top">X</a>'
        '<a href="#section">anchor</a>'
        '<a href="mailto:team@example.com">mail</a>'
        '<a href="javascript:void(0)">js</a>'
        '<iframe src="frames/widget.html"></iframe>'
        '<a href="/link1#again">L1 again</a>'
        "<a>no href</a>"
        "</body></html>"
    )
    return PageData(url="http://example.com/docs/index.html", content=html)
