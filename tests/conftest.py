"""
pytest configuration and fixtures.
"""

from datetime import datetime

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from httpcommon import Headers, HeaderDefaults


@pytest.fixture
def known_datetime() -> datetime:
    """A fixed naive UTC timestamp: Thursday 2 May 2013, 13:45:07."""
    return datetime(2013, 5, 2, 13, 45, 7)


@pytest.fixture
def cookie_headers() -> Headers:
    """Headers with one Content-Type and two Set-Cookie fields."""
    headers = Headers()
    headers["Content-Type"] = "text/html"
    headers["Set-Cookie"] = "user=me;"
    headers["Set-Cookie"] = "pass=secret;"
    return headers


@pytest.fixture
def custom_defaults() -> HeaderDefaults:
    """Non-default header configuration."""
    return HeaderDefaults(
        server_name="TestServer/0.1",
        content_type="application/json",
        content_language="fr",
    )
