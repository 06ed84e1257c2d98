"""Pytest configuration and fixtures for linkpreview tests."""

from unittest.mock import AsyncMock, patch

import pytest

from linkpreview.logging import set_log_level


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Set up logging for tests."""
    set_log_level("DEBUG")


@pytest.fixture
def og_html() -> bytes:
    """Page with a full set of Open Graph tags."""
    return b"""<!DOCTYPE html>
<html>
<head>
    <title>Plain Title</title>
    <meta name="description" content="Plain description">
    <meta property="og:title" content="OG Title">
    <meta property="og:description" content="OG <em>description</em>">
    <meta property="og:url" content="https://example.com/canonical">
    <meta property="og:image" content="https://example.com/image.png">
</head>
<body><h1>Heading</h1></body>
</html>"""


@pytest.fixture
def plain_html() -> bytes:
    """Page with only standard meta tags and structure."""
    return b"""<html>
<head>
    <title>Plain <b>Title</b></title>
    <meta name="description" content="Plain description">
</head>
<body><h1>Heading</h1><p>Body text</p></body>
</html>"""


@pytest.fixture
def heading_only_html() -> bytes:
    return b"<html><body><h1>Only <span>Heading</span></h1><h1>Second</h1></body></html>"


@pytest.fixture
def empty_html() -> bytes:
    return b"<html><head></head><body><p>Nothing here</p></body></html>"


@pytest.fixture
def mock_get_request():
    """Stand in for the network; set `return_value` to the body or None."""
    with patch("linkpreview.preview.get_request", new_callable=AsyncMock) as mock_get:
        yield mock_get
