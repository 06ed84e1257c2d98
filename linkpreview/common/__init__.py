"""Common utilities for link preview extraction."""

from . import http_utils
from . import text

__all__ = ["http_utils", "text"]
