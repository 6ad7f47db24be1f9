"""
Display helpers — human-readable labels for URLs.

Formatting problems never abort rendering: a URL that cannot be parsed
is shown as-is.
"""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)


def display_url(url: str) -> str:
    """``https://example.org/a/b.h`` → ``example.org/a/b.h``.

    Falls back to the raw value when the URL is malformed or has no
    host.
    """
    try:
        parts = urlsplit(url)
        host = parts.hostname
        port = parts.port
    except ValueError as e:
        logger.debug("Cannot format URL %r: %s", url, e)
        return url

    if not host:
        return url

    label = f"{host}:{port}" if port else host
    path = parts.path.rstrip("/")
    return f"{label}{path}" if path else label


def link_label(label: str, url: str) -> str:
    """``label (host/path)`` for terminal output."""
    return f"{label} ({display_url(url)})"
