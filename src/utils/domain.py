"""
Domain Utilities

Normalises visitor-entered URLs into the bare domain used for
personalisation, analytics and the leaderboard.
"""

import logging
import re
from typing import Optional
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.-]*://", re.I)


def normalize_domain(value: Optional[str]) -> Optional[str]:
    """
    Extract a lowercase domain from a URL or bare hostname.

    Strips scheme, credentials, port, path and a leading "www.".

    Args:
        value: URL or domain as entered by the visitor

    Returns:
        Normalised domain, or None for empty or unparseable input
    """
    if not value or not value.strip():
        return None

    raw = value.strip()
    if not _SCHEME_RE.match(raw):
        raw = f"http://{raw}"

    try:
        host = urlparse(raw).hostname or ""
    except ValueError:
        logger.debug(f"Unparseable domain: {value!r}")
        return None
    host = host.lower().rstrip(".")
    if host.startswith("www."):
        host = host[4:]

    return host or None


def is_valid_url(value: Optional[str]) -> bool:
    """True for an absolute http(s) URL with a host."""
    if not value:
        return False
    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.hostname)
