"""HTTPS URL validation."""

from __future__ import annotations

from urllib.parse import urlsplit


def is_https_url(url: object) -> bool:
    """Whether *url* uses the ``https`` scheme and names a host."""
    if not isinstance(url, str):
        return False
    try:
        parsed = urlsplit(url)
        hostname = parsed.hostname
    except ValueError:
        return False
    return parsed.scheme == "https" and bool(hostname)
