"""Utility helpers shared by the theme configuration models and loader."""

from __future__ import annotations

from urllib.parse import urlsplit

URL_SCHEMES = frozenset({"http", "https"})


def _is_absolute_url(value: object) -> bool:
    """Return True when ``value`` is an absolute http(s) URL with a host.

    Whitespace anywhere in ``value``, including padding, makes it malformed.
    """
    if not isinstance(value, str):
        return False
    if not value or any(char.isspace() for char in value):
        return False
    try:
        parsed = urlsplit(value)
        hostname = parsed.hostname
    except ValueError:
        return False
    return parsed.scheme.lower() in URL_SCHEMES and bool(hostname)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


__all__ = ["URL_SCHEMES", "_is_absolute_url", "_optional_str"]
