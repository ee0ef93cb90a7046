"""Helpers for building per-page "edit this page" links."""

from __future__ import annotations

import posixpath
from pathlib import PurePosixPath


def build_edit_url(docs_repository_base: str, path: str | PurePosixPath) -> str:
    """Join the docs repository base and a repo-relative file path.

    Parameters
    ----------
    docs_repository_base : str
        Browsable tree URL such as ``https://github.com/org/repo/tree/main``.
    path : str or PurePosixPath
        File path relative to the repository root, for example
        ``content/guides/setup.md``.

    Returns
    -------
    str
        The base and path joined by exactly one slash.

    Examples
    --------
    >>> build_edit_url("https://github.com/o/r/tree/main/", "/content/index.md")
    'https://github.com/o/r/tree/main/content/index.md'
    """
    normalized = posixpath.normpath(str(path).replace("\\", "/")).lstrip("/")
    while normalized.startswith("../"):
        normalized = normalized[3:]
    base = docs_repository_base.rstrip("/")
    if normalized in (".", ""):
        return base
    return f"{base}/{normalized}"


def page_href(relative: PurePosixPath) -> str:
    """Return the output HTML filename for a content file path."""
    return relative.with_suffix(".html").as_posix()


def relative_href(target: str, current: str) -> str:
    """Return ``target`` as a link relative to the page at ``current``."""
    start = posixpath.dirname(current) or "."
    return posixpath.relpath(target, start=start)


__all__ = ["build_edit_url", "page_href", "relative_href"]
