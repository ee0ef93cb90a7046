"""Theme configuration and preview tooling for the web-dev-wiki docs site.

The documentation renderer reads a single immutable theme value (header logo,
project and chat links, and the repository base for "edit this page" links).
This package builds and validates that value and renders a local preview of
the guide pages with it applied.

Exports
-------
- ``get_theme_config``: Build the site's theme configuration.
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from webdev_wiki import get_theme_config
>>> get_theme_config() == get_theme_config()
True
"""

from __future__ import annotations

from .cli import app, main
from .theme import get_theme_config

__all__ = ["app", "get_theme_config", "main"]
