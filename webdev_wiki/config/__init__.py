"""Build and validate the wiki theme configuration.

This subpackage defines the immutable :class:`ThemeConfig` value handed to the
documentation renderer (header logo, project and chat links, and the
repository base used for "edit this page" links). Values are validated at
construction, so a missing logo or a malformed URL fails at startup instead of
producing a broken page. :func:`build_theme_config` accepts loosely typed
keyword values and :func:`load_theme_config` reads the same fields from YAML.

Examples
--------
>>> from webdev_wiki.config import build_theme_config
>>> theme = build_theme_config(
...     logo="My Project",
...     docs_repository_base="https://github.com/example/repo/tree/main",
... )
>>> theme.logo
PlainText(text='My Project')
>>> theme.project_link is None
True
"""

from .loader import build_theme_config, load_theme_config
from .models import (
    LogoMarkup,
    MalformedURLError,
    MarkupFragment,
    MissingFieldError,
    PlainText,
    ThemeConfig,
    ThemeConfigError,
)

__all__ = [
    "LogoMarkup",
    "MalformedURLError",
    "MarkupFragment",
    "MissingFieldError",
    "PlainText",
    "ThemeConfig",
    "ThemeConfigError",
    "build_theme_config",
    "load_theme_config",
]
