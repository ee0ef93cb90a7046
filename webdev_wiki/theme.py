"""Theme values for the web-dev-wiki documentation site.

The site theme is authored as literal constants. :func:`get_theme_config`
builds a fresh, validated value on each call so the caller can construct it
once during startup and hand it to whatever renders pages.

Examples
--------
>>> from webdev_wiki.theme import get_theme_config
>>> theme = get_theme_config()
>>> theme.docs_repository_base
'https://github.com/shreyas-jadhav/web-dev-wiki/tree/main'
>>> theme.chat_link is None
True
"""

from __future__ import annotations

from .config import MarkupFragment, ThemeConfig, build_theme_config

SITE_LOGO = MarkupFragment("<span>My Project</span>")
PROJECT_LINK = "https://github.com/shreyas-jadhav/web-dev-wiki"
DOCS_REPOSITORY_BASE = "https://github.com/shreyas-jadhav/web-dev-wiki/tree/main"
# No community chat destination yet.
CHAT_LINK: str | None = None


def get_theme_config() -> ThemeConfig:
    """Return the fully populated site theme configuration."""
    return build_theme_config(
        logo=SITE_LOGO,
        project_link=PROJECT_LINK,
        chat_link=CHAT_LINK,
        docs_repository_base=DOCS_REPOSITORY_BASE,
    )


__all__ = ["get_theme_config"]
