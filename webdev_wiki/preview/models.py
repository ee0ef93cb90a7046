"""Shared dataclasses used by the theme preview pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from markupsafe import Markup, escape

from webdev_wiki.config import MarkupFragment

if typ.TYPE_CHECKING:
    from pathlib import Path, PurePosixPath

    from webdev_wiki.config import ThemeConfig


@dc.dataclass(frozen=True, slots=True)
class HeaderModel:
    """Values the header template needs from the theme.

    Attributes
    ----------
    logo_html : Markup
        Logo label, escaped for plain text and passed through for markup
        fragments.
    project_link : str | None
        Repository URL rendered as the project icon, if configured.
    chat_link : str | None
        Chat URL rendered as the chat icon, if configured.
    """

    logo_html: Markup
    project_link: str | None
    chat_link: str | None

    @classmethod
    def from_theme(cls, theme: ThemeConfig) -> HeaderModel:
        """Build the header model for ``theme``."""
        if isinstance(theme.logo, MarkupFragment):
            logo_html = Markup(theme.logo.markup)  # noqa: S704 - trusted config markup
        else:
            logo_html = escape(theme.logo.text)
        return cls(
            logo_html=logo_html,
            project_link=theme.project_link,
            chat_link=theme.chat_link,
        )


@dc.dataclass(slots=True)
class ContentPage:
    """A Markdown content file discovered under the content directory.

    Attributes
    ----------
    source : Path
        Absolute path to the Markdown file.
    relative : PurePosixPath
        Path relative to the content directory.
    title : str
        First ``#`` heading, or the file stem title-cased.
    markdown : str
        Markdown body with the title heading removed.
    """

    source: Path
    relative: PurePosixPath
    title: str
    markdown: str


__all__ = ["ContentPage", "HeaderModel"]
