"""Typed dataclasses describing the wiki theme configuration."""

from __future__ import annotations

import dataclasses as dc

from .helpers import _is_absolute_url


class ThemeConfigError(ValueError):
    """Raised when the theme configuration is invalid or incomplete."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class MissingFieldError(ThemeConfigError):
    """Raised when a required theme field is absent or empty."""


class MalformedURLError(ThemeConfigError):
    """Raised when a theme link is present but not an absolute URL."""


@dc.dataclass(frozen=True, slots=True)
class PlainText:
    """Header label rendered as escaped text."""

    text: str

    def __str__(self) -> str:
        return self.text

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()


@dc.dataclass(frozen=True, slots=True)
class MarkupFragment:
    """Header label rendered verbatim as trusted markup (icon plus text)."""

    markup: str

    def __str__(self) -> str:
        return self.markup

    @property
    def is_empty(self) -> bool:
        return not self.markup.strip()


LogoMarkup = PlainText | MarkupFragment


@dc.dataclass(frozen=True, slots=True)
class ThemeConfig:
    """Presentation and navigation parameters handed to the docs renderer.

    Attributes
    ----------
    logo : PlainText | MarkupFragment
        Label shown in the site header. Required.
    docs_repository_base : str
        Browsable tree URL used to build per-page "edit this page" links.
        Required.
    project_link : str, optional
        Source repository URL shown as the project icon.
    chat_link : str, optional
        Community chat URL. Unset unless explicitly configured.

    Raises
    ------
    MissingFieldError
        If ``logo`` or ``docs_repository_base`` is missing or empty.
    MalformedURLError
        If any link is present but not an absolute ``http(s)`` URL.
    """

    logo: LogoMarkup
    docs_repository_base: str
    project_link: str | None = None
    chat_link: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.logo, PlainText | MarkupFragment) or self.logo.is_empty:
            msg = "Theme field 'logo' is required and must not be empty."
            raise MissingFieldError(msg, field="logo")
        if not self.docs_repository_base or not self.docs_repository_base.strip():
            msg = "Theme field 'docs_repository_base' is required."
            raise MissingFieldError(msg, field="docs_repository_base")
        for name in ("docs_repository_base", "project_link", "chat_link"):
            value = getattr(self, name)
            if value is not None and not _is_absolute_url(value):
                msg = f"Theme field '{name}' must be an absolute URL, got {value!r}."
                raise MalformedURLError(msg, field=name)


__all__ = [
    "LogoMarkup",
    "MalformedURLError",
    "MarkupFragment",
    "MissingFieldError",
    "PlainText",
    "ThemeConfig",
    "ThemeConfigError",
]
