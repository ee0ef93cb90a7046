"""Build theme configuration values from keyword arguments or YAML files."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import _optional_str
from .models import LogoMarkup, MarkupFragment, PlainText, ThemeConfig, ThemeConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path


def build_theme_config(
    *,
    logo: LogoMarkup | str | None,
    docs_repository_base: str | None,
    project_link: str | None = None,
    chat_link: str | None = None,
) -> ThemeConfig:
    """Construct a validated :class:`ThemeConfig` from loosely typed values.

    Bare strings passed as ``logo`` become :class:`PlainText` labels.
    Surrounding whitespace is stripped from every value and blank optional
    links are treated as unset.

    Raises
    ------
    MissingFieldError
        If ``logo`` or ``docs_repository_base`` is missing or empty.
    MalformedURLError
        If a supplied link is not an absolute ``http(s)`` URL.
    """
    return ThemeConfig(
        logo=_coerce_logo(logo),  # type: ignore[arg-type]
        docs_repository_base=_optional_str(docs_repository_base),  # type: ignore[arg-type]
        project_link=_optional_str(project_link),
        chat_link=_optional_str(chat_link),
    )


def load_theme_config(path: Path) -> ThemeConfig:
    """Load the YAML file describing the site theme.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML theme file (for example, ``theme.yaml``).

    Returns
    -------
    ThemeConfig
        Validated, immutable theme configuration.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    ThemeConfigError
        If the document or its ``theme`` section is not a mapping, or a field
        is missing or malformed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from webdev_wiki.config import load_theme_config
    >>> theme = load_theme_config(Path("theme.yaml"))  # doctest: +SKIP
    >>> theme.docs_repository_base  # doctest: +SKIP
    'https://github.com/example/repo/tree/main'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ThemeConfigError(msg)

    theme_raw = loaded.get("theme")
    if not isinstance(theme_raw, dict):
        msg = "Configuration must define a 'theme' mapping."
        raise ThemeConfigError(msg, field="theme")

    return build_theme_config(
        logo=_parse_logo(theme_raw.get("logo")),
        docs_repository_base=theme_raw.get("docs_repository_base"),
        project_link=_parse_link(theme_raw.get("project"), field="project"),
        chat_link=_parse_link(theme_raw.get("chat"), field="chat"),
    )


def _coerce_logo(value: LogoMarkup | str | None) -> LogoMarkup | None:
    """Wrap bare strings as plain-text labels, passing variants through."""
    match value:
        case PlainText() | MarkupFragment():
            return value
        case str() as text:
            return PlainText(text.strip())
        case _:
            return None


def _parse_logo(value: object) -> LogoMarkup | str | None:
    """Return the logo variant described by a YAML scalar or mapping."""
    match value:
        case None | str():
            return value
        case dict():
            has_text = "text" in value
            has_markup = "markup" in value
            if has_text and has_markup:
                msg = "Theme field 'logo' must define either 'text' or 'markup', not both."
                raise ThemeConfigError(msg, field="logo")
            if has_markup:
                return MarkupFragment(str(value["markup"] or "").strip())
            return PlainText(str(value.get("text") or "").strip())
        case _:
            msg = "Theme field 'logo' must be a string or a mapping."
            raise ThemeConfigError(msg, field="logo")


def _parse_link(value: object, *, field: str) -> str | None:
    """Return the ``link`` entry of a ``project``/``chat`` block, if any."""
    match value:
        case None:
            return None
        case str():
            return value
        case dict():
            link = value.get("link")
            return None if link is None else str(link)
        case _:
            msg = f"Theme field '{field}' must be a URL or a mapping with 'link'."
            raise ThemeConfigError(msg, field=field)


__all__ = ["build_theme_config", "load_theme_config"]
