"""Cyclopts CLI entrypoint for checking and previewing the wiki theme.

The ``wiki`` console script defined here validates the site theme before a
build (``wiki check``) and renders the local guide pages with the theme
applied (``wiki preview``). Both commands use the built-in site theme unless
``--config`` points at a YAML theme file, and both exit with status 1 and a
message naming the offending field when the theme is invalid. An unreadable
or unparsable theme file exits the same way.

Examples
--------
Validate the built-in theme:

>>> from webdev_wiki.cli import main
>>> main()  # doctest: +SKIP

Preview the guides with an alternate theme:

>>> from webdev_wiki.cli import app
>>> app(
...     ["preview", "--config", "theme.yaml", "--output-dir", "dist"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from ._constants import DEFAULT_CONTENT_DIR, DEFAULT_OUTPUT_DIR
from .config import ThemeConfig, ThemeConfigError, load_theme_config
from .preview import PagePreviewBuilder
from .theme import get_theme_config

app = App(name="wiki", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


def _resolve_theme(config: Path | None) -> ThemeConfig:
    """Build the theme from ``config`` or the built-in values, failing fast.

    A missing file, unparsable YAML or an invalid theme is reported on stderr
    and exits with status 1.
    """
    try:
        if config is None:
            return get_theme_config()
        return load_theme_config(config)
    except (ThemeConfigError, FileNotFoundError, YAMLError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


@app.command(help="Validate the site theme and print its fields.")
def check(
    *,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to a YAML theme file", env_var="INPUT_CONFIG"),
    ] = None,
) -> None:
    """Validate the theme configuration and print the resolved values.

    Parameters
    ----------
    config : Path or None, optional
        YAML theme file; when ``None`` (default) the built-in site theme is
        checked.

    Raises
    ------
    SystemExit
        With status 1 when the theme is missing a required field or carries a
        malformed URL.
    """
    theme = _resolve_theme(config)
    print(f"logo: {theme.logo}")
    print(f"project_link: {theme.project_link or '(unset)'}")
    print(f"chat_link: {theme.chat_link or '(unset)'}")
    print(f"docs_repository_base: {theme.docs_repository_base}")


@app.command(help="Render the guide pages with the site theme applied.")
def preview(
    *,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to a YAML theme file", env_var="INPUT_CONFIG"),
    ] = None,
    content_dir: typ.Annotated[
        Path,
        Parameter(help="Directory holding Markdown pages", env_var="INPUT_CONTENT_DIR"),
    ] = DEFAULT_CONTENT_DIR,
    output_dir: typ.Annotated[
        Path,
        Parameter(help="Directory for rendered HTML", env_var="INPUT_OUTPUT_DIR"),
    ] = DEFAULT_OUTPUT_DIR,
    source_root: typ.Annotated[
        str,
        Parameter(
            help="Repository path of the content directory, used in edit links",
            env_var="INPUT_SOURCE_ROOT",
        ),
    ] = DEFAULT_CONTENT_DIR.as_posix(),
) -> None:
    """Render every content page and print the written paths."""
    theme = _resolve_theme(config)
    builder = PagePreviewBuilder(
        theme, content_dir, output_dir=output_dir, source_root=source_root
    )
    for path in builder.run():
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``wiki`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
