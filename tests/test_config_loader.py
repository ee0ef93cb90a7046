"""Unit tests for loading the theme configuration from YAML."""

from __future__ import annotations

from pathlib import Path

import pytest

from webdev_wiki.config import (
    MalformedURLError,
    MarkupFragment,
    MissingFieldError,
    PlainText,
    ThemeConfigError,
    load_theme_config,
)
from webdev_wiki.theme import get_theme_config

REPO_ROOT = Path(__file__).resolve().parents[1]


def _write_theme(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "theme.yaml"
    path.write_text(body.strip() + "\n", encoding="utf-8")
    return path


def test_loads_nested_project_and_chat_links(tmp_path: Path) -> None:
    path = _write_theme(
        tmp_path,
        """
theme:
  logo:
    markup: "<strong>Wiki</strong>"
  project:
    link: https://github.com/example/repo
  chat:
    link: https://discord.com
  docs_repository_base: https://github.com/example/repo/tree/main
""",
    )
    theme = load_theme_config(path)
    assert theme.logo == MarkupFragment("<strong>Wiki</strong>"), (
        f"expected markup logo, got {theme.logo!r}"
    )
    assert theme.project_link == "https://github.com/example/repo", (
        f"unexpected project link {theme.project_link!r}"
    )
    assert theme.chat_link == "https://discord.com", (
        f"unexpected chat link {theme.chat_link!r}"
    )


def test_bare_string_logo_is_plain_text(tmp_path: Path) -> None:
    path = _write_theme(
        tmp_path,
        """
theme:
  logo: My Project
  docs_repository_base: https://github.com/example/repo/tree/main
""",
    )
    theme = load_theme_config(path)
    assert theme.logo == PlainText("My Project"), (
        f"expected plain-text logo, got {theme.logo!r}"
    )
    assert theme.project_link is None, "project link should be optional"
    assert theme.chat_link is None, "chat link should be optional"


def test_bundled_theme_file_matches_site_theme() -> None:
    theme = load_theme_config(REPO_ROOT / "config" / "theme.yaml")
    assert theme == get_theme_config(), (
        "expected config/theme.yaml to describe the built-in site theme"
    )


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_theme_config(tmp_path / "absent.yaml")


def test_missing_theme_section_raises(tmp_path: Path) -> None:
    path = _write_theme(tmp_path, "site: {}")
    with pytest.raises(ThemeConfigError) as excinfo:
        load_theme_config(path)
    assert excinfo.value.field == "theme", (
        f"expected error to name 'theme', got {excinfo.value.field!r}"
    )


def test_non_mapping_document_raises(tmp_path: Path) -> None:
    path = _write_theme(tmp_path, "- just\n- a list")
    with pytest.raises(ThemeConfigError):
        load_theme_config(path)


def test_missing_logo_raises(tmp_path: Path) -> None:
    path = _write_theme(
        tmp_path,
        """
theme:
  docs_repository_base: https://github.com/example/repo/tree/main
""",
    )
    with pytest.raises(MissingFieldError) as excinfo:
        load_theme_config(path)
    assert excinfo.value.field == "logo", (
        f"expected error to name 'logo', got {excinfo.value.field!r}"
    )


def test_logo_with_text_and_markup_raises(tmp_path: Path) -> None:
    path = _write_theme(
        tmp_path,
        """
theme:
  logo:
    text: Wiki
    markup: "<span>Wiki</span>"
  docs_repository_base: https://github.com/example/repo/tree/main
""",
    )
    with pytest.raises(ThemeConfigError) as excinfo:
        load_theme_config(path)
    assert excinfo.value.field == "logo", (
        f"expected error to name 'logo', got {excinfo.value.field!r}"
    )


def test_malformed_project_link_raises(tmp_path: Path) -> None:
    path = _write_theme(
        tmp_path,
        """
theme:
  logo: Wiki
  project:
    link: example/repo
  docs_repository_base: https://github.com/example/repo/tree/main
""",
    )
    with pytest.raises(MalformedURLError) as excinfo:
        load_theme_config(path)
    assert excinfo.value.field == "project_link", (
        f"expected error to name 'project_link', got {excinfo.value.field!r}"
    )


def test_invalid_chat_block_raises(tmp_path: Path) -> None:
    path = _write_theme(
        tmp_path,
        """
theme:
  logo: Wiki
  chat: [https://discord.com]
  docs_repository_base: https://github.com/example/repo/tree/main
""",
    )
    with pytest.raises(ThemeConfigError) as excinfo:
        load_theme_config(path)
    assert excinfo.value.field == "chat", (
        f"expected error to name 'chat', got {excinfo.value.field!r}"
    )
