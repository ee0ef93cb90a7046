"""Render local guide pages with the site theme applied.

This module shows how the documentation renderer consumes a
:class:`~webdev_wiki.config.ThemeConfig`: the logo and project/chat links fill
the header, every Markdown file under the content directory becomes a sidebar
entry, and each page carries an "Edit this page" link built from
``docs_repository_base``. The main entry point is :class:`PagePreviewBuilder`.

Example
-------
>>> from pathlib import Path
>>> from webdev_wiki.preview import PagePreviewBuilder
>>> from webdev_wiki.theme import get_theme_config
>>> builder = PagePreviewBuilder(
...     get_theme_config(), Path("content"), output_dir=Path("public")
... )  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
[PosixPath('public/index.html'), PosixPath('public/guides/setup.html')]
"""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path, PurePosixPath

from jinja2 import Environment, FileSystemLoader, select_autoescape

from webdev_wiki.preview.links import build_edit_url, page_href, relative_href
from webdev_wiki.preview.models import ContentPage, HeaderModel
from webdev_wiki.preview.renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from webdev_wiki.config import ThemeConfig

TITLE_PATTERN = re.compile(r"^#[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$", re.MULTILINE)
FENCE_PATTERN = re.compile(r"^[ ]{0,3}(?:`{3,}|~{3,})", re.MULTILINE)
INDEX_FILENAME = "index.md"


class PagePreviewBuilder:
    """Render every content page into themed HTML."""

    def __init__(
        self,
        theme: ThemeConfig,
        content_dir: Path,
        *,
        output_dir: Path,
        source_root: str = "content",
        templates_dir: Path | None = None,
        pygments_style: str = "monokai",
    ) -> None:
        """Initialize the builder with the theme and template environment.

        Parameters
        ----------
        theme : ThemeConfig
            Validated theme supplying header values and the edit-link base.
        content_dir : Path
            Directory containing the Markdown guide pages.
        output_dir : Path
            Directory that receives the rendered HTML.
        source_root : str, optional
            Repository path of ``content_dir``; prefixes every edit link.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        pygments_style : str, optional
            Pygments style for highlighted code samples.
        """
        self.theme = theme
        self.content_dir = content_dir
        self.output_dir = output_dir
        self.source_root = source_root.strip("/")
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.renderer = HtmlContentRenderer(pygments_style)
        self.header = HeaderModel.from_theme(theme)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("page_preview.jinja")

    def run(self) -> list[Path]:
        """Render each discovered page and return the written paths.

        Raises
        ------
        RuntimeError
            If the content directory holds no Markdown pages.
        """
        pages = self.discover_pages()
        if not pages:
            msg = f"No Markdown pages were found under '{self.content_dir}'."
            raise RuntimeError(msg)

        written: list[Path] = []
        for page in pages:
            current = page_href(page.relative)
            context = {
                "header": self.header,
                "page": page,
                "html_title": f"{page.title} | {self.header.logo_html.striptags()}",
                "body_html": self.renderer.markdown(page.markdown),
                "nav_entries": self._build_nav(pages, current),
                "edit_url": self.edit_url(page),
                "pygments_css": self.renderer.stylesheet,
            }
            html = self.template.render(**context)
            if not html.endswith("\n"):
                html += "\n"
            output_path = self.output_dir / current
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(html, encoding="utf-8")
            written.append(output_path)
        return written

    def discover_pages(self) -> list[ContentPage]:
        """Return content pages ordered with index pages first."""
        if not self.content_dir.is_dir():
            msg = f"Content directory '{self.content_dir}' not found."
            raise FileNotFoundError(msg)
        sources = sorted(
            (path for path in self.content_dir.rglob("*.md") if path.is_file()),
            key=lambda path: _page_sort_key(self._relative(path)),
        )
        return [self._load_page(path) for path in sources]

    def edit_url(self, page: ContentPage) -> str:
        """Return the "edit this page" URL for ``page``."""
        repo_path = PurePosixPath(self.source_root) / page.relative
        return build_edit_url(self.theme.docs_repository_base, repo_path)

    def _relative(self, path: Path) -> PurePosixPath:
        return PurePosixPath(path.relative_to(self.content_dir).as_posix())

    def _load_page(self, path: Path) -> ContentPage:
        text = path.read_text(encoding="utf-8")
        # Headings inside fenced samples (shell comments) are not titles.
        fence = FENCE_PATTERN.search(text)
        match = TITLE_PATTERN.search(text, 0, fence.start() if fence else len(text))
        if match:
            title = match.group(1).strip()
            body = (text[: match.start()] + text[match.end() :]).strip()
        else:
            title = path.stem.replace("-", " ").replace("_", " ").title()
            body = text.strip()
        return ContentPage(
            source=path,
            relative=self._relative(path),
            title=title,
            markdown=body,
        )

    @staticmethod
    def _build_nav(
        pages: list[ContentPage], current: str
    ) -> list[dict[str, typ.Any]]:
        """Build sidebar entries with hrefs relative to the current page."""
        entries: list[dict[str, typ.Any]] = []
        for page in pages:
            target = page_href(page.relative)
            entries.append(
                {
                    "label": page.title,
                    "href": relative_href(target, current),
                    "depth": len(page.relative.parts) - 1,
                    "is_current": target == current,
                }
            )
        return entries


def _page_sort_key(relative: PurePosixPath) -> tuple[str, ...]:
    """Sort index pages ahead of their siblings, then alphabetically."""
    return tuple("" if part == INDEX_FILENAME else part.lower() for part in relative.parts)


__all__ = ["PagePreviewBuilder"]
