"""Render guide Markdown with syntax-highlighted code samples.

``fenced_code`` records each sample's language as a ``language-*`` class on
the emitted ``<pre><code>`` element. The renderer reads the language back
from that class and replaces the block with a Pygments-highlighted
``div.codehilite`` carrying a ``data-language`` attribute, so backtick and
tilde fences are tagged alike.
"""

from __future__ import annotations

import html
import re

from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

CODE_ELEMENT_PATTERN = re.compile(
    r'<pre><code(?: class="language-(?P<lang>[^"\s]+)")?>(?P<code>.*?)</code></pre>',
    re.DOTALL,
)
PLAIN_LANGUAGE = "text"


class HtmlContentRenderer:
    """Render guide Markdown into HTML with consistent code styling."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        self.pygments_style = pygments_style
        self._block_formatter = HtmlFormatter(style=pygments_style, nowrap=True)

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        formatter = HtmlFormatter(style=self.pygments_style, cssclass="codehilite")
        return formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render ``text`` into HTML, tagging each code block with its language."""
        if not text.strip():
            return ""
        md = Markdown(extensions=["fenced_code", "tables", "sane_lists"])
        return CODE_ELEMENT_PATTERN.sub(self._highlight_block, md.convert(text))

    def _highlight_block(self, match: re.Match[str]) -> str:
        language = match.group("lang") or PLAIN_LANGUAGE
        source = html.unescape(match.group("code"))
        try:
            lexer = get_lexer_by_name(language)
        except ClassNotFound:
            lexer = TextLexer()
        spans = highlight(source, lexer, self._block_formatter)
        label = html.escape(language, quote=True)
        return f'<div class="codehilite" data-language="{label}"><pre>{spans}</pre></div>'


__all__ = ["HtmlContentRenderer"]
