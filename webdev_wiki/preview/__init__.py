"""Preview how the documentation renderer consumes the site theme."""

from .links import build_edit_url
from .models import ContentPage, HeaderModel
from .page_builder import PagePreviewBuilder
from .renderer import HtmlContentRenderer

__all__ = [
    "ContentPage",
    "HeaderModel",
    "HtmlContentRenderer",
    "PagePreviewBuilder",
    "build_edit_url",
]
