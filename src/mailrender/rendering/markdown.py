# =============================================================================
# HTML → Markdown Rendering
# =============================================================================
# In-process fallback for when no text browser is installed. The document
# is parsed with BeautifulSoup (lxml backend), stripped of elements that
# only carry styling or code, and handed to markdownify.
#
# markdownify keeps tables as pipe tables, which is where most of the mess
# in cleanup.py comes from: email layouts nest tables several levels deep.
# =============================================================================

import logging
from dataclasses import dataclass, field

from bs4 import BeautifulSoup
from markdownify import ATX, MarkdownConverter

from mailrender.rendering.converter import OutputKind
from mailrender.rendering.errors import ConversionError

logger = logging.getLogger(__name__)


@dataclass
class MarkdownRenderOptions:
    """
    Options for markdown rendering.

    Attributes:
        parser: BeautifulSoup tree builder.
        skip_elements: Tags removed (with their content) before conversion.
    """
    parser: str = "lxml"
    skip_elements: list[str] = field(
        default_factory=lambda: ["script", "style", "head", "noscript"]
    )


class MarkdownRenderer:
    """
    Renders HTML to markdown using markdownify.

    Usage:
        >>> renderer = MarkdownRenderer()
        >>> md = renderer.convert("<html><body><h1>Hi</h1></body></html>")
    """

    name = "markdown"
    output_kind = OutputKind.MARKDOWN

    def __init__(self, options: MarkdownRenderOptions | None = None) -> None:
        self.options = options or MarkdownRenderOptions()
        self._converter = MarkdownConverter(heading_style=ATX, bullets="-")

    def convert(self, html: str) -> str:
        """
        Convert HTML to markdown.

        Raises:
            ConversionError: If parsing or conversion fails.
        """
        try:
            soup = BeautifulSoup(html, self.options.parser)
            for element in soup(self.options.skip_elements):
                element.decompose()
            return self._converter.convert_soup(soup)
        except Exception as e:
            raise ConversionError(self.name, str(e) or type(e).__name__) from e
