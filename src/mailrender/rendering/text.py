# =============================================================================
# Text-Based HTML Rendering
# =============================================================================
# Converts HTML emails to laid-out text in-process using inscriptis.
#
# inscriptis is a battle-tested HTML-to-text converter that handles:
#   - Complex table layouts (common in email HTML)
#   - Proper whitespace and line break handling
#   - Lists, headings, and other semantic elements
#
# Its output is already laid out like w3m's, so it gets the light cleanup
# and then the same layout/coloring pass.
# =============================================================================

import logging
import re
from dataclasses import dataclass

from inscriptis import get_text
from inscriptis.css_profiles import CSS_PROFILES
from inscriptis.model.config import ParserConfig

from mailrender.rendering.converter import OutputKind
from mailrender.rendering.errors import ConversionError

logger = logging.getLogger(__name__)


@dataclass
class TextRenderOptions:
    """
    Options for inscriptis rendering.

    Attributes:
        display_links: Append link targets after the link text.
        display_images: Show image alt text.
    """
    display_links: bool = False
    display_images: bool = False


class TextRenderer:
    """
    Renders HTML to plain text using inscriptis.

    Usage:
        >>> renderer = TextRenderer()
        >>> text = renderer.convert(html_content)
    """

    name = "inscriptis"
    output_kind = OutputKind.TEXT

    def __init__(self, options: TextRenderOptions | None = None) -> None:
        """
        Initialize the text renderer.

        Args:
            options: Rendering options.
        """
        self.options = options or TextRenderOptions()

        # Configure inscriptis
        self._config = ParserConfig(
            css=CSS_PROFILES['strict'],  # Better whitespace handling
            display_links=self.options.display_links,
            display_images=self.options.display_images,
            display_anchors=False,
        )

    def convert(self, html_content: str) -> str:
        """
        Convert HTML to laid-out text.

        Args:
            html_content: HTML content to render.

        Returns:
            Plain text with inscriptis' layout.

        Raises:
            ConversionError: If inscriptis fails on the document.
        """
        if not html_content or not html_content.strip():
            return ""

        html_content = preclean_html(html_content)

        try:
            text = get_text(html_content, self._config)
        except Exception as e:
            raise ConversionError(self.name, str(e) or type(e).__name__) from e

        # Trailing whitespace would widen table boxes for nothing
        return "\n".join(line.rstrip() for line in text.split("\n"))


def preclean_html(html: str) -> str:
    """Pre-clean HTML before parsing to remove problematic content."""
    # Remove IE conditional comments
    html = re.sub(r'<!--\[if[^\]]*\]>.*?<!\[endif\]-->', '', html, flags=re.DOTALL | re.IGNORECASE)
    html = re.sub(r'<!--\[if[^\]]*\]><!-->.*?<!--<!\[endif\]-->', '', html, flags=re.DOTALL | re.IGNORECASE)
    html = re.sub(r'<!\[if[^\]]*\]>.*?<!\[endif\]>', '', html, flags=re.DOTALL | re.IGNORECASE)

    # Remove style tags
    html = re.sub(r'<style[^>]*>.*?</style>', '', html, flags=re.DOTALL | re.IGNORECASE)

    # Remove script tags (shouldn't be in email but just in case)
    html = re.sub(r'<script[^>]*>.*?</script>', '', html, flags=re.DOTALL | re.IGNORECASE)

    # Remove XML/Office namespace tags
    html = re.sub(r'<\?xml[^>]*\?>', '', html, flags=re.IGNORECASE)
    html = re.sub(r'<o:[^>]*>.*?</o:[^>]*>', '', html, flags=re.DOTALL)
    html = re.sub(r'<v:[^>]*>.*?</v:[^>]*>', '', html, flags=re.DOTALL)

    return html
