# =============================================================================
# Rendering Engine
# =============================================================================
# Coordinates email body rendering across the different strategies.
#
# This is the main entry point for the rendering module. It:
#   - Sniffs whether the body is HTML or plain text
#   - Tries the HTML converters in order until one succeeds
#   - Runs the cleanup pipeline that matches the converter's output
#   - Applies the layout/coloring pass
#
# Plain text bodies skip all of that: only long URLs are stripped.
# =============================================================================

import logging
from typing import TYPE_CHECKING

from mailrender.core import classify_content
from mailrender.rendering.cleanup import clean_markdown, clean_text
from mailrender.rendering.converter import HTMLConverter, OutputKind
from mailrender.rendering.errors import ConversionError, RenderError
from mailrender.rendering.external import W3mRenderer, W3mRenderOptions
from mailrender.rendering.layout import colorize
from mailrender.rendering.markdown import MarkdownRenderer
from mailrender.rendering.text import TextRenderer
from mailrender.rendering.urls import strip_long_urls

if TYPE_CHECKING:
    from mailrender.config import RenderingConfig

logger = logging.getLogger(__name__)


def build_converter(name: str, config: "RenderingConfig") -> HTMLConverter:
    """
    Create the converter registered under a strategy name.

    Args:
        name: "w3m", "inscriptis" or "markdown".
        config: Rendering configuration (columns, w3m command, ...).

    Raises:
        ValueError: If the name is unknown.
    """
    if name == "w3m":
        return W3mRenderer(W3mRenderOptions(
            command=config.w3m_command,
            columns=config.columns,
            timeout=config.w3m_timeout or None,
        ))
    if name == "inscriptis":
        return TextRenderer()
    if name == "markdown":
        return MarkdownRenderer()
    raise ValueError(f"Unknown rendering strategy: {name!r}")


class RenderEngine:
    """
    Renders email bodies for terminal display.

    HTML converters are tried in the order given; the first success wins.
    If every converter fails, RenderError is raised with each failure
    attached.

    Usage:
        >>> engine = RenderEngine()
        >>> print(engine.render(body, strip_urls=True))

    Attributes:
        converters: HTML conversion strategies, in order of preference.
    """

    def __init__(
        self,
        converters: list[HTMLConverter] | None = None,
        *,
        config: "RenderingConfig | None" = None,
    ) -> None:
        """
        Initialize the rendering engine.

        Args:
            converters: Explicit strategy list. Takes precedence over config.
            config: Rendering configuration used to build the strategy list
                    when none is given. Defaults to RenderingConfig().
        """
        if converters is None:
            if config is None:
                from mailrender.config import RenderingConfig
                config = RenderingConfig()
            converters = [build_converter(name, config) for name in config.strategies]

        if not converters:
            raise ValueError("At least one HTML conversion strategy is required")

        self.converters = list(converters)

    def render(self, content: str, strip_urls: bool = True) -> str:
        """
        Render an email body for terminal display.

        Args:
            content: Raw body (HTML or plain text).
            strip_urls: Remove long URLs (and, for markdown, link targets).

        Returns:
            ANSI-decorated text, or "" for empty input.

        Raises:
            RenderError: If the body is HTML and no converter succeeded.
        """
        if not content.strip():
            return ""

        classified = classify_content(content)
        logger.debug(f"Classified content as {classified.kind.name} ({len(content)} chars)")

        if not classified.is_html:
            return self._render_plain(classified.text, strip_urls)
        return self._render_html(classified.text, strip_urls)

    def _render_plain(self, text: str, strip_urls: bool) -> str:
        """Plain text only gets long URLs removed."""
        if strip_urls:
            text = strip_long_urls(text)
        return text.strip()

    def _render_html(self, html: str, strip_urls: bool) -> str:
        """Convert, clean up and colorize an HTML body."""
        converter, converted = self._convert(html)
        converted = converted.replace("\r\n", "\n").replace("\r", "\n")

        if converter.output_kind is OutputKind.MARKDOWN:
            cleaned = clean_markdown(converted, strip_urls)
        else:
            cleaned = clean_text(converted, strip_urls)

        logger.debug(
            f"{converter.name}: {len(converted)} chars converted, {len(cleaned)} after cleanup"
        )
        return colorize(cleaned).strip()

    def _convert(self, html: str) -> tuple[HTMLConverter, str]:
        """
        Run the converters in order and return the first success.

        Raises:
            RenderError: If all of them failed.
        """
        failures: list[ConversionError] = []

        for converter in self.converters:
            try:
                text = converter.convert(html)
            except ConversionError as e:
                logger.info(f"HTML conversion with {converter.name} failed, trying next: {e}")
                failures.append(e)
                continue
            logger.debug(f"Converted HTML with {converter.name}")
            return converter, text

        error = RenderError(failures)
        logger.error(str(error))
        raise error from failures[-1]


def render(content: str, strip_urls: bool = True) -> str:
    """
    Render an email body with the default strategy order (w3m, markdown).

    See RenderEngine.render().
    """
    return RenderEngine().render(content, strip_urls)
