# =============================================================================
# Rendering Module
# =============================================================================
# HTML and plain-text email bodies → readable, colored terminal text.
#
# HTML conversion strategies (tried in configured order):
#   - w3m:        external text browser, best with layout tables
#   - markdown:   markdownify over BeautifulSoup/lxml, always available
#   - inscriptis: in-process laid-out text, opt-in
#
# The rendering pipeline:
#   1. Sniff HTML vs. plain text
#   2. Convert HTML with the first strategy that works
#   3. Clean up converter artifacts (markdown or text pipeline)
#   4. Detect tables, headers and section titles; apply ANSI styling
# =============================================================================

from mailrender.rendering.engine import RenderEngine, render
from mailrender.rendering.errors import ConversionError, MailRenderError, RenderError

__all__ = [
    "ConversionError",
    "MailRenderError",
    "RenderEngine",
    "RenderError",
    "render",
]
