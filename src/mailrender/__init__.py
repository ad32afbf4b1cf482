# =============================================================================
# mailrender: Email Bodies for the Terminal
# =============================================================================
#
# mailrender turns HTML (or plain) email bodies into readable, colored,
# fixed-width terminal text. It is meant to sit behind mutt/neomutt as a
# display filter:
#
#   text/html; mailrender -i %s; copiousoutput
#
# Features:
#   - w3m rendering with an in-process markdown fallback
#   - Cleanup of flattened layout tables and invisible characters
#   - Boxed "Label:   value" tables, highlighted headers and titles
#   - Long tracking URL removal
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "mailrender"

from mailrender.rendering import RenderEngine, RenderError, render

__all__ = ["RenderEngine", "RenderError", "render", "__version__", "__app_name__"]
