# =============================================================================
# mailrender Core Module
# =============================================================================
# Plain value types shared by the rendering pipeline. Nothing in here does
# I/O or imports third-party code, so it can be used from anywhere.
#
#   - ContentKind / ClassifiedContent: HTML vs. plain text sniffing
# =============================================================================

from mailrender.core.content import ClassifiedContent, ContentKind, classify_content

__all__ = [
    "ClassifiedContent",
    "ContentKind",
    "classify_content",
]
