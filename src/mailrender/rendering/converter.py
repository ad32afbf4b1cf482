# =============================================================================
# HTML Converter Interface
# =============================================================================
# Every HTML→text strategy exposes the same small surface so the engine can
# try them in order:
#
#   name         - short identifier used in config and error messages
#   output_kind  - TEXT (already laid out) or MARKDOWN (needs full cleanup)
#   convert()    - HTML in, text out; raises ConversionError on failure
# =============================================================================

from enum import Enum, auto
from typing import Protocol


class OutputKind(Enum):
    """What a converter produces, which decides the cleanup it gets."""
    TEXT = auto()       # Laid-out text (w3m, inscriptis)
    MARKDOWN = auto()   # Markdown (markdownify)


class HTMLConverter(Protocol):
    """Structural type for HTML conversion strategies."""

    name: str
    output_kind: OutputKind

    def convert(self, html: str) -> str:
        ...
