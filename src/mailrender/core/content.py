# =============================================================================
# Content Classification
# =============================================================================
# Decides whether an email body is HTML or already-plain text.
#
# This is deliberately a cheap substring sniff, not a parser. Mail bodies
# that carry a full document (<html>, <body> or a doctype) are treated as
# HTML; anything else, including bare fragments like "<p>hi</p>", is passed
# through as plain text.
# =============================================================================

from dataclasses import dataclass
from enum import Enum, auto


class ContentKind(Enum):
    """What kind of body we were handed."""
    HTML = auto()       # Needs conversion before layout
    PLAIN = auto()      # Passed through (URL stripping only)


# Lowercased markers that identify an HTML document
HTML_MARKERS = ("<html", "<body", "<!doctype")


@dataclass(frozen=True)
class ClassifiedContent:
    """
    A body tagged with its content kind.

    Attributes:
        kind: HTML or PLAIN.
        text: The raw content, unchanged.
    """
    kind: ContentKind
    text: str

    @property
    def is_html(self) -> bool:
        """Returns True if the content needs HTML conversion."""
        return self.kind is ContentKind.HTML


def classify_content(content: str) -> ClassifiedContent:
    """
    Classify raw content as HTML or plain text.

    Args:
        content: Raw email body.

    Returns:
        ClassifiedContent wrapping the original text.

    Example:
        >>> classify_content("<!DOCTYPE html><p>x</p>").kind
        <ContentKind.HTML: 1>
    """
    lowered = content.lower()
    if any(marker in lowered for marker in HTML_MARKERS):
        return ClassifiedContent(kind=ContentKind.HTML, text=content)
    return ClassifiedContent(kind=ContentKind.PLAIN, text=content)
