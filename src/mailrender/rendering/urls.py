# =============================================================================
# URL Stripping
# =============================================================================
# Email bodies are full of tracking links hundreds of characters long.
# Short, readable URLs are kept; anything with 40+ characters after the
# scheme is removed outright.
# =============================================================================

import re

# Minimum length (after "http(s)://") for a URL to count as "long"
LONG_URL_MIN_LENGTH = 40

LONG_URL_PATTERN = re.compile(rf"https?://\S{{{LONG_URL_MIN_LENGTH},}}")


def strip_long_urls(text: str) -> str:
    """
    Remove long URLs from text.

    Args:
        text: Any text.

    Returns:
        The text with every long http(s) URL deleted.

    Example:
        >>> strip_long_urls("see https://example.com here")
        'see https://example.com here'
    """
    return LONG_URL_PATTERN.sub("", text)
