# =============================================================================
# ANSI Styling
# =============================================================================
# Plain SGR escape sequences. No terminal capability negotiation is done:
# the output assumes an ANSI-capable terminal (the pager or mutt handles the
# rest).
# =============================================================================

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"
YELLOW = "\x1b[33m"
CYAN = "\x1b[36m"


def style(text: str, *codes: str) -> str:
    """Wrap text in the given SGR codes followed by a reset."""
    return f"{''.join(codes)}{text}{RESET}"
