# =============================================================================
# Terminal Layout and Coloring
# =============================================================================
# Turns cleaned text into ANSI-decorated terminal output.
#
# Every line gets one of four kinds, checked in this order:
#   - TABLE_ROW:     "Label:    value" rows, boxed when 2+ appear together
#   - HEADER:        centered text or ALL CAPS lines (bold cyan)
#   - SECTION_TITLE: short lines ending in ":" (bold yellow)
#   - PLAIN:         everything else, untouched
#
# These are heuristics for what receipts, shipping notices and newsletters
# look like once a text browser has flattened them. They are tuned to be
# readable, not correct.
#
# Width is measured in code points, so boxes around East-Asian wide
# characters or emoji will be misaligned.
# =============================================================================

import logging
import re
from dataclasses import dataclass
from enum import Enum, auto

from mailrender.rendering.ansi import BOLD, CYAN, DIM, RESET, YELLOW, style

logger = logging.getLogger(__name__)


class LineKind(Enum):
    """Classification of a single line of text."""
    HEADER = auto()
    SECTION_TITLE = auto()
    TABLE_ROW = auto()
    PLAIN = auto()


# Table row limits
TABLE_ROW_MIN_LENGTH = 15
TABLE_LABEL_MIN_LENGTH = 3
TABLE_LABEL_MAX_LENGTH = 30

# Header limits
HEADER_MAX_LENGTH = 60
CENTERED_MIN_INDENT = 11       # Leading whitespace must exceed 10
CENTERED_MAX_LENGTH = 49       # Centered text must be shorter than 50
SHOUTY_MIN_WORDS = 2
SHOUTY_MIN_LETTERS = 2

# Section titles must be shorter than 50
SECTION_TITLE_MAX_LENGTH = 49

WHITESPACE_SPLIT = re.compile(r"(\s+)")


# =============================================================================
# Line Predicates
# =============================================================================

def visual_width(text: str) -> int:
    """Approximate terminal width of text as its code point count."""
    return len(text)


def is_table_row(line: str) -> bool:
    """
    Check whether a line looks like an aligned "Label:    value" row.

    All of these must hold:
        - trimmed line is at least 15 characters
        - there is a colon
        - the label before the first colon is 3-30 characters and
          contains neither "//" nor "@" (URLs, email addresses)
        - after the colon comes a gap (two spaces, or a space and a tab)
          and then some value
    """
    trimmed = line.strip()
    if len(trimmed) < TABLE_ROW_MIN_LENGTH:
        return False

    label, colon, after = trimmed.partition(":")
    if not colon:
        return False

    has_gap = after.startswith("  ") or after.startswith(" \t")
    has_value = bool(after.strip())
    valid_label = (
        TABLE_LABEL_MIN_LENGTH <= len(label) <= TABLE_LABEL_MAX_LENGTH
        and "//" not in label
        and "@" not in label
    )

    return has_gap and has_value and valid_label


def _is_shouty_word(word: str) -> bool:
    letters = "".join(c for c in word if c.isalpha())
    return len(letters) >= SHOUTY_MIN_LETTERS and letters == letters.upper()


def is_header(line: str) -> bool:
    """
    Check whether a line looks like a header.

    A header is short (1-60 characters trimmed) and either centered
    (more than 10 columns of indentation, under 50 characters) or written
    in capitals (2+ words, each with 2+ letters, all uppercase).
    """
    trimmed = line.strip()
    if not trimmed or len(trimmed) > HEADER_MAX_LENGTH:
        return False

    indent = len(line) - len(line.lstrip())
    is_centered = indent >= CENTERED_MIN_INDENT and len(trimmed) <= CENTERED_MAX_LENGTH

    words = trimmed.split()
    is_shouty = len(words) >= SHOUTY_MIN_WORDS and all(_is_shouty_word(w) for w in words)

    return is_centered or is_shouty


def is_section_title(line: str) -> bool:
    """Short line ending with a colon, with no double-space gap anywhere."""
    trimmed = line.strip()
    return (
        trimmed.endswith(":")
        and len(trimmed) <= SECTION_TITLE_MAX_LENGTH
        and "  " not in line
    )


def classify_line(line: str, *, allow_table: bool = True) -> LineKind:
    """
    Classify a single line, ignoring its neighbours.

    Whether a TABLE_ROW line is actually drawn as a table depends on the
    lines around it (see colorize()); a lone row is re-classified with
    allow_table=False.

    Args:
        line: One line of text, without its newline.
        allow_table: Consider the TABLE_ROW kind at all.

    Returns:
        The first matching LineKind.
    """
    if allow_table and is_table_row(line):
        return LineKind.TABLE_ROW
    if is_header(line):
        return LineKind.HEADER
    if is_section_title(line):
        return LineKind.SECTION_TITLE
    return LineKind.PLAIN


# =============================================================================
# Tables
# =============================================================================

def colorize_table_row(line: str) -> str:
    """
    Highlight "Label:" tokens in a table row.

    Whitespace between tokens is kept exactly as it was.
    """
    parts = []
    for token in WHITESPACE_SPLIT.split(line):
        if len(token) > 1 and token.endswith(":") and token[0].isalpha():
            parts.append(style(token, YELLOW))
        else:
            parts.append(token)
    return "".join(parts)


@dataclass
class TableBlock:
    """
    A run of table rows drawn inside a box.

    Attributes:
        rows: The raw rows, in order, with blank lines already dropped.
    """
    rows: list[str]

    @property
    def max_len(self) -> int:
        """Width of the widest row."""
        return max((visual_width(row) for row in self.rows), default=0)

    @property
    def box_width(self) -> int:
        """Inner width of the box (widest row plus one column each side)."""
        return self.max_len + 2

    def render(self) -> str:
        """
        Draw the block:

            ┌──────────────────────┐
            │ Order:    12345      │
            │ Total:    $10.00     │
            └──────────────────────┘
        """
        width = self.box_width
        lines = [style(f"┌{'─' * width}┐", DIM)]

        for row in self.rows:
            padding = max(width - visual_width(row) - 1, 0)
            lines.append(
                f"{DIM}│{RESET} {colorize_table_row(row)}{' ' * padding}{DIM}│{RESET}"
            )

        lines.append(style(f"└{'─' * width}┘", DIM))
        return "\n".join(lines)


def _collect_table(lines: list[str], start: int) -> tuple[TableBlock, int]:
    """
    Grow a table block from lines[start], which must be a table row.

    Blank lines inside (and trailing) the run are swallowed.

    Returns:
        The block and the index of the first line after the run.
    """
    rows = [lines[start]]
    end = start + 1
    while end < len(lines) and (is_table_row(lines[end]) or not lines[end].strip()):
        if lines[end].strip():
            rows.append(lines[end])
        end += 1
    return TableBlock(rows=rows), end


# =============================================================================
# Coloring
# =============================================================================

def style_line(line: str, kind: LineKind) -> str:
    """Apply the styling for a non-table line kind."""
    if kind is LineKind.HEADER:
        return style(line, BOLD, CYAN)
    if kind is LineKind.SECTION_TITLE:
        return style(line, BOLD, YELLOW)
    return line


def colorize(text: str) -> str:
    """
    Classify every line of text and apply terminal styling.

    Args:
        text: Cleaned, newline-delimited text.

    Returns:
        ANSI-decorated text. Table runs come out boxed, which adds a border
        line above and below while dropping blank lines inside the run.
    """
    lines = text.split("\n")
    result = []
    tables = 0
    i = 0

    while i < len(lines):
        line = lines[i]

        if is_table_row(line):
            block, end = _collect_table(lines, i)
            if len(block.rows) >= 2:
                result.append(block.render())
                tables += 1
                i = end
                continue

        result.append(style_line(line, classify_line(line, allow_table=False)))
        i += 1

    logger.debug(f"Colorized {len(lines)} lines ({tables} tables)")
    return "\n".join(result)
