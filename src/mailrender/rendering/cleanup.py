# =============================================================================
# Text Cleanup Pipelines
# =============================================================================
# HTML→markdown converters leave a lot of junk behind when fed real-world
# marketing email: layout tables flattened into "| |" rows, single-cell
# tables wrapping every paragraph, duplicated separators, invisible
# characters used for preheader padding, and so on.
#
# Each step below is a pure str → str function, so the pipelines are just
# ordered lists of steps:
#   - clean_markdown(): the full pipeline, for markdown-sourced text
#   - clean_text(): the light pipeline, for text that is already laid out
#     (w3m / inscriptis output)
#
# Order matters: later patterns assume earlier ones already normalized the
# table syntax.
# =============================================================================

import re
from typing import Callable

from mailrender.rendering.urls import strip_long_urls

Step = Callable[[str], str]


# Characters that render as nothing but break width calculations
INVISIBLE_CHARS = (
    "\u034f"    # combining grapheme joiner
    "\u200b"    # zero-width space
    "\u200c"    # zero-width non-joiner
    "\u200d"    # zero-width joiner
    "\ufeff"    # byte-order mark
)

_INVISIBLE_TABLE = str.maketrans("", "", INVISIBLE_CHARS)

FRONTMATTER_PATTERN = re.compile(r"\A---\n.*?\n---\n?", re.DOTALL)
SEPARATOR_LINE_PATTERN = re.compile(r"^---$\n?", re.MULTILINE)

MARKDOWN_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(https?://[^)]+\)")
ANGLE_LINK_PATTERN = re.compile(r"<https?://[^>]+>")
LONG_BARE_URL_PATTERN = re.compile(r"https?://[^\s)\]]{40,}")
MAILTO_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(mailto:[^)]+\)")

LIST_SINGLE_CELL_PATTERN = re.compile(r"^(-\s*)\|\s*([^|]+?)\s*\|$")
SINGLE_CELL_PATTERN = re.compile(r"^\|\s*([^|]+?)\s*\|$")
EMPTY_CELLS_PATTERN = re.compile(r"\|(?:[ \t]*\|)+")
EMPTY_TABLE_LINE_PATTERN = re.compile(r"^-?\s*\|\s*\|?\s*$")
TABLE_SEPARATOR_PATTERN = re.compile(r"^\|\s*[-:]+\s*\|")

EXCESS_NEWLINES_PATTERN = re.compile(r"\n{3,}")

def _map_lines(text: str, func: Callable[[str], str]) -> str:
    return "\n".join(func(line) for line in text.split("\n"))


def _is_blank_cell(text: str) -> bool:
    """True for cell text that carries nothing (empty, or just dashes/spaces)."""
    return not text or all(c in "- " for c in text)


# =============================================================================
# Markdown Steps
# =============================================================================

def strip_frontmatter(text: str) -> str:
    """Remove a YAML frontmatter block at the very start of the text."""
    return FRONTMATTER_PATTERN.sub("", text, count=1)


def strip_separator_lines(text: str) -> str:
    """Remove standalone --- lines."""
    return SEPARATOR_LINE_PATTERN.sub("", text)


def strip_links(text: str) -> str:
    """
    Reduce hyperlinks to their labels and drop long bare URLs.

    [label](https://...) → label
    <https://...>        → (removed)
    https://<40+ chars>  → (removed)
    [label](mailto:...)  → label
    """
    text = MARKDOWN_LINK_PATTERN.sub(r"\1", text)
    text = ANGLE_LINK_PATTERN.sub("", text)
    text = LONG_BARE_URL_PATTERN.sub("", text)
    text = MAILTO_LINK_PATTERN.sub(r"\1", text)
    return text


def collapse_list_single_cells(text: str) -> str:
    """Rewrite "- | text |" as "- **text**"; blank the line if the cell is empty."""
    def rewrite(line: str) -> str:
        match = LIST_SINGLE_CELL_PATTERN.match(line)
        if not match:
            return line
        prefix, cell = match.group(1), match.group(2).strip()
        if _is_blank_cell(cell):
            return ""
        return f"{prefix}**{cell}**"

    return _map_lines(text, rewrite)


def collapse_single_cells(text: str) -> str:
    """Rewrite "| text |" as "**text**"; blank the line if the cell is empty."""
    def rewrite(line: str) -> str:
        match = SINGLE_CELL_PATTERN.match(line)
        if not match:
            return line
        cell = match.group(1).strip()
        if _is_blank_cell(cell):
            return ""
        return f"**{cell}**"

    return _map_lines(text, rewrite)


def collapse_empty_cells(text: str) -> str:
    """Collapse runs of empty cells ("| |", "| | |") into a single pipe."""
    return EMPTY_CELLS_PATTERN.sub("|", text)


def drop_empty_table_lines(text: str) -> str:
    """Drop lines left holding nothing but table pipes."""
    lines = [
        line for line in text.split("\n")
        if not EMPTY_TABLE_LINE_PATTERN.match(line)
    ]
    return "\n".join(lines)


def remove_invisible_chars(text: str) -> str:
    """Remove zero-width and other invisible characters."""
    return text.translate(_INVISIBLE_TABLE)


def dedupe_table_separators(text: str) -> str:
    """
    Keep only the first separator row within a run of table rows.

    Several HTML tables flattened back to back come out as one markdown
    table with a |---| row after each original header.
    """
    kept = []
    in_table = False
    had_separator = False

    for line in text.split("\n"):
        is_table_row = line.startswith("|") and line.endswith("|")
        is_separator = (
            TABLE_SEPARATOR_PATTERN.match(line) is not None
            and line.count("-") > 2
        )

        if is_table_row:
            if is_separator:
                if in_table and had_separator:
                    continue
                had_separator = True
            in_table = True
        else:
            in_table = False
            had_separator = False

        kept.append(line)

    return "\n".join(kept)


def collapse_blank_lines(text: str) -> str:
    """Collapse three or more newlines into a single blank line."""
    return EXCESS_NEWLINES_PATTERN.sub("\n\n", text)


def trim(text: str) -> str:
    return text.strip()


# =============================================================================
# Pipelines
# =============================================================================

def markdown_steps(strip_urls: bool) -> list[Step]:
    """
    The ordered markdown cleanup pipeline.

    Args:
        strip_urls: Include the link/URL stripping step.
    """
    steps: list[Step] = [strip_frontmatter, strip_separator_lines]
    if strip_urls:
        steps.append(strip_links)
    steps.extend([
        collapse_list_single_cells,
        collapse_single_cells,
        collapse_empty_cells,
        drop_empty_table_lines,
        remove_invisible_chars,
        dedupe_table_separators,
        collapse_blank_lines,
        trim,
    ])
    return steps


def text_steps(strip_urls: bool) -> list[Step]:
    """The ordered light cleanup pipeline for pre-laid-out text."""
    steps: list[Step] = []
    if strip_urls:
        steps.append(strip_long_urls)
    steps.extend([remove_invisible_chars, collapse_blank_lines])
    return steps


def run_steps(text: str, steps: list[Step]) -> str:
    """Feed text through each step in order."""
    for step in steps:
        text = step(text)
    return text


def clean_markdown(text: str, strip_urls: bool = True) -> str:
    """
    Clean converter-produced markdown.

    The pipeline is repeated until the text stops changing, because
    collapsing empty cells can expose a single-cell row that an earlier
    step would have rewritten ("|  | x |" → "| x |" → "**x**").
    Every pass that changes the text removes pipes or shortens it, so
    the loop ends.

    Args:
        text: Markdown from an HTML→markdown converter.
        strip_urls: Reduce links to labels and drop long URLs.

    Returns:
        Cleaned, trimmed markdown. Running it again is a no-op.
    """
    steps = markdown_steps(strip_urls)
    while True:
        cleaned = run_steps(text, steps)
        if cleaned == text:
            break
        text = cleaned
    return text


def clean_text(text: str, strip_urls: bool = True) -> str:
    """
    Light cleanup for text that a renderer has already laid out.

    No markdown rewriting happens here, and the result is not trimmed:
    leading indentation is what the header detection keys on.
    """
    return run_steps(text, text_steps(strip_urls))
