# =============================================================================
# Cleanup Pipeline Tests
# =============================================================================
# Each step is tested on its own, then the pipelines as a whole.
# =============================================================================

import pytest

from mailrender.rendering.cleanup import (
    clean_markdown,
    clean_text,
    collapse_blank_lines,
    collapse_empty_cells,
    collapse_list_single_cells,
    collapse_single_cells,
    dedupe_table_separators,
    drop_empty_table_lines,
    markdown_steps,
    remove_invisible_chars,
    strip_frontmatter,
    strip_links,
    strip_separator_lines,
)


MESSY_MARKDOWN = (
    "---\n"
    "title: Newsletter\n"
    "---\n"
    "# Hello\n"
    "\n"
    "| | |\n"
    "|---|---|\n"
    "| Name | Value |\n"
    "|---|---|\n"
    "| a | b |\n"
    "\n\n\n\n"
    "- | Item one |\n"
    "- |  |\n"
    "|  | x |\n"
    "See [docs](https://example.com/docs) \u200b\n"
)


# -----------------------------------------------------------------------------
# Individual steps
# -----------------------------------------------------------------------------

def test_frontmatter_at_start_is_removed():
    assert strip_frontmatter("---\ntitle: x\n---\nBody") == "Body"


def test_frontmatter_not_at_start_is_left_alone():
    text = "Intro\n---\nx\n---\n"
    assert strip_frontmatter(text) == text


def test_standalone_separator_lines_are_removed():
    assert strip_separator_lines("a\n---\nb") == "a\nb"
    assert strip_separator_lines("a\n----\nb") == "a\n----\nb"


def test_links_are_reduced_to_labels():
    text = (
        "[Click here](https://example.com/a) "
        "<https://example.com/b> "
        "[Mail us](mailto:help@example.com)"
    )
    assert strip_links(text) == "Click here  Mail us"


def test_long_bare_urls_are_removed_but_short_ones_kept():
    long_url = "https://example.com/" + "t" * 45
    assert strip_links(f"go {long_url} now") == "go  now"
    assert strip_links("go https://example.com now") == "go https://example.com now"


def test_list_single_cell_becomes_bold_item():
    assert collapse_list_single_cells("- | some text |") == "- **some text**"


@pytest.mark.parametrize("line", ["- |   |", "- | --- |", "- | - - |"])
def test_empty_list_single_cell_is_blanked(line):
    assert collapse_list_single_cells(line) == ""


def test_single_cell_becomes_bold_text():
    assert collapse_single_cells("| Hello |") == "**Hello**"
    assert collapse_single_cells("| --- |") == ""


def test_multi_cell_rows_are_not_single_cells():
    row = "| a | b |"
    assert collapse_single_cells(row) == row
    assert collapse_list_single_cells("- " + row) == "- " + row


def test_empty_cells_collapse():
    assert collapse_empty_cells("| a | | b |") == "| a | b |"
    assert collapse_empty_cells("| a || b |") == "| a | b |"
    assert collapse_empty_cells("| | | |") == "|"


def test_empty_cells_do_not_merge_rows():
    text = "| a |\n| b |"
    assert collapse_empty_cells(text) == text


def test_empty_table_lines_are_dropped():
    text = "text\n| |\n- | |\n|\nmore"
    assert drop_empty_table_lines(text) == "text\nmore"


def test_invisible_characters_are_removed():
    text = "a\u200bb\u200cc\u200dd\u034fe\ufefff"
    assert remove_invisible_chars(text) == "abcdef"


def test_repeated_separator_in_one_table_is_dropped():
    text = (
        "| a | b |\n"
        "|---|---|\n"
        "| 1 | 2 |\n"
        "|---|---|\n"
        "| 3 | 4 |"
    )
    assert dedupe_table_separators(text) == "| a | b |\n|---|---|\n| 1 | 2 |\n| 3 | 4 |"


def test_separators_of_separate_tables_are_kept():
    text = "| a |\n|---|\n\ntext\n\n| b |\n|---|"
    assert dedupe_table_separators(text) == text


def test_short_separator_does_not_count():
    text = "| a |\n|--|\n| b |\n|---|"
    assert dedupe_table_separators(text) == text


def test_blank_line_runs_collapse():
    assert collapse_blank_lines("a\n\n\n\nb") == "a\n\nb"
    assert collapse_blank_lines("a\n\nb") == "a\n\nb"


def test_url_step_only_present_when_requested():
    assert strip_links in markdown_steps(True)
    assert strip_links not in markdown_steps(False)


# -----------------------------------------------------------------------------
# Pipelines
# -----------------------------------------------------------------------------

def test_clean_markdown_list_cell_scenarios():
    assert clean_markdown("- | some text |") == "- **some text**"
    assert clean_markdown("- |   |") == ""


def test_clean_markdown_full_document():
    cleaned = clean_markdown(MESSY_MARKDOWN, strip_urls=True)

    assert "title: Newsletter" not in cleaned
    assert cleaned.startswith("# Hello")
    assert "- **Item one**" in cleaned
    assert "**x**" in cleaned
    assert "See docs" in cleaned
    assert "https://" not in cleaned
    assert "\u200b" not in cleaned
    assert cleaned.count("|---|---|") == 1
    assert "\n\n\n" not in cleaned


def test_clean_markdown_is_idempotent():
    once = clean_markdown(MESSY_MARKDOWN)
    assert clean_markdown(once) == once


def test_clean_markdown_unwraps_deeply_nested_links():
    nested = "[" * 6 + "a](http://1.io)" + "".join(f"](http://{n}.io)" for n in range(2, 7))

    once = clean_markdown(nested)
    assert once == "a"
    assert clean_markdown(once) == once


def test_clean_markdown_keeps_links_when_not_stripping():
    text = "[Click](https://example.com/x)"
    assert clean_markdown(text, strip_urls=False) == text


def test_clean_text_is_light():
    text = "| Hello |\n\n\n\nhttps://example.com/" + "x" * 50 + "\u200b\n   indented"
    assert clean_text(text, strip_urls=True) == "| Hello |\n\n   indented"
    assert clean_text("   indented", strip_urls=False) == "   indented"
