"""
Tests for the plain-text sanitizer.
"""

import re

import pytest

from debate_core.utils import text_sanitizer
from debate_core.utils.text_sanitizer import clean

FORBIDDEN_LINE = re.compile(r"^(#|>|- |\d\. )", re.MULTILINE)

NASTY_SAMPLES = [
    "",
    "Plain text with nothing to strip.",
    "**Yes** it is!\n1. Great taste\n\n\n2. Versatile",
    "* * *",
    "**",
    "***bold and italic***",
    "**unclosed bold",
    "2 * 3 = 6",
    "1. 2. 3. nested markers",
    "# > - 1. stacked markers",
    "- # heading after dash",
    "> > double quote",
    "#hashtag at line start",
    "## Summary:",
    "Title:\n\n\n\n# Title:",
    "   \n\n\n   leading blank lines",
    "1.5 million people agree",
    "* **Taste:** sweet\n* *Texture* matters\n- done\n\n\n\n\n> fin",
]


def test_scenario_numbered_list_and_bold():
    """Bold, numbered markers and extra blank lines are all removed."""
    raw = "**Yes** it is!\n1. Great taste\n\n\n2. Versatile"
    assert clean(raw) == "Yes it is!\nGreat taste\n\nVersatile"


def test_mixed_markdown_reply():
    """A typical markdown-heavy reply becomes plain conversational text."""
    raw = (
        "**Great question!** Here's my take:\n\n"
        "* **Taste:** sweet and salty\n"
        "* *Texture* matters\n\n\n\n"
        "> Food is personal\n"
        "- Try it"
    )
    assert clean(raw) == (
        "Great question! Here's my take:\n\n"
        "• Taste sweet and salty\n"
        "• Texture matters\n\n"
        "Food is personal\n"
        "Try it"
    )


@pytest.mark.parametrize("raw", NASTY_SAMPLES)
def test_clean_is_idempotent(raw):
    """Cleaning twice gives the same result as cleaning once."""
    once = clean(raw)
    assert clean(once) == once


@pytest.mark.parametrize("raw", NASTY_SAMPLES)
def test_clean_output_has_no_markdown(raw):
    """No asterisks and no line starting with a removed marker survive."""
    cleaned = clean(raw)
    assert "*" not in cleaned
    assert FORBIDDEN_LINE.search(cleaned) is None


def test_stacked_markers_are_fully_removed():
    """Removing one marker never exposes another."""
    assert clean("# 1. Intro") == "Intro"
    assert clean("# > - 1. stacked markers") == "stacked markers"
    assert clean("## Summary:") == "Summary"


def test_plain_text_is_untouched():
    """Text with no formatting only gets trimmed."""
    assert clean("  Honestly, I disagree.  ") == "Honestly, I disagree."
    assert clean("A well-known 1.5% effect") == "A well-known 1.5% effect"


def test_convert_asterisk_bullets():
    assert text_sanitizer.convert_asterisk_bullets("* one\n  * two") == "• one\n• two"
    assert text_sanitizer.convert_asterisk_bullets("*not a bullet*") == "*not a bullet*"


def test_strip_header_emphasis():
    assert text_sanitizer.strip_header_emphasis("**Benefits:** many") == "Benefits many"
    assert text_sanitizer.strip_header_emphasis("***Key Point:***") == "Key Point"
    assert text_sanitizer.strip_header_emphasis("**bold**") == "**bold**"


def test_strip_standalone_labels():
    text = "Positive Impacts:\nThey help a lot: really."
    assert text_sanitizer.strip_standalone_labels(text) == (
        "Positive Impacts\nThey help a lot: really."
    )


def test_strip_bold_and_italic():
    assert text_sanitizer.strip_bold("a **b** c") == "a b c"
    assert text_sanitizer.strip_italic("a *b* c") == "a b c"
    assert text_sanitizer.strip_italic("stray * here") == "stray  here"


def test_strip_line_markers():
    assert text_sanitizer.strip_numbered_markers("1. a\n12. b") == "a\nb"
    assert text_sanitizer.strip_dash_markers("- a\n- b\nwell-known") == "a\nb\nwell-known"
    assert text_sanitizer.strip_heading_markers("## Title\ntext") == "Title\ntext"
    assert text_sanitizer.strip_blockquote_markers("> quoted\nplain") == "quoted\nplain"


def test_collapse_newlines_and_trim():
    assert text_sanitizer.collapse_newlines("a\n\n\n\nb\n\nc") == "a\n\nb\n\nc"
    assert text_sanitizer.trim("\n  text \n") == "text"


def test_rules_run_in_documented_order():
    """Bullets come first, trimming last."""
    assert text_sanitizer.RULES[0] is text_sanitizer.convert_asterisk_bullets
    assert text_sanitizer.RULES[-1] is text_sanitizer.trim
    assert len(text_sanitizer.RULES) == 11
