"""Plain-conversational-text sanitizer for model output.

The model is asked not to use markdown, but it often does anyway. ``clean``
runs an ordered list of small, independent rules over the raw text. Order
matters: bullets are rewritten before emphasis is stripped, and emphasis is
stripped before line markers are removed.

The whole pipeline is re-applied until the text stops changing, so
``clean(clean(x)) == clean(x)`` and a rule can never leave behind a pattern
an earlier rule is meant to remove (``"# 1. Intro"`` ends up as ``"Intro"``).
Every pass that changes the text either shortens it or removes an asterisk,
so the loop always terminates.
"""

import re
from collections.abc import Callable

BULLET = "• "

_ASTERISK_BULLET = re.compile(r"^[ \t]*\*[ \t]+", re.MULTILINE)
_HEADER_EMPHASIS = re.compile(r"\*{2,3}([^*\n]+?):\*{2,3}")
_STANDALONE_LABEL = re.compile(r"^[ \t]*([A-Za-z][A-Za-z \t]*?)[ \t]*:[ \t]*$", re.MULTILINE)
_BOLD = re.compile(r"\*\*([^*\n]+?)\*\*")
_ITALIC = re.compile(r"\*([^*\n]+?)\*")
_NUMBERED_MARKER = re.compile(r"^[ \t]*\d+\.[ \t]+", re.MULTILINE)
_DASH_MARKER = re.compile(r"^[ \t]*-[ \t]+", re.MULTILINE)
_HEADING_MARKER = re.compile(r"^[ \t]*#+[ \t]*", re.MULTILINE)
_BLOCKQUOTE_MARKER = re.compile(r"^[ \t]*>+[ \t]*", re.MULTILINE)
_EXTRA_NEWLINES = re.compile(r"\n{3,}")


def convert_asterisk_bullets(text: str) -> str:
    """``* item`` -> ``• item``."""
    return _ASTERISK_BULLET.sub(BULLET, text)


def strip_header_emphasis(text: str) -> str:
    """``**Label:**`` or ``***Label:***`` -> ``Label``."""
    return _HEADER_EMPHASIS.sub(r"\1", text)


def strip_standalone_labels(text: str) -> str:
    """A line holding only ``Some Label:`` -> ``Some Label``."""
    return _STANDALONE_LABEL.sub(r"\1", text)


def strip_bold(text: str) -> str:
    """``**bold**`` -> ``bold``."""
    return _BOLD.sub(r"\1", text)


def strip_italic(text: str) -> str:
    """``*italic*`` -> ``italic``; unpaired asterisks are dropped."""
    return _ITALIC.sub(r"\1", text).replace("*", "")


def strip_numbered_markers(text: str) -> str:
    """Remove ``1. `` style list markers at line start."""
    return _NUMBERED_MARKER.sub("", text)


def strip_dash_markers(text: str) -> str:
    """Remove ``- `` list markers at line start."""
    return _DASH_MARKER.sub("", text)


def strip_heading_markers(text: str) -> str:
    """Remove ``#``/``##``/... heading markers at line start."""
    return _HEADING_MARKER.sub("", text)


def strip_blockquote_markers(text: str) -> str:
    """Remove ``>`` blockquote markers at line start."""
    return _BLOCKQUOTE_MARKER.sub("", text)


def collapse_newlines(text: str) -> str:
    """Three or more consecutive newlines -> exactly two."""
    return _EXTRA_NEWLINES.sub("\n\n", text)


def trim(text: str) -> str:
    return text.strip()


RULES: tuple[Callable[[str], str], ...] = (
    convert_asterisk_bullets,
    strip_header_emphasis,
    strip_standalone_labels,
    strip_bold,
    strip_italic,
    strip_numbered_markers,
    strip_dash_markers,
    strip_heading_markers,
    strip_blockquote_markers,
    collapse_newlines,
    trim,
)


def apply_rules(text: str) -> str:
    """Run every rule once, in order."""
    for rule in RULES:
        text = rule(text)
    return text


def clean(raw: str) -> str:
    """Sanitize raw model output into plain conversational text.

    Args:
        raw: Raw generated text

    Returns:
        Text with no asterisks and no markdown line markers

    Example:
        ```python
        clean("**Yes** it is!\\n1. Great taste\\n\\n\\n2. Versatile")
        # 'Yes it is!\\nGreat taste\\n\\nVersatile'
        ```
    """
    previous = None
    text = raw
    while text != previous:
        previous = text
        text = apply_rules(text)
    return text
