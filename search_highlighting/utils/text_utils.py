"""
Text utility functions for the highlighting engine.

Provides whitespace normalization, whitespace-snapped cut points and
argument coercion shared by the query parser and the highlighter.
"""

import re
from typing import Any

from ..core import get_logger

logger = get_logger(__name__)


_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """
    Collapse runs of whitespace into single spaces and trim the ends.

    Args:
        text: Raw text.

    Returns:
        Normalized text, or an empty string for empty input.
    """
    if not text:
        return ""

    return _WHITESPACE_RE.sub(" ", text).strip()


def snap_to_whitespace(text: str, index: int, floor: int = 0) -> int:
    """
    Move a cut index backward to the nearest whitespace boundary.

    A cut at ``index`` keeps ``text[:index]``. If the character at the cut
    is already whitespace (or the cut is at the end), the index is returned
    unchanged. Otherwise the index moves back to the last whitespace
    character found at or after ``floor``.

    Args:
        text: Text being cut.
        index: Proposed cut index.
        floor: Lowest index the cut may move back to.

    Returns:
        Snapped cut index, or ``index`` when no whitespace lies in range.
    """
    index = max(0, min(index, len(text)))
    if index >= len(text) or text[index].isspace():
        return index

    pos = index - 1
    while pos >= floor and pos > 0:
        if text[pos].isspace():
            return pos
        pos -= 1

    return index


def ensure_text(value: Any, label: str = "text") -> str:
    """
    Coerce an argument to a string without raising.

    ``None`` becomes an empty string. Other non-string values are logged
    and converted with ``str()``.

    Args:
        value: Caller-supplied argument.
        label: Argument name used in the warning.

    Returns:
        A string, possibly empty.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value

    logger.warning(f"Expected string for {label}, got {type(value).__name__}")
    try:
        return str(value)
    except Exception as e:
        logger.warning(f"Could not convert {label} to string: {e}")
        return ""


if __name__ == "__main__":
    print("=== normalize_whitespace ===")
    print(repr(normalize_whitespace("  machine \t learning \n  guide ")))

    print("\n=== snap_to_whitespace ===")
    sample = "Machine learning in modern JavaScript applications"
    cut = snap_to_whitespace(sample, 30)
    print(f"Cut at {cut}: {sample[:cut]!r}")

    print("\n=== ensure_text ===")
    print(repr(ensure_text(None)), repr(ensure_text(42, "query")))

