"""Highlighter: classify the input into invisible / double-space spans.

The input is scanned once, left to right, grouping consecutive characters by
their scan class.  Invisible runs always win over space runs because the two
classes are disjoint (U+0020 is whitespace, never ``Cf``), so an invisible run
followed directly by spaces yields two adjacent spans.

Usage::

    result = highlight("a\\u200bb  c")
    result.invisible_count   # → 1
    result.to_html()         # markup for the overlay
"""

from __future__ import annotations

import logging
from itertools import groupby

from unicode_cleaner.core.models import (
    CharacterClass,
    HighlightResult,
    HighlightSpan,
    LineBreak,
    Segment,
    TextSegment,
)
from unicode_cleaner.core.text_utils import is_invisible

_log = logging.getLogger(__name__)

_SPACE = " "
_NEWLINE = "\n"

# Scan classes (internal; only INVISIBLE and DOUBLE_SPACE surface as spans)
_K_INVISIBLE = "invisible"
_K_SPACE = "space"
_K_NEWLINE = "newline"
_K_OTHER = "other"

MIN_DOUBLE_SPACE = 2


def _scan_class(ch: str) -> str:
    if is_invisible(ch):
        return _K_INVISIBLE
    if ch == _SPACE:
        return _K_SPACE
    if ch == _NEWLINE:
        return _K_NEWLINE
    return _K_OTHER


def highlight(text: str) -> HighlightResult:
    """Return the annotated segments of *text* and its invisible-character count."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    segments: list[Segment] = []
    invisible_count = 0
    plain_start: int | None = None  # start of the pending literal-text segment
    pos = 0

    def flush(end: int) -> None:
        nonlocal plain_start
        if plain_start is not None and end > plain_start:
            segments.append(TextSegment(plain_start, end, text[plain_start:end]))
        plain_start = None

    for kind, group in groupby(text, key=_scan_class):
        length = sum(1 for _ in group)
        end = pos + length

        if kind == _K_INVISIBLE:
            flush(pos)
            segments.append(HighlightSpan(pos, end, CharacterClass.INVISIBLE, text[pos:end]))
            invisible_count += length
        elif kind == _K_SPACE and length >= MIN_DOUBLE_SPACE:
            flush(pos)
            segments.append(HighlightSpan(pos, end, CharacterClass.DOUBLE_SPACE, text[pos:end]))
        elif kind == _K_NEWLINE:
            flush(pos)
            segments.extend(LineBreak(i) for i in range(pos, end))
        elif plain_start is None:
            # Single spaces and ordinary characters merge into one text segment
            plain_start = pos

        pos = end

    flush(pos)

    _log.debug(
        "highlight: %d chars, %d segment(s), %d invisible",
        len(text),
        len(segments),
        invisible_count,
    )
    return HighlightResult(segments=segments, invisible_count=invisible_count)
