"""Cleaner: collapse invisible characters and whitespace into single spaces.

Every maximal run of characters satisfying
:func:`~unicode_cleaner.core.text_utils.is_collapsible` becomes one U+0020 and
the result is trimmed.  The reported count is taken from the original input
with :func:`~unicode_cleaner.core.text_utils.count_invisible`, the same
predicate the highlighter counts with, so a lone U+200B is counted even though
it only turns into a space.
"""

from __future__ import annotations

import logging
from itertools import groupby

from unicode_cleaner.core.models import CleanResult
from unicode_cleaner.core.text_utils import count_invisible, is_collapsible

_log = logging.getLogger(__name__)


def collapse(text: str) -> str:
    """Replace each collapsible run in *text* by a single space and trim."""
    parts: list[str] = []
    for collapsible, group in groupby(text, key=is_collapsible):
        parts.append(" " if collapsible else "".join(group))
    return "".join(parts).strip(" ")


def clean(text: str) -> CleanResult:
    """Return the cleaned copy of *text* plus the number of invisible characters found."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    cleaned = collapse(text)
    removed = count_invisible(text)

    _log.debug("clean: %d → %d chars, %d invisible", len(text), len(cleaned), removed)
    return CleanResult(cleaned_text=cleaned, removed_invisible_count=removed)
