"""Shared character-classification predicates.

Used by both the highlighter (core/highlighter.py) and the cleaner
(core/cleaner.py) so that the live counter and the post-clean report
always agree on what counts as an invisible character.
"""

from __future__ import annotations

import unicodedata

# ---------------------------------------------------------------------------
# Invisible code points
# ---------------------------------------------------------------------------

# Line and paragraph separators are Zl/Zp, not Cf, so they are listed apart.
LINE_SEPARATORS = frozenset(["\u2028", "\u2029"])

# Whitespace as matched by the JavaScript \s class.
# str.isspace() is broader: it also accepts the U+001C-U+001F separators.
WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Unicode general category for format characters (ZWSP, ZWJ, BOM, bidi marks...)
FORMAT_CATEGORY = "Cf"


def is_invisible(ch: str) -> bool:
    """Return True for U+2028, U+2029 and any format (``Cf``) character."""
    return ch in LINE_SEPARATORS or unicodedata.category(ch) == FORMAT_CATEGORY


def is_collapsible(ch: str) -> bool:
    """Return True for characters the cleaner folds into a single space."""
    return is_invisible(ch) or ch in WHITESPACE


def count_invisible(text: str) -> int:
    """Number of characters in *text* for which :func:`is_invisible` holds."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return sum(1 for ch in text if is_invisible(ch))


def describe_char(ch: str) -> str:
    """Return ``U+XXXX (NAME)`` for *ch*, as shown in diagnostics."""
    return f"U+{ord(ch):04X} ({unicodedata.name(ch, '?')})"
