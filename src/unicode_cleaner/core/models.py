"""Core data model dataclasses.

All other modules import from here. Keep this module free of side-effects and
web imports so it can be used in tests and batch contexts without a server.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from unicode_cleaner.core.text_utils import describe_char


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class CharacterClass(str, Enum):
    PLAIN = "plain"
    INVISIBLE = "invisible"
    DOUBLE_SPACE = "double_space"


# CSS classes used by the overlay in web/static/index.html
_SPAN_CSS: dict[CharacterClass, str] = {
    CharacterClass.INVISIBLE: "hl-invisible",
    CharacterClass.DOUBLE_SPACE: "hl-double-space",
}


def _escape(text: str) -> str:
    # Only the three markup-significant characters; quotes never reach an attribute.
    return html.escape(text, quote=False)


# ---------------------------------------------------------------------------
# Highlight segments
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextSegment:
    """Literal text between two spans. Offsets index the raw input."""

    start: int
    end: int
    text: str

    def to_html(self) -> str:
        return _escape(self.text)

    def to_dict(self) -> dict:
        return {"kind": "text", "start": self.start, "end": self.end, "text": self.text}


@dataclass(frozen=True)
class LineBreak:
    """Render-time marker standing in for a ``\\n`` at *start*."""

    start: int

    @property
    def end(self) -> int:
        return self.start + 1

    def to_html(self) -> str:
        return "<br />"

    def to_dict(self) -> dict:
        return {"kind": "break", "start": self.start, "end": self.end}


@dataclass(frozen=True)
class HighlightSpan:
    """A classified run of characters, used for presentation only."""

    start: int
    end: int
    char_class: CharacterClass
    text: str

    def __len__(self) -> int:
        return self.end - self.start

    def to_html(self) -> str:
        css = _SPAN_CSS.get(self.char_class, "")
        return f'<span class="{css}">{_escape(self.text)}</span>'

    def to_dict(self) -> dict:
        d = {
            "kind": self.char_class.value,
            "start": self.start,
            "end": self.end,
            "text": self.text,
        }
        if self.char_class is CharacterClass.INVISIBLE:
            d["chars"] = sorted({describe_char(ch) for ch in self.text})
        return d


Segment = Union[TextSegment, LineBreak, HighlightSpan]


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass
class HighlightResult:
    """The whole input re-expressed as ordered, non-overlapping segments."""

    segments: list[Segment] = field(default_factory=list)
    invisible_count: int = 0  # characters, not spans

    @property
    def spans(self) -> list[HighlightSpan]:
        return [s for s in self.segments if isinstance(s, HighlightSpan)]

    def to_html(self) -> str:
        return "".join(s.to_html() for s in self.segments)

    def to_dict(self) -> dict:
        return {
            "segments": [s.to_dict() for s in self.segments],
            "invisible_count": self.invisible_count,
        }


@dataclass
class CleanResult:
    cleaned_text: str = ""
    removed_invisible_count: int = 0  # measured on the original input

    def to_dict(self) -> dict:
        return {
            "cleaned_text": self.cleaned_text,
            "removed_invisible_count": self.removed_invisible_count,
        }
