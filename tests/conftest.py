"""Pytest fixtures shared across all tests."""

from __future__ import annotations

import pandas as pd
import pytest


@pytest.fixture
def sample_texts() -> list[str]:
    """Inputs covering every character class and their boundaries."""
    return [
        "",
        "plain text",
        "a  b",                           # double space only
        "a\u200bb  c",                    # ZWSP then double space
        "   \u2028  ",                    # whitespace + line separator only
        "line one\nline two",             # newline
        "\ufeffBOM at start",             # byte-order mark
        "x\u200b\u200c\u200dy",           # run of three format chars
        "tab\tand\r\nCRLF",               # other whitespace
        "<b>&amp;</b>\u2029end",          # markup-significant chars
        "\u200b  \u200b",                 # invisible, spaces, invisible
        "trailing\u00a0nbsp\u00a0",       # NBSP is whitespace, not Cf
    ]


@pytest.fixture
def messy_df() -> pd.DataFrame:
    """A small DataFrame with invisible characters in some cells."""
    return pd.DataFrame(
        {
            "Titre": [
                "Introduction\u200b",   # ZWSP
                "  Méthodes",           # leading spaces
                "Histoire  médiévale",  # double space
                None,                   # missing
            ],
            "Code": ["A1", "B\u2028 2", "C3", "D4"],
            "Nombre": [1, 2, 3, 4],
        }
    )
