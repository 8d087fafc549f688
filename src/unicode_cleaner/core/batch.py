"""Batch cleaning over pandas Series / DataFrames.

Applies :func:`~unicode_cleaner.core.cleaner.clean` value by value.  Missing
values (NaN / None) and non-string cells are passed through untouched, the
same way the hygiene checks skip them.
"""

from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from unicode_cleaner.core.cleaner import clean

_log = logging.getLogger(__name__)


def clean_series(series: pd.Series) -> tuple[pd.Series, pd.Series]:
    """Clean every string value of *series*.

    Returns:
        ``(cleaned, counts)``: two Series sharing *series*' index.  ``counts``
        holds the invisible-character count per value (0 for skipped cells).
    """
    cleaned: list[object] = []
    counts: list[int] = []
    for val in series:
        if not isinstance(val, str) or pd.isna(val):
            cleaned.append(val)
            counts.append(0)
            continue
        result = clean(val)
        cleaned.append(result.cleaned_text)
        counts.append(result.removed_invisible_count)
    return (
        pd.Series(cleaned, index=series.index, name=series.name, dtype=object),
        pd.Series(counts, index=series.index, name=series.name, dtype="int64"),
    )


def clean_frame(
    df: pd.DataFrame,
    columns: Iterable[str] | None = None,
) -> tuple[pd.DataFrame, dict[str, int]]:
    """Clean the given string *columns* of *df* (all columns if None).

    The input frame is not modified.

    Returns:
        ``(cleaned_df, totals)`` where ``totals`` maps each processed column
        to its total number of invisible characters.
    """
    out = df.copy()
    totals: dict[str, int] = {}
    target = list(df.columns) if columns is None else [c for c in columns if c in df.columns]
    for col in target:
        cleaned, counts = clean_series(df[col])
        out[col] = cleaned
        totals[col] = int(counts.sum())
    _log.debug("clean_frame: %d column(s), %d invisible", len(totals), sum(totals.values()))
    return out, totals


def clean_texts(texts: Iterable[str]) -> tuple[list[str], list[int]]:
    """Clean a plain sequence of strings; used by the batch HTTP endpoint."""
    cleaned, counts = clean_series(pd.Series(list(texts), dtype=object))
    return cleaned.tolist(), counts.tolist()
