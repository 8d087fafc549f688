"""Tests for the shared classification predicates."""

from __future__ import annotations

import pytest

from unicode_cleaner.core.text_utils import (
    count_invisible,
    describe_char,
    is_collapsible,
    is_invisible,
)


class TestIsInvisible:
    @pytest.mark.parametrize(
        "ch",
        [
            "\u200b",  # zero width space
            "\u200c",  # zero width non-joiner
            "\u200d",  # zero width joiner
            "\u200e",  # left-to-right mark
            "\u202e",  # right-to-left override
            "\u2060",  # word joiner
            "\ufeff",  # BOM
            "\u00ad",  # soft hyphen
            "\u2028",  # line separator
            "\u2029",  # paragraph separator
        ],
    )
    def test_format_and_separators(self, ch):
        assert is_invisible(ch)

    @pytest.mark.parametrize("ch", ["a", " ", "\t", "\n", "\u00a0", "é", "—"])
    def test_visible_and_plain_whitespace(self, ch):
        assert not is_invisible(ch)


class TestIsCollapsible:
    @pytest.mark.parametrize("ch", [" ", "\t", "\n", "\r", "\u00a0", "\u3000", "\u200b", "\u2028"])
    def test_whitespace_and_invisible(self, ch):
        assert is_collapsible(ch)

    @pytest.mark.parametrize("ch", ["a", "0", "-", "é"])
    def test_ordinary_chars(self, ch):
        assert not is_collapsible(ch)


class TestCountInvisible:
    def test_counts_characters_not_runs(self):
        assert count_invisible("a\u200b\u200bb\u2029") == 3

    def test_empty(self):
        assert count_invisible("") == 0

    def test_rejects_non_string(self):
        with pytest.raises(TypeError):
            count_invisible(None)


def test_describe_char():
    assert describe_char("\u200b") == "U+200B (ZERO WIDTH SPACE)"


class TestWhitespaceSet:
    @pytest.mark.parametrize(
        "ch",
        ["\t", "\n", "\x0b", "\x0c", "\r", " ", "\u00a0", "\u1680", "\u2000", "\u2005",
         "\u200a", "\u202f", "\u205f", "\u3000", "\ufeff"],
    )
    def test_js_whitespace_is_collapsible(self, ch):
        assert is_collapsible(ch)

    @pytest.mark.parametrize("ch", ["\x1c", "\x1d", "\x1e", "\x1f", "\x85", "\x00", "\x07"])
    def test_control_separators_are_not_collapsible(self, ch):
        assert not is_collapsible(ch)
        assert not is_invisible(ch)
