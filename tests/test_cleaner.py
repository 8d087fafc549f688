"""Tests for the cleaner (collapse transform and removal count)."""

from __future__ import annotations

import pytest

from unicode_cleaner.core.cleaner import clean, collapse
from unicode_cleaner.core.models import CleanResult
from unicode_cleaner.core.text_utils import is_invisible


class TestCleanTransform:
    def test_empty_input(self):
        assert clean("") == CleanResult(cleaned_text="", removed_invisible_count=0)

    def test_double_space_only(self):
        result = clean("a  b")
        assert result.cleaned_text == "a b"
        assert result.removed_invisible_count == 0

    def test_zero_width_space_becomes_a_space(self):
        result = clean("a\u200bb  c")
        assert result.cleaned_text == "a b c"
        assert result.removed_invisible_count == 1

    def test_whitespace_and_separator_only(self):
        text = "   \u2028  "
        result = clean(text)
        assert result.cleaned_text == ""
        assert result.removed_invisible_count == 1

    def test_all_invisible_still_counted(self):
        result = clean("\u200b\u200b\ufeff")
        assert result.cleaned_text == ""
        assert result.removed_invisible_count == 3

    def test_mixed_run_collapses_to_one_space(self):
        assert clean("a \t\u200b\n\u2029 b").cleaned_text == "a b"

    def test_newlines_are_collapsed(self):
        assert clean("line one\r\nline two").cleaned_text == "line one line two"

    def test_trims_leading_and_trailing(self):
        assert clean("  \u00a0hello\u3000 ").cleaned_text == "hello"

    def test_visible_text_untouched(self):
        assert clean("Привет, мир!").cleaned_text == "Привет, мир!"

    def test_rejects_non_string(self):
        with pytest.raises(TypeError):
            clean(b"bytes")


class TestCleanProperties:
    def test_no_invisible_or_double_space_left(self, sample_texts):
        for text in sample_texts:
            cleaned = clean(text).cleaned_text
            assert not any(is_invisible(ch) for ch in cleaned)
            assert "  " not in cleaned

    def test_idempotent(self, sample_texts):
        for text in sample_texts:
            once = clean(text)
            twice = clean(once.cleaned_text)
            assert twice.cleaned_text == once.cleaned_text
            assert twice.removed_invisible_count == 0

    def test_count_uses_original_text(self):
        # Leading/trailing invisible characters are trimmed but still counted
        assert clean("\u200bhello\u200b").removed_invisible_count == 2


def test_collapse_helper():
    assert collapse(" a  \u200b b ") == "a b"


class TestControlCharacters:
    @pytest.mark.parametrize("ch", ["\x1c", "\x1d", "\x1e", "\x1f", "\x85"])
    def test_information_separators_survive(self, ch):
        text = f"a{ch}b"
        result = clean(text)
        assert result.cleaned_text == text
        assert result.removed_invisible_count == 0

    @pytest.mark.parametrize("ch", ["\x1c", "\x1f"])
    def test_separator_at_edges_is_not_trimmed(self, ch):
        assert clean(f"{ch} a {ch}").cleaned_text == f"{ch} a {ch}"

    def test_cleaner_and_highlighter_agree_on_control_chars(self):
        from unicode_cleaner.core.highlighter import highlight

        text = "a\x1cb\x1d c"
        assert highlight(text).invisible_count == clean(text).removed_invisible_count == 0
        assert highlight(text).spans == []
