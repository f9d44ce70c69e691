"""Tests for masked views and the blanking helper."""

from __future__ import annotations

from markspell.core.ranges import TextRange
from markspell.masking import MaskedView, blank, get_masker
from markspell.masking.html import find_html_spans
from markspell.masking.markdown import MarkdownMasker
from markspell.masking.plain import PlainMasker
from markspell.utils.file_io import DocumentFormat


def test_blank_keeps_length_and_line_breaks() -> None:
    text = "ab\ncd\r\nef"

    result = blank(text, [TextRange(1, 8)])

    assert result == "a \n  \r\n f"
    assert len(result) == len(text)


def test_blank_ignores_spans_past_the_end() -> None:
    assert blank("abc", [TextRange(2, 10)]) == "ab "
    assert blank("abc", []) == "abc"


def test_masked_view_merges_spans() -> None:
    view = MaskedView("x" * 10, (TextRange(6, 8), TextRange(1, 3), TextRange(3, 4)))

    assert view.masked == (TextRange(1, 4), TextRange(6, 8))
    assert len(view) == 10


def test_is_masked_detects_any_overlap() -> None:
    view = MaskedView("x" * 20, (TextRange(2, 5), TextRange(10, 12)))

    assert view.is_masked(TextRange(4, 6))
    assert view.is_masked(TextRange(0, 3))
    assert view.is_masked(TextRange(0, 20))
    assert view.is_masked(TextRange(11, 11))
    assert not view.is_masked(TextRange(5, 10))
    assert not view.is_masked(TextRange(0, 2))
    assert not view.is_masked(TextRange(12, 20))
    assert not view.is_masked(TextRange(5, 5))


def test_identity_view_masks_nothing() -> None:
    view = MaskedView.identity("hello")

    assert view.text == "hello"
    assert not view.is_masked(TextRange(0, 5))


def test_get_masker_dispatches_on_format() -> None:
    assert isinstance(get_masker(DocumentFormat.MARKDOWN), MarkdownMasker)
    assert isinstance(get_masker(DocumentFormat.PLAIN), PlainMasker)
    assert get_masker(DocumentFormat.MARKDOWN, mask_frontmatter=True).rule_names[0] == "frontmatter"


def test_find_html_spans_handles_quoted_angle_brackets() -> None:
    text = '<a title="x > y">link</a>'

    assert find_html_spans(text) == [TextRange(0, 17), TextRange(21, 25)]


def test_find_html_spans_self_closing_raw_element() -> None:
    text = "<code/>after"

    assert find_html_spans(text) == [TextRange(0, 7)]


def test_find_html_spans_declarations_and_instructions() -> None:
    text = "<!DOCTYPE html><?xml version='1.0'?>Body"

    assert find_html_spans(text) == [TextRange(0, 15), TextRange(15, 36)]
