"""Tests for count_words_from_html — server-side essay word counts."""

from slate.core.text_metrics import count_words_from_html


def test_empty_and_none_count_zero():
    assert count_words_from_html("") == 0
    assert count_words_from_html(None) == 0


def test_plain_text_counts_words():
    assert count_words_from_html("one two  three") == 3


def test_tags_are_stripped_and_act_as_separators():
    html = "<p>Hello <strong>brave</strong> new</p><p>world</p>"
    assert count_words_from_html(html) == 4


def test_markup_only_counts_zero():
    assert count_words_from_html("<p></p><br/>") == 0


def test_newlines_and_tabs_collapse():
    assert count_words_from_html("a\n\tb\r\n c") == 3
