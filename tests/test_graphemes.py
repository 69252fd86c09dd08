import pytest

from text_coords import CoordinateError, TextDocument
from text_coords.text import (
    ensure_grapheme_boundary_next,
    ensure_grapheme_boundary_prev,
    grapheme_width,
    is_grapheme_boundary,
    iter_graphemes,
    split_graphemes,
)

COMBINING = "a\u0310e\u0301o\u0308\u0332\r\n"


def test_split_keeps_combining_marks_with_base() -> None:
    assert split_graphemes(COMBINING) == [
        "a\u0310",
        "e\u0301",
        "o\u0308\u0332",
        "\r\n",
    ]
    assert list(iter_graphemes(COMBINING)) == split_graphemes(COMBINING)


def test_split_empty_text() -> None:
    assert split_graphemes("") == []


def test_lone_carriage_return_is_its_own_cluster() -> None:
    assert split_graphemes("a\r\rb") == ["a", "\r", "\r", "b"]


def test_ascii_and_controls_are_one_column() -> None:
    assert grapheme_width("a") == 1
    assert grapheme_width("\t") == 1
    assert grapheme_width("\r\n") == 1
    assert grapheme_width("e\u0301") == 1


def test_wide_characters_are_two_columns() -> None:
    assert grapheme_width("\u4eca") == 2
    assert grapheme_width("\uff21") == 2
    assert grapheme_width("\u4eca\u0301") == 2


def test_emoji_sequences_are_at_most_two_columns() -> None:
    thumbs_up_medium = "\U0001f44d\U0001f3fd"
    family = "\U0001f468\u200d\U0001f469\u200d\U0001f467"

    assert split_graphemes(thumbs_up_medium) == [thumbs_up_medium]
    assert grapheme_width(thumbs_up_medium) == 2
    assert split_graphemes(family) == [family]
    assert grapheme_width(family) == 2


def test_devanagari_spacing_mark_cluster() -> None:
    assert split_graphemes("\u0915\u093f\u092e") == ["\u0915\u093f", "\u092e"]
    assert grapheme_width("\u0915\u093f") == 2
    assert grapheme_width("\u092e") == 1


def test_narrow_non_ascii_and_zero_width_floor() -> None:
    assert grapheme_width("\u00e9") == 1
    assert grapheme_width("\u200b") == 1
    assert grapheme_width("\x85") == 1


def test_empty_grapheme_is_rejected() -> None:
    with pytest.raises(CoordinateError):
        grapheme_width("")


def test_boundary_prev_snaps_into_cluster_start() -> None:
    text = TextDocument.from_text(COMBINING)

    expected = [0, 0, 2, 2, 4, 4, 4, 7, 7, 9]
    assert [ensure_grapheme_boundary_prev(text, idx) for idx in range(10)] == expected


def test_boundary_next_snaps_to_cluster_end() -> None:
    text = TextDocument.from_text(COMBINING)

    expected = [0, 2, 2, 4, 4, 7, 7, 7, 9, 9]
    assert [ensure_grapheme_boundary_next(text, idx) for idx in range(10)] == expected


def test_boundaries_across_lines() -> None:
    text = TextDocument.from_text("ab\r\ncd\u0301")

    assert ensure_grapheme_boundary_prev(text, 3) == 2
    assert ensure_grapheme_boundary_next(text, 3) == 4
    assert ensure_grapheme_boundary_prev(text, 6) == 5
    assert ensure_grapheme_boundary_next(text, 6) == 7
    assert is_grapheme_boundary(text, 4)
    assert not is_grapheme_boundary(text, 3)
    assert is_grapheme_boundary(text, text.len_chars())


def test_boundary_out_of_range_raises() -> None:
    text = TextDocument.from_text("abc")

    with pytest.raises(CoordinateError):
        ensure_grapheme_boundary_prev(text, 5)
