"""Grapheme cluster segmentation, display width and boundary snapping."""

from __future__ import annotations

from typing import Iterator

import regex
from wcwidth import wcswidth

from text_coords.errors import fail
from text_coords.runtime.settings import get_settings

from .document import TextView

_GRAPHEME = regex.compile(r"\X")


def iter_graphemes(text: str) -> Iterator[str]:
    """Yield the extended grapheme clusters of ``text`` left to right."""

    for match in _GRAPHEME.finditer(text):
        yield match.group()


def split_graphemes(text: str) -> list[str]:
    return _GRAPHEME.findall(text)


def grapheme_width(grapheme: str) -> int:
    """Visual columns taken by one grapheme cluster.

    ASCII-led clusters (controls and ``\\r\\n`` included) are one column so
    they remain editable. Everything else goes through wcwidth and is clamped
    to one or two columns, the widths a terminal cell grid can hold.
    """

    if not grapheme:
        fail("Grapheme cluster cannot be empty")
    if grapheme[0] < "\x80":
        return 1
    width = wcswidth(grapheme, unicode_version=get_settings().unicode_version)
    return min(max(width, 1), 2)


def _line_clusters(text: TextView, char_idx: int) -> tuple[int, Iterator[str]]:
    # Clusters never cross a line break, so segmenting the line is enough.
    line = text.char_to_line(char_idx)
    start = text.line_to_char(line)
    return start, iter_graphemes(text.line(line))


def ensure_grapheme_boundary_prev(text: TextView, char_idx: int) -> int:
    """Round ``char_idx`` down to the nearest grapheme boundary."""

    if char_idx == text.len_chars():
        return char_idx
    boundary, clusters = _line_clusters(text, char_idx)
    for grapheme in clusters:
        if boundary + len(grapheme) > char_idx:
            break
        boundary += len(grapheme)
    return boundary


def ensure_grapheme_boundary_next(text: TextView, char_idx: int) -> int:
    """Round ``char_idx`` up to the nearest grapheme boundary."""

    if char_idx == text.len_chars():
        return char_idx
    boundary, clusters = _line_clusters(text, char_idx)
    for grapheme in clusters:
        if boundary >= char_idx:
            break
        boundary += len(grapheme)
    return boundary


def is_grapheme_boundary(text: TextView, char_idx: int) -> bool:
    return ensure_grapheme_boundary_prev(text, char_idx) == char_idx


__all__ = [
    "ensure_grapheme_boundary_next",
    "ensure_grapheme_boundary_prev",
    "grapheme_width",
    "is_grapheme_boundary",
    "iter_graphemes",
    "split_graphemes",
]
