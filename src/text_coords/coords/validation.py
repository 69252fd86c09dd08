"""Precondition checks shared by the coordinate queries."""

from __future__ import annotations

from text_coords.errors import fail
from text_coords.text.document import TextView

from .position import Position


def ensure_char_index(text: TextView, char_idx: int) -> int:
    if char_idx < 0 or char_idx > text.len_chars():
        fail("Character index out of range", index=char_idx)
    return char_idx


def ensure_coords(text: TextView, coords: Position) -> Position:
    if coords.row >= text.len_lines():
        fail("Row out of range", position=coords)
    return coords
