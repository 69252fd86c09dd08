"""Conversions between character indices and visual (row, column) positions."""

from __future__ import annotations

from typing import Tuple, Union

from text_coords.text.document import TextView
from text_coords.text.graphemes import (
    ensure_grapheme_boundary_prev,
    grapheme_width,
    iter_graphemes,
)
from text_coords.text.line_ending import line_end_char_index

from .position import Position
from .validation import ensure_char_index, ensure_coords

Coords = Union[Position, Tuple[int, int]]


def coords_at_pos(text: TextView, pos: int) -> Position:
    """Convert a character index to (row, visual column).

    An index that falls inside a grapheme cluster is first rounded down to the
    cluster start. The column is the summed width of the clusters between the
    start of the line and that index, so an index on a line terminator reports
    the column of the terminator itself.

    The same visual column is used for cursor placement and for the
    ``row:col`` readout; there is no separate character-count column.
    """

    ensure_char_index(text, pos)
    row = text.char_to_line(pos)
    line_start = text.line_to_char(row)
    pos = ensure_grapheme_boundary_prev(text, pos)
    col = sum(grapheme_width(g) for g in iter_graphemes(text.slice(line_start, pos)))
    return Position(row, col)


def pos_at_coords(text: TextView, coords: Coords, is_1_width: bool = False) -> int:
    """Convert (row, visual column) to a character index.

    ``is_1_width`` treats the position as a block cursor: the result never
    goes past the last content character of the line. With ``False`` the
    result may land on or after the line terminator and round-trips exactly
    with ``coords_at_pos``.

    Columns inside a wide cluster resolve to the start of that cluster, and
    columns past the end of the line resolve to the line end.
    """

    if not isinstance(coords, Position):
        coords = Position.from_pair(coords)
    row, col = ensure_coords(text, coords).to_point()

    line_start = text.line_to_char(row)
    if is_1_width:
        line_end = line_end_char_index(text, row)
    else:
        line_end = text.line_to_char(min(row + 1, text.len_lines()))

    prev_col = 0
    col_char_offset = 0
    for grapheme in iter_graphemes(text.slice(line_start, line_end)):
        next_col = prev_col + grapheme_width(grapheme)
        if next_col > col:
            break
        prev_col = next_col
        col_char_offset += len(grapheme)

    return line_start + col_char_offset


__all__ = ["Coords", "coords_at_pos", "pos_at_coords"]
