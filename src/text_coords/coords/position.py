"""Row/column value type for cursor and selection positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from text_coords.errors import fail
from text_coords.text.line_ending import char_is_line_ending

Point = Tuple[int, int]  # (row, column)


@dataclass(frozen=True, order=True, slots=True)
class Position:
    """A zero-indexed point in a text buffer.

    ``col`` is a visual column, not a codepoint offset. Ordering is by row,
    then column.
    """

    row: int = 0
    col: int = 0

    def __post_init__(self) -> None:
        for value in (self.row, self.col):
            if not isinstance(value, int) or isinstance(value, bool):
                fail("Position fields must be integers", position=(self.row, self.col))
        if self.row < 0 or self.col < 0:
            fail("Position fields must be non-negative", position=(self.row, self.col))

    @classmethod
    def origin(cls) -> "Position":
        return cls(0, 0)

    @classmethod
    def from_pair(cls, pair: Iterable[int]) -> "Position":
        try:
            row, col = pair
        except (TypeError, ValueError):
            fail("Expected a (row, col) pair", position=pair)
        return cls(row, col)

    def is_origin(self) -> bool:
        return self.row == 0 and self.col == 0

    def traverse(self, text: str) -> "Position":
        """Position reached after ``text`` is inserted here.

        Columns advance one per character, not per display cell; re-run
        ``coords_at_pos`` when the exact visual column matters.
        """

        row, col = self.row, self.col
        last = len(text) - 1
        for idx, ch in enumerate(text):
            if char_is_line_ending(ch) and not (
                ch == "\r" and idx < last and text[idx + 1] == "\n"
            ):
                row += 1
                col = 0
            else:
                col += 1
        return Position(row, col)

    def to_point(self) -> Point:
        """``(row, column)`` as taken by tree-sitter point arguments."""

        return (self.row, self.col)


__all__ = ["Point", "Position"]
