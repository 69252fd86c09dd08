"""Line-indexed, read-only text storage consumed by the coordinate queries."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Protocol, Tuple

import regex

from text_coords.errors import fail
from text_coords.runtime import telemetry

# CRLF first so it wins over a lone CR.
_LINE_BREAK = regex.compile(r"\r\n|[\n\x0b\x0c\r\x85\u2028\u2029]")


class TextView(Protocol):
    """What ``coords_at_pos`` / ``pos_at_coords`` need from a text store.

    Indices are codepoint offsets. A line includes its terminator, and text
    that ends with a terminator has a trailing empty line.
    """

    def len_chars(self) -> int:
        ...

    def len_lines(self) -> int:
        ...

    def char_to_line(self, char_idx: int) -> int:
        ...

    def line_to_char(self, line_idx: int) -> int:
        ...

    def line(self, line_idx: int) -> str:
        ...

    def slice(self, start: int, end: int) -> str:
        ...


@dataclass(frozen=True, slots=True)
class TextDocument:
    """Immutable ``TextView`` backed by a ``str`` and a table of line starts."""

    source: str = ""
    line_starts: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        starts = [0]
        starts.extend(match.end() for match in _LINE_BREAK.finditer(self.source))
        object.__setattr__(self, "line_starts", tuple(starts))

    @classmethod
    def from_text(cls, text: str) -> "TextDocument":
        with telemetry.span("text::index", metadata={"chars": len(text)}) as handle:
            document = cls(source=text)
            handle.add_metadata("lines", document.len_lines())
        return document

    def __len__(self) -> int:
        return len(self.source)

    def __str__(self) -> str:
        return self.source

    def len_chars(self) -> int:
        return len(self.source)

    def len_lines(self) -> int:
        return len(self.line_starts)

    def char_to_line(self, char_idx: int) -> int:
        if not 0 <= char_idx <= len(self.source):
            fail("Character index out of range", index=char_idx)
        return bisect_right(self.line_starts, char_idx) - 1

    def line_to_char(self, line_idx: int) -> int:
        """Start of ``line_idx``; ``len_lines()`` itself maps to the end."""

        if line_idx == len(self.line_starts):
            return len(self.source)
        if not 0 <= line_idx < len(self.line_starts):
            fail("Line index out of range", index=line_idx)
        return self.line_starts[line_idx]

    def line(self, line_idx: int) -> str:
        if not 0 <= line_idx < len(self.line_starts):
            fail("Line index out of range", index=line_idx)
        return self.source[self.line_to_char(line_idx) : self.line_to_char(line_idx + 1)]

    def lines(self) -> Tuple[str, ...]:
        return tuple(self.line(idx) for idx in range(self.len_lines()))

    def slice(self, start: int, end: int) -> str:
        if not 0 <= start <= end <= len(self.source):
            fail(f"Invalid slice {start}..{end}", index=start)
        return self.source[start:end]


__all__ = ["TextDocument", "TextView"]
