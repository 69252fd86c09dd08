"""Line terminator classification."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .document import TextView


class LineEnding(str, Enum):
    """Every sequence that ends a line. ``CRLF`` is a single unit."""

    CRLF = "\r\n"
    LF = "\n"
    VT = "\x0b"
    FF = "\x0c"
    CR = "\r"
    NEL = "\x85"
    LS = "\u2028"
    PS = "\u2029"

    @property
    def len_chars(self) -> int:
        return len(self.value)

    @classmethod
    def from_char(cls, ch: str) -> Optional["LineEnding"]:
        if len(ch) != 1:
            return None
        return _BY_VALUE.get(ch)

    @classmethod
    def from_str(cls, text: str) -> Optional["LineEnding"]:
        return _BY_VALUE.get(text)


_BY_VALUE = {ending.value: ending for ending in LineEnding}


def char_is_line_ending(ch: str) -> bool:
    return LineEnding.from_char(ch) is not None


def str_is_line_ending(text: str) -> bool:
    return LineEnding.from_str(text) is not None


def get_line_ending(line: str) -> Optional[LineEnding]:
    """Return the terminator ``line`` ends with, if any."""

    if line.endswith("\r\n"):
        return LineEnding.CRLF
    if not line:
        return None
    return LineEnding.from_char(line[-1])


def line_end_char_index(text: "TextView", line: int) -> int:
    """Index just past the last content character of ``line``.

    For a terminated line this is where its line ending starts; for the last
    line of an unterminated text it is the end of the text.
    """

    content = text.line(line)
    ending = get_line_ending(content)
    trailing = ending.len_chars if ending is not None else 0
    return text.line_to_char(line) + len(content) - trailing


__all__ = [
    "LineEnding",
    "char_is_line_ending",
    "get_line_ending",
    "line_end_char_index",
    "str_is_line_ending",
]
