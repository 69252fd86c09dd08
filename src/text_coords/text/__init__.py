"""Text storage, line endings and grapheme handling."""

from .document import TextDocument, TextView
from .graphemes import (
    ensure_grapheme_boundary_next,
    ensure_grapheme_boundary_prev,
    grapheme_width,
    is_grapheme_boundary,
    iter_graphemes,
    split_graphemes,
)
from .line_ending import (
    LineEnding,
    char_is_line_ending,
    get_line_ending,
    line_end_char_index,
    str_is_line_ending,
)

__all__ = [
    "LineEnding",
    "TextDocument",
    "TextView",
    "char_is_line_ending",
    "ensure_grapheme_boundary_next",
    "ensure_grapheme_boundary_prev",
    "get_line_ending",
    "grapheme_width",
    "is_grapheme_boundary",
    "iter_graphemes",
    "line_end_char_index",
    "split_graphemes",
    "str_is_line_ending",
]
