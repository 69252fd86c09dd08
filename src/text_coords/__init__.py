"""Grapheme-aware mapping between character indices and visual positions."""

from .coords import Position, coords_at_pos, pos_at_coords
from .errors import CoordinateError
from .text import (
    LineEnding,
    TextDocument,
    TextView,
    ensure_grapheme_boundary_next,
    ensure_grapheme_boundary_prev,
    grapheme_width,
)

__all__ = [
    "CoordinateError",
    "LineEnding",
    "Position",
    "TextDocument",
    "TextView",
    "coords",
    "coords_at_pos",
    "ensure_grapheme_boundary_next",
    "ensure_grapheme_boundary_prev",
    "errors",
    "grapheme_width",
    "pos_at_coords",
    "runtime",
    "text",
]

__version__ = "0.1.0"
