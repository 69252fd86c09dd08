"""Position value type and index/coordinate conversions."""

from .mapping import Coords, coords_at_pos, pos_at_coords
from .position import Point, Position
from .validation import ensure_char_index, ensure_coords

__all__ = [
    "Coords",
    "Point",
    "Position",
    "coords_at_pos",
    "ensure_char_index",
    "ensure_coords",
    "pos_at_coords",
]
