"""Color collaborators: notation parsing and perceptual contrast."""

from .apca import contrast_score
from .parser import RGBA, parse_color

__all__ = ["RGBA", "contrast_score", "parse_color"]
