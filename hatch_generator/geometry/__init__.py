"""Geometry utilities for hatch-generator."""

from .types import Point, HatchLine, Rectangle
from .angle import AngleFamily, normalize_angle, direction_vectors, classify_angle
from .clipping import OutCode, compute_out_code, clip_line_to_rectangle

__all__ = [
    "Point",
    "HatchLine",
    "Rectangle",
    "AngleFamily",
    "normalize_angle",
    "direction_vectors",
    "classify_angle",
    "OutCode",
    "compute_out_code",
    "clip_line_to_rectangle",
]
