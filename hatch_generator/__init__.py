"""hatch-generator: directional hatch fills clipped to a rectangle."""

__version__ = "0.1.0"

from .patterns import (
    generate_hatch_lines,
    InvalidArgumentError,
    InvalidAngleError,
    InvalidStepError,
)
from .geometry import Point, HatchLine, Rectangle, clip_line_to_rectangle

__all__ = [
    "generate_hatch_lines",
    "clip_line_to_rectangle",
    "InvalidArgumentError",
    "InvalidAngleError",
    "InvalidStepError",
    "Point",
    "HatchLine",
    "Rectangle",
]
