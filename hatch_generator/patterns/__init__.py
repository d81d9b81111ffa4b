"""Fill pattern generators."""

from .hatch import (
    InvalidAngleError,
    InvalidArgumentError,
    InvalidStepError,
    generate_hatch_lines,
    hatch_contour,
)

__all__ = [
    "InvalidAngleError",
    "InvalidArgumentError",
    "InvalidStepError",
    "generate_hatch_lines",
    "hatch_contour",
]
