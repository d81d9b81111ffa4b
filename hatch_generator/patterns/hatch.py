"""Directional hatch fill for an axis-aligned rectangle."""

import math
from typing import Iterator, List

from ..geometry import HatchLine, Point, Rectangle
from ..geometry.angle import (
    AngleFamily,
    classify_angle,
    direction_vectors,
    normalize_angle,
)
from ..geometry.clipping import clip_line_to_rectangle


class InvalidArgumentError(ValueError):
    """Raised when a hatch parameter cannot produce a pattern."""


class InvalidStepError(InvalidArgumentError):
    """Raised when the hatch step is not a positive number."""


class InvalidAngleError(InvalidArgumentError):
    """Raised when the hatch angle is infinite or NaN."""


def validate_step(step: float) -> None:
    """Reject steps that would generate nothing sensible."""
    if not step > 0:
        raise InvalidStepError("step must be greater than zero")
    if math.isinf(step):
        raise InvalidStepError("step must be finite")


def validate_angle(angle_degrees: float) -> None:
    if not math.isfinite(angle_degrees):
        raise InvalidAngleError(f"angle must be a finite number of degrees, got {angle_degrees}")


def _positions(start: float, stop: float, step: float) -> Iterator[float]:
    """Yield start, start + step, ... up to stop inclusive.

    A negative step counts down. Positions are computed from the index so
    rounding error does not build up over long runs.
    """
    i = 0
    value = start
    while (value <= stop) if step > 0 else (value >= stop):
        yield value
        i += 1
        value = start + i * step


def _oblique_lines(rectangle: Rectangle, angle: float, step: float) -> List[HatchLine]:
    direction, perp = direction_vectors(angle)
    center = rectangle.center
    half = rectangle.diagonal / 2

    lines: List[HatchLine] = []
    for offset in _positions(-half, half, step):
        # Candidate spans the whole diagonal so it always crosses the rectangle
        mid_x = center.x + perp.x * offset
        mid_y = center.y + perp.y * offset
        candidate = HatchLine(
            x1=mid_x - direction.x * half,
            y1=mid_y - direction.y * half,
            x2=mid_x + direction.x * half,
            y2=mid_y + direction.y * half,
        )

        clipped = clip_line_to_rectangle(candidate, rectangle)
        if clipped is not None:
            lines.append(clipped)

    return lines


def generate_hatch_lines(
    rectangle: Rectangle,
    angle_degrees: float,
    step: float,
    angle_tolerance: float = 0.0,
) -> List[HatchLine]:
    """Generate parallel hatch lines clipped to a rectangle.

    Lines run along ``angle_degrees`` (counter-clockwise from the +x axis)
    and are spaced ``step`` apart along the perpendicular. Axis-aligned
    angles are enumerated directly; every other angle is swept with
    candidates as long as the rectangle diagonal and clipped.

    Args:
        rectangle: Region to fill
        angle_degrees: Hatch angle, any real value
        step: Distance between adjacent lines, must be positive
        angle_tolerance: Degrees within which an angle snaps to an axis
            family (0 compares exactly)

    Returns:
        Lines in generation order (increasing offset or coordinate;
        top-down for 180 degrees)

    Raises:
        InvalidStepError: If step is not greater than zero
        InvalidAngleError: If the angle is infinite or NaN
    """
    validate_step(step)
    validate_angle(angle_degrees)

    angle = normalize_angle(angle_degrees)
    family = classify_angle(angle, angle_tolerance)
    bottom_left, top_right = rectangle.bottom_left, rectangle.top_right

    if family is AngleFamily.HORIZONTAL:
        return [
            HatchLine(x1=bottom_left.x, y1=y, x2=top_right.x, y2=y)
            for y in _positions(bottom_left.y, top_right.y, step)
        ]
    if family is AngleFamily.HORIZONTAL_REVERSED:
        return [
            HatchLine(x1=bottom_left.x, y1=y, x2=top_right.x, y2=y)
            for y in _positions(top_right.y, bottom_left.y, -step)
        ]
    if family is AngleFamily.VERTICAL:
        return [
            HatchLine(x1=x, y1=bottom_left.y, x2=x, y2=top_right.y)
            for x in _positions(bottom_left.x, top_right.x, step)
        ]
    return _oblique_lines(rectangle, angle, step)


def hatch_contour(contour: List[Point], angle_degrees: float, step: float) -> List[HatchLine]:
    """Hatch the bounding rectangle of a contour."""
    return generate_hatch_lines(Rectangle.from_contour(contour), angle_degrees, step)
