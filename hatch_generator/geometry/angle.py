"""Angle normalization and hatch direction vectors."""

import math
from enum import Enum
from typing import Tuple

from .types import Point


class AngleFamily(Enum):
    """How a normalized angle is hatched."""
    HORIZONTAL = "horizontal"
    HORIZONTAL_REVERSED = "horizontal_reversed"
    VERTICAL = "vertical"
    OBLIQUE = "oblique"


def normalize_angle(degrees: float) -> float:
    """Reduce an angle in degrees to the range [0, 360).

    Negative remainders are shifted up by a full turn. A negative input
    small enough to round away may come back as exactly 360.0.
    """
    normalized = math.fmod(degrees, 360.0)
    if normalized < 0:
        normalized += 360.0
    return normalized


def direction_vectors(degrees: float) -> Tuple[Point, Point]:
    """Return (direction, perpendicular) unit vectors for an angle in degrees."""
    radians = math.radians(degrees)
    direction = Point(math.cos(radians), math.sin(radians))
    perpendicular = Point(-direction.y, direction.x)
    return direction, perpendicular


def _matches(angle: float, target: float, tolerance: float) -> bool:
    if tolerance <= 0:
        return angle == target
    return abs(angle - target) <= tolerance


def classify_angle(degrees: float, tolerance: float = 0.0) -> AngleFamily:
    """Classify a normalized angle into its hatch family.

    With the default tolerance the comparison is exact, so an angle that is
    only approximately 90 (e.g. 89.9999999) is hatched as OBLIQUE.
    """
    if _matches(degrees, 0.0, tolerance) or _matches(degrees, 360.0, tolerance):
        return AngleFamily.HORIZONTAL
    if _matches(degrees, 180.0, tolerance):
        return AngleFamily.HORIZONTAL_REVERSED
    if _matches(degrees, 90.0, tolerance) or _matches(degrees, 270.0, tolerance):
        return AngleFamily.VERTICAL
    return AngleFamily.OBLIQUE
