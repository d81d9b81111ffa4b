"""Type definitions for hatch-generator geometry."""

import math
from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class Point:
    """2D point."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass
class HatchLine:
    """A line segment defined by two endpoints."""
    x1: float
    y1: float
    x2: float
    y2: float

    @classmethod
    def from_points(cls, start: Point, end: Point) -> "HatchLine":
        return cls(start.x, start.y, end.x, end.y)

    @property
    def start(self) -> Point:
        return Point(self.x1, self.y1)

    @property
    def end(self) -> Point:
        return Point(self.x2, self.y2)

    @property
    def length(self) -> float:
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)


def _require_finite(points: List[Point]) -> None:
    # min/max would silently drop NaN coordinates
    if not all(math.isfinite(v) for p in points for v in p):
        raise ValueError("rectangle corners must be finite numbers")


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle given by its bottom-left and top-right corners."""
    bottom_left: Point
    top_right: Point

    def __post_init__(self):
        _require_finite([self.bottom_left, self.top_right])
        if self.bottom_left.x > self.top_right.x or self.bottom_left.y > self.top_right.y:
            raise ValueError(
                f"bottom_left {tuple(self.bottom_left)} must not lie above or "
                f"right of top_right {tuple(self.top_right)}"
            )

    @classmethod
    def from_corners(cls, a: Point, b: Point) -> "Rectangle":
        """Build a rectangle from any two opposite corners."""
        _require_finite([a, b])
        return cls(
            Point(min(a.x, b.x), min(a.y, b.y)),
            Point(max(a.x, b.x), max(a.y, b.y)),
        )

    @classmethod
    def from_contour(cls, contour: Iterable[Point]) -> "Rectangle":
        """Bounding rectangle of a contour."""
        points = list(contour)
        if not points:
            raise ValueError("cannot bound an empty contour")
        _require_finite(points)
        return cls(
            Point(min(p.x for p in points), min(p.y for p in points)),
            Point(max(p.x for p in points), max(p.y for p in points)),
        )

    @property
    def width(self) -> float:
        return self.top_right.x - self.bottom_left.x

    @property
    def height(self) -> float:
        return self.top_right.y - self.bottom_left.y

    @property
    def diagonal(self) -> float:
        return math.sqrt(self.width * self.width + self.height * self.height)

    @property
    def center(self) -> Point:
        return Point(
            (self.bottom_left.x + self.top_right.x) / 2,
            (self.bottom_left.y + self.top_right.y) / 2,
        )

    def corners(self) -> List[Point]:
        """Corners counter-clockwise, starting at bottom-left."""
        bl, tr = self.bottom_left, self.top_right
        return [bl, Point(tr.x, bl.y), tr, Point(bl.x, tr.y)]

    def edges(self) -> List[HatchLine]:
        """The four outline segments, in corner order."""
        corners = self.corners()
        return [
            HatchLine.from_points(corners[i], corners[(i + 1) % len(corners)])
            for i in range(len(corners))
        ]
