"""Cohen-Sutherland line clipping against an axis-aligned rectangle."""

from enum import IntFlag
from typing import Optional

from .types import HatchLine, Rectangle


class OutCode(IntFlag):
    """Position of a point relative to a rectangle's four half-planes."""
    INSIDE = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


def compute_out_code(x: float, y: float, rectangle: Rectangle) -> OutCode:
    """Compute the outcode of (x, y) against a rectangle."""
    bottom_left, top_right = rectangle.bottom_left, rectangle.top_right

    code = OutCode.INSIDE
    if x < bottom_left.x:
        code |= OutCode.LEFT
    elif x > top_right.x:
        code |= OutCode.RIGHT

    if y < bottom_left.y:
        code |= OutCode.BOTTOM
    elif y > top_right.y:
        code |= OutCode.TOP

    return code


def clip_line_to_rectangle(line: HatchLine, rectangle: Rectangle) -> Optional[HatchLine]:
    """Clip a line segment to a rectangle.

    Endpoints outside the rectangle are moved onto the violated edge one
    edge at a time (TOP, BOTTOM, RIGHT, LEFT priority) until both are
    inside, or until both share an outside half-plane.

    Args:
        line: Segment to clip. It is not modified.
        rectangle: Clipping bounds.

    Returns:
        The trimmed segment, or None if the segment misses the rectangle.
    """
    bottom_left, top_right = rectangle.bottom_left, rectangle.top_right
    x0, y0, x1, y1 = line.x1, line.y1, line.x2, line.y2

    outcode0 = compute_out_code(x0, y0, rectangle)
    outcode1 = compute_out_code(x1, y1, rectangle)

    while True:
        if not (outcode0 | outcode1):
            return HatchLine(x0, y0, x1, y1)
        if outcode0 & outcode1:
            return None

        # A nonzero delta on the tested axis is guaranteed: the bit is set
        # for exactly one endpoint.
        outcode_out = outcode0 if outcode0 else outcode1

        if outcode_out & OutCode.TOP:
            x = x0 + (x1 - x0) * (top_right.y - y0) / (y1 - y0)
            y = top_right.y
        elif outcode_out & OutCode.BOTTOM:
            x = x0 + (x1 - x0) * (bottom_left.y - y0) / (y1 - y0)
            y = bottom_left.y
        elif outcode_out & OutCode.RIGHT:
            y = y0 + (y1 - y0) * (top_right.x - x0) / (x1 - x0)
            x = top_right.x
        else:
            y = y0 + (y1 - y0) * (bottom_left.x - x0) / (x1 - x0)
            x = bottom_left.x

        if outcode_out == outcode0:
            x0, y0 = x, y
            outcode0 = compute_out_code(x0, y0, rectangle)
        else:
            x1, y1 = x, y
            outcode1 = compute_out_code(x1, y1, rectangle)
