#!/usr/bin/env python3
"""
Shapely comparison benchmark for rectangle hatching.
Builds the same candidate lines hatch-generator sweeps across a rectangle,
clips them with Shapely, and compares the result and timing against
hatch_generator.generate_hatch_lines.

Usage:
    python benchmark_shapely.py [step] [angle]
    python benchmark_shapely.py 0.05 30
"""

import time
import math
import sys

try:
    from shapely.geometry import LineString, box
except ImportError as e:
    print(f"Missing dependency: {e}")
    print("Install with: pip install shapely")
    sys.exit(1)

from hatch_generator import Point, Rectangle, generate_hatch_lines


def shapely_hatch_lines(rectangle: Rectangle, step: float, angle_deg: float) -> list[tuple]:
    """
    Generate hatch lines for a rectangle using Shapely for the clipping.
    Returns list of ((x1,y1), (x2,y2)) tuples.
    """
    bl, tr = rectangle.bottom_left, rectangle.top_right
    region = box(bl.x, bl.y, tr.x, tr.y)

    cx, cy = rectangle.center
    half = rectangle.diagonal / 2

    angle_rad = math.radians(angle_deg)
    cos_a, sin_a = math.cos(angle_rad), math.sin(angle_rad)

    lines = []
    i = 0
    offset = -half
    while offset <= half:
        p1_x = cx - sin_a * offset - half * cos_a
        p1_y = cy + cos_a * offset - half * sin_a
        p2_x = cx - sin_a * offset + half * cos_a
        p2_y = cy + cos_a * offset + half * sin_a

        clipped = LineString([(p1_x, p1_y), (p2_x, p2_y)]).intersection(region)

        if clipped.geom_type == 'LineString' and not clipped.is_empty:
            coords = list(clipped.coords)
            lines.append((coords[0], coords[-1]))

        i += 1
        offset = -half + i * step

    return lines


def max_endpoint_error(ours, theirs) -> float:
    """Largest endpoint distance between two line lists of equal length."""
    worst = 0.0
    for line, (start, end) in zip(ours, theirs):
        forward = max(math.dist((line.x1, line.y1), start), math.dist((line.x2, line.y2), end))
        backward = max(math.dist((line.x1, line.y1), end), math.dist((line.x2, line.y2), start))
        worst = max(worst, min(forward, backward))
    return worst


def benchmark(step: float = 0.05, angle: float = 30.0, repeats: int = 20):
    """Run the full benchmark."""
    rectangle = Rectangle(Point(0, 0), Point(200, 100))
    print(f"Rectangle 200x100, step={step}, angle={angle}, repeats={repeats}")

    start = time.perf_counter()
    for _ in range(repeats):
        ours = generate_hatch_lines(rectangle, angle, step)
    ours_time = (time.perf_counter() - start) / repeats

    start = time.perf_counter()
    for _ in range(repeats):
        theirs = shapely_hatch_lines(rectangle, step, angle)
    shapely_time = (time.perf_counter() - start) / repeats

    print()
    print("=" * 50)
    print("RESULTS")
    print("=" * 50)
    print(f"Lines (hatch-generator): {len(ours)}")
    print(f"Lines (Shapely):         {len(theirs)}")
    if len(ours) == len(theirs):
        print(f"Max endpoint error:      {max_endpoint_error(ours, theirs):.3g}")
    else:
        print("Line counts differ (grazing corner candidates)")
    print(f"hatch-generator:         {ours_time*1000:.2f}ms")
    print(f"Shapely:                 {shapely_time*1000:.2f}ms")
    print("=" * 50)


if __name__ == "__main__":
    step = float(sys.argv[1]) if len(sys.argv) > 1 else 0.05
    angle = float(sys.argv[2]) if len(sys.argv) > 2 else 30.0

    if step <= 0:
        print("Error: step must be greater than zero")
        print("Usage: python benchmark_shapely.py [step] [angle]")
        sys.exit(1)

    benchmark(step, angle)
