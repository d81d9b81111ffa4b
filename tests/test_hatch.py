"""Tests for the rectangle hatch generator."""

import math

import pytest
from hatch_generator import (
    HatchLine,
    InvalidAngleError,
    InvalidArgumentError,
    InvalidStepError,
    Point,
    Rectangle,
    generate_hatch_lines,
)
from hatch_generator.geometry import direction_vectors
from hatch_generator.patterns import hatch_contour

EPS = 1e-9


@pytest.fixture
def rect():
    """The 20x10 reference rectangle."""
    return Rectangle(Point(0, 0), Point(20, 10))


@pytest.fixture
def square():
    return Rectangle(Point(0, 0), Point(10, 10))


def segment_key(line: HatchLine, mirror_width: float = None):
    """Orientation-independent, rounded endpoints for set comparison."""
    x1, x2 = line.x1, line.x2
    if mirror_width is not None:
        x1, x2 = mirror_width - x1, mirror_width - x2
    a = (round(x1, 6), round(line.y1, 6))
    b = (round(x2, 6), round(line.y2, 6))
    return tuple(sorted((a, b)))


def solid_segments(lines, mirror_width=None):
    return {segment_key(line, mirror_width) for line in lines if line.length > 1e-6}


def test_horizontal_count(rect):
    """Angle 0 gives one full-width line per step, bottom to top."""
    lines = generate_hatch_lines(rect, 0, 1)
    assert lines == [HatchLine(0, y, 20, y) for y in range(11)]


def test_full_turn_is_horizontal(rect):
    assert generate_hatch_lines(rect, 360, 1) == generate_hatch_lines(rect, 0, 1)


def test_vertical_count(rect):
    """Angle 90 gives one full-height line per step, left to right."""
    lines = generate_hatch_lines(rect, 90, 1)
    assert lines == [HatchLine(x, 0, x, 10) for x in range(21)]


@pytest.mark.parametrize("angle", [270, -90, -270, 450])
def test_vertical_equivalents(rect, angle):
    assert generate_hatch_lines(rect, angle, 1) == generate_hatch_lines(rect, 90, 1)


def test_half_turn_is_reversed_horizontal(rect):
    """Angle 180 yields the horizontal lines top-down."""
    lines = generate_hatch_lines(rect, 180, 1)
    assert lines == list(reversed(generate_hatch_lines(rect, 0, 1)))
    assert generate_hatch_lines(rect, -180, 1) == lines


def test_fractional_step_stays_inside(rect):
    """Index-based positions never overshoot the far edge."""
    lines = generate_hatch_lines(rect, 0, 0.1)
    assert len(lines) in (100, 101)
    assert all(0 <= line.y1 <= 10 for line in lines)


def test_step_larger_than_rectangle(rect):
    assert generate_hatch_lines(rect, 0, 100) == [HatchLine(0, 0, 20, 0)]


@pytest.mark.parametrize("step", [0, -1, float('nan'), float('inf')])
def test_invalid_step(rect, step):
    """Non-positive steps are rejected before anything is generated."""
    with pytest.raises(InvalidStepError):
        generate_hatch_lines(rect, 45, step)


def test_invalid_step_is_value_error(rect):
    with pytest.raises(ValueError, match="greater than zero"):
        generate_hatch_lines(rect, 0, 0)


@pytest.mark.parametrize("angle", [float('inf'), float('-inf'), float('nan')])
def test_invalid_angle(rect, angle):
    """Infinite and NaN angles are rejected instead of hatching NaN lines."""
    with pytest.raises(InvalidAngleError, match="finite"):
        generate_hatch_lines(rect, angle, 1)


def test_invalid_arguments_share_a_base(rect):
    for angle, step in ((float('nan'), 1), (45, 0)):
        with pytest.raises(InvalidArgumentError):
            generate_hatch_lines(rect, angle, step)


@pytest.mark.parametrize("corner", [Point(float('nan'), 0), Point(0, float('inf'))])
def test_non_finite_rectangle(corner):
    with pytest.raises(ValueError, match="finite"):
        Rectangle.from_corners(Point(-1, -1), corner)


@pytest.mark.parametrize("angle", [15, 30, 45, 60, 120, 135, 200, 225, 330, -37.5, 1000])
def test_containment(rect, angle):
    """Every endpoint lies within the rectangle."""
    lines = generate_hatch_lines(rect, angle, 0.7)
    assert lines
    for line in lines:
        for x, y in (line.start, line.end):
            assert -EPS <= x <= 20 + EPS
            assert -EPS <= y <= 10 + EPS


@pytest.mark.parametrize("angle", [30, 45, 112.5, 300])
def test_oblique_lines_are_parallel(rect, angle):
    """Oblique lines all follow the hatch direction."""
    direction, _ = direction_vectors(angle)
    for line in generate_hatch_lines(rect, angle, 0.5):
        dx, dy = line.x2 - line.x1, line.y2 - line.y1
        assert abs(dx * direction.y - dy * direction.x) < 1e-9


@pytest.mark.parametrize("angle", [30, 45, 112.5, 300])
def test_oblique_spacing_and_order(rect, angle):
    """Consecutive lines are one step apart, in increasing offset."""
    step = 0.5
    _, perp = direction_vectors(angle)
    center = rect.center
    offsets = [
        (line.x1 - center.x) * perp.x + (line.y1 - center.y) * perp.y
        for line in generate_hatch_lines(rect, angle, step)
    ]
    assert len(offsets) > 2
    for a, b in zip(offsets, offsets[1:]):
        assert b - a == pytest.approx(step, abs=1e-9)


def test_oblique_lines_reach_the_boundary(rect):
    """Clipped lines end on the rectangle edges, not short of them."""
    for line in generate_hatch_lines(rect, 30, 1):
        for x, y in (line.start, line.end):
            on_edge = (
                math.isclose(x, 0, abs_tol=EPS) or math.isclose(x, 20, abs_tol=EPS)
                or math.isclose(y, 0, abs_tol=EPS) or math.isclose(y, 10, abs_tol=EPS)
            )
            assert on_edge


def test_opposite_angles_same_family(square):
    """45 and 225 degrees hatch a square with the same segments."""
    step = math.sqrt(2) / 2
    at_45 = solid_segments(generate_hatch_lines(square, 45, step))
    at_225 = solid_segments(generate_hatch_lines(square, 225, step))
    assert len(at_45) == 19
    assert at_45 == at_225


def test_perpendicular_family_is_mirror(square):
    """135 degrees is the left-right mirror of 45 degrees on a square."""
    step = math.sqrt(2) / 2
    at_45 = solid_segments(generate_hatch_lines(square, 45, step), mirror_width=10)
    at_135 = solid_segments(generate_hatch_lines(square, 135, step))
    assert at_45 == at_135


def test_near_axis_angle_is_oblique_by_default(rect):
    """An angle a hair off 90 goes through the clipped sweep."""
    lines = generate_hatch_lines(rect, 90.0000001, 1)
    assert lines != generate_hatch_lines(rect, 90, 1)
    snapped = generate_hatch_lines(rect, 90.0000001, 1, angle_tolerance=1e-3)
    assert snapped == generate_hatch_lines(rect, 90, 1)


@pytest.mark.parametrize("angle", [0, 90, 180, 45])
def test_degenerate_rectangle(angle):
    """A zero-area rectangle yields a single point-like line."""
    point = Rectangle(Point(3, 3), Point(3, 3))
    lines = generate_hatch_lines(point, angle, 1)
    assert len(lines) == 1
    assert lines[0].length == pytest.approx(0)


def test_offset_rectangle():
    """Rectangles away from the origin are hatched in place."""
    rect = Rectangle(Point(-30, 5), Point(-10, 15))
    lines = generate_hatch_lines(rect, 60, 2)
    assert lines
    for line in lines:
        assert -30 - EPS <= min(line.x1, line.x2) and max(line.x1, line.x2) <= -10 + EPS
        assert 5 - EPS <= min(line.y1, line.y2) and max(line.y1, line.y2) <= 15 + EPS


def test_hatch_contour():
    """Contours are hatched over their bounding corners."""
    contour = [Point(0, 0), Point(20, 0), Point(20, 10), Point(0, 10)]
    assert hatch_contour(contour, 0, 1) == generate_hatch_lines(
        Rectangle(Point(0, 0), Point(20, 10)), 0, 1)
