"""SVG output utilities for hatch-generator."""

import sys
from typing import List, Optional
from xml.sax.saxutils import escape

from .geometry import HatchLine, Rectangle


def _num(value: float) -> str:
    return f"{value:g}"


def _attr(value: str) -> str:
    """Escape a value for a single-quoted attribute."""
    return escape(str(value), {"'": "&apos;", '"': "&quot;"})


def line_to_svg_element(
    line: HatchLine,
    scale: float = 1.0,
    stroke: str = 'black',
    stroke_width: str = '0.5'
) -> str:
    """Render one line as an SVG <line> element with scaled coordinates."""
    return (
        f"<line x1='{_num(line.x1 * scale)}' y1='{_num(line.y1 * scale)}' "
        f"x2='{_num(line.x2 * scale)}' y2='{_num(line.y2 * scale)}' "
        f"stroke='{_attr(stroke)}' stroke-width='{_attr(stroke_width)}'/>"
    )


def lines_to_svg_path(lines: List[HatchLine], scale: float = 1.0) -> str:
    """Join lines into one path d attribute, a move and a draw per line."""
    return ' '.join(
        f"M{_num(line.x1 * scale)},{_num(line.y1 * scale)} "
        f"L{_num(line.x2 * scale)},{_num(line.y2 * scale)}"
        for line in lines
    )


def lines_to_svg_path_element(
    lines: List[HatchLine],
    scale: float = 1.0,
    stroke: str = 'black',
    stroke_width: str = '0.5'
) -> str:
    """Render lines as a single unfilled <path> element."""
    return (
        f"<path d='{lines_to_svg_path(lines, scale)}' fill='none' "
        f"stroke='{_attr(stroke)}' stroke-width='{_attr(stroke_width)}'/>"
    )


def create_svg_from_lines(
    lines: List[HatchLine],
    rectangle: Optional[Rectangle] = None,
    scale: float = 10.0,
    width: str = '300',
    height: str = '200',
    stroke: str = 'black',
    stroke_width: str = '0.5',
    outline_stroke: str = 'red',
    outline_width: str = '1',
    compact: bool = False
) -> str:
    """Create a complete SVG document from hatch lines.

    Args:
        lines: Hatch line segments
        rectangle: Hatched region, drawn as an outline after the lines
        scale: Factor applied to every coordinate
        width: SVG width attribute
        height: SVG height attribute
        stroke: Hatch stroke color
        stroke_width: Hatch stroke width
        outline_stroke: Rectangle outline color
        outline_width: Rectangle outline width
        compact: Emit the hatch as one <path> instead of one <line> each

    Returns:
        Complete SVG document as string
    """
    attrs = ["xmlns='http://www.w3.org/2000/svg'"]
    if width:
        attrs.append(f"width='{_attr(width)}'")
    if height:
        attrs.append(f"height='{_attr(height)}'")

    if compact:
        elements = [lines_to_svg_path_element(lines, scale, stroke, stroke_width)] if lines else []
    else:
        elements = [line_to_svg_element(line, scale, stroke, stroke_width) for line in lines]
    if rectangle is not None:
        elements.extend(
            line_to_svg_element(edge, scale, outline_stroke, outline_width)
            for edge in rectangle.edges()
        )

    body = ''.join(f"{element}\n" for element in elements)
    return f"<svg {' '.join(attrs)}>\n{body}</svg>"


def write_svg(content: str, path: Optional[str] = None):
    """Write SVG content to file or stdout.

    Args:
        content: SVG content
        path: File path, or None to write to stdout
    """
    if path is None or path == '-':
        sys.stdout.write(content)
    else:
        with open(path, 'w') as f:
            f.write(content)
