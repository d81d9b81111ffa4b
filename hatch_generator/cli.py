"""Command-line interface for hatch-generator."""

import math
import sys
import time
import click

from .config import ConfigError, HatchSettings, load_settings
from .geometry import HatchLine, Point, Rectangle, clip_line_to_rectangle
from .patterns import InvalidArgumentError, generate_hatch_lines
from .svg_io import create_svg_from_lines, write_svg


def format_line(number: int, line: HatchLine) -> str:
    return f"Line {number}: ({line.x1:g},{line.y1:g}) -> ({line.x2:g},{line.y2:g})"


@click.group()
@click.version_option()
def main():
    """hatch-generator: directional hatch fills for rectangles.

    Generates parallel lines at a given angle and spacing, clips them to a
    rectangle with the Cohen-Sutherland algorithm and writes an SVG.

    Examples:

        hatch-gen generate --angle 45 --step 1

        hatch-gen generate --angle 30 --step 0.5 --rect 0 0 40 20 -o out.svg
    """
    pass


@main.command()
@click.option('--angle', '-a', type=float, default=None,
              help='Hatch angle in degrees (default: 45)')
@click.option('--step', '-s', type=float, default=None,
              help='Distance between hatch lines (default: 1)')
@click.option('--rect', type=float, nargs=4, default=None,
              metavar='X0 Y0 X1 Y1',
              help='Two opposite rectangle corners (default: 0 0 20 10)')
@click.option('-o', '--output', default=None,
              help='Output SVG file, - for stdout (default: hatch.svg)')
@click.option('--scale', type=float, default=None,
              help='Coordinate scale factor for the SVG (default: 10)')
@click.option('--width', default=None, help='SVG width attribute (default: 300)')
@click.option('--height', default=None, help='SVG height attribute (default: 200)')
@click.option('--stroke', default=None, help='Hatch stroke color (default: black)')
@click.option('--stroke-width', default=None, help='Hatch stroke width (default: 0.5)')
@click.option('--compact/--no-compact', default=None,
              help='Write the hatch as one <path> instead of <line> elements')
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              default=None, help='JSON settings file; options given here override it')
@click.option('--quiet', '-q', is_flag=True, help='Do not list the generated lines')
@click.option('--verbose', '-v', is_flag=True, help='Print timing and statistics')
def generate(angle, step, rect, output, scale, width, height, stroke, stroke_width,
             compact, config_path, quiet, verbose):
    """Generate a hatch pattern and write it as SVG.

    Every generated line is listed on stdout as
    "Line N: (x1,y1) -> (x2,y2)" before the SVG is written.
    """
    start_time = time.time()

    try:
        settings = load_settings(config_path) if config_path else HatchSettings()
    except (OSError, ConfigError) as e:
        click.echo(f"Error reading config: {e}", err=True)
        sys.exit(1)

    settings = settings.with_overrides(
        angle=angle, step=step, rect=rect, output=output, scale=scale,
        width=width, height=height, stroke=stroke, stroke_width=stroke_width,
        compact=compact,
    )

    try:
        rectangle = settings.rectangle()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    try:
        lines = generate_hatch_lines(
            rectangle, settings.angle, settings.step,
            angle_tolerance=settings.angle_tolerance,
        )
    except InvalidArgumentError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    # Keep stdout clean for the document when it is the output
    to_stderr = settings.output == '-'

    if verbose:
        click.echo(
            f"Generated {len(lines)} lines at {settings.angle:g} degrees, "
            f"step {settings.step:g}", err=True)

    if not quiet:
        for number, line in enumerate(lines, start=1):
            click.echo(format_line(number, line), err=to_stderr)

    output_svg = create_svg_from_lines(
        lines,
        rectangle=rectangle,
        scale=settings.scale,
        width=settings.width,
        height=settings.height,
        stroke=settings.stroke,
        stroke_width=settings.stroke_width,
        outline_stroke=settings.outline_stroke,
        outline_width=settings.outline_width,
        compact=settings.compact,
    )

    try:
        write_svg(output_svg, settings.output)
    except OSError as e:
        click.echo(f"Error writing output: {e}", err=True)
        sys.exit(1)

    if not to_stderr:
        click.echo(f"SVG file generated: {settings.output}")

    elapsed = time.time() - start_time
    if verbose:
        click.echo(f"Completed in {elapsed:.3f}s", err=True)


@main.command()
@click.argument('x1', type=float)
@click.argument('y1', type=float)
@click.argument('x2', type=float)
@click.argument('y2', type=float)
@click.option('--rect', type=float, nargs=4, default=(0.0, 0.0, 20.0, 10.0),
              show_default=True, metavar='X0 Y0 X1 Y1',
              help='Two opposite rectangle corners')
def clip(x1, y1, x2, y2, rect):
    """Clip the segment (X1,Y1)-(X2,Y2) to a rectangle.

    Use -- before negative coordinates, e.g. hatch-gen clip -- -5 5 25 5
    """
    if not all(math.isfinite(v) for v in (x1, y1, x2, y2)):
        click.echo("Error: line coordinates must be finite numbers", err=True)
        sys.exit(1)

    try:
        rectangle = Rectangle.from_corners(Point(rect[0], rect[1]), Point(rect[2], rect[3]))
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    clipped = clip_line_to_rectangle(HatchLine(x1, y1, x2, y2), rectangle)

    if clipped is None:
        click.echo("No intersection")
    else:
        click.echo(format_line(1, clipped))


if __name__ == '__main__':
    main()
