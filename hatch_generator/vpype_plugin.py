"""vpype plugin for hatch-generator.

This module provides vpype integration, hatching the bounding rectangle
of every closed path in a layer.

Usage:
    vpype read input.svg hatch --angle 45 --step 2 write output.svg
"""

try:
    import vpype
    import vpype_cli
    import numpy as np
    VPYPE_AVAILABLE = True
except ImportError:
    VPYPE_AVAILABLE = False

if VPYPE_AVAILABLE:
    import click

    from .geometry import Point
    from .patterns import hatch_contour

    CLOSED_TOLERANCE = 0.1

    def _is_closed(line) -> bool:
        return len(line) >= 3 and abs(line[-1] - line[0]) <= CLOSED_TOLERANCE

    @click.command()
    @click.option('--angle', '-a', default=45.0, type=float,
                  help='Hatch angle in degrees')
    @click.option('--step', '-s', default=1.0, type=vpype_cli.LengthType(),
                  help='Distance between hatch lines')
    @click.option('--keep/--no-keep', default=True,
                  help='Keep the source paths alongside the hatching')
    @vpype_cli.layer_processor
    def hatch(lines: vpype.LineCollection, angle: float, step: float,
              keep: bool) -> vpype.LineCollection:
        """Fill the bounding rectangle of each closed path with hatch lines."""
        result = vpype.LineCollection()
        if keep:
            result.extend(lines)

        for line in lines:
            if not _is_closed(line):
                continue

            contour = [Point(float(p.real), float(p.imag)) for p in line]
            for fill_line in hatch_contour(contour, angle, step):
                result.append(np.array([
                    complex(fill_line.x1, fill_line.y1),
                    complex(fill_line.x2, fill_line.y2),
                ]))

        return result
