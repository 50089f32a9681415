"""SVG renderings of 3-d surfaces in isometric projection."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Iterator, Sequence
from itertools import chain

from .units import _go_g

WIDTH, HEIGHT = 600, 320  # canvas size in pixels
CELLS = 100  # number of grid cells
XYRANGE = 30.0  # axis ranges (-XYRANGE..+XYRANGE)
XYSCALE = WIDTH / 2 / XYRANGE  # pixels per x or y unit
ZSCALE = HEIGHT * 0.4  # pixels per z unit
ANGLE = math.pi / 6  # angle of the x and y axes (30 degrees)

_SIN30, _COS30 = math.sin(ANGLE), math.cos(ANGLE)

SurfaceFunc = Callable[[float, float], float]
Point = tuple[float, float]


def surface(x: float, y: float) -> float:
    """sin(r)/r, where r is the distance from the origin; NaN at the origin."""
    r = math.hypot(x, y)
    return math.sin(r) / r if r else math.nan


def eggbox(x: float, y: float) -> float:
    """An egg-box surface."""
    return math.sin(x) * math.cos(y)


def corner(i: int, j: int, f: SurfaceFunc = surface) -> Point:
    """Project the corner of grid cell (i, j) onto the canvas."""
    x = XYRANGE * (i / CELLS - 0.5)
    y = XYRANGE * (j / CELLS - 0.5)
    z = f(x, y)
    sx = WIDTH / 2 + (x - y) * _COS30 * XYSCALE
    sy = HEIGHT / 2 + (x + y) * _SIN30 * XYSCALE - z * ZSCALE
    return sx, sy


def has_nan(*args: float) -> bool:
    """Report whether any of the values is NaN."""
    return any(math.isnan(v) for v in args)


def polygons(
    f: SurfaceFunc = surface, skip_nan: bool = True
) -> Iterator[tuple[Point, Point, Point, Point]]:
    """Yield the four projected corners of every grid cell.

    With skip_nan set, cells with a NaN coordinate are left out.
    """
    for i in range(CELLS):
        for j in range(CELLS):
            cell = (corner(i + 1, j, f), corner(i, j, f), corner(i, j + 1, f),
                    corner(i + 1, j + 1, f))
            if skip_nan and has_nan(*chain.from_iterable(cell)):
                continue
            yield cell


def render_svg(f: SurfaceFunc = surface, skip_nan: bool = True) -> str:
    """Render the surface as an SVG document."""
    parts = [
        "<svg smlns='http://www.w3.org/2000/svg' "
        "style='stroke: grey; fill: white; stroke-width: 0.7' "
        f"width='{WIDTH}' height='{HEIGHT}'>"
    ]
    for cell in polygons(f, skip_nan):
        points = " ".join(f"{_go_g(x)},{_go_g(y)}" for x, y in cell)
        parts.append(f"<polygon points='{points}' />\n")
    parts.append("</svg>\n")
    return "".join(parts)


_FUNCTIONS: dict[str, SurfaceFunc] = {"surface": surface, "eggbox": eggbox}


def main(argv: Sequence[str] | None = None) -> int:
    """Write an SVG rendering of the chosen surface to standard output."""
    parser = argparse.ArgumentParser(
        prog="surface", description="Render a 3-d surface as SVG."
    )
    parser.add_argument("function", nargs="?", default="surface")
    parser.add_argument(
        "--keep-nan", action="store_true", help="keep cells with NaN coordinates"
    )
    options = parser.parse_args(list(sys.argv[1:] if argv is None else argv))
    f = _FUNCTIONS.get(options.function)
    if f is None:
        print("Did not provide valid argument: surface|eggbox", file=sys.stderr)
        return 2
    sys.stdout.write(render_svg(f, not options.keep_nan))
    return 0