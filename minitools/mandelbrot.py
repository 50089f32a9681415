"""PNG images of the Mandelbrot fractal."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from PIL import Image

XMIN, YMIN, XMAX, YMAX = -2, -2, 2, 2
ITERATIONS = 200
CONTRAST = 15


def mandelbrot(z: complex) -> int:
    """Grey level of the point z: black inside the set, lighter the faster it escapes."""
    v = 0j
    for n in range(ITERATIONS):
        v = v * v + z
        if abs(v) > 2:
            return (255 - CONTRAST * n) & 0xFF
    return 0


def render(width: int = 1024, height: int = 1024) -> Image.Image:
    """Render the square [-2, 2] x [-2, 2] of the complex plane as an RGB image."""
    if width < 0 or height < 0:
        raise ValueError(f"invalid image size {width}x{height}")
    levels = bytearray()
    for py in range(height):
        y = py / height * (YMAX - YMIN) + YMIN
        for px in range(width):
            x = px / width * (XMAX - XMIN) + XMIN
            levels.append(mandelbrot(complex(x, y)))
    image = Image.new("L", (width, height))
    image.putdata(bytes(levels))
    return image.convert("RGB")


def main(argv: Sequence[str] | None = None) -> int:
    """Write a PNG of the Mandelbrot fractal to standard output."""
    parser = argparse.ArgumentParser(
        prog="mandelbrot", description="Write a PNG of the Mandelbrot fractal."
    )
    parser.add_argument("--width", type=int, default=1024)
    parser.add_argument("--height", type=int, default=1024)
    options = parser.parse_args(list(sys.argv[1:] if argv is None else argv))
    image = render(options.width, options.height)
    sys.stdout.flush()
    image.save(sys.stdout.buffer, format="PNG")
    sys.stdout.buffer.flush()
    return 0