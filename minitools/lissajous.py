"""Animated GIFs of random Lissajous figures."""

from __future__ import annotations

import argparse
import enum
import math
import random
import sys
from collections.abc import Sequence
from typing import BinaryIO

from PIL import Image

_SIZE = 100  # the canvas covers [-size..+size]
_RES = 0.001  # angular resolution
_NFRAMES = 64  # number of animation frames
_DELAY = 8  # delay between frames in 10ms units


class Variant(enum.Enum):
    """Colour scheme of the animation."""

    CLASSIC = "classic"  # black on white
    GREEN = "green"  # green on black
    RAINBOW = "rainbow"  # green, red or blue at random on black

    @property
    def palette(self) -> tuple[tuple[int, int, int], ...]:
        """RGB colours of the palette; index 0 is the background."""
        return _PALETTES[self]


_PALETTES = {
    Variant.CLASSIC: ((255, 255, 255), (0, 0, 0)),
    Variant.GREEN: ((0, 0, 0), (0, 255, 0)),
    Variant.RAINBOW: ((0, 0, 0), (0, 255, 0), (255, 0, 0), (0, 0, 255)),
}


def render_frames(
    cycles: float = 5,
    nframes: int = _NFRAMES,
    freq: float | None = None,
    variant: Variant = Variant.CLASSIC,
    rng: random.Random | None = None,
) -> list[Image.Image]:
    """Draw the frames of the animation as palette images.

    cycles is the number of complete x oscillations; freq is the relative
    frequency of y, drawn at random from [0, 3) when not given.
    """
    rng = rng if rng is not None else random.Random()
    if freq is None:
        freq = rng.random() * 3.0
    limit = cycles * 2 * math.pi
    angles = []
    t = 0.0
    while t < limit:
        angles.append(t)
        t += _RES
    columns = [_SIZE + int(math.sin(a) * _SIZE + 0.5) for a in angles]
    side = 2 * _SIZE + 1
    palette = bytes(channel for rgb in variant.palette for channel in rgb)
    rainbow = variant is Variant.RAINBOW

    frames = []
    phase = 0.0
    for _ in range(nframes):
        pixels = bytearray(side * side)
        for angle, column in zip(angles, columns):
            row = _SIZE + int(math.sin(angle * freq + phase) * _SIZE + 0.5)
            pixels[row * side + column] = rng.randrange(3) + 1 if rainbow else 1
        image = Image.frombytes("P", (side, side), bytes(pixels))
        image.putpalette(palette)
        frames.append(image)
        phase += 0.1
    return frames


def lissajous(
    out: BinaryIO,
    cycles: float = 5,
    variant: Variant = Variant.CLASSIC,
    rng: random.Random | None = None,
) -> None:
    """Write an animated GIF of a random Lissajous figure to out."""
    frames = render_frames(cycles, _NFRAMES, None, variant, rng)
    frames[0].save(
        out,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=_DELAY * 10,
        loop=_NFRAMES,
        optimize=False,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Write a Lissajous animation to standard output."""
    parser = argparse.ArgumentParser(
        prog="lissajous", description="Write an animated Lissajous GIF."
    )
    parser.add_argument(
        "--variant",
        choices=[v.value for v in Variant],
        default=Variant.CLASSIC.value,
        help="colour scheme",
    )
    parser.add_argument(
        "--cycles", type=int, default=5, help="number of complete x oscillations"
    )
    options = parser.parse_args(list(sys.argv[1:] if argv is None else argv))
    sys.stdout.flush()
    lissajous(sys.stdout.buffer, options.cycles, Variant(options.variant))
    sys.stdout.buffer.flush()
    return 0