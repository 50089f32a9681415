import math

import pytest

from minitools.surface import (
    CELLS,
    WIDTH,
    corner,
    eggbox,
    has_nan,
    main,
    polygons,
    render_svg,
    surface,
)

HEADER = (
    "<svg smlns='http://www.w3.org/2000/svg' "
    "style='stroke: grey; fill: white; stroke-width: 0.7' "
    "width='600' height='320'>"
)


def test_surface_is_nan_at_origin():
    result = surface(0.0, 0.0)
    assert str(result) == "nan"
    assert has_nan(result) is True


def test_surface_is_radially_symmetric():
    assert surface(3.0, 4.0) == surface(4.0, 3.0) == surface(-3.0, -4.0)


def test_eggbox_zero_on_axis():
    assert eggbox(0.0, 1.7) == 0.0


@pytest.mark.parametrize("i", [0, 10, 37, 100])
def test_diagonal_corners_are_centred(i):
    sx, _ = corner(i, i, eggbox)
    assert sx == pytest.approx(WIDTH / 2)


def test_corner_at_origin_is_nan():
    assert has_nan(*corner(CELLS // 2, CELLS // 2))


def test_has_nan():
    assert has_nan(1.0, math.nan, 2.0) is True
    assert has_nan(1.0, 2.0) is False
    assert has_nan() is False


def test_eggbox_keeps_every_cell():
    assert len(list(polygons(eggbox, True))) == CELLS * CELLS


def test_surface_nan_cells_skipped():
    kept = list(polygons(surface, True))
    everything = list(polygons(surface, False))
    assert len(everything) == CELLS * CELLS
    assert len(kept) < len(everything)
    assert not any(has_nan(*(c for p in cell for c in p)) for cell in kept)


def test_render_svg_structure():
    svg = render_svg(eggbox, True)
    assert svg.startswith(HEADER)
    assert svg.endswith("</svg>\n")
    assert svg.count("<polygon points=") == CELLS * CELLS


def test_render_svg_keeps_nan_when_asked():
    assert "NaN" in render_svg(surface, False)
    assert "NaN" not in render_svg(surface, True)


def test_main_eggbox(capsys):
    assert main(["eggbox"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(HEADER)
    assert out.endswith("</svg>\n")


def test_main_rejects_unknown_function(capsys):
    assert main(["teapot"]) == 2
    assert "Did not provide valid argument: surface|eggbox" in capsys.readouterr().err