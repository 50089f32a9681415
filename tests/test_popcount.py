import pytest

from minitools.popcount import (
    main,
    pop_count,
    pop_count_clear_nonzero,
    pop_count_loop,
    pop_count_shift64,
)


def _all_methods(value):
    return [
        pop_count(value),
        pop_count_loop(value),
        pop_count_shift64(value),
        pop_count_clear_nonzero(value),
    ]


def test_all_bits_set():
    assert _all_methods(18446744073709551615) == [64, 64, 64, 64]


@pytest.mark.parametrize("value, expected", [(15, 4), (1, 1), (7, 3), (0, 0)])
def test_known_values(value, expected):
    assert _all_methods(value) == [expected] * 4


@pytest.mark.parametrize(
    "value", [2, 255, 256, 0xDEADBEEF, 1 << 63, (1 << 64) - 2, 0x0123456789ABCDEF]
)
def test_methods_agree(value):
    results = _all_methods(value)
    assert len(set(results)) == 1
    assert results[0] == bin(value).count("1")


@pytest.mark.parametrize("value", [-1, 1 << 64])
def test_out_of_range(value):
    with pytest.raises(ValueError):
        pop_count(value)
    with pytest.raises(ValueError):
        pop_count_loop(value)
    with pytest.raises(ValueError):
        pop_count_shift64(value)
    with pytest.raises(ValueError):
        pop_count_clear_nonzero(value)


def test_rejects_non_integers():
    with pytest.raises(TypeError):
        pop_count(1.5)
    with pytest.raises(TypeError):
        pop_count_loop(1.5)
    with pytest.raises(TypeError):
        pop_count_shift64(1.5)
    with pytest.raises(TypeError):
        pop_count_clear_nonzero(1.5)


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["4"] * 4 + ["1"] * 4 + ["3"] * 4