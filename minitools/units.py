"""Temperature, length and weight units with conversions and small commands."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from decimal import Decimal
from typing import ClassVar


def _go_g(value: float) -> str:
    """Format a float with the shortest digits, switching to exponent form
    when the decimal exponent is below -4 or at least 6."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(float(value))).as_tuple()
    point = len(digit_tuple) + exponent
    raw = "".join(map(str, digit_tuple))
    digits = raw.lstrip("0")
    point -= len(raw) - len(digits)
    digits = digits.rstrip("0")
    prefix = "-" if sign else ""
    exp10 = point - 1
    if exp10 < -4 or exp10 >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exp10 < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp10):02d}"
    if point <= 0:
        body = "0." + "0" * (-point) + digits
    elif point >= len(digits):
        body = digits + "0" * (point - len(digits))
    else:
        body = digits[:point] + "." + digits[point:]
    return prefix + body


class _Quantity(float):
    symbol: ClassVar[str] = ""

    def __str__(self) -> str:
        return _go_g(float(self)) + self.symbol

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return format(float(self), spec) + self.symbol

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"


class Celsius(_Quantity):
    """A temperature in degrees Celsius."""

    symbol = "°C"


class Fahrenheit(_Quantity):
    """A temperature in degrees Fahrenheit."""

    symbol = "°F"


class Kelvin(_Quantity):
    """A temperature in kelvins."""

    symbol = "°K"


class Feet(_Quantity):
    """A length in feet."""

    symbol = "ft"


class Meters(_Quantity):
    """A length in meters."""

    symbol = "m"


class Pounds(_Quantity):
    """A weight in pounds."""

    symbol = "lbs"


class Kilograms(_Quantity):
    """A weight in kilograms."""

    symbol = "kg"


ABSOLUTE_ZERO_C = Celsius(-273.15)
FREEZING_C = Celsius(0)
BOILING_C = Celsius(100)
ABSOLUTE_ZERO_K = Kelvin(0)

_BYTE_UNITS = ("KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def _coerce(value: float, unit: type[_Quantity], func: str) -> float:
    if isinstance(value, _Quantity) and not isinstance(value, unit):
        raise TypeError(f"{func}() expects {unit.__name__}, got {type(value).__name__}")
    return float(value)


def c_to_f(c: float) -> Fahrenheit:
    """Convert a Celsius temperature to Fahrenheit."""
    return Fahrenheit(_coerce(c, Celsius, "c_to_f") * 9 / 5 + 32)


def f_to_c(f: float) -> Celsius:
    """Convert a Fahrenheit temperature to Celsius."""
    return Celsius((_coerce(f, Fahrenheit, "f_to_c") - 32) * 5 / 9)


def k_to_c(k: float) -> Celsius:
    """Convert a Kelvin temperature to Celsius."""
    return Celsius(_coerce(k, Kelvin, "k_to_c") - 273.15)


def c_to_k(c: float) -> Kelvin:
    """Convert a Celsius temperature to Kelvin."""
    return Kelvin(_coerce(c, Celsius, "c_to_k") + 273.15)


def feet_to_meters(f: float) -> Meters:
    """Convert feet to meters."""
    return Meters(_coerce(f, Feet, "feet_to_meters") * 0.3048)


def meters_to_feet(m: float) -> Feet:
    """Convert meters to feet."""
    return Feet(_coerce(m, Meters, "meters_to_feet") * 3.28084)


def pounds_to_kilograms(p: float) -> Kilograms:
    """Convert pounds to kilograms."""
    return Kilograms(_coerce(p, Pounds, "pounds_to_kilograms") * 0.45359237)


def kilograms_to_pounds(k: float) -> Pounds:
    """Convert kilograms to pounds."""
    return Pounds(_coerce(k, Kilograms, "kilograms_to_pounds") * 2.20462)


def format_conversions(value: float) -> str:
    """Describe value read as each unit and converted to its counterpart."""
    v = float(value)
    return (
        f"{Fahrenheit(v):.1f} = {f_to_c(Fahrenheit(v)):.1f},\t"
        f"{Celsius(v):.1f} = {c_to_f(Celsius(v)):.1f},\n"
        f"{Feet(v):.1f} = {feet_to_meters(Feet(v)):.1f},\t"
        f"{Meters(v):.1f} = {meters_to_feet(Meters(v)):.1f},\n"
        f"{Pounds(v):.1f} = {pounds_to_kilograms(Pounds(v)):.1f},\t"
        f"{Kilograms(v):.1f} = {kilograms_to_pounds(Kilograms(v)):.1f}\n\n"
    )


def byte_size_table() -> dict[str, float]:
    """Return the decimal byte-size units, KB through YB, in bytes."""
    return {name: float(1000**power) for power, name in enumerate(_BYTE_UNITS, 1)}


def _parse_float(text: str) -> float:
    try:
        if text.strip() != text or "_" in text:
            raise ValueError(text)
        return float(text)
    except ValueError:
        raise ValueError(f'parsing "{text}": invalid syntax') from None


def _args(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def cf_main(argv: Sequence[str] | None = None) -> int:
    """Read each argument as both Fahrenheit and Celsius and convert it."""
    for arg in _args(argv):
        try:
            t = _parse_float(arg)
        except ValueError as exc:
            print(f"cf: {exc}", file=sys.stderr)
            t = 0.0
        f, c = Fahrenheit(t), Celsius(t)
        print(f"{f} = {f_to_c(f)}, {c} = {c_to_f(c)}")
    return 0


def convert_main(argv: Sequence[str] | None = None) -> int:
    """Convert numbers from the arguments, or from standard input, in every unit."""
    args = _args(argv)
    if args:
        for arg in args:
            try:
                value = _parse_float(arg)
            except ValueError as exc:
                print(f"Invalid float64 value 0: {exc}", file=sys.stderr)
                continue
            print(format_conversions(value), end="")
        return 0
    print("Enter float values (press ctrl+d to end): ", end="", flush=True)
    for line in sys.stdin:
        for field in line.split():
            try:
                value = _parse_float(field)
            except ValueError as exc:
                print(f"Invalid float64 value '{field}': {exc}", file=sys.stderr)
                continue
            print(format_conversions(value), end="")
    return 0


def boiling_main(argv: Sequence[str] | None = None) -> int:
    """Print the boiling point of water."""
    f = Fahrenheit(212.0)
    c = (f - 32) * 5 / 9
    print(f"boiling point = {_go_g(f)}°F or {_go_g(c)}°C")
    return 0


def ftoc_main(argv: Sequence[str] | None = None) -> int:
    """Print the freezing and boiling points of water in both scales."""
    for f in (Fahrenheit(32.0), Fahrenheit(212.0)):
        print(f"{f} = {f_to_c(f)}")
    return 0


def kelvin_main(argv: Sequence[str] | None = None) -> int:
    """Print two Kelvin/Celsius conversions."""
    kelvin = Kelvin(273.15)
    celsius = Celsius(-273.15)
    lines = [
        f"{kelvin} = {k_to_c(kelvin)}",
        f"{celsius} = {c_to_k(celsius)}",
    ]
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


def bytesize_main(argv: Sequence[str] | None = None) -> int:
    """Print the byte-size units."""
    for name, size in byte_size_table().items():
        print(f"{name}: {_go_g(size)}")
    return 0