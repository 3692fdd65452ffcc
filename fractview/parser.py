"""Command-line argument parsing."""

from __future__ import annotations

from dataclasses import dataclass

from .fractals import FractalSet

DEFAULT_JULIA = (-0.70176, -0.3842)
DEFAULT_COLOR = 0x80BFFF

_SPACES = " \t\n\v\f\r"
_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdefABCDEF"

_FRACTAL_NAMES = (
    ("mandelbrot", "m", "1", FractalSet.MANDELBROT),
    ("julia", "j", "2", FractalSet.JULIA),
    ("burning ship", "b", "3", FractalSet.BURNING_SHIP),
)


class UsageError(ValueError):
    """The command line could not be understood."""


@dataclass(frozen=True)
class Options:
    """Settings taken from the command line."""

    fractal: FractalSet
    kr: float
    ki: float
    color: int


def _skip_spaces(text):
    return len(text) - len(text.lstrip(_SPACES))


def parse_hex_color(text):
    """Parse an RRGGBB colour, allowing leading spaces, '+' and '0x'."""
    i = _skip_spaces(text)
    if text[i:i + 1] == "+":
        i += 1
    if text[i:i + 2] in ("0x", "0X"):
        i += 2
    digits = text[i:]
    if len(digits) != 6 or any(c not in _HEX_DIGITS for c in digits):
        raise UsageError(f"invalid colour: {text!r}")
    return int(digits, 16)


def parse_decimal(text):
    """Parse a plain decimal number such as '-0.285'."""
    i = _skip_spaces(text)
    sign = 1.0
    if text[i:i + 1] in ("+", "-"):
        if text[i] == "-":
            sign = -1.0
        i += 1
    result = 0.0
    while i < len(text) and text[i] in _DIGITS:
        result = result * 10.0 + (ord(text[i]) - ord("0"))
        i += 1
    if text[i:i + 1] == ".":
        i += 1
    div = 0.1
    while i < len(text) and text[i] in _DIGITS:
        result = result + (ord(text[i]) - ord("0")) * div
        div *= 0.1
        i += 1
    if i < len(text):
        raise UsageError(f"invalid number: {text!r}")
    return result * sign


def parse_fractal_name(text):
    """Map a full name, initial or number to a fractal set."""
    lowered = text.lower()
    if lowered:
        for name, initial, number, fractal in _FRACTAL_NAMES:
            if lowered == name or lowered in (initial, number):
                return fractal
    raise UsageError(f"unknown fractal: {text!r}")


def _julia_constant(args):
    if len(args) == 2 or "." not in args[1] or "." not in args[2]:
        raise UsageError("Julia needs two decimal starting values")
    kr, ki = parse_decimal(args[1]), parse_decimal(args[2])
    if kr > 2.0 or kr < -2.0 or ki >= 2.0 or ki <= -2.0:
        raise UsageError("Julia starting values must lie between -2.0 and 2.0")
    return kr, ki


def parse_args(argv):
    """Build Options from the arguments that follow the program name."""
    args = list(argv)
    if not args:
        raise UsageError("no fractal given")
    fractal = parse_fractal_name(args[0])
    is_julia = fractal is FractalSet.JULIA
    if len(args) > (4 if is_julia else 2):
        raise UsageError("too many arguments")

    if is_julia and len(args) > 1:
        kr, ki = _julia_constant(args)
    else:
        kr, ki = DEFAULT_JULIA

    if is_julia and len(args) == 4:
        color = parse_hex_color(args[3])
    elif not is_julia and len(args) == 2:
        color = parse_hex_color(args[1])
    else:
        color = DEFAULT_COLOR
    return Options(fractal=fractal, kr=kr, ki=ki, color=color)