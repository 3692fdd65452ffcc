"""Escape-time iteration for the supported fractal sets."""

from __future__ import annotations

import enum

WIDTH = 900
HEIGHT = 900
MAX_ITERATIONS = 500

_ESCAPE_RADIUS_SQUARED = 4.0


class FractalSet(enum.IntEnum):
    """The fractals the viewer can draw."""

    MANDELBROT = 1
    JULIA = 2
    BURNING_SHIP = 3


def mandelbrot(cr, ci, iterations):
    """Return the number of steps before z -> z^2 + c escapes, at most ``iterations``."""
    zr = zi = 0.0
    for n in range(iterations):
        if zr * zr + zi * zi > _ESCAPE_RADIUS_SQUARED:
            return n
        zr, zi = zr * zr - zi * zi + cr, 2 * zr * zi + ci
    return max(iterations, 0)


def julia(zr, zi, kr, ki, iterations):
    """Return the escape count of z starting at (zr, zi) under z -> z^2 + k."""
    for n in range(iterations):
        if zi * zi + zr * zr > _ESCAPE_RADIUS_SQUARED:
            return n
        zr, zi = zr * zr - zi * zi + kr, 2 * zr * zi + ki
    return max(iterations, 0)


def burning_ship(cr, ci, iterations):
    """Return the escape count of the burning ship iteration for c."""
    zr = zi = 0.0
    for n in range(iterations):
        if zr * zr + zi * zi > _ESCAPE_RADIUS_SQUARED:
            return n
        zr, zi = abs(zr), abs(zi)
        zr, zi = zr * zr - zi * zi + cr, 2 * zr * zi + ci
    return max(iterations, 0)


def escape_count(fractal, pr, pi, kr, ki, iterations):
    """Return the escape count of the point (pr, pi) for the given fractal."""
    fractal = FractalSet(fractal)
    if fractal is FractalSet.MANDELBROT:
        return mandelbrot(pr, pi, iterations)
    if fractal is FractalSet.JULIA:
        return julia(pr, pi, kr, ki, iterations)
    return burning_ship(pr, pi, iterations)