"""View state of the fractal window: complex plane, iterations, colours and rendering."""

from __future__ import annotations

import enum

import numpy as np

from . import palettes
from .fractals import HEIGHT, MAX_ITERATIONS, WIDTH, FractalSet

START_ITERATIONS = 42
ITERATION_STEP = 14
PATTERN_COUNT = 8

_BLACK = 0x000000
_WHITE = 0xFFFFFF
_RAINBOW = (
    0xFF0000, 0xFF7F00, 0xFFFF00, 0x00FF00,
    0x0000FF, 0x4B0082, 0x9400D3, 0xFFFFFF,
)


class Direction(enum.Enum):
    """Directions in which the view can be shifted."""

    RIGHT = "R"
    LEFT = "L"
    UP = "U"
    DOWN = "D"


class Viewer:
    """Holds what is on screen and turns it into a pixel array."""

    def __init__(self, fractal, kr, ki, color):
        self.fractal = FractalSet(fractal)
        self.kr = float(kr)
        self.ki = float(ki)
        self.color = int(color)
        self.iterations = START_ITERATIONS
        self.color_pattern = -1
        self.palette = []
        self.min_r = self.max_r = self.min_i = self.max_i = 0.0
        self.reset_plane()
        self.next_color_pattern()

    def reset_plane(self):
        """Show the default region of the complex plane for the current fractal."""
        if self.fractal is FractalSet.JULIA:
            self.min_r = -2.0
            self.max_r = 2.0
            self.min_i = -2.0
            self.max_i = self.min_i + (self.max_r - self.min_r) * HEIGHT / WIDTH
        else:
            self.min_r = -2.0
            self.max_r = 1.0
            self.max_i = -1.5
            self.min_i = self.max_i + (self.max_r - self.min_r) * HEIGHT / WIDTH

    def zoom(self, factor):
        """Scale the view about its centre; a factor below 1 zooms in."""
        center_r = (self.min_r + self.max_r) / 2.0
        center_i = (self.min_i + self.max_i) / 2.0
        half_r = (self.max_r - self.min_r) / 2.0 * factor
        half_i = (self.max_i - self.min_i) / 2.0 * factor
        self.min_r = center_r - half_r
        self.max_r = center_r + half_r
        self.min_i = center_i - half_i
        self.max_i = center_i + half_i

    def shift(self, distance, direction):
        """Move the view by ``distance`` times its size in ``direction``."""
        direction = Direction(direction)
        span_r = self.max_r - self.min_r
        span_i = self.max_i - self.min_i
        if direction is Direction.RIGHT:
            self.min_r += span_r * distance
            self.max_r += span_r * distance
        elif direction is Direction.LEFT:
            self.min_r -= span_r * distance
            self.max_r -= span_r * distance
        elif direction is Direction.DOWN:
            self.min_i -= span_i * distance
            self.max_i -= span_i * distance
        else:
            self.min_i += span_i * distance
            self.max_i += span_i * distance

    def zoom_at(self, x, y):
        """Zoom in by half and move towards the pixel (x, y)."""
        self.zoom(0.5)
        dx = x - WIDTH // 2
        dy = y - HEIGHT // 2
        if dx < 0:
            self.shift(-dx / WIDTH, Direction.LEFT)
        elif dx > 0:
            self.shift(dx / WIDTH, Direction.RIGHT)
        if dy < 0:
            self.shift(-dy / HEIGHT, Direction.UP)
        elif dy > 0:
            self.shift(dy / HEIGHT, Direction.DOWN)

    def more_iterations(self):
        """Raise the iteration limit by one step, up to the maximum."""
        self.iterations = min(self.iterations + ITERATION_STEP, MAX_ITERATIONS)
        self.reapply_colors()

    def fewer_iterations(self):
        """Lower the iteration limit by one step, down to one step."""
        self.iterations = max(self.iterations - ITERATION_STEP, ITERATION_STEP)
        self.reapply_colors()

    def next_color_pattern(self):
        """Advance to the next colour pattern and rebuild the palette."""
        self.color_pattern = (self.color_pattern + 1) % PATTERN_COUNT
        if self.color == _BLACK:
            self.color = 0x333333
        if self.color_pattern >= 5 and self.color == _WHITE:
            self.color = 0x999999
        if self.color_pattern == 0:
            self.palette = palettes.mono(self.iterations, self.color)
        elif self.color_pattern == 1:
            self.palette = self._gradient(self.color)
        else:
            self.palette = self._pattern_palette()

    def reapply_colors(self):
        """Rebuild the palette of the current pattern for the current iterations."""
        alt = 0x666666 if self.color == _BLACK else self.color
        if self.color_pattern == 0:
            self.palette = palettes.mono(self.iterations, alt)
        elif self.color_pattern == 1:
            self.palette = self._gradient(alt)
        elif 2 <= self.color_pattern < PATTERN_COUNT:
            self.palette = self._pattern_palette()

    def _gradient(self, color):
        return palettes.multiple(
            self.iterations,
            [_BLACK, color, palettes.set_percent_color(self.color, 50), _WHITE],
        )

    def _pattern_palette(self):
        builders = {
            2: palettes.zebra,
            3: palettes.triad,
            4: palettes.tetra,
            5: palettes.opposites,
            6: palettes.graphic,
        }
        if self.color_pattern == 7:
            return palettes.multiple(self.iterations, _RAINBOW)
        return builders[self.color_pattern](self.iterations, self.color)

    def set_julia_from_pixel(self, x, y):
        """Use the point under pixel (x, y) as the Julia constant."""
        self.kr, self.ki = self.pixel_to_complex(x, y)

    def switch_fractal(self, fractal):
        """Show another fractal; return False if it is already shown."""
        fractal = FractalSet(fractal)
        if fractal is self.fractal:
            return False
        self.fractal = fractal
        self.reset_plane()
        return True

    def pixel_to_complex(self, x, y):
        """Return the point of the complex plane under pixel (x, y)."""
        pr = self.min_r + x * (self.max_r - self.min_r) / WIDTH
        pi = self.max_i + y * (self.min_i - self.max_i) / HEIGHT
        return pr, pi

    def _escape_counts(self):
        xs = np.arange(WIDTH, dtype=np.float64)
        ys = np.arange(HEIGHT, dtype=np.float64)
        pr = (self.min_r + xs * (self.max_r - self.min_r) / WIDTH)[np.newaxis, :]
        pi = (self.max_i + ys * (self.min_i - self.max_i) / HEIGHT)[:, np.newaxis]
        shape = (HEIGHT, WIDTH)
        if self.fractal is FractalSet.JULIA:
            zr = np.broadcast_to(pr, shape).copy()
            zi = np.broadcast_to(pi, shape).copy()
            cr, ci = self.kr, self.ki
        else:
            zr = np.zeros(shape)
            zi = np.zeros(shape)
            cr, ci = pr, pi
        burning = self.fractal is FractalSet.BURNING_SHIP
        counts = np.full(shape, self.iterations, dtype=np.int64)
        active = np.ones(shape, dtype=bool)
        with np.errstate(over="ignore", invalid="ignore"):
            for n in range(self.iterations):
                escaped = active & (zr * zr + zi * zi > 4.0)
                counts[escaped] = n
                active &= ~escaped
                if not active.any():
                    break
                if burning:
                    zr, zi = np.abs(zr), np.abs(zi)
                zr, zi = zr * zr - zi * zi + cr, 2 * zr * zi + ci
        return counts

    def render(self):
        """Return the image as a (HEIGHT, WIDTH) array of 32-bit ARGB colours."""
        counts = np.minimum(self._escape_counts(), self.iterations - 1)
        lookup = np.array(self.palette, dtype=np.uint32)
        return lookup[counts]