"""Colour palettes indexed by escape count.

Every palette is a list of ``iterations`` 32-bit ARGB values whose last
entry is black, the colour of points that never escape.
"""

from __future__ import annotations

_MASK = 0xFFFFFFFF
_OPAQUE = 0xFF << 24
_BLACK = 0x000000
_WHITE = 0xFFFFFF


def _channels(color):
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _pack(r, g, b):
    return (_OPAQUE | r << 16 | g << 8 | b) & _MASK


def _require(iterations, minimum):
    if iterations < minimum:
        raise ValueError(f"palette needs at least {minimum} iterations, got {iterations}")


def interpolate_color(start, end, fraction):
    """Blend two RGB colours; ``fraction`` 0 gives ``start``."""
    blended = (
        int((e - s) * fraction + s)
        for s, e in zip(_channels(start), _channels(end))
    )
    return _pack(*blended)


def set_percent_color(color, percent):
    """Shift every channel of ``color`` by ``percent`` of 256 less 256."""
    offset = (percent / 100) * 256
    shifted = (int((c + offset) - 256) for c in _channels(color))
    return _pack(*shifted)


def mono(iterations, color):
    """Gradient from black to ``color`` over the first half, then to white."""
    half = iterations // 2
    _require(iterations, 2)
    palette = []
    start, end = _BLACK, color
    while len(palette) < iterations:
        palette.extend(interpolate_color(start, end, j / half) for j in range(half))
        start, end = end, _WHITE
    del palette[iterations:]
    palette[-1] = 0
    return palette


def multiple(iterations, colors):
    """Gradient through ``colors`` in equal segments."""
    colors = list(colors)
    if len(colors) < 2:
        raise ValueError("a gradient needs at least two colours")
    last = len(colors) - 1
    step = iterations // last
    if step < 1:
        raise ValueError(f"too few iterations ({iterations}) for {len(colors)} colours")
    palette = []
    segment = 0
    while len(palette) < iterations:
        start = colors[min(segment, last)]
        end = colors[min(segment + 1, last)]
        count = min(step, iterations - len(palette))
        palette.extend(interpolate_color(start, end, j / step) for j in range(count))
        segment += 1
    palette[-1] = 0
    return palette


def opposites(iterations, color):
    """Channels climb by a growing amount at each step, wrapping in 32 bits."""
    _require(iterations, 1)
    r, g, b = _channels(color)
    palette = []
    for i in range(iterations):
        shift = i % 0xFF
        r, g, b = r + shift, g + shift, b + shift
        palette.append(_pack(r, g, b))
    palette[-1] = 0
    return palette


def graphic(iterations, color):
    """Channels are lifted to at least 0x33, then fall by a growing amount."""
    _require(iterations, 1)
    channels = _channels(color)
    lift = max(0, 0x33 - min(channels))
    r, g, b = (min(c + lift, 0xFF) for c in channels)
    palette = []
    for i in range(iterations):
        shift = i % 0xFF
        r, g, b = r - shift, g - shift, b - shift
        palette.append(_pack(r, g, b))
    palette[-1] = 0
    return palette


def _stripes(iterations, colors):
    _require(iterations, 1)
    palette = [0] * iterations
    for stripe, color in enumerate(colors, start=1):
        for i in range(0, iterations, stripe):
            palette[i] = color
    palette[-1] = 0
    return palette


def zebra(iterations, color):
    """Alternate ``color`` with a shifted shade of it."""
    return _stripes(iterations, [color, set_percent_color(color, 50)])


def triad(iterations, color):
    """Stripes of ``color`` and two shifted shades."""
    return _stripes(
        iterations,
        [color, set_percent_color(color, 33), set_percent_color(color, 66)],
    )


def tetra(iterations, color):
    """Stripes of ``color`` and three shifted shades."""
    return _stripes(
        iterations,
        [
            color,
            set_percent_color(color, 25),
            set_percent_color(color, 50),
            set_percent_color(color, 75),
        ],
    )