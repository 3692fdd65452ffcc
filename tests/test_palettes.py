import pytest

from fractview.palettes import (
    graphic,
    interpolate_color,
    mono,
    multiple,
    opposites,
    set_percent_color,
    tetra,
    triad,
    zebra,
)

OPAQUE = 0xFF000000
RAINBOW = [0xFF0000, 0xFF7F00, 0xFFFF00, 0x00FF00, 0x0000FF, 0x4B0082, 0x9400D3, 0xFFFFFF]


def test_interpolate_endpoints():
    assert interpolate_color(0x123456, 0xABCDEF, 0.0) == OPAQUE | 0x123456
    assert interpolate_color(0x123456, 0xABCDEF, 1.0) == OPAQUE | 0xABCDEF


def test_interpolate_same_colour_is_constant():
    for fraction in (0.0, 0.25, 0.5, 0.9):
        assert interpolate_color(0x80BFFF, 0x80BFFF, fraction) == OPAQUE | 0x80BFFF


def test_set_percent_full_keeps_colour():
    assert set_percent_color(0x80BFFF, 100) == OPAQUE | 0x80BFFF


def test_set_percent_half_of_white():
    assert set_percent_color(0xFFFFFF, 50) == 0xFF7F7F7F


@pytest.mark.parametrize("builder", [mono, opposites, graphic, zebra, triad, tetra])
@pytest.mark.parametrize("iterations", [14, 42, 500])
def test_palette_shape(builder, iterations):
    palette = builder(iterations, 0x80BFFF)
    assert len(palette) == iterations
    assert palette[-1] == 0
    assert all(0 <= value <= 0xFFFFFFFF for value in palette)


def test_mono_gradient_anchors():
    palette = mono(42, 0x80BFFF)
    assert palette[0] == OPAQUE
    assert palette[21] == OPAQUE | 0x80BFFF


def test_multiple_segment_starts():
    palette = multiple(42, RAINBOW)
    step = 42 // 7
    for index, color in enumerate(RAINBOW[:7]):
        assert palette[index * step] == OPAQUE | color
    assert palette[-1] == 0


def test_multiple_with_uneven_split_fills_whole_palette():
    colors = [0x000000, 0x80BFFF, set_percent_color(0x80BFFF, 50), 0xFFFFFF]
    palette = multiple(56, colors)
    assert len(palette) == 56
    assert palette[0] == OPAQUE
    assert palette[-1] == 0


def test_opposites_starts_at_colour():
    assert opposites(42, 0x80BFFF)[0] == OPAQUE | 0x80BFFF


def test_graphic_lifts_dark_colours():
    assert graphic(42, 0x000000) == graphic(42, 0x333333)
    assert graphic(42, 0x404040)[0] == OPAQUE | 0x404040


def test_zebra_alternates():
    color = 0x80BFFF
    shade = set_percent_color(color, 50)
    palette = zebra(42, color)
    for i, value in enumerate(palette[:-1]):
        assert value == (shade if i % 2 == 0 else color)


def test_triad_pattern():
    color = 0x9933FF
    first, second = set_percent_color(color, 33), set_percent_color(color, 66)
    palette = triad(42, color)
    for i, value in enumerate(palette[:-1]):
        expected = second if i % 3 == 0 else first if i % 2 == 0 else color
        assert value == expected


def test_tetra_pattern():
    color = 0xCC6600
    shades = [set_percent_color(color, p) for p in (25, 50, 75)]
    palette = tetra(42, color)
    for i, value in enumerate(palette[:-1]):
        if i % 4 == 0:
            expected = shades[2]
        elif i % 3 == 0:
            expected = shades[1]
        elif i % 2 == 0:
            expected = shades[0]
        else:
            expected = color
        assert value == expected


def test_too_few_iterations_rejected():
    with pytest.raises(ValueError):
        mono(1, 0x80BFFF)
    with pytest.raises(ValueError):
        multiple(3, RAINBOW)
    with pytest.raises(ValueError):
        multiple(42, [0xFFFFFF])
    with pytest.raises(ValueError):
        zebra(0, 0x80BFFF)