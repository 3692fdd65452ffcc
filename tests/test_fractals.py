import pytest

from fractview.fractals import (
    FractalSet,
    burning_ship,
    escape_count,
    julia,
    mandelbrot,
)


def test_origin_never_escapes():
    assert mandelbrot(0.0, 0.0, 42) == 42
    assert burning_ship(0.0, 0.0, 42) == 42
    assert julia(0.0, 0.0, 0.0, 0.0, 42) == 42


def test_far_point_escapes_after_one_step():
    assert mandelbrot(2.0, 2.0, 42) == 1


def test_julia_start_outside_radius_escapes_immediately():
    assert julia(3.0, 0.0, 0.0, 0.0, 42) == 0


def test_zero_iterations_gives_zero():
    assert mandelbrot(0.0, 0.0, 0) == 0


@pytest.mark.parametrize("cr,ci", [(-0.75, 0.1), (0.3, 0.5), (-1.2, 0.25), (0.1, 0.65)])
def test_mandelbrot_conjugate_symmetry(cr, ci):
    assert mandelbrot(cr, ci, 200) == mandelbrot(cr, -ci, 200)


@pytest.mark.parametrize("zr,zi", [(0.1, 0.2), (-0.5, 0.3), (1.1, -0.4), (0.0, 0.9)])
def test_julia_point_symmetry(zr, zi):
    kr, ki = -0.70176, -0.3842
    assert julia(zr, zi, kr, ki, 300) == julia(-zr, -zi, kr, ki, 300)


@pytest.mark.parametrize("cr", [-1.9, -1.2, -0.5, 0.2, 0.3, 0.5])
def test_burning_ship_matches_mandelbrot_on_real_axis(cr):
    assert burning_ship(cr, 0.0, 100) == mandelbrot(cr, 0.0, 100)


@pytest.mark.parametrize(
    "func",
    [
        lambda n: mandelbrot(-0.74, 0.12, n),
        lambda n: julia(0.2, 0.3, -0.70176, -0.3842, n),
        lambda n: burning_ship(-1.75, -0.03, n),
    ],
)
def test_counts_bounded_and_monotone(func):
    small, large = func(20), func(200)
    assert 0 <= small <= 20
    assert 0 <= large <= 200
    assert small <= large


def test_escape_count_dispatches():
    pr, pi, kr, ki = -0.4, 0.55, 0.285, 0.01
    assert escape_count(FractalSet.MANDELBROT, pr, pi, kr, ki, 80) == mandelbrot(pr, pi, 80)
    assert escape_count(FractalSet.JULIA, pr, pi, kr, ki, 80) == julia(pr, pi, kr, ki, 80)
    assert escape_count(FractalSet.BURNING_SHIP, pr, pi, kr, ki, 80) == burning_ship(pr, pi, 80)


def test_escape_count_accepts_plain_numbers():
    assert escape_count(2, 0.1, 0.1, 0.285, 0.01, 60) == julia(0.1, 0.1, 0.285, 0.01, 60)


def test_escape_count_rejects_unknown_fractal():
    with pytest.raises(ValueError):
        escape_count(7, 0.0, 0.0, 0.0, 0.0, 10)