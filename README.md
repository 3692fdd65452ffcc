# fractview

An interactive 900×900 window for exploring three escape-time fractals: the
Mandelbrot set, Julia sets and the Burning Ship.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Running

    fractview <type> [julia-re julia-im] [color]

`<type>` is one of `mandelbrot`, `julia` or `burning ship` (case does not
matter), or the short forms `M`, `J`, `B` or `1`, `2`, `3`.

Examples:

    fractview M
    fractview M 0066FF
    fractview J 0.285 0.01
    fractview J 0.285 0.01 CC6600

For Julia you may give the starting constant as two plain decimal numbers;
each must contain a decimal point. The real part must lie within -2.0 and 2.0
inclusive, the imaginary part strictly between -2.0 and 2.0. Without them the
constant is `-0.70176 - 0.3842i`.

The optional color is a six-digit hexadecimal code in the form `RRGGBB`;
leading spaces, a `+` sign and a `0x` prefix are accepted. For Julia, the
color comes after the two starting values. The default color is `80BFFF`.

If the arguments are not understood, a usage summary is printed and the
program exits with status 1. Once the window is open, a summary of the
controls is printed.

## Controls

| Input                | Effect                                        |
|----------------------|-----------------------------------------------|
| Arrow keys           | move the view by a fifth of its size          |
| Scroll wheel         | zoom in (towards the pointer) and out         |
| `+` / `-`            | more or fewer iterations (14 to 500, step 14) |
| Space                | cycle through the eight color schemes         |
| Left click           | pick a new Julia constant (Julia only)        |
| `1`, `2`, `3`        | switch to Mandelbrot, Julia, Burning Ship     |
| Esc or close window  | quit                                          |

The view starts with 42 iterations.

## Using it as a library

- `fractview.fractals`: `FractalSet`, and the escape-count functions
  `mandelbrot`, `julia`, `burning_ship` and `escape_count`.
- `fractview.palettes`: palette builders `mono`, `multiple`, `opposites`,
  `graphic`, `zebra`, `triad` and `tetra`, each returning a list of 32-bit
  ARGB values whose last entry is black, plus `interpolate_color` and
  `set_percent_color`.
- `fractview.parser`: `parse_args`, which returns an `Options` value
  (`fractal`, `kr`, `ki`, `color`) or raises `UsageError`, and the helpers
  `parse_hex_color`, `parse_decimal` and `parse_fractal_name`.
- `fractview.viewer`: `Viewer` holds the view state (plane, iterations,
  color pattern) and its `render()` returns a `(900, 900)` NumPy array of
  ARGB colours without opening a window.
- `fractview.help`: the usage, color and control texts.
- `fractview.app`: `Action`, `action_for_key`, `apply_action`,
  `apply_mouse` and `main`, the entry point of the `fractview` command.