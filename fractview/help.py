"""Usage, colour and control help texts, and error messages."""

from __future__ import annotations

PROG = "fractview"

_CYAN = "\x1b[36m"
_RESET = "\x1b[0m"


def available_fractals_text():
    """Describe the fractals that can be chosen on the command line."""
    return (
        "+===============  Available Fractals  ===============+\n"
        "Which fractal would you like to view?\n"
        "\tM - Mandelbrot\n"
        "\tJ - Julia\n"
        "\tB - Burning Ship\n"
        f"{_CYAN}Usage example:\t{PROG} <type>\n\t\t{PROG} M{_RESET}\n"
        "\nFor Julia, you may specify starting values for the\n"
        "initial fractal shape. Values must be between\n"
        "-2.0 and 2.0 and must contain a decimal point.\n"
        f"{_CYAN}Usage example:\t\n"
        f"{PROG} J\n\t\t{PROG} J 0.285 0.01{_RESET}\n"
    )


def color_usage_text():
    """Describe how a display colour is given."""
    return (
        "\n+===========  Color Display  ==================+\n"
        "Pick a display color by providing a hexadecimal code.\n"
        "The hex color code must be formatted as RRGGBB:\n"
        "\tWhite:\tFFFFFF\t\tBlack:\t000000\n"
        "\tRed:\tFF0000\t\tGreen:\t00FF00\n"
        "\tBlue:\t0000FF\t\tYellow:\tFFFF00\n"
        "Other interesting colors:\n"
        "\tPurple:\t9933FF\t\tOrange:\tCC6600\n"
        "\tPink:\tFF3399\t\tTurquoise: 00FF80\t\n"
        f"{_CYAN}Usage example:\t{PROG} <type> <color>\n"
        f"\t\t{PROG} M 0066FF{_RESET}\n"
        "\nFor Julia, you can only specify colors after\n"
        "the starting values.\n"
        f"{_CYAN}Usage example:\t{PROG} J 0.285 0.01 CC6600{_RESET}\n"
    )


def controls_text():
    """Describe the keyboard and mouse controls."""
    return (
        "\n+===============  Controls  ===============+\n"
        "Arrow keys\t\tmove view.\n"
        "scroll wheel\t\tzoom in and out.\n"
        "+/-\t\t\titerative details.\n"
        "Spacebar\t\tchange color schemes.\n"
        "Left click\t\tshift Julia set (only Julia).\n"
        "1, 2, 3,\t\tswitch fractals.\n"
        f"ESC or close window\tquit {PROG}.\n"
        "+=============================================+\n\n"
    )


def usage_text():
    """Full help shown when the command line is not understood."""
    banner = (
        "\n+================================================+\n"
        f"|{PROG.upper():^48}|\n"
        "+================================================+\n\n"
    )
    return banner + available_fractals_text() + color_usage_text()


def error_text(message, detail=""):
    """Format an error line for standard error."""
    return f"{PROG}: {message}{detail}\n"