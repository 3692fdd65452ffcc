"""Interactive window: keyboard and mouse controls and the program entry point."""

from __future__ import annotations

import enum
import os
import sys

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .fractals import HEIGHT, WIDTH, FractalSet  # noqa: E402
from .help import PROG, controls_text, error_text, usage_text  # noqa: E402
from .parser import UsageError, parse_args  # noqa: E402
from .viewer import Direction, Viewer  # noqa: E402

SHIFT_DISTANCE = 0.2
ZOOM_OUT_FACTOR = 2

MOUSE_LEFT = 1
MOUSE_WHEEL_UP = 4
MOUSE_WHEEL_DOWN = 5


class Action(enum.Enum):
    """Things a key press can ask the viewer to do."""

    QUIT = "quit"
    MORE_ITERATIONS = "more_iterations"
    FEWER_ITERATIONS = "fewer_iterations"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    NEXT_COLORS = "next_colors"
    SHOW_MANDELBROT = "show_mandelbrot"
    SHOW_JULIA = "show_julia"
    SHOW_BURNING_SHIP = "show_burning_ship"


_KEY_ACTIONS = {
    pygame.K_ESCAPE: Action.QUIT,
    pygame.K_PLUS: Action.MORE_ITERATIONS,
    pygame.K_MINUS: Action.FEWER_ITERATIONS,
    pygame.K_UP: Action.MOVE_UP,
    pygame.K_DOWN: Action.MOVE_DOWN,
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_SPACE: Action.NEXT_COLORS,
    pygame.K_1: Action.SHOW_MANDELBROT,
    pygame.K_2: Action.SHOW_JULIA,
    pygame.K_3: Action.SHOW_BURNING_SHIP,
}

_MOVES = {
    Action.MOVE_UP: Direction.UP,
    Action.MOVE_DOWN: Direction.DOWN,
    Action.MOVE_LEFT: Direction.LEFT,
    Action.MOVE_RIGHT: Direction.RIGHT,
}

_SWITCHES = {
    Action.SHOW_MANDELBROT: FractalSet.MANDELBROT,
    Action.SHOW_JULIA: FractalSet.JULIA,
    Action.SHOW_BURNING_SHIP: FractalSet.BURNING_SHIP,
}


def action_for_key(key):
    """Return the action bound to a pygame key code, or None."""
    return _KEY_ACTIONS.get(key)


def apply_action(viewer, action):
    """Carry out ``action`` on ``viewer``; return True if it must be redrawn.

    Quitting is left to the event loop and never changes the view.
    """
    action = Action(action)
    if action is Action.QUIT:
        return False
    if action is Action.MORE_ITERATIONS:
        viewer.more_iterations()
    elif action is Action.FEWER_ITERATIONS:
        viewer.fewer_iterations()
    elif action is Action.NEXT_COLORS:
        viewer.next_color_pattern()
    elif action in _MOVES:
        viewer.shift(SHIFT_DISTANCE, _MOVES[action])
    else:
        return viewer.switch_fractal(_SWITCHES[action])
    return True


def apply_mouse(viewer, button, x, y):
    """Handle a mouse button at pixel (x, y); return True if it must be redrawn."""
    if button == MOUSE_WHEEL_UP:
        viewer.zoom_at(x, y)
    elif button == MOUSE_WHEEL_DOWN:
        viewer.zoom(ZOOM_OUT_FACTOR)
    elif button == MOUSE_LEFT:
        if viewer.fractal is FractalSet.JULIA:
            viewer.set_julia_from_pixel(x, y)
    else:
        return False
    return True


def _to_surface(pixels):
    rgb = np.empty((HEIGHT, WIDTH, 3), dtype=np.uint8)
    rgb[..., 0] = (pixels >> 16) & 0xFF
    rgb[..., 1] = (pixels >> 8) & 0xFF
    rgb[..., 2] = pixels & 0xFF
    return pygame.surfarray.make_surface(rgb.swapaxes(0, 1))


def _draw(screen, viewer):
    screen.blit(_to_surface(viewer.render()), (0, 0))
    pygame.display.flip()


def _key_of(event):
    if event.unicode in ("+", "-"):
        return ord(event.unicode)
    return event.key


def _run(viewer):
    try:
        pygame.display.init()
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
    except pygame.error as exc:
        sys.stderr.write(error_text("error creating window: ", str(exc)))
        return 1
    try:
        pygame.display.set_caption(PROG)
        _draw(screen, viewer)
        sys.stdout.write(controls_text())
        sys.stdout.flush()
        while True:
            event = pygame.event.wait()
            redraw = False
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN:
                action = action_for_key(_key_of(event))
                if action is Action.QUIT:
                    return 0
                if action is not None:
                    redraw = apply_action(viewer, action)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                redraw = apply_mouse(viewer, event.button, x, y)
            if redraw:
                _draw(screen, viewer)
    finally:
        pygame.quit()


def main(argv=None):
    """Parse the command line, open the window and run until it is closed."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
    except UsageError:
        sys.stdout.write(usage_text())
        return 1
    viewer = Viewer(options.fractal, options.kr, options.ki, options.color)
    return _run(viewer)


if __name__ == "__main__":
    sys.exit(main())