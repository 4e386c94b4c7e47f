"""Interactive wireframe viewer window and its command line."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import replace
from enum import IntEnum

import pygame

from wirefdf.heightmap import HeightMap, MapError, read_map
from wirefdf.render import HEIGHT, WIDTH, Image, View, render

USAGE = "2 arguments expected\nUsage : fdf <filename>"
LEGEND = ("Q = Rotation", "W = Increase size", "S = Decrease size", "E = Change Color")
_LEGEND_COLOR = (255, 255, 255)
_SIZE_STEP = WIDTH // 1000
_MOVE_STEP = 10
_COLOR_STEP = 8847592


class Key(IntEnum):
    """Viewer key codes."""

    A = 0
    S = 1
    D = 2
    Q = 12
    W = 13
    E = 14
    ESCAPE = 53
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


class Quit(Exception):
    """Raised when the viewer is asked to close."""


_ACTIONS: dict[Key, Callable[[View], View]] = {
    Key.Q: lambda v: replace(v, deg=v.deg + 0.05),
    Key.W: lambda v: replace(v, space=v.space + _SIZE_STEP),
    Key.S: lambda v: replace(v, space=v.space - _SIZE_STEP),
    Key.LEFT: lambda v: replace(v, x_move=v.x_move - _MOVE_STEP),
    Key.RIGHT: lambda v: replace(v, x_move=v.x_move + _MOVE_STEP),
    Key.UP: lambda v: replace(v, y_move=v.y_move - _MOVE_STEP),
    Key.DOWN: lambda v: replace(v, y_move=v.y_move + _MOVE_STEP),
    Key.E: lambda v: replace(v, color=v.color + _COLOR_STEP),
}


def apply_key(view: View, key: int) -> View:
    """Return the view after a key press; Escape raises Quit."""
    try:
        key = Key(key)
    except ValueError:
        return view
    if key is Key.ESCAPE:
        raise Quit
    action = _ACTIONS.get(key)
    return view if action is None else action(view)


def _to_surface(image: Image) -> pygame.Surface:
    rgb = bytearray(image.width * image.height * 3)
    rgb[0::3] = image.buffer[2::4]
    rgb[1::3] = image.buffer[1::4]
    rgb[2::3] = image.buffer[0::4]
    return pygame.image.frombuffer(bytes(rgb), (image.width, image.height), "RGB")


def _draw(screen: pygame.Surface, font: pygame.font.Font, heightmap: HeightMap, view: View) -> None:
    screen.blit(_to_surface(render(heightmap, view)), (0, 0))
    for row, text in enumerate(LEGEND):
        screen.blit(font.render(text, True, _LEGEND_COLOR), (10, 10 + 20 * row))
    pygame.display.flip()


def run(heightmap: HeightMap) -> None:
    """Show the height map in a window until Escape or the window is closed."""
    keymap = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_q: Key.Q,
        pygame.K_w: Key.W,
        pygame.K_e: Key.E,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("fdf")
        font = pygame.font.Font(None, 22)
        view = View()
        _draw(screen, font, heightmap, view)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type != pygame.KEYDOWN:
                continue
            key = keymap.get(event.key)
            if key is None:
                continue
            try:
                view = apply_key(view, key)
            except Quit:
                break
            _draw(screen, font, heightmap, view)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Read the map named on the command line and show it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 1
    try:
        heightmap = read_map(args[0])
    except MapError as err:
        print(err, file=sys.stderr)
        return 1
    run(heightmap)
    return 0


if __name__ == "__main__":
    sys.exit(main())