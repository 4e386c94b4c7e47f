"""Isometric projection of height maps and drawing into a pixel image."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, replace

from wirefdf.heightmap import HeightMap, Point

WIDTH = 1240
HEIGHT = 670


def _float32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class View:
    """Projection settings: grid spacing, angle, offset and line colour."""

    space: int = WIDTH // 150
    deg: float = 0.5
    x_move: int = 0
    y_move: int = 0
    color: int = 0x00F23452

    def __post_init__(self) -> None:
        object.__setattr__(self, "deg", _float32(self.deg))


class Image:
    """A pixel buffer with four bytes per pixel: blue, green, red, alpha."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.buffer = bytearray(width * height * 4)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; writes whose offset falls outside the buffer are dropped.

        Row 0 is never written and the row is checked against the width;
        an x past a row's end spills into the next row.
        """
        if not 0 < y < self.width:
            return
        pos = (y * self.width + x) * 4
        if 0 < pos < len(self.buffer):
            self.buffer[pos:pos + 4] = bytes(
                (color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF, 0)
            )

    def pixel(self, x: int, y: int) -> int:
        """Return the 0xRRGGBB colour at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        pos = (y * self.width + x) * 4
        blue, green, red = self.buffer[pos:pos + 3]
        return red << 16 | green << 8 | blue

    def draw_line(self, start: Point, end: Point, color: int) -> None:
        """Draw a line from start up to, not including, end."""
        x, y = start.x, start.y
        dx = abs(end.x - x)
        dy = abs(end.y - y)
        sx = 1 if x < end.x else -1
        sy = 1 if y < end.y else -1
        counter = dx // 2 if dx > dy else -(dy // 2)
        while x != end.x or y != end.y:
            if 0 < x < self.width:
                self.put_pixel(x, y, color)
            error = counter
            if error > -dx:
                counter -= dy
                x += sx
            if error < dy:
                counter += dx
                y += sy


def project(view: View, point: Point) -> Point:
    """Project a map point to screen coordinates; z is kept."""
    cos = math.cos(view.deg)
    sin = math.sin(view.deg)
    x = (
        WIDTH // 2
        + point.x * view.space * cos
        - point.y * view.space * cos
        + view.x_move
    )
    y = (
        HEIGHT // 2
        + point.x * view.space * sin
        + point.y * view.space * sin
        - point.z * view.space
        + view.y_move
    )
    return replace(point, x=int(x), y=int(y))


def render(heightmap: HeightMap, view: View) -> Image:
    """Draw the wireframe of a height map into a new image."""
    image = Image()
    for point in heightmap.points():
        start = project(view, point)
        if 0 < start.x < image.width:
            image.put_pixel(start.x, start.y, view.color)
        for neighbour in (heightmap.right(point), heightmap.down(point)):
            if neighbour is not None:
                image.draw_line(start, project(view, neighbour), view.color)
    return image