"""Height maps: grids of integer altitudes read from text."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike

from wirefdf.libft.chars import atoi, is_digit
from wirefdf.libft.lines import LineReader

INVALID_MAP = "Error : Invalid map"
EMPTY_FILE = "Error : File is empty"
CANT_OPEN = "Error : Can't open file"


class MapError(Exception):
    """Raised when a map cannot be read or is malformed."""


@dataclass(frozen=True)
class Point:
    """A grid point: column x, row y, altitude z."""

    x: int
    y: int
    z: int


@dataclass(frozen=True)
class HeightMap:
    """Rows of points; rows may differ in length."""

    rows: tuple[tuple[Point, ...], ...]

    def _at(self, x: int, y: int) -> Point | None:
        if 0 <= y < len(self.rows) and 0 <= x < len(self.rows[y]):
            return self.rows[y][x]
        return None

    def right(self, point: Point) -> Point | None:
        """The next point in the same row, or None at the row's end."""
        return self._at(point.x + 1, point.y)

    def down(self, point: Point) -> Point | None:
        """The point at the same column in the next row, or None."""
        return self._at(point.x, point.y + 1)

    def points(self) -> Iterator[Point]:
        """Every point, row by row, left to right."""
        for row in self.rows:
            yield from row


def parse_line(line: str, y: int) -> list[Point]:
    """Parse one map line of space-separated altitudes into row y.

    A value starts with a digit or a sign and runs to the next space; its
    leading integer is the altitude. Any other character where a value
    could start makes the map invalid.
    """
    text = line.partition("\0")[0]
    points: list[Point] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == " ":
            i += 1
        elif is_digit(ch) or ch in "+-":
            end = text.find(" ", i)
            if end < 0:
                end = len(text)
            points.append(Point(len(points), y, atoi(text[i:end])))
            i = end
        else:
            raise MapError(INVALID_MAP)
    return points


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from lines of text; every line must hold a value."""
    rows = []
    for y, line in enumerate(lines):
        row = parse_line(line, y)
        if not row:
            raise MapError(INVALID_MAP)
        rows.append(tuple(row))
    if not rows:
        raise MapError(EMPTY_FILE)
    return HeightMap(tuple(rows))


def read_map(path: str | PathLike[str]) -> HeightMap:
    """Read a height map from a file."""
    try:
        handle = open(path, "rb")
    except OSError as err:
        raise MapError(CANT_OPEN) from err
    with handle:
        return parse_map(LineReader(handle, encoding="latin-1"))