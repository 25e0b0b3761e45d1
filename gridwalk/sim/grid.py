"""Grid model, coordinates and text layout ingestion."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BLOCKED_CHAR = "X"


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def moved(self, direction: Direction) -> Point:
        dx, dy = direction.offset
        return Point(self.x + dx, self.y + dy)

    def manhattan(self, other: Point) -> int:
        return abs(other.x - self.x) + abs(other.y - self.y)


class Direction(Enum):
    """Axis-aligned unit steps; iteration order is UP, RIGHT, DOWN, LEFT."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def offset(self) -> tuple[int, int]:
        return self.value

    @classmethod
    def between(cls, a: Point, b: Point) -> Direction:
        delta = (b.x - a.x, b.y - a.y)
        for direction in cls:
            if direction.offset == delta:
                return direction
        raise ValueError(f"{a} and {b} are not adjacent.")


@dataclass(frozen=True)
class Grid:
    width: int
    tiles: tuple[bool, ...]

    @classmethod
    def empty(cls) -> Grid:
        return cls(width=0, tiles=())

    @property
    def height(self) -> int:
        if self.width == 0:
            return 0
        return len(self.tiles) // self.width

    def in_bounds(self, pos: Point) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_blocked(self, pos: Point) -> bool:
        """Return whether ``pos`` is an obstacle; check ``in_bounds`` first."""
        if not self.in_bounds(pos):
            raise IndexError(f"{pos} is outside the {self.width}x{self.height} grid.")
        return self.tiles[pos.x + pos.y * self.width]

    def blocked_cells(self) -> set[Point]:
        return {
            Point(index % self.width, index // self.width)
            for index, blocked in enumerate(self.tiles)
            if blocked
        }


def parse_grid(text: str) -> Grid:
    """Build a grid from rows of text where ``X`` marks a blocked cell.

    Width comes from the first row. Text without a newline degrades to an
    empty grid; use ``validate_layout`` to reject such input up front.
    """
    rows = _split_rows(text)
    if rows is None:
        return Grid.empty()
    width = len(rows[0])
    if width == 0:
        return Grid.empty()
    cells = "".join(rows)
    height = len(cells) // width
    tiles = tuple(char == BLOCKED_CHAR for char in cells[: width * height])
    return Grid(width=width, tiles=tiles)


def validate_layout(text: str) -> None:
    rows = _split_rows(text)
    if rows is None:
        raise ValueError("Grid layout needs at least one newline-terminated row.")
    width = len(rows[0])
    if width == 0:
        raise ValueError("Grid layout starts with an empty row.")
    if rows[-1] == "":
        rows = rows[:-1]
    for index, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(
                f"Grid row {index} has width {len(row)}, expected {width}."
            )


def _split_rows(text: str) -> list[str] | None:
    if "\n" not in text:
        return None
    return [row.removesuffix("\r") for row in text.split("\n")]
