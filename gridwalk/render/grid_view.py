"""Render grids as plain text or styled Rich text."""

from __future__ import annotations

from rich.text import Text

from gridwalk.sim.grid import BLOCKED_CHAR, Grid, Point

CURRENT_CHAR = "@"
GOAL_CHAR = "*"
TRAIL_CHAR = "·"
OPEN_CHAR = " "

BLOCKED_STYLE = "grey50 on grey23"
OPEN_STYLE = "grey70"
TRAIL_STYLE = "yellow"
GOAL_STYLE = "bold bright_magenta"
CURRENT_STYLE = "bold bright_cyan"


def render_grid_text(
    grid: Grid,
    *,
    current: Point | None = None,
    goal: Point | None = None,
) -> str:
    """One line per row; re-parses to the same blocked pattern.

    Markers are only drawn on open cells, so a blocked start stays ``X``.
    """
    lines = []
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            row.append(
                _cell_char(
                    grid,
                    Point(x, y),
                    current=current,
                    goal=goal,
                    markers_over_walls=False,
                )
            )
        lines.append("".join(row) + "\n")
    return "".join(lines)


def render_grid(
    grid: Grid,
    *,
    current: Point | None = None,
    goal: Point | None = None,
    trail: list[Point] | None = None,
) -> Text:
    trail_cells = set(trail or [])
    text = Text()
    for y in range(grid.height):
        for x in range(grid.width):
            pos = Point(x, y)
            char = _cell_char(grid, pos, current=current, goal=goal)
            if char == OPEN_CHAR and pos in trail_cells:
                text.append(TRAIL_CHAR, style=TRAIL_STYLE)
                continue
            text.append(char, style=_cell_style(char))
        if y < grid.height - 1:
            text.append("\n")
    return text


def _cell_char(
    grid: Grid,
    pos: Point,
    *,
    current: Point | None,
    goal: Point | None,
    markers_over_walls: bool = True,
) -> str:
    if not markers_over_walls and grid.is_blocked(pos):
        return BLOCKED_CHAR
    if pos == current:
        return CURRENT_CHAR
    if pos == goal:
        return GOAL_CHAR
    if grid.is_blocked(pos):
        return BLOCKED_CHAR
    return OPEN_CHAR


def _cell_style(char: str) -> str:
    if char == CURRENT_CHAR:
        return CURRENT_STYLE
    if char == GOAL_CHAR:
        return GOAL_STYLE
    if char == BLOCKED_CHAR:
        return BLOCKED_STYLE
    return OPEN_STYLE
