"""Step-through replay of a found path on the console."""

from __future__ import annotations

from typing import Callable

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from gridwalk.render.grid_view import render_grid
from gridwalk.sim.contracts import ReplayFrame
from gridwalk.sim.grid import Grid, Point

PROMPT = "Press enter for the next step (q to quit) "
QUIT_KEYS = {"q", "quit"}


def run_console_replay(
    grid: Grid,
    frames: list[ReplayFrame],
    goal: Point,
    *,
    console: Console | None = None,
    read_line: Callable[[], str] | None = None,
) -> int:
    """Print one frame at a time, waiting for a line of input in between.

    Returns the number of frames shown.
    """
    console = console or Console()
    if read_line is None:

        def read_line() -> str:
            return console.input(PROMPT)

    shown = 0
    for frame in frames:
        console.print(render_frame(grid, frames, frame, goal))
        shown += 1
        if frame.index == len(frames) - 1:
            break
        if read_line().strip().lower() in QUIT_KEYS:
            break
    return shown


def render_frame(
    grid: Grid, frames: list[ReplayFrame], frame: ReplayFrame, goal: Point
) -> RenderableType:
    trail = [later.position for later in frames[frame.index + 1 :]]
    board = render_grid(grid, current=frame.position, goal=goal, trail=trail)
    return Panel(
        Group(board, _render_status(frame, goal)),
        title=frame.title,
        expand=False,
    )


def _render_status(frame: ReplayFrame, goal: Point) -> Text:
    position = frame.position
    if position == goal:
        return Text(f"Reached goal at ({goal.x}, {goal.y}).", style="bold green")
    remaining = frame.total - 1 - frame.index
    return Text(f"At ({position.x}, {position.y}), {remaining} steps to go.")
