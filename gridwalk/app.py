"""Application entry for searching a scenario and replaying the result."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.logging import RichHandler

from gridwalk.render.grid_view import render_grid
from gridwalk.render.replay_player import run_console_replay
from gridwalk.render.replay_screen import run_textual_replay
from gridwalk.sim.contracts import Scenario, build_frames
from gridwalk.sim.grid import Point
from gridwalk.sim.pathfinding import PathSearch

DEFAULT_VIEWER = "console"
DEFAULT_LOG_LEVEL = "WARNING"
VIEWERS = ("console", "textual", "none")

EXIT_FOUND = 0
EXIT_UNREACHABLE = 1

logger = logging.getLogger(__name__)


def run_pathfind(
    scenario: Scenario,
    *,
    viewer: str = DEFAULT_VIEWER,
    console: Console | None = None,
    read_line: Callable[[], str] | None = None,
) -> int:
    console = console or Console()
    grid = scenario.grid
    search = PathSearch(grid, scenario.start, scenario.goal)
    path = search.run()
    logger.info(
        "search finished: %s, %d expansions, %d cells explored",
        search.status.value,
        search.expanded,
        search.frontier.explored_count,
    )

    if path is None:
        console.print(render_grid(grid, current=scenario.start, goal=scenario.goal))
        console.print(
            f"[bold red]No path[/] from {_format_point(scenario.start)} "
            f"to {_format_point(scenario.goal)}."
        )
        return EXIT_UNREACHABLE

    if path:
        steps = " -> ".join(_format_point(point) for point in path)
        console.print(f"Found a {len(path)}-step path: {steps}")
    else:
        console.print("Start is already the goal.")
    frames = build_frames(scenario.start, path)
    if viewer == "textual":
        run_textual_replay(grid, frames, scenario.goal)
    elif viewer == "console":
        run_console_replay(
            grid, frames, scenario.goal, console=console, read_line=read_line
        )
    return EXIT_FOUND


def resolve_viewer(viewer: str | None) -> str:
    resolved = (viewer or os.getenv("GRIDWALK_VIEWER") or DEFAULT_VIEWER).lower()
    if resolved not in VIEWERS:
        raise ValueError(
            f"Unknown viewer {resolved!r}; expected one of {', '.join(VIEWERS)}."
        )
    return resolved


def resolve_log_level(level: str | None) -> int:
    name = (level or os.getenv("GRIDWALK_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level {name!r}.")
    return value


def resolve_map_path(map_path: Path | None) -> Path | None:
    if map_path is not None:
        return map_path
    env_path = os.getenv("GRIDWALK_MAP")
    return Path(env_path) if env_path else None


def configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _format_point(point: Point) -> str:
    return f"({point.x}, {point.y})"
