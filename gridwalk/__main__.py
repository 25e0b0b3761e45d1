"""Module entry point for `python -m gridwalk`."""

from __future__ import annotations

import argparse
from pathlib import Path

from gridwalk.app import (
    VIEWERS,
    configure_logging,
    resolve_log_level,
    resolve_map_path,
    resolve_viewer,
    run_pathfind,
)
from gridwalk.sim.contracts import Scenario
from gridwalk.sim.grid import Point
from gridwalk.sim.scenario_loader import build_demo_scenario, load_scenario


def parse_point(value: str) -> Point:
    try:
        x, y = (int(part) for part in value.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"expected X,Y integer coordinates, got {value!r}"
        ) from exc
    return Point(x, y)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find a shortest path on a grid and replay it step by step."
    )
    parser.add_argument(
        "--map",
        type=Path,
        default=None,
        help="Scenario file (.json) or text layout. Defaults to $GRIDWALK_MAP or the demo board.",
    )
    parser.add_argument(
        "--start",
        type=parse_point,
        default=None,
        help="Start cell as X,Y (overrides the scenario).",
    )
    parser.add_argument(
        "--goal",
        type=parse_point,
        default=None,
        help="Goal cell as X,Y (overrides the scenario).",
    )
    parser.add_argument(
        "--viewer",
        choices=VIEWERS,
        default=None,
        help="Replay viewer: console, textual or none. Defaults to $GRIDWALK_VIEWER.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level. Defaults to $GRIDWALK_LOG_LEVEL or WARNING.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        configure_logging(resolve_log_level(args.log_level))
        viewer = resolve_viewer(args.viewer)
        scenario = _load(resolve_map_path(args.map), args.start, args.goal)
    except (ValueError, FileNotFoundError) as exc:
        raise SystemExit(str(exc)) from exc

    return run_pathfind(scenario, viewer=viewer)


def _load(map_path: Path | None, start: Point | None, goal: Point | None) -> Scenario:
    if map_path is not None:
        return load_scenario(map_path, start=start, goal=goal)
    scenario = build_demo_scenario()
    if start is None and goal is None:
        return scenario
    return Scenario(
        layout=scenario.layout,
        start=start or scenario.start,
        goal=goal or scenario.goal,
    )


if __name__ == "__main__":
    raise SystemExit(main())
