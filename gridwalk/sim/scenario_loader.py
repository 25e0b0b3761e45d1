"""Load scenarios from JSON files or plain-text layouts."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from gridwalk.sim.contracts import Scenario
from gridwalk.sim.grid import Point

logger = logging.getLogger(__name__)

DEMO_LAYOUT = "XXXXX\nX   X\nX X X\nX   X\nXXXXX\n"
DEMO_START = Point(1, 1)
DEMO_GOAL = Point(3, 3)


def build_demo_scenario() -> Scenario:
    return Scenario(layout=DEMO_LAYOUT, start=DEMO_START, goal=DEMO_GOAL)


def load_scenario(
    path: Path,
    *,
    start: Point | None = None,
    goal: Point | None = None,
) -> Scenario:
    """Read a scenario; ``start``/``goal`` override values stored in the file.

    ``.json`` files carry ``layout``, ``start`` and ``goal``. Anything else is
    read as a raw text layout, so ``start`` and ``goal`` must be given.
    """
    if path.suffix.lower() == ".json":
        data = _load_json(path)
        layout = _coerce_layout(data.get("layout"), path)
        start_data: Any = start or data.get("start")
        goal_data: Any = goal or data.get("goal")
    else:
        layout = _read_text(path)
        start_data = start
        goal_data = goal
    if start_data is None or goal_data is None:
        raise ValueError(f"Scenario {path} needs both a start and a goal.")
    logger.info("loaded scenario from %s", path)
    return Scenario(layout=layout, start=start_data, goal=goal_data)


def _load_json(path: Path) -> dict:
    text = _read_text(path)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Scenario file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Scenario file {path} must contain a JSON object.")
    return data


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing scenario file: {path}") from exc


def _coerce_layout(raw: Any, path: Path) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, list) and all(isinstance(row, str) for row in raw):
        return "".join(f"{row}\n" for row in raw)
    raise ValueError(f"Scenario {path} layout must be a string or a list of rows.")
