"""Search core and grid model."""

from gridwalk.sim.contracts import ReplayFrame, Scenario, build_frames
from gridwalk.sim.frontier import Frontier
from gridwalk.sim.grid import Direction, Grid, Point, parse_grid, validate_layout
from gridwalk.sim.node import SearchNode
from gridwalk.sim.pathfinding import PathSearch, SearchStatus, pathfind
from gridwalk.sim.scenario_loader import build_demo_scenario, load_scenario

__all__ = [
    "Direction",
    "Frontier",
    "Grid",
    "PathSearch",
    "Point",
    "ReplayFrame",
    "Scenario",
    "SearchNode",
    "SearchStatus",
    "build_demo_scenario",
    "build_frames",
    "load_scenario",
    "parse_grid",
    "pathfind",
    "validate_layout",
]
