"""Grid-based pathfinding (A*)."""

from __future__ import annotations

import logging
from enum import Enum

from gridwalk.sim.frontier import Frontier
from gridwalk.sim.grid import Grid, Point
from gridwalk.sim.node import SearchNode

logger = logging.getLogger(__name__)


class SearchStatus(str, Enum):
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class PathSearch:
    """Step-at-a-time A* from ``start`` to ``goal`` over a static grid."""

    def __init__(self, grid: Grid, start: Point, goal: Point) -> None:
        self._grid = grid
        self.start = start
        self.goal = goal
        self.frontier = Frontier(goal)
        self.frontier.admit(SearchNode.root(start))
        self.status = SearchStatus.RUNNING
        self.path: list[Point] | None = None
        self.expanded = 0

    @property
    def done(self) -> bool:
        return self.status != SearchStatus.RUNNING

    def step(self) -> SearchStatus:
        if self.done:
            return self.status
        if not self.frontier:
            self.status = SearchStatus.FAILED
            logger.debug(
                "search %s -> %s failed after %d expansions",
                self.start,
                self.goal,
                self.expanded,
            )
            return self.status

        current = self.frontier.pop_best()
        if current.position == self.goal:
            self.status = SearchStatus.SUCCEEDED
            self.path = list(current.path)
            logger.debug(
                "search %s -> %s found %d-step path after %d expansions",
                self.start,
                self.goal,
                current.length,
                self.expanded,
            )
            return self.status

        self.frontier.mark_explored(current)
        self.expanded += 1
        for child in current.expand():
            if self._is_open(child.position):
                self.frontier.admit(child)
        return self.status

    def run(self) -> list[Point] | None:
        while not self.done:
            self.step()
        return self.path

    def _is_open(self, position: Point) -> bool:
        if not self._grid.in_bounds(position):
            return False
        if self._grid.is_blocked(position):
            return False
        if self.frontier.is_explored(position):
            return False
        return True


def pathfind(grid: Grid, start: Point, goal: Point) -> list[Point] | None:
    """Return the cells from after ``start`` through ``goal``, or None if unreachable.

    Endpoints are not bounds-checked; an off-grid goal is never reached, so
    the search fails instead of raising.
    """
    logger.debug("pathfind %s -> %s on %dx%d grid", start, goal, grid.width, grid.height)
    return PathSearch(grid, start, goal).run()
