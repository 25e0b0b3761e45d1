"""Search nodes: a candidate path tip plus the path that reached it."""

from __future__ import annotations

from dataclasses import dataclass

from gridwalk.sim.grid import Direction, Point


@dataclass(frozen=True)
class SearchNode:
    position: Point
    path: tuple[Point, ...] = ()

    @classmethod
    def root(cls, start: Point) -> SearchNode:
        return cls(position=start)

    @property
    def length(self) -> int:
        return len(self.path)

    def priority(self, goal: Point) -> int:
        """A* score: steps taken so far plus Manhattan distance to ``goal``."""
        return self.position.manhattan(goal) + self.length

    def expand(self) -> tuple[SearchNode, ...]:
        children = []
        for direction in Direction:
            position = self.position.moved(direction)
            children.append(SearchNode(position=position, path=self.path + (position,)))
        return tuple(children)
