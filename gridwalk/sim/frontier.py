"""Open and closed sets for the grid search."""

from __future__ import annotations

import heapq

from gridwalk.sim.grid import Point
from gridwalk.sim.node import SearchNode


class Frontier:
    """Frontier (open set) and explored (closed set) for one search goal.

    Holds at most one node per position. Ties on priority go to the position
    that was queued first; replacing a queued node keeps its place in line.
    """

    def __init__(self, goal: Point) -> None:
        self.goal = goal
        self._heap: list[tuple[int, int, Point]] = []
        self._entries: dict[Point, tuple[int, int, SearchNode]] = {}
        self._explored: set[Point] = set()
        self._sequence = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, position: object) -> bool:
        return position in self._entries

    @property
    def explored_count(self) -> int:
        return len(self._explored)

    def is_explored(self, position: Point) -> bool:
        return position in self._explored

    def queued(self, position: Point) -> SearchNode | None:
        entry = self._entries.get(position)
        return entry[2] if entry else None

    def pop_best(self) -> SearchNode:
        while self._heap:
            priority, sequence, position = heapq.heappop(self._heap)
            entry = self._entries.get(position)
            if entry is None or entry[0] != priority or entry[1] != sequence:
                continue
            del self._entries[position]
            return entry[2]
        raise IndexError("pop from an empty frontier")

    def admit(self, child: SearchNode) -> bool:
        """Queue ``child`` unless its cell is settled or already queued cheaper."""
        position = child.position
        if position in self._explored:
            return False
        priority = child.priority(self.goal)
        existing = self._entries.get(position)
        if existing is not None:
            if priority >= existing[0]:
                return False
            sequence = existing[1]
        else:
            sequence = self._next_sequence()
        self._entries[position] = (priority, sequence, child)
        heapq.heappush(self._heap, (priority, sequence, position))
        return True

    def mark_explored(self, node: SearchNode) -> None:
        self._explored.add(node.position)

    def _next_sequence(self) -> int:
        self._sequence += 1
        return self._sequence
