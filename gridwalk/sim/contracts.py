"""Data contracts for scenarios and replay frames."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from gridwalk.sim.grid import Direction, Grid, Point, parse_grid, validate_layout


class Scenario(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    layout: str
    start: Point
    goal: Point

    @model_validator(mode="after")
    def validate_scenario(self) -> "Scenario":
        validate_layout(self.layout)
        grid = self.grid
        if not grid.in_bounds(self.start):
            raise ValueError(f"start {self.start} is outside the grid")
        if not grid.in_bounds(self.goal):
            raise ValueError(f"goal {self.goal} is outside the grid")
        return self

    @property
    def grid(self) -> Grid:
        return parse_grid(self.layout)


class ReplayFrame(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    index: int
    total: int
    position: Point
    direction: Direction | None = None

    @property
    def title(self) -> str:
        label = self.direction.name if self.direction else "START"
        return f"Step {self.index}/{self.total - 1}: {label}"


def build_frames(start: Point, path: list[Point]) -> list[ReplayFrame]:
    """Prefix ``path`` with ``start`` and label each step with its direction."""
    positions = [start, *path]
    total = len(positions)
    frames = [ReplayFrame(index=0, total=total, position=start)]
    for index in range(1, total):
        frames.append(
            ReplayFrame(
                index=index,
                total=total,
                position=positions[index],
                direction=Direction.between(positions[index - 1], positions[index]),
            )
        )
    return frames
