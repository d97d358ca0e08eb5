"""Core data contracts shared by the solver, the autopilot and the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field

Cell = tuple[int, int]


class Direction(str, Enum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def offset(self) -> Cell:
        return _OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def step(self, cell: Cell) -> Cell:
        dx, dy = self.offset
        return cell[0] + dx, cell[1] + dy


_OFFSETS: dict[Direction, Cell] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}

# Neighbor expansion order; equal-f tie-breaks depend on it.
EXPANSION_ORDER: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)


class TileKind(str, Enum):
    FLOOR = "floor"
    WALL = "wall"


@dataclass(frozen=True)
class Tile:
    x: int
    y: int
    kind: TileKind = TileKind.FLOOR

    @property
    def cell(self) -> Cell:
        return self.x, self.y


class GridAdapter(Protocol):
    """Read-only view of a grid snapshot.

    `tile_at` returns None for positions without a tile, including anything
    outside `[0, width) x [0, height)`.
    """

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def tile_at(self, x: int, y: int) -> Tile | None: ...


BlockingPredicate = Callable[[Tile], bool]


class InvalidQueryError(ValueError):
    """Raised when a search is asked for cells the grid cannot hold."""


@dataclass(frozen=True)
class Route:
    direction: Direction
    path: list[Cell] = field(default_factory=list)
    cost: int = 0
    expanded: int = 0

    found: bool = field(default=True, init=False)

    @property
    def steps(self) -> int:
        return len(self.path) - 1


@dataclass(frozen=True)
class NoRoute:
    reason: Literal["unreachable", "budget_exhausted"] = "unreachable"
    expanded: int = 0

    found: bool = field(default=False, init=False)


SolveResult = Route | NoRoute


class RouteReport(BaseModel):
    model_config = ConfigDict(extra="forbid")

    found: bool
    start: Cell
    target: Cell
    direction: Direction | None = None
    path: list[Cell] = Field(default_factory=list)
    cost: int | None = None
    expanded: int = 0
    reason: str | None = None


def build_report(result: SolveResult, *, start: Cell, target: Cell) -> RouteReport:
    if isinstance(result, Route):
        return RouteReport(
            found=True,
            start=start,
            target=target,
            direction=result.direction,
            path=list(result.path),
            cost=result.cost,
            expanded=result.expanded,
        )
    return RouteReport(
        found=False,
        start=start,
        target=target,
        expanded=result.expanded,
        reason=result.reason,
    )
