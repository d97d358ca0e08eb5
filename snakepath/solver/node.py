"""Per-cell bookkeeping for the A* search."""

from __future__ import annotations

from dataclasses import dataclass

from snakepath.config import DEFAULT_STEP_COST
from snakepath.solver.contracts import Cell, Direction


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass
class SearchNode:
    """One grid cell's search state.

    `parent` is the arena index of the predecessor on the best known path,
    not a reference, so the whole arena shares one lifetime.
    """

    index: int
    coordinate: Cell
    h: int
    g: int = 0
    parent: int | None = None
    arrival_direction: Direction | None = None
    opened: bool = False
    closed: bool = False

    @classmethod
    def initialize(
        cls,
        index: int,
        coordinate: Cell,
        target: Cell,
        *,
        step_cost: int = DEFAULT_STEP_COST,
    ) -> "SearchNode":
        return cls(
            index=index,
            coordinate=coordinate,
            h=step_cost * manhattan(coordinate, target),
        )

    @property
    def f(self) -> int:
        return self.g + self.h

    def update(
        self, source: "SearchNode", direction: Direction, step_cost: int
    ) -> None:
        self.parent = source.index
        self.arrival_direction = direction
        self.g = source.g + step_cost

    def relax_if_better(
        self, source: "SearchNode", direction: Direction, step_cost: int
    ) -> bool:
        if source.g + step_cost >= self.g:
            return False
        self.update(source, direction, step_cost)
        return True
