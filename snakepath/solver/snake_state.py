"""Runtime state of a snake on the grid."""

from __future__ import annotations

from dataclasses import dataclass

from snakepath.solver.contracts import Cell, Direction


@dataclass
class Snake:
    body: list[Cell]
    heading: Direction = Direction.EAST

    def __post_init__(self) -> None:
        if not self.body:
            raise ValueError("Snake body needs at least a head.")

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def neck(self) -> Cell | None:
        return self.body[1] if len(self.body) > 1 else None

    def advance(self, direction: Direction, *, grow: bool = False) -> Cell:
        new_head = direction.step(self.head)
        self.body.insert(0, new_head)
        if not grow:
            self.body.pop()
        self.heading = direction
        return new_head
