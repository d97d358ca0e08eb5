"""Stock blocking predicates for pathfinder queries."""

from __future__ import annotations

from typing import Iterable, Sequence

from snakepath.solver.contracts import BlockingPredicate, Cell, Tile, TileKind


def never_blocked(tile: Tile) -> bool:
    return False


def walls(tile: Tile) -> bool:
    return tile.kind == TileKind.WALL


def occupied(cells: Iterable[Cell]) -> BlockingPredicate:
    blocked = frozenset(cells)

    def _is_blocked(tile: Tile) -> bool:
        return tile.cell in blocked

    return _is_blocked


def body_after_moves(body: Sequence[Cell], moves: int) -> BlockingPredicate:
    """Block the segments still occupied once the snake has moved `moves` times.

    `body` is ordered head first; each move frees one tail segment.
    """
    remaining = max(len(body) - moves, 0)
    return occupied(body[:remaining])


def any_of(*predicates: BlockingPredicate) -> BlockingPredicate:
    def _is_blocked(tile: Tile) -> bool:
        return any(predicate(tile) for predicate in predicates)

    return _is_blocked
