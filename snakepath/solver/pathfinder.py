"""Grid-based pathfinding (A*) toward a single target cell."""

from __future__ import annotations

import heapq
import logging
from itertools import count
from typing import Callable

from snakepath.config import SolverConfig
from snakepath.solver.contracts import (
    EXPANSION_ORDER,
    BlockingPredicate,
    Cell,
    GridAdapter,
    InvalidQueryError,
    NoRoute,
    Route,
    SolveResult,
)
from snakepath.solver.node import SearchNode

logger = logging.getLogger(__name__)


class Pathfinder:
    """One search against one grid snapshot.

    Build a new instance per query; the node arena lives as long as the
    instance does.
    """

    def __init__(
        self,
        grid: GridAdapter,
        start: Cell,
        target: Cell,
        is_blocked: BlockingPredicate,
        *,
        config: SolverConfig | None = None,
        on_close: Callable[[SearchNode], None] | None = None,
    ) -> None:
        self._grid = grid
        self._width = grid.width
        self._height = grid.height
        self._start = start
        self._target = target
        self._is_blocked = is_blocked
        self._config = config or SolverConfig()
        self._on_close = on_close
        self._validate()
        self.nodes = self._allocate()

    def solve(self) -> SolveResult:
        step_cost = self._config.step_cost
        budget = self._config.max_expansions
        sequence = count()
        insertion: dict[int, int] = {}

        # (f, insertion order, arena index); relaxed nodes are re-pushed with
        # their original insertion order and stale entries skipped on pop.
        open_heap: list[tuple[int, int, int]] = []
        start = self.nodes[self._index(self._start)]
        start.opened = True
        insertion[start.index] = next(sequence)
        heapq.heappush(open_heap, (start.f, insertion[start.index], start.index))

        expanded = 0
        while open_heap:
            _, _, index = heapq.heappop(open_heap)
            current = self.nodes[index]
            if current.closed:
                continue
            current.closed = True
            expanded += 1
            if self._on_close is not None:
                self._on_close(current)

            if current.coordinate == self._target:
                route = self._build_route(current, expanded)
                logger.debug(
                    "Route %s -> %s: %s, %d steps, %d expanded",
                    self._start,
                    self._target,
                    route.direction.value,
                    route.steps,
                    expanded,
                )
                return route

            if budget is not None and expanded >= budget:
                logger.debug(
                    "Search %s -> %s stopped after %d expansions",
                    self._start,
                    self._target,
                    expanded,
                )
                return NoRoute(reason="budget_exhausted", expanded=expanded)

            for direction in EXPANSION_ORDER:
                x, y = direction.step(current.coordinate)
                if not (0 <= x < self._width and 0 <= y < self._height):
                    continue
                tile = self._grid.tile_at(x, y)
                if tile is None:
                    continue
                neighbor = self.nodes[self._index((x, y))]
                if self._is_blocked(tile) or neighbor.closed:
                    continue
                if not neighbor.opened:
                    neighbor.update(current, direction, step_cost)
                    neighbor.opened = True
                    insertion[neighbor.index] = next(sequence)
                elif not neighbor.relax_if_better(current, direction, step_cost):
                    continue
                heapq.heappush(
                    open_heap,
                    (neighbor.f, insertion[neighbor.index], neighbor.index),
                )

        logger.debug(
            "No route %s -> %s after %d expansions",
            self._start,
            self._target,
            expanded,
        )
        return NoRoute(reason="unreachable", expanded=expanded)

    def _validate(self) -> None:
        for label, cell in (("start", self._start), ("target", self._target)):
            x, y = cell
            if not (0 <= x < self._width and 0 <= y < self._height):
                raise InvalidQueryError(
                    f"{label} {cell} lies outside the "
                    f"{self._width}x{self._height} grid."
                )
            if self._grid.tile_at(x, y) is None:
                raise InvalidQueryError(f"{label} {cell} has no tile.")
        if self._start == self._target:
            raise InvalidQueryError(f"start and target are both {self._start}.")

    def _allocate(self) -> list[SearchNode]:
        step_cost = self._config.step_cost
        return [
            SearchNode.initialize(
                y * self._width + x, (x, y), self._target, step_cost=step_cost
            )
            for y in range(self._height)
            for x in range(self._width)
        ]

    def _index(self, cell: Cell) -> int:
        return cell[1] * self._width + cell[0]

    def _build_route(self, goal: SearchNode, expanded: int) -> Route:
        path_nodes = [goal]
        while path_nodes[-1].parent is not None:
            path_nodes.append(self.nodes[path_nodes[-1].parent])
        path_nodes.reverse()
        first_step = path_nodes[1].arrival_direction
        assert first_step is not None
        return Route(
            direction=first_step,
            path=[node.coordinate for node in path_nodes],
            cost=goal.g,
            expanded=expanded,
        )


def find_direction(
    grid: GridAdapter,
    start: Cell,
    target: Cell,
    is_blocked: BlockingPredicate,
    *,
    config: SolverConfig | None = None,
) -> SolveResult:
    """Return the first move of the cheapest route, or NoRoute."""
    return Pathfinder(grid, start, target, is_blocked, config=config).solve()
