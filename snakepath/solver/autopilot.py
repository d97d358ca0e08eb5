"""Per-tick steering for an AI-controlled snake."""

from __future__ import annotations

import logging

from snakepath.config import SolverConfig
from snakepath.solver.blocking import any_of, body_after_moves, occupied, walls
from snakepath.solver.contracts import (
    EXPANSION_ORDER,
    BlockingPredicate,
    Cell,
    Direction,
    GridAdapter,
    Route,
)
from snakepath.solver.pathfinder import find_direction
from snakepath.solver.snake_state import Snake

logger = logging.getLogger(__name__)


def build_blocking(snake: Snake, *, tail_lookahead: int) -> BlockingPredicate:
    predicates = [walls, body_after_moves(snake.body, tail_lookahead)]
    if snake.neck is not None:
        # Reversing onto the neck is never a legal move, even when it is the tail.
        predicates.append(occupied([snake.neck]))
    return any_of(*predicates)


def choose_direction(
    grid: GridAdapter,
    snake: Snake,
    food: Cell,
    *,
    config: SolverConfig | None = None,
) -> Direction:
    config = config or SolverConfig()
    is_blocked = build_blocking(snake, tail_lookahead=config.tail_lookahead)
    result = find_direction(grid, snake.head, food, is_blocked, config=config)
    if isinstance(result, Route):
        return result.direction

    direction = fallback_direction(grid, snake, is_blocked)
    logger.debug(
        "No route from %s to %s (%s); falling back to %s",
        snake.head,
        food,
        result.reason,
        direction.value,
    )
    return direction


def fallback_direction(
    grid: GridAdapter, snake: Snake, is_blocked: BlockingPredicate
) -> Direction:
    """Keep heading if safe, else the first safe neighbor, else keep heading."""
    if _is_safe(grid, snake.heading.step(snake.head), is_blocked):
        return snake.heading
    for direction in EXPANSION_ORDER:
        if _is_safe(grid, direction.step(snake.head), is_blocked):
            return direction
    return snake.heading


def _is_safe(grid: GridAdapter, cell: Cell, is_blocked: BlockingPredicate) -> bool:
    x, y = cell
    if not (0 <= x < grid.width and 0 <= y < grid.height):
        return False
    tile = grid.tile_at(x, y)
    return tile is not None and not is_blocked(tile)
