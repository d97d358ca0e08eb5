from snakepath.config import SolverConfig
from snakepath.solver.autopilot import (
    build_blocking,
    choose_direction,
    fallback_direction,
)
from snakepath.solver.contracts import Direction, Tile
from snakepath.solver.snake_state import Snake
from snakepath.solver.terrain import Terrain

# Food in the bottom-right corner with walls on both open sides.
SEALED_CORNER = Terrain.from_cells(
    5,
    5,
    [(x, y) for y in range(5) for x in range(5) if (x, y) not in {(3, 4), (4, 3)}],
    walls=[(3, 4), (4, 3)],
)


def test_follows_route_to_food() -> None:
    terrain = Terrain.open_field(5, 5)
    snake = Snake(body=[(1, 2), (0, 2)], heading=Direction.EAST)
    assert choose_direction(terrain, snake, (4, 2)) == Direction.EAST


def test_never_reverses_onto_neck() -> None:
    terrain = Terrain.open_field(5, 5)
    snake = Snake(body=[(2, 2), (3, 2)], heading=Direction.WEST)

    direction = choose_direction(terrain, snake, (4, 2))

    assert direction in {Direction.NORTH, Direction.SOUTH}
    blocked = build_blocking(snake, tail_lookahead=1)
    assert blocked(Tile(3, 2)) is True


def test_falls_back_to_heading_without_route() -> None:
    snake = Snake(body=[(0, 0)], heading=Direction.EAST)
    assert choose_direction(SEALED_CORNER, snake, (4, 4)) == Direction.EAST


def test_falls_back_to_first_safe_neighbor() -> None:
    snake = Snake(body=[(4, 0)], heading=Direction.EAST)
    assert choose_direction(SEALED_CORNER, snake, (4, 4)) == Direction.SOUTH


def test_boxed_in_snake_keeps_heading() -> None:
    terrain = Terrain.open_field(5, 5)
    snake = Snake(body=[(0, 0), (1, 0), (1, 1), (0, 1)], heading=Direction.NORTH)
    config = SolverConfig(tail_lookahead=0)

    assert choose_direction(terrain, snake, (4, 4), config=config) == Direction.NORTH


def test_tail_lookahead_frees_the_tail() -> None:
    terrain = Terrain.open_field(5, 5)
    snake = Snake(body=[(0, 0), (1, 0), (1, 1), (0, 1)], heading=Direction.NORTH)

    assert choose_direction(terrain, snake, (4, 4)) == Direction.SOUTH


def test_fallback_direction_directly() -> None:
    terrain = Terrain.open_field(3, 3)
    snake = Snake(body=[(1, 1)], heading=Direction.WEST)
    blocked = build_blocking(snake, tail_lookahead=1)
    assert fallback_direction(terrain, snake, blocked) == Direction.WEST


def test_snake_advance_and_grow() -> None:
    snake = Snake(body=[(2, 2), (1, 2)], heading=Direction.EAST)

    assert snake.advance(Direction.SOUTH) == (2, 3)
    assert snake.body == [(2, 3), (2, 2)]
    assert snake.heading == Direction.SOUTH

    snake.advance(Direction.SOUTH, grow=True)
    assert snake.body == [(2, 4), (2, 3), (2, 2)]
    assert snake.neck == (2, 3)
