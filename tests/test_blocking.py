from snakepath.solver.blocking import (
    any_of,
    body_after_moves,
    never_blocked,
    occupied,
    walls,
)
from snakepath.solver.contracts import Tile, TileKind


def test_walls_and_occupied() -> None:
    assert walls(Tile(0, 0, TileKind.WALL)) is True
    assert walls(Tile(0, 0)) is False
    assert never_blocked(Tile(0, 0, TileKind.WALL)) is False

    body = occupied([(1, 1), (1, 2)])
    assert body(Tile(1, 2)) is True
    assert body(Tile(2, 2)) is False


def test_body_after_moves_frees_tail_segments() -> None:
    body = [(3, 0), (2, 0), (1, 0), (0, 0)]

    now = body_after_moves(body, 0)
    assert all(now(Tile(x, y)) for x, y in body)

    next_tick = body_after_moves(body, 1)
    assert next_tick(Tile(1, 0)) is True
    assert next_tick(Tile(0, 0)) is False

    later = body_after_moves(body, 10)
    assert not any(later(Tile(x, y)) for x, y in body)


def test_any_of_combines_predicates() -> None:
    blocked = any_of(walls, occupied([(2, 2)]))
    assert blocked(Tile(0, 0, TileKind.WALL)) is True
    assert blocked(Tile(2, 2)) is True
    assert blocked(Tile(1, 1)) is False
