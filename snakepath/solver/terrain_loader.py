"""Load a scene (terrain, snake, food) from an ASCII map."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from snakepath.solver.contracts import Cell
from snakepath.solver.terrain import Terrain

WALL = "#"
FLOOR = "."
HEAD = "H"
BODY = "o"
FOOD = "F"
VOID = " "

MAP_SYMBOLS: set[str] = {WALL, FLOOR, HEAD, BODY, FOOD, VOID}


class MapFormatError(ValueError):
    """Raised when an ASCII map cannot be turned into a scene."""


@dataclass(frozen=True)
class Scene:
    terrain: Terrain
    head: Cell
    body: frozenset[Cell]
    food: Cell


def load_scene(path: Path) -> Scene:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing map file: {path}") from exc
    return parse_scene(text)


def parse_scene(text: str) -> Scene:
    lines = [line.rstrip("\n") for line in text.splitlines()]
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise MapFormatError("Map is empty.")

    width = max(len(line) for line in lines)
    height = len(lines)
    floor: list[Cell] = []
    walls: list[Cell] = []
    body: set[Cell] = set()
    heads: list[Cell] = []
    foods: list[Cell] = []

    for y, line in enumerate(lines):
        for x, symbol in enumerate(line):
            if symbol not in MAP_SYMBOLS:
                raise MapFormatError(f"Unknown map symbol {symbol!r} at ({x}, {y}).")
            if symbol == VOID:
                continue
            if symbol == WALL:
                walls.append((x, y))
                continue
            floor.append((x, y))
            if symbol == HEAD:
                heads.append((x, y))
            elif symbol == BODY:
                body.add((x, y))
            elif symbol == FOOD:
                foods.append((x, y))

    if len(heads) != 1:
        raise MapFormatError(f"Map needs exactly one {HEAD!r}, found {len(heads)}.")
    if len(foods) != 1:
        raise MapFormatError(f"Map needs exactly one {FOOD!r}, found {len(foods)}.")

    terrain = Terrain.from_cells(width, height, floor, walls)
    return Scene(terrain=terrain, head=heads[0], body=frozenset(body), food=foods[0])
