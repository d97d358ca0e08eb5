"""Grid adapter backed by a fixed set of tiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from snakepath.solver.contracts import Cell, Tile, TileKind


@dataclass(frozen=True)
class Terrain:
    width: int
    height: int
    tiles: dict[Cell, Tile] = field(default_factory=dict)

    @classmethod
    def open_field(cls, width: int, height: int) -> "Terrain":
        return cls.from_cells(
            width, height, ((x, y) for y in range(height) for x in range(width))
        )

    @classmethod
    def from_cells(
        cls,
        width: int,
        height: int,
        floor: Iterable[Cell],
        walls: Iterable[Cell] = (),
    ) -> "Terrain":
        tiles: dict[Cell, Tile] = {}
        for x, y in floor:
            tiles[(x, y)] = Tile(x, y)
        for x, y in walls:
            tiles[(x, y)] = Tile(x, y, TileKind.WALL)
        for x, y in tiles:
            if not (0 <= x < width and 0 <= y < height):
                raise ValueError(f"Tile ({x}, {y}) lies outside {width}x{height}.")
        return cls(width=width, height=height, tiles=tiles)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> Tile | None:
        if not self.in_bounds(x, y):
            return None
        return self.tiles.get((x, y))

    def walls(self) -> set[Cell]:
        return {cell for cell, tile in self.tiles.items() if tile.kind == TileKind.WALL}

    def __iter__(self) -> Iterator[Tile]:
        for y in range(self.height):
            for x in range(self.width):
                tile = self.tiles.get((x, y))
                if tile is not None:
                    yield tile
