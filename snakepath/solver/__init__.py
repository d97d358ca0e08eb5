"""Pathfinding core and its grid/blocking collaborators."""

from snakepath.solver.autopilot import choose_direction, fallback_direction
from snakepath.solver.contracts import (
    Cell,
    Direction,
    GridAdapter,
    InvalidQueryError,
    NoRoute,
    Route,
    RouteReport,
    SolveResult,
    Tile,
    TileKind,
    build_report,
)
from snakepath.solver.node import SearchNode
from snakepath.solver.pathfinder import Pathfinder, find_direction
from snakepath.solver.snake_state import Snake
from snakepath.solver.terrain import Terrain
from snakepath.solver.terrain_loader import (
    MapFormatError,
    Scene,
    load_scene,
    parse_scene,
)

__all__ = [
    "Cell",
    "Direction",
    "GridAdapter",
    "InvalidQueryError",
    "MapFormatError",
    "NoRoute",
    "Pathfinder",
    "Route",
    "RouteReport",
    "Scene",
    "SearchNode",
    "Snake",
    "SolveResult",
    "Terrain",
    "Tile",
    "TileKind",
    "build_report",
    "choose_direction",
    "fallback_direction",
    "find_direction",
    "load_scene",
    "parse_scene",
]
