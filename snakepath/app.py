"""Application entry for solving a single ASCII map."""

from __future__ import annotations

from pathlib import Path

from snakepath.config import SolverConfig
from snakepath.solver.blocking import any_of, occupied, walls
from snakepath.solver.contracts import BlockingPredicate, RouteReport, build_report
from snakepath.solver.pathfinder import find_direction
from snakepath.solver.terrain_loader import Scene, load_scene


def scene_blocking(scene: Scene) -> BlockingPredicate:
    return any_of(walls, occupied(scene.body))


def solve_scene(scene: Scene, *, config: SolverConfig | None = None) -> RouteReport:
    result = find_direction(
        scene.terrain,
        scene.head,
        scene.food,
        scene_blocking(scene),
        config=config,
    )
    return build_report(result, start=scene.head, target=scene.food)


def solve_map(path: Path, *, config: SolverConfig | None = None) -> RouteReport:
    return solve_scene(load_scene(path), config=config)
