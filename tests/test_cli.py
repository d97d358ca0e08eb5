import json
from pathlib import Path

import pytest

from snakepath.__main__ import main, render_report
from snakepath.app import solve_map, solve_scene
from snakepath.solver.contracts import Direction
from snakepath.solver.terrain_loader import parse_scene

MAPS_DIR = Path(__file__).resolve().parents[1] / "maps"

CORRIDOR = "\n".join(["#######", "#oH..F#", "#######"])
SEALED = "\n".join(["#######", "#oH#.F#", "#######"])


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SNAKEPATH_STEP_COST",
        "SNAKEPATH_MAX_EXPANSIONS",
        "SNAKEPATH_TAIL_LOOKAHEAD",
    ):
        monkeypatch.delenv(name, raising=False)


def _write_map(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "map.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_solve_map_escapes_pocket() -> None:
    report = solve_map(MAPS_DIR / "pocket.txt")
    assert report.found is True
    assert report.direction == Direction.SOUTH
    assert len(report.path) - 1 == 5
    assert report.cost == 50


def test_solve_scene_reports_no_route() -> None:
    report = solve_scene(parse_scene(SEALED))
    assert report.found is False
    assert report.direction is None
    assert report.reason == "unreachable"
    assert report.path == []


def test_cli_prints_table(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(_write_map(tmp_path, CORRIDOR))])
    output = capsys.readouterr().out
    assert "Next Move" in output
    assert "EAST" in output


def test_cli_prints_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(_write_map(tmp_path, CORRIDOR)), "--json", "--step-cost", "1"])
    data = json.loads(capsys.readouterr().out)
    assert data["found"] is True
    assert data["direction"] == "east"
    assert data["cost"] == 3
    assert data["path"] == [[2, 1], [3, 1], [4, 1], [5, 1]]


def test_cli_reports_budget(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(_write_map(tmp_path, CORRIDOR)), "--json", "--max-expansions", "1"])
    data = json.loads(capsys.readouterr().out)
    assert data["found"] is False
    assert data["reason"] == "budget_exhausted"


def test_cli_errors_exit(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing.txt")])
    with pytest.raises(SystemExit):
        main([str(_write_map(tmp_path, "#H#"))])
    with pytest.raises(SystemExit):
        main([str(_write_map(tmp_path, CORRIDOR)), "--step-cost", "0"])


def test_render_report_without_route() -> None:
    report = solve_scene(parse_scene(SEALED))
    table = render_report(report)
    assert table.row_count == 5
