"""Module entry point for `python -m snakepath`."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from snakepath.app import solve_map
from snakepath.config import load_solver_config
from snakepath.solver.contracts import RouteReport


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Find the next snake move toward the food on an ASCII map."
    )
    parser.add_argument("map_file", type=Path, help="ASCII map with H, o, F and #.")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of a table.",
    )
    parser.add_argument(
        "--step-cost",
        type=int,
        default=None,
        help="Cost of one move (defaults to SNAKEPATH_STEP_COST or 10).",
    )
    parser.add_argument(
        "--max-expansions",
        type=int,
        default=None,
        help="Give up after closing this many cells.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log search details.",
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )

    try:
        config = load_solver_config(
            step_cost=args.step_cost, max_expansions=args.max_expansions
        )
        report = solve_map(args.map_file, config=config)
    except ValidationError as exc:
        raise SystemExit(f"Invalid solver settings: {exc}") from exc
    except (ValueError, FileNotFoundError) as exc:
        raise SystemExit(str(exc)) from exc

    if args.json:
        print(report.model_dump_json(indent=2))
        return
    console = Console()
    console.print(render_report(report))


def render_report(report: RouteReport) -> Table:
    table = Table(title="Next Move", show_header=True, header_style="bold")
    table.add_column("Field")
    table.add_column("Value")

    table.add_row("Start", _format_cell(report.start))
    table.add_row("Food", _format_cell(report.target))
    if report.found and report.direction is not None:
        table.add_row("Direction", report.direction.value.upper())
        table.add_row("Steps", str(len(report.path) - 1))
        table.add_row("Cost", str(report.cost))
        table.add_row("Path", " ".join(_format_cell(cell) for cell in report.path))
    else:
        table.add_row("Direction", "None")
        table.add_row("Reason", report.reason or "-")
    table.add_row("Expanded", str(report.expanded))
    return table


def _format_cell(cell: tuple[int, int]) -> str:
    return f"({cell[0]},{cell[1]})"


if __name__ == "__main__":
    main()
