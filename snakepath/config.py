"""Solver settings with environment overrides."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_STEP_COST = 10
DEFAULT_TAIL_LOOKAHEAD = 1


class SolverConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    step_cost: int = Field(default=DEFAULT_STEP_COST, gt=0)
    max_expansions: int | None = Field(default=None, gt=0)
    tail_lookahead: int = Field(default=DEFAULT_TAIL_LOOKAHEAD, ge=0)


def load_solver_config(
    *,
    step_cost: int | None = None,
    max_expansions: int | None = None,
    tail_lookahead: int | None = None,
) -> SolverConfig:
    """Merge explicit values over `SNAKEPATH_*` environment variables."""
    values: dict[str, object] = {}
    resolved_step = (
        step_cost if step_cost is not None else _env_int("SNAKEPATH_STEP_COST")
    )
    if resolved_step is not None:
        values["step_cost"] = resolved_step
    resolved_budget = (
        max_expansions
        if max_expansions is not None
        else _env_int("SNAKEPATH_MAX_EXPANSIONS")
    )
    if resolved_budget is not None:
        values["max_expansions"] = resolved_budget
    resolved_lookahead = (
        tail_lookahead
        if tail_lookahead is not None
        else _env_int("SNAKEPATH_TAIL_LOOKAHEAD")
    )
    if resolved_lookahead is not None:
        values["tail_lookahead"] = resolved_lookahead
    return SolverConfig.model_validate(values)


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc
