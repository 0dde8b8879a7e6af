"""
Budget-indexed dynamic programming.

The table has one cell per integer cost 0..B. Each cell remembers a single
path (value, hours, chosen tasks), not one path per hours total, so a cell
that committed to a high-hours path can hide a better combination that a
full cost x hours table would find, so results can fall below the optimum.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..cancellation import CancellationToken, resolve_token
from ..config import SolverConfig, resolve_config
from ..evaluation import build_result, empty_result, evaluate, is_fully_feasible
from ..models import Constraints, SelectionResult, Strategy, Task

logger = logging.getLogger(__name__)

NAME = Strategy.DYNAMIC_PROGRAMMING.value


@dataclass(frozen=True)
class _Cell:
    value: int
    hours: int
    chosen: tuple[int, ...]


_EMPTY_CELL = _Cell(0, 0, ())


def dynamic_programming(
    tasks: Sequence[Task],
    constraints: Constraints,
    *,
    config: SolverConfig | None = None,
    token: CancellationToken | None = None,
) -> SelectionResult:
    config = resolve_config(config)
    token = resolve_token(token)
    budget = constraints.max_cost
    if budget <= 0:
        return empty_result(NAME, config.categories)

    table = [_EMPTY_CELL] * (budget + 1)
    updates = 0

    for index, task in enumerate(tasks):
        token.raise_if_cancelled(NAME)
        # Downward scan so each task is used at most once per path
        for b in range(budget, task.cost - 1, -1):
            if b % config.poll_interval == 0:
                token.raise_if_cancelled(NAME)
            prev = table[b - task.cost]
            hours = prev.hours + task.hours
            if hours > constraints.max_hours:
                continue
            value = prev.value + task.value
            if value > table[b].value:
                table[b] = _Cell(value, hours, prev.chosen + (index,))
                updates += 1

    logger.debug(f"DP filled {budget + 1} cells with {updates} updates for {len(tasks)} tasks")

    best_subset = None
    best_value = -1
    seen = set()
    for b, cell in enumerate(table):
        if b % config.poll_interval == 0:
            token.raise_if_cancelled(NAME)
        # Neighbouring cells often share one path
        if cell.chosen in seen:
            continue
        seen.add(cell.chosen)
        subset = [tasks[i] for i in cell.chosen]
        totals = evaluate(subset, config.categories)
        if is_fully_feasible(totals, constraints) and totals.total_value > best_value:
            best_value = totals.total_value
            best_subset = subset

    if best_subset is None:
        return empty_result(NAME, config.categories)
    return build_result(best_subset, NAME, config.categories)
