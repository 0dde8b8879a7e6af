"""
Greedy selection by value-to-cost ratio, followed by a category repair pass.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..cancellation import CancellationToken, resolve_token
from ..config import SolverConfig, resolve_config
from ..evaluation import build_result, empty_result, evaluate, is_fully_feasible
from ..models import Constraints, SelectionResult, Strategy, Task

logger = logging.getLogger(__name__)

NAME = Strategy.GREEDY.value
INFEASIBLE_NOTE = "No feasible solution under current constraints"


def value_per_cost(task: Task) -> float:
    """Ratio used to rank tasks; free tasks with value rank first."""
    if task.cost == 0:
        return float("inf") if task.value > 0 else 0.0
    return task.value / task.cost


def rank_by_ratio(tasks: Sequence[Task]) -> list[int]:
    """Task indices sorted by ratio descending, ties kept in input order."""
    return sorted(range(len(tasks)), key=lambda i: value_per_cost(tasks[i]), reverse=True)


def _deficits(category_totals: dict[str, int], constraints: Constraints) -> dict[str, int]:
    return {
        key: max(0, minimum - category_totals.get(key, 0))
        for key, minimum in constraints.min_category_totals.items()
    }


def greedy(
    tasks: Sequence[Task],
    constraints: Constraints,
    *,
    config: SolverConfig | None = None,
    token: CancellationToken | None = None,
    fallback_from: str | None = None,
    fallback_note: str | None = None,
) -> SelectionResult:
    """Ratio-ordered fill under the caps, then repair category deficits.

    Args:
        tasks: Candidate tasks
        constraints: Cost and hours ceilings plus category minima
        config: Solver configuration
        token: Optional cancellation token
        fallback_from: Name of the strategy that delegated here, if any
        fallback_note: Note to attach when a delegated run succeeds

    Returns:
        SelectionResult; the canonical empty result with a note when the
        repaired selection still misses a constraint
    """
    config = resolve_config(config)
    token = resolve_token(token)

    order = rank_by_ratio(tasks)
    selected: list[int] = []
    chosen = [False] * len(tasks)
    cost = hours = 0
    category_totals: dict[str, int] = {}

    def take(index: int) -> None:
        nonlocal cost, hours
        task = tasks[index]
        selected.append(index)
        chosen[index] = True
        cost += task.cost
        hours += task.hours
        for key, amount in task.categories.items():
            category_totals[key] = category_totals.get(key, 0) + amount

    # Phase 1: fill by ratio while the caps hold
    for index in order:
        task = tasks[index]
        if cost + task.cost <= constraints.max_cost and hours + task.hours <= constraints.max_hours:
            take(index)

    # Phase 2: add tasks that best reduce the category deficit per unit cost
    deficits = _deficits(category_totals, constraints)
    repairs = 0
    while sum(deficits.values()) > 0:
        token.raise_if_cancelled(NAME)
        best_index = None
        best_score = float("-inf")
        for index, task in enumerate(tasks):
            if chosen[index]:
                continue
            reduction = sum(
                min(deficit, task.contribution(key)) for key, deficit in deficits.items()
            )
            if reduction <= 0:
                continue
            if cost + task.cost > constraints.max_cost or hours + task.hours > constraints.max_hours:
                continue
            score = reduction / (task.cost + 1)
            if score > best_score:
                best_score = score
                best_index = index
        if best_index is None:
            break
        take(best_index)
        repairs += 1
        deficits = _deficits(category_totals, constraints)

    subset = [tasks[i] for i in selected]
    totals = evaluate(subset, config.categories)
    logger.debug(
        f"Greedy picked {len(selected)} of {len(tasks)} tasks ({repairs} repairs)"
    )

    if not is_fully_feasible(totals, constraints):
        logger.warning(f"Greedy repair could not satisfy constraints for {len(tasks)} tasks")
        return empty_result(
            NAME, config.categories, note=INFEASIBLE_NOTE, fallback_from=fallback_from
        )

    return build_result(
        subset,
        NAME,
        config.categories,
        note=fallback_note if fallback_from else None,
        fallback_from=fallback_from,
    )
