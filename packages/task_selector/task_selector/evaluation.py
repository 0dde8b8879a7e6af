"""
Evaluation and feasibility primitives shared by every strategy.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .complexity import complexity_label
from .config import DEFAULT_CONFIG
from .models import AlgorithmInfo, Constraints, SelectionResult, SelectionTotals, Task


def evaluate(subset: Iterable[Task], categories: Sequence[str] | None = None) -> SelectionTotals:
    """Aggregate value, cost, hours and category totals of a subset.

    Every configured category is present in the result, at zero if no task
    contributes to it.
    """
    if categories is None:
        categories = DEFAULT_CONFIG.categories

    total_value = total_cost = total_hours = 0
    total_categories = {key: 0 for key in categories}
    for task in subset:
        total_value += task.value
        total_cost += task.cost
        total_hours += task.hours
        for key, amount in task.categories.items():
            total_categories[key] = total_categories.get(key, 0) + amount

    return SelectionTotals(
        total_value=total_value,
        total_cost=total_cost,
        total_hours=total_hours,
        total_categories=total_categories,
    )


def fits_caps(totals: SelectionTotals, constraints: Constraints) -> bool:
    """True when total cost and hours are within their ceilings."""
    return (
        totals.total_cost <= constraints.max_cost
        and totals.total_hours <= constraints.max_hours
    )


def meets_category_minima(totals: SelectionTotals, constraints: Constraints) -> bool:
    """True when every category total reaches its minimum."""
    for key, minimum in constraints.min_category_totals.items():
        if totals.total_categories.get(key, 0) < minimum:
            return False
    return True


def is_fully_feasible(totals: SelectionTotals, constraints: Constraints) -> bool:
    """Caps and category minima both hold."""
    return fits_caps(totals, constraints) and meets_category_minima(totals, constraints)


def make_info(
    strategy_name: str,
    note: str | None = None,
    fallback_from: str | None = None,
) -> AlgorithmInfo:
    """AlgorithmInfo for a strategy name, with its complexity label."""
    return AlgorithmInfo(
        strategy_name=strategy_name,
        complexity_label=complexity_label(strategy_name),
        note=note,
        fallback_from=fallback_from,
    )


def empty_result(
    strategy_name: str,
    categories: Sequence[str] | None = None,
    *,
    note: str | None = None,
    fallback_from: str | None = None,
) -> SelectionResult:
    """Canonical no-solution result: no tasks and all totals at zero."""
    return SelectionResult(
        selected_tasks=[],
        totals=evaluate((), categories),
        algorithm_info=make_info(strategy_name, note=note, fallback_from=fallback_from),
    )


def build_result(
    subset: Sequence[Task],
    strategy_name: str,
    categories: Sequence[str] | None = None,
    *,
    note: str | None = None,
    fallback_from: str | None = None,
) -> SelectionResult:
    return SelectionResult(
        selected_tasks=list(subset),
        totals=evaluate(subset, categories),
        algorithm_info=make_info(strategy_name, note=note, fallback_from=fallback_from),
    )


class TaskColumns:
    """Column view of a task list for tight enumeration loops.

    Only the categories that carry a minimum are kept, in the order of
    `constraints.min_category_totals`.
    """

    def __init__(self, tasks: Sequence[Task], constraints: Constraints):
        self.minimum_keys = list(constraints.min_category_totals)
        self.minima = [constraints.min_category_totals[key] for key in self.minimum_keys]
        self.costs = [task.cost for task in tasks]
        self.hours = [task.hours for task in tasks]
        self.values = [task.value for task in tasks]
        self.contributions = [
            [task.contribution(key) for key in self.minimum_keys] for task in tasks
        ]

    def meets_minima(self, category_sums: Sequence[int]) -> bool:
        for total, minimum in zip(category_sums, self.minima):
            if total < minimum:
                return False
        return True
