"""
Meet-in-the-middle search: enumerate both halves, then join them by budget.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..cancellation import CancellationToken, resolve_token
from ..config import SolverConfig, resolve_config
from ..evaluation import TaskColumns, build_result, empty_result
from ..models import Constraints, SelectionResult, Strategy, Task
from .greedy import greedy

logger = logging.getLogger(__name__)

NAME = Strategy.MEET_IN_THE_MIDDLE.value


@dataclass(frozen=True)
class HalfSubset:
    indices: tuple[int, ...]
    cost: int
    hours: int
    value: int
    category_sums: tuple[int, ...]


def enumerate_half(
    indices: Sequence[int],
    columns: TaskColumns,
    constraints: Constraints,
    token: CancellationToken,
    poll_interval: int,
) -> list[HalfSubset]:
    """All subsets of `indices` that respect the caps on their own, in mask order."""
    n_minima = len(columns.minimum_keys)
    subsets = []
    for mask in range(1 << len(indices)):
        if mask % poll_interval == 0:
            token.raise_if_cancelled(NAME)
        chosen = tuple(indices[j] for j in range(len(indices)) if mask >> j & 1)
        cost = sum(columns.costs[i] for i in chosen)
        hours = sum(columns.hours[i] for i in chosen)
        if cost > constraints.max_cost or hours > constraints.max_hours:
            continue
        sums = tuple(
            sum(columns.contributions[i][k] for i in chosen) for k in range(n_minima)
        )
        value = sum(columns.values[i] for i in chosen)
        subsets.append(HalfSubset(chosen, cost, hours, value, sums))
    return subsets


def suffix_best(subsets: Sequence[HalfSubset]) -> list[HalfSubset]:
    """best[i] is the highest-value subset among subsets[i:]."""
    best: list[HalfSubset] = [None] * len(subsets)
    for i in range(len(subsets) - 1, -1, -1):
        if i == len(subsets) - 1 or subsets[i].value > best[i + 1].value:
            best[i] = subsets[i]
        else:
            best[i] = best[i + 1]
    return best


def meet_in_the_middle(
    tasks: Sequence[Task],
    constraints: Constraints,
    *,
    config: SolverConfig | None = None,
    token: CancellationToken | None = None,
) -> SelectionResult:
    """Split the tasks in two, enumerate each half and join them by budget.

    For every left subset the right subset used is the most expensive one
    within the remaining budget whose hours also fit, found by binary search
    and a backward scan. It is not necessarily the right subset with the
    highest value, so the strategy can miss the optimum.
    """
    config = resolve_config(config)
    token = resolve_token(token)
    n = len(tasks)

    if n > config.meet_in_middle_max_tasks:
        logger.info(
            f"{n} tasks exceed the meet-in-the-middle limit of "
            f"{config.meet_in_middle_max_tasks}; using greedy"
        )
        return greedy(
            tasks,
            constraints,
            config=config,
            token=token,
            fallback_from=NAME,
            fallback_note="Large n; used greedy heuristic",
        )

    columns = TaskColumns(tasks, constraints)
    mid = n // 2
    left = enumerate_half(range(mid), columns, constraints, token, config.poll_interval)
    right = enumerate_half(range(mid, n), columns, constraints, token, config.poll_interval)

    right.sort(key=lambda subset: subset.cost)
    right_costs = [subset.cost for subset in right]
    best_right_from = suffix_best(right)
    top_right_value = best_right_from[0].value if best_right_from else 0

    best_indices = None
    best_value = -1
    skipped = 0

    for count, l in enumerate(left):
        if count % config.poll_interval == 0:
            token.raise_if_cancelled(NAME)
        if l.value + top_right_value <= best_value:
            skipped += 1
            continue
        remaining_budget = constraints.max_cost - l.cost
        remaining_hours = constraints.max_hours - l.hours
        idx = bisect.bisect_right(right_costs, remaining_budget) - 1
        for j in range(idx, -1, -1):
            r = right[j]
            if r.hours > remaining_hours:
                continue
            cost = l.cost + r.cost
            hours = l.hours + r.hours
            sums = [a + b for a, b in zip(l.category_sums, r.category_sums)]
            value = l.value + r.value
            if (
                cost <= constraints.max_cost
                and hours <= constraints.max_hours
                and columns.meets_minima(sums)
                and value > best_value
            ):
                best_value = value
                best_indices = l.indices + r.indices
            break

    logger.debug(
        f"Meet-in-the-middle joined {len(left)} left and {len(right)} right subsets "
        f"({skipped} left subsets skipped by the value bound)"
    )

    if best_indices is None:
        return empty_result(NAME, config.categories)
    return build_result([tasks[i] for i in best_indices], NAME, config.categories)
