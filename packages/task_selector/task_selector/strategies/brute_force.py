"""
Exhaustive search over every subset.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..cancellation import CancellationToken, resolve_token
from ..config import SolverConfig, resolve_config
from ..evaluation import TaskColumns, build_result, empty_result
from ..models import Constraints, SelectionResult, Strategy, Task
from .greedy import greedy

logger = logging.getLogger(__name__)

NAME = Strategy.BRUTE_FORCE.value


def brute_force(
    tasks: Sequence[Task],
    constraints: Constraints,
    *,
    config: SolverConfig | None = None,
    token: CancellationToken | None = None,
) -> SelectionResult:
    """Enumerate all 2^n subsets and keep the best fully feasible one.

    Subsets are visited in bitmask order, so among equal values the first
    mask wins. Inputs larger than `config.brute_force_max_tasks` go to greedy.
    """
    config = resolve_config(config)
    token = resolve_token(token)
    n = len(tasks)

    if n > config.brute_force_max_tasks:
        logger.info(
            f"{n} tasks exceed the brute force limit of {config.brute_force_max_tasks}; using greedy"
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
    n_minima = len(columns.minimum_keys)
    best_mask = -1
    best_value = -1

    for mask in range(1 << n):
        if mask % config.poll_interval == 0:
            token.raise_if_cancelled(NAME)
        cost = hours = value = 0
        category_sums = [0] * n_minima
        bits = mask
        index = 0
        while bits:
            if bits & 1:
                cost += columns.costs[index]
                hours += columns.hours[index]
                value += columns.values[index]
                contribution = columns.contributions[index]
                for k in range(n_minima):
                    category_sums[k] += contribution[k]
            bits >>= 1
            index += 1
        if cost > constraints.max_cost or hours > constraints.max_hours:
            continue
        if not columns.meets_minima(category_sums):
            continue
        if value > best_value:
            best_value = value
            best_mask = mask

    logger.debug(f"Brute force enumerated {1 << n} subsets of {n} tasks")

    if best_mask < 0:
        return empty_result(NAME, config.categories)

    subset = [tasks[i] for i in range(n) if best_mask >> i & 1]
    return build_result(subset, NAME, config.categories)
