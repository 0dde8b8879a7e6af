"""
Depth-first branch and bound over tasks ranked by value-to-cost ratio.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..cancellation import CancellationToken, resolve_token
from ..config import SolverConfig, resolve_config
from ..evaluation import TaskColumns, build_result
from ..models import Constraints, SelectionResult, Strategy, Task
from .greedy import greedy, rank_by_ratio

logger = logging.getLogger(__name__)

NAME = Strategy.BRANCH_AND_BOUND.value


def branch_and_bound(
    tasks: Sequence[Task],
    constraints: Constraints,
    *,
    config: SolverConfig | None = None,
    token: CancellationToken | None = None,
) -> SelectionResult:
    """Include/exclude search with cap pruning and a suffix-value bound.

    Category minima never prune a branch; they only decide whether a node
    may replace the incumbent. If no node is fully feasible the greedy
    heuristic answers instead.
    """
    config = resolve_config(config)
    token = resolve_token(token)

    order = rank_by_ratio(tasks)
    columns = TaskColumns([tasks[i] for i in order], constraints)
    n = len(order)
    n_minima = len(columns.minimum_keys)

    # suffix_value[i]: value of every task from position i on
    suffix_value = [0] * (n + 1)
    for i in range(n - 1, -1, -1):
        suffix_value[i] = suffix_value[i + 1] + columns.values[i]

    best_value = -1
    best_positions: tuple[int, ...] | None = None
    visited = pruned = 0

    # Frames: (position, chosen positions, cost, hours, value, category sums)
    stack = [(0, (), 0, 0, 0, (0,) * n_minima)]
    while stack:
        position, chosen, cost, hours, value, sums = stack.pop()
        if visited % config.poll_interval == 0:
            token.raise_if_cancelled(NAME)
        visited += 1

        if cost > constraints.max_cost or hours > constraints.max_hours:
            pruned += 1
            continue
        if value > best_value and columns.meets_minima(sums):
            best_value = value
            best_positions = chosen
        if position >= n:
            continue
        if value + suffix_value[position] <= best_value:
            pruned += 1
            continue

        contribution = columns.contributions[position]
        # Exclude is pushed first so the include branch is explored first
        stack.append((position + 1, chosen, cost, hours, value, sums))
        stack.append(
            (
                position + 1,
                chosen + (position,),
                cost + columns.costs[position],
                hours + columns.hours[position],
                value + columns.values[position],
                tuple(s + c for s, c in zip(sums, contribution)),
            )
        )

    logger.debug(f"Branch and bound visited {visited} nodes, pruned {pruned}")

    if best_positions is None:
        logger.info("Branch and bound found no feasible selection; using greedy")
        return greedy(
            tasks,
            constraints,
            config=config,
            token=token,
            fallback_from=NAME,
            fallback_note="No feasible selection found by search; used greedy heuristic",
        )

    subset = [tasks[order[p]] for p in best_positions]
    return build_result(subset, NAME, config.categories)
