"""
Reachable-cost bitset with first-predecessor reconstruction.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..bitset import WordBitset
from ..cancellation import CancellationToken, resolve_token
from ..config import SolverConfig, resolve_config
from ..evaluation import build_result, empty_result, evaluate, is_fully_feasible
from ..models import Constraints, SelectionResult, Strategy, Task

logger = logging.getLogger(__name__)

NAME = Strategy.BITSET_DP.value


def reachable_costs(
    tasks: Sequence[Task],
    budget: int,
    word_bits: int = 64,
    token: CancellationToken | None = None,
) -> tuple[WordBitset, list[int], list[int]]:
    """Build the reachable-cost bitset over 0..budget.

    Returns:
        tuple: (reachable, predecessor, achieved_by) where predecessor[b] is
        the cost reached before the task achieved_by[b] first made b
        reachable, or -1 for costs never reached that way
    """
    token = resolve_token(token)
    reachable = WordBitset(budget + 1, word_bits)
    reachable.set(0)
    predecessor = [-1] * (budget + 1)
    achieved_by = [-1] * (budget + 1)

    for index, task in enumerate(tasks):
        token.raise_if_cancelled(NAME)
        if task.cost > budget:
            continue
        merged = reachable.union(reachable.shifted_left(task.cost))
        for b in merged.difference(reachable).iter_set_bits():
            predecessor[b] = b - task.cost
            achieved_by[b] = index
        reachable = merged

    return reachable, predecessor, achieved_by


def reconstruct(cost: int, predecessor: Sequence[int], achieved_by: Sequence[int]) -> list[int]:
    """Task indices on the recorded chain from `cost` back to 0, ascending."""
    picked = []
    current = cost
    while current > 0 and predecessor[current] != -1:
        picked.append(achieved_by[current])
        current = predecessor[current]
    picked.reverse()
    return picked


def bitset_dp(
    tasks: Sequence[Task],
    constraints: Constraints,
    *,
    config: SolverConfig | None = None,
    token: CancellationToken | None = None,
) -> SelectionResult:
    """Track which total costs are reachable, then rebuild one subset per cost.

    Only the first task that makes a cost reachable is remembered, so each
    cost maps to exactly one subset. Hours and category minima are checked
    on those subsets only.
    """
    config = resolve_config(config)
    token = resolve_token(token)
    budget = constraints.max_cost
    if budget <= 0:
        return empty_result(NAME, config.categories)

    reachable, predecessor, achieved_by = reachable_costs(
        tasks, budget, config.word_bits, token
    )
    logger.debug(f"Bitset DP reached {reachable.count()} of {budget + 1} costs")

    best_subset = None
    best_value = -1
    for checked, b in enumerate(reachable.iter_set_bits()):
        if checked % config.poll_interval == 0:
            token.raise_if_cancelled(NAME)
        subset = [tasks[i] for i in reconstruct(b, predecessor, achieved_by)]
        totals = evaluate(subset, config.categories)
        if is_fully_feasible(totals, constraints) and totals.total_value > best_value:
            best_value = totals.total_value
            best_subset = subset

    if best_subset is None:
        return empty_result(NAME, config.categories)
    return build_result(best_subset, NAME, config.categories)
