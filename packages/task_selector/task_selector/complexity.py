"""
Theoretical cost estimates for comparing strategies.

The numbers are relative operation counts for charts. Solvers never read them.
"""

from __future__ import annotations

import math
from typing import Any

from .models import Constraints, Strategy

UNKNOWN_LABEL = "—"

_LABELS = {
    Strategy.BRUTE_FORCE: "O(2^n)",
    Strategy.DYNAMIC_PROGRAMMING: "O(n·B)",
    Strategy.MEET_IN_THE_MIDDLE: "O(2^(n/2))",
    Strategy.BRANCH_AND_BOUND: "O(2^n) (pruned)",
    Strategy.GREEDY: "O(n log n)",
    Strategy.BITSET_DP: "O(n·B/word)",
}


def budget_scale(constraints: Constraints) -> int:
    """Budget in hundreds, clamped to [1, 1000]."""
    return max(1, min(1000, constraints.max_cost // 100))


def estimate_cost(strategy: str | Strategy, n: int, constraints: Constraints) -> float:
    scale = budget_scale(constraints)
    parsed = Strategy.parse(strategy)

    if parsed is Strategy.BRUTE_FORCE:
        return float(2 ** min(30, n))
    if parsed is Strategy.DYNAMIC_PROGRAMMING:
        return float(n * scale)
    if parsed is Strategy.MEET_IN_THE_MIDDLE:
        return float(2 ** min(30, math.ceil(n / 2)))
    if parsed is Strategy.BRANCH_AND_BOUND:
        # Optimistic pruning factor
        return 2.0 ** min(30.0, 0.75 * n)
    if parsed is Strategy.GREEDY:
        return n * math.log2(max(2, n))
    if parsed is Strategy.BITSET_DP:
        return n * scale / 32
    return float(n)


def complexity_label(strategy: str | Strategy) -> str:
    parsed = Strategy.parse(strategy)
    if parsed is None:
        return UNKNOWN_LABEL
    return _LABELS[parsed]


def complexity_chart(n: int, constraints: Constraints) -> list[dict[str, Any]]:
    """One row per strategy, ready to plot as a bar chart."""
    return [
        {
            "strategy": strategy.value,
            "label": complexity_label(strategy),
            "theoretical_cost": estimate_cost(strategy, n, constraints),
        }
        for strategy in Strategy
    ]
