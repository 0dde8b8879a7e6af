"""
Strategy dispatch for task selection.
"""

import asyncio
import logging
import time
from typing import List, Optional, Sequence, Union

from .cancellation import CancellationToken
from .config import SolverConfig
from .models import Constraints, SelectionResult, Strategy, Task
from .strategies import STRATEGIES, greedy

logger = logging.getLogger(__name__)


def list_strategies() -> List[str]:
    """Names of the supported strategies, in display order."""
    return [strategy.value for strategy in Strategy]


def solve(
    tasks: Sequence[Task],
    constraints: Constraints,
    strategy: Union[str, Strategy],
    *,
    config: Optional[SolverConfig] = None,
    token: Optional[CancellationToken] = None,
) -> SelectionResult:
    """
    Select tasks with the named strategy.

    Args:
        tasks: Candidate tasks; never modified
        constraints: Cost and hours ceilings plus category minima
        strategy: Strategy member or display name
        config: Solver configuration (category set, size limits)
        token: Optional cancellation token polled by the strategy

    Returns:
        SelectionResult. Unknown strategy names run the greedy heuristic with
        the unknown name recorded in `algorithm_info.fallback_from`.

    Raises:
        SolveCancelledError: If `token` is cancelled or its deadline passes
    """
    start_time = time.time()
    parsed = Strategy.parse(strategy)
    name = parsed.value if parsed else str(strategy)
    logger.info(f"Solving {len(tasks)} tasks with {name}")

    if parsed is None:
        logger.warning(f"Unknown strategy '{strategy}'; using greedy")
        result = greedy(
            tasks,
            constraints,
            config=config,
            token=token,
            fallback_from=name,
            fallback_note="Unknown strategy; used greedy heuristic",
        )
    else:
        result = STRATEGIES[parsed](tasks, constraints, config=config, token=token)

    solve_time = time.time() - start_time
    logger.info(
        f"{result.algorithm_info.strategy_name} selected {len(result.selected_tasks)} tasks, "
        f"value={result.totals.total_value} in {solve_time:.3f}s"
    )
    return result


async def solve_async(
    tasks: Sequence[Task],
    constraints: Constraints,
    strategy: Union[str, Strategy],
    *,
    config: Optional[SolverConfig] = None,
    timeout_seconds: Optional[float] = None,
) -> SelectionResult:
    """
    Run `solve` on a worker thread so the event loop stays responsive.

    Raises:
        SolveTimeoutError: If the solve exceeds `timeout_seconds`
    """
    token = CancellationToken(timeout_seconds)
    try:
        return await asyncio.to_thread(
            solve, tasks, constraints, strategy, config=config, token=token
        )
    except asyncio.CancelledError:
        # Stop the worker thread as well
        token.cancel()
        raise
