"""
Selection API endpoints: run strategies on a posted task set.
"""

import logging
import time
import uuid
from datetime import datetime

from fastapi import APIRouter

from task_selector import (
    complexity_chart,
    complexity_label,
    estimate_cost,
    list_strategies,
    solve_async,
)
from task_selector.models import Strategy
from taskpicker_api.config import settings
from taskpicker_api.exceptions import ValidationError
from taskpicker_api.models import (
    CompareRequest,
    CompareResponse,
    ComplexityRequest,
    ComplexityRow,
    ErrorResponse,
    SolveRequest,
    SolveResponse,
    StrategyInfo,
    StrategyRun,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/selection", tags=["selection"])


@router.get("/strategies", response_model=list[StrategyInfo])
async def get_strategies():
    """Supported strategies in display order."""
    return [
        StrategyInfo(name=name, complexity_label=complexity_label(name))
        for name in list_strategies()
    ]


@router.post(
    "/solve",
    response_model=SolveResponse,
    responses={
        408: {"model": ErrorResponse, "description": "Solve timed out"},
        422: {"model": ErrorResponse, "description": "Invalid tasks or constraints"},
    },
)
async def solve_selection(request: SolveRequest):
    """
    Run one strategy on the posted tasks.

    Unknown strategy names are not rejected: the greedy heuristic answers and
    the requested name is reported in `algorithm_info.fallback_from`.
    """
    timeout = request.timeout_seconds or settings.solve_timeout_seconds
    logger.info(
        f"Solve request: {len(request.tasks)} tasks, strategy={request.strategy}, timeout={timeout}s"
    )

    start_time = time.monotonic()
    result = await solve_async(
        request.tasks,
        request.constraints,
        request.strategy,
        config=settings.solver_config(),
        timeout_seconds=timeout,
    )
    solve_time = time.monotonic() - start_time

    return SolveResponse(
        result=result,
        request_id=str(uuid.uuid4()),
        generated_at=datetime.now(),
        solve_time_seconds=solve_time,
    )


@router.post(
    "/compare",
    response_model=CompareResponse,
    responses={
        408: {"model": ErrorResponse, "description": "A strategy timed out"},
        422: {"model": ErrorResponse, "description": "Unknown strategy requested"},
    },
)
async def compare_strategies(request: CompareRequest):
    """Run several strategies on the same input, side by side."""
    names = request.strategies or list_strategies()
    unknown = [name for name in names if Strategy.parse(name) is None]
    if unknown:
        raise ValidationError(f"Unknown strategies: {', '.join(unknown)}", field="strategies")

    timeout = request.timeout_seconds or settings.solve_timeout_seconds
    config = settings.solver_config()
    n = len(request.tasks)
    runs = []

    for name in names:
        start_time = time.monotonic()
        result = await solve_async(
            request.tasks,
            request.constraints,
            name,
            config=config,
            timeout_seconds=timeout,
        )
        runs.append(
            StrategyRun(
                strategy=name,
                result=result,
                theoretical_cost=estimate_cost(name, n, request.constraints),
                solve_time_seconds=time.monotonic() - start_time,
            )
        )

    best = None
    best_value = 0
    for run in runs:
        if run.result.totals.total_value > best_value:
            best_value = run.result.totals.total_value
            best = run.strategy

    logger.info(f"Compared {len(runs)} strategies on {n} tasks, best={best}")
    return CompareResponse(runs=runs, best_strategy=best)


@router.post("/complexity", response_model=list[ComplexityRow])
async def get_complexity(request: ComplexityRequest):
    """Theoretical operation counts for charting; nothing is solved."""
    return [ComplexityRow(**row) for row in complexity_chart(request.n, request.constraints)]
