"""
Task selection library.

Chooses a subset of tasks that maximises total value under cost and hours
ceilings and per-category minimum totals, with six interchangeable
strategies and a theoretical cost estimator for comparing them.
"""

from .cancellation import CancellationToken
from .complexity import complexity_chart, complexity_label, estimate_cost
from .config import SolverConfig
from .core import list_strategies, solve, solve_async
from .errors import (
    SelectionError,
    SolveCancelledError,
    SolveTimeoutError,
    TaskNotFoundError,
    WorkspaceError,
)
from .evaluation import evaluate, is_fully_feasible
from .models import (
    AlgorithmInfo,
    Category,
    Constraints,
    SelectionResult,
    SelectionTotals,
    Strategy,
    Task,
)
from .workspace import SelectionWorkspace, WorkspaceState

__version__ = "0.1.0"

__all__ = [
    "AlgorithmInfo",
    "CancellationToken",
    "Category",
    "Constraints",
    "SelectionError",
    "SelectionResult",
    "SelectionTotals",
    "SelectionWorkspace",
    "SolveCancelledError",
    "SolveTimeoutError",
    "SolverConfig",
    "Strategy",
    "Task",
    "TaskNotFoundError",
    "WorkspaceError",
    "WorkspaceState",
    "complexity_chart",
    "complexity_label",
    "estimate_cost",
    "evaluate",
    "is_fully_feasible",
    "list_strategies",
    "solve",
    "solve_async",
]
