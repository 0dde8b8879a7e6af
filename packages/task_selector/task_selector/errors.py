"""
Exceptions raised by the task selection library.

Infeasible inputs are never errors: solvers answer them with an empty result.
These exceptions cover caller-driven interruption and workspace misuse.
"""


class SelectionError(Exception):
    """Base exception for the task selection library."""

    def __init__(self, message: str, error_code: str = "SELECTION_ERROR"):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class SolveCancelledError(SelectionError):
    """Raised when a solve is cancelled through its token."""

    def __init__(self, strategy: str, message: str = None):
        self.strategy = strategy
        super().__init__(message or f"{strategy} was cancelled", "SOLVE_CANCELLED")


class SolveTimeoutError(SolveCancelledError):
    """Raised when a solve runs past its deadline."""

    def __init__(self, strategy: str, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(
            strategy, f"{strategy} timed out after {timeout_seconds} seconds"
        )
        self.error_code = "SOLVE_TIMEOUT"


class TaskNotFoundError(SelectionError):
    """Raised when a workspace task id does not exist."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Task not found with ID: {task_id}", "TASK_NOT_FOUND")


class WorkspaceError(SelectionError):
    """Raised when a stored workspace cannot be read or written."""

    def __init__(self, message: str):
        super().__init__(message, "WORKSPACE_ERROR")
