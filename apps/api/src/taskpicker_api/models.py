"""
Request and response models for the HTTP service.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from task_selector.api import SelectionRequest
from task_selector.models import Constraints, SelectionResult, Task


class ErrorDetail(BaseModel):
    """Error detail model following API standardization"""

    code: str = Field(..., description="Error code for programmatic handling")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(
        default=None, description="Additional error context"
    )


class ErrorResponse(BaseModel):
    """Standardized error response model"""

    error: ErrorDetail

    @classmethod
    def create(
        cls, code: str, message: str, details: dict[str, Any] | None = None
    ) -> "ErrorResponse":
        """Create a standardized error response"""
        return cls(error=ErrorDetail(code=code, message=message, details=details))


class StrategyInfo(BaseModel):
    name: str
    complexity_label: str


class SolveRequest(SelectionRequest):
    """Selection request with an optional per-request deadline."""

    timeout_seconds: float | None = Field(
        default=None, gt=0, le=300, description="Overrides the server deadline"
    )


class SolveResponse(BaseModel):
    result: SelectionResult
    request_id: str
    generated_at: datetime
    solve_time_seconds: float = Field(..., ge=0)


class CompareRequest(BaseModel):
    tasks: list[Task]
    constraints: Constraints
    strategies: list[str] | None = Field(
        default=None, description="Strategies to run; all of them when omitted"
    )
    timeout_seconds: float | None = Field(default=None, gt=0, le=300)


class StrategyRun(BaseModel):
    strategy: str
    result: SelectionResult
    theoretical_cost: float
    solve_time_seconds: float


class CompareResponse(BaseModel):
    runs: list[StrategyRun]
    best_strategy: str | None = Field(
        default=None, description="First strategy reaching the highest value"
    )


class ComplexityRequest(BaseModel):
    n: int = Field(..., ge=0, description="Number of tasks")
    constraints: Constraints


class ComplexityRow(BaseModel):
    strategy: str
    label: str
    theoretical_cost: float


class TaskCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    cost: int = Field(..., ge=0)
    hours: int = Field(..., ge=0)
    value: int = Field(..., ge=0)
    categories: dict[str, int] = Field(default_factory=dict)


class RunRequest(BaseModel):
    strategy: str = Field(..., description="Strategy name")
