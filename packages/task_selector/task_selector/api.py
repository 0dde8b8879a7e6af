"""
API wrapper functions for task selection.
"""

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .config import SolverConfig
from .core import list_strategies, solve
from .evaluation import empty_result
from .models import Constraints, SelectionResult, Strategy, Task


class SelectionRequest(BaseModel):
    """Request model for a selection run."""
    tasks: List[Task] = Field(..., description="Candidate tasks")
    constraints: Constraints = Field(..., description="Ceilings and category minima")
    strategy: str = Field(Strategy.GREEDY.value, description="Strategy name")

    @field_validator("tasks")
    @classmethod
    def validate_unique_ids(cls, v):
        seen = set()
        for task in v:
            if task.id in seen:
                raise ValueError(f"Duplicate task id: {task.id}")
            seen.add(task.id)
        return v


class SelectionResponse(BaseModel):
    """Response model for a selection run."""
    result: SelectionResult = Field(..., description="Selection result")
    request_id: Optional[str] = Field(None, description="Request identifier")
    generated_at: datetime = Field(default_factory=datetime.now, description="Response generation time")


def solve_selection_api(
    request_data: Dict[str, Any], config: Optional[SolverConfig] = None
) -> Dict[str, Any]:
    """
    API wrapper for task selection.

    Args:
        request_data: Dictionary containing tasks, constraints and strategy

    Returns:
        Dictionary containing selection response data. Invalid requests come
        back as an empty result whose note starts with "ERROR:".
    """
    try:
        request = SelectionRequest(**request_data)
        result = solve(request.tasks, request.constraints, request.strategy, config=config)
    except Exception as e:
        strategy = request_data.get("strategy") if isinstance(request_data, dict) else None
        result = empty_result(
            str(strategy or Strategy.GREEDY.value),
            config.categories if config else None,
            note=f"ERROR: {str(e)}",
        )

    response = SelectionResponse(
        result=result,
        request_id=str(uuid.uuid4()),
        generated_at=datetime.now(),
    )
    return response.model_dump(mode="json")


def create_task_from_dict(task_data: Dict[str, Any]) -> Task:
    """
    Create Task instance from dictionary data.

    Also accepts the legacy field names
    `price` for cost and `skills` for categories.

    Args:
        task_data: Dictionary containing task data

    Returns:
        Task instance
    """
    cost = task_data.get("cost", task_data.get("price"))
    categories = task_data.get("categories", task_data.get("skills")) or {}

    return Task(
        id=str(task_data["id"]),
        name=task_data.get("name", str(task_data["id"])),
        cost=int(cost),
        hours=int(task_data["hours"]),
        value=int(task_data["value"]),
        categories={str(k): int(v) for k, v in categories.items()},
    )


def format_selection_result(result: SelectionResult) -> Dict[str, Any]:
    """
    Format SelectionResult as flat, JSON-ready data for export.

    Args:
        result: SelectionResult instance

    Returns:
        Formatted dictionary
    """
    info = result.algorithm_info
    return {
        'selected_tasks': [
            {
                'id': task.id,
                'name': task.name,
                'cost': task.cost,
                'hours': task.hours,
                'value': task.value,
                'categories': dict(task.categories),
            }
            for task in result.selected_tasks
        ],
        'total_value': result.totals.total_value,
        'total_cost': result.totals.total_cost,
        'total_hours': result.totals.total_hours,
        'total_categories': dict(result.totals.total_categories),
        'algorithm_info': {
            'name': info.strategy_name,
            'complexity': info.complexity_label,
            'note': info.note,
            'fallback_from': info.fallback_from,
        },
    }


def validate_selection_request(request_data: Dict[str, Any]) -> Optional[str]:
    """
    Validate selection request data.

    Args:
        request_data: Dictionary containing request data

    Returns:
        Error message if validation fails, None if valid
    """
    required_fields = ['tasks', 'constraints']
    for field in required_fields:
        if field not in request_data:
            return f"Missing required field: {field}"

    tasks = request_data['tasks']
    if not isinstance(tasks, list):
        return "Tasks must be a list"

    seen_ids = set()
    for i, task in enumerate(tasks):
        if not isinstance(task, dict):
            return f"Task {i} must be a dictionary"

        required_task_fields = ['id', 'name', 'cost', 'hours', 'value']
        for field in required_task_fields:
            if field not in task:
                return f"Task {i} missing required field: {field}"

        for field in ('cost', 'hours', 'value'):
            if not isinstance(task[field], int) or task[field] < 0:
                return f"Task {i} field {field} must be a non-negative integer"

        if task['id'] in seen_ids:
            return f"Duplicate task id: {task['id']}"
        seen_ids.add(task['id'])

    constraints = request_data['constraints']
    if not isinstance(constraints, dict):
        return "Constraints must be a dictionary"

    for field in ('max_cost', 'max_hours'):
        if field not in constraints:
            return f"Constraints missing required field: {field}"
        if not isinstance(constraints[field], int) or constraints[field] < 0:
            return f"Constraints field {field} must be a non-negative integer"

    strategy = request_data.get('strategy')
    if strategy is not None and strategy not in list_strategies():
        return f"Unknown strategy: {strategy}"

    return None
