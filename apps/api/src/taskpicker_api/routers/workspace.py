"""
Workspace API endpoints: the shared task list, its constraints and the
latest selection, stored in a JSON file between requests.
"""

import asyncio
import logging
from typing import Any

from fastapi import APIRouter, status

from task_selector import CancellationToken, SelectionWorkspace
from task_selector.models import Constraints, SelectionResult, Task
from task_selector.workspace import WorkspaceState
from taskpicker_api.config import settings
from taskpicker_api.exceptions import ValidationError
from taskpicker_api.models import ErrorResponse, RunRequest, TaskCreate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/workspace", tags=["workspace"])

# One writer at a time for the load-modify-save cycle
_workspace_lock = asyncio.Lock()


def load_workspace() -> SelectionWorkspace:
    return SelectionWorkspace.load(settings.workspace_file, config=settings.solver_config())


def _solve_token() -> CancellationToken:
    return CancellationToken(settings.solve_timeout_seconds)


@router.get("", response_model=WorkspaceState)
async def get_workspace():
    """Current tasks, constraints, strategy and result."""
    return load_workspace().to_state()


@router.post(
    "/tasks",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse, "description": "Unknown category"}},
)
async def add_task(task_data: TaskCreate):
    """Add a task; its id is the next free `T<k>`."""
    unknown = sorted(set(task_data.categories) - set(settings.categories_list))
    if unknown:
        raise ValidationError(f"Unknown categories: {', '.join(unknown)}", field="categories")

    async with _workspace_lock:
        workspace = load_workspace()
        task = workspace.add_task(
            task_data.name,
            task_data.cost,
            task_data.hours,
            task_data.value,
            task_data.categories,
        )
        workspace.save(settings.workspace_file)
    return task


@router.delete(
    "/tasks/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse, "description": "Task not found"}},
)
async def delete_task(task_id: str):
    async with _workspace_lock:
        workspace = load_workspace()
        workspace.delete_task(task_id)
        workspace.save(settings.workspace_file)


@router.put("/constraints", response_model=WorkspaceState)
async def replace_constraints(constraints: Constraints):
    """Replace the constraints and re-run the current strategy, if any."""
    async with _workspace_lock:
        workspace = load_workspace()
        await asyncio.to_thread(workspace.set_constraints, constraints, _solve_token())
        workspace.save(settings.workspace_file)
    return workspace.to_state()


@router.post(
    "/run",
    response_model=SelectionResult,
    responses={408: {"model": ErrorResponse, "description": "Solve timed out"}},
)
async def run_strategy(request: RunRequest):
    """Run a strategy on the workspace tasks; the result replaces the previous one."""
    async with _workspace_lock:
        workspace = load_workspace()
        result = await asyncio.to_thread(
            workspace.run_strategy, request.strategy, _solve_token()
        )
        workspace.save(settings.workspace_file)
    logger.info(f"Workspace run with {request.strategy}: value={result.totals.total_value}")
    return result


@router.get("/export", response_model=dict[str, Any])
async def export_result():
    """Latest result as flat JSON for download."""
    return load_workspace().export_result()
