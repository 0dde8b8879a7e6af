"""
Caller-side planning state: the task list, the constraints, the strategy in
use and its latest result, persisted as a JSON document.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from .api import format_selection_result
from .cancellation import CancellationToken
from .config import SolverConfig, resolve_config
from .core import solve
from .errors import TaskNotFoundError, WorkspaceError
from .evaluation import empty_result
from .models import Constraints, SelectionResult, Strategy, Task
from .samples import sample_constraints, sample_tasks

logger = logging.getLogger(__name__)

_TASK_ID_PATTERN = re.compile(r"^T(\d+)$")


class WorkspaceState(BaseModel):
    """Serialisable snapshot of a workspace."""
    tasks: list[Task] = Field(default_factory=list)
    constraints: Constraints
    current_strategy: str | None = None
    result: SelectionResult | None = None


class SelectionWorkspace:
    """Holds one task list and its most recent selection.

    A new run replaces the previous result. Changing the constraints re-runs
    the current strategy, if one has been chosen.
    """

    def __init__(
        self,
        tasks: list[Task] | None = None,
        constraints: Constraints | None = None,
        *,
        current_strategy: str | None = None,
        result: SelectionResult | None = None,
        config: SolverConfig | None = None,
    ):
        self.tasks = list(sample_tasks() if tasks is None else tasks)
        self.constraints = sample_constraints() if constraints is None else constraints
        self.current_strategy = current_strategy
        self.config = resolve_config(config)
        self.result = result if result is not None else self._blank_result()

    def _blank_result(self) -> SelectionResult:
        return empty_result(self.current_strategy or Strategy.GREEDY.value, self.config.categories)

    def next_task_id(self) -> str:
        used = set()
        for task in self.tasks:
            match = _TASK_ID_PATTERN.match(task.id)
            if match:
                used.add(int(match.group(1)))
        candidate = len(self.tasks) + 1
        while candidate in used:
            candidate += 1
        return f"T{candidate}"

    def get_task(self, task_id: str) -> Task:
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def add_task(
        self,
        name: str,
        cost: int,
        hours: int,
        value: int,
        categories: dict[str, int] | None = None,
    ) -> Task:
        task = Task(
            id=self.next_task_id(),
            name=name,
            cost=cost,
            hours=hours,
            value=value,
            categories={key: 0 for key in self.config.categories} | dict(categories or {}),
        )
        self.tasks.append(task)
        logger.info(f"Added task {task.id} ({task.name})")
        return task

    def delete_task(self, task_id: str) -> Task:
        task = self.get_task(task_id)
        self.tasks = [t for t in self.tasks if t.id != task_id]
        logger.info(f"Deleted task {task_id}")
        return task

    def set_constraints(
        self, constraints: Constraints, token: CancellationToken | None = None
    ) -> SelectionResult | None:
        self.constraints = constraints
        if self.current_strategy is None:
            return None
        return self.run_strategy(self.current_strategy, token=token)

    def run_strategy(
        self, strategy: str | Strategy, token: CancellationToken | None = None
    ) -> SelectionResult:
        name = strategy.value if isinstance(strategy, Strategy) else str(strategy)
        self.result = solve(
            self.tasks, self.constraints, name, config=self.config, token=token
        )
        self.current_strategy = name
        return self.result

    def export_result(self) -> dict[str, Any]:
        return format_selection_result(self.result)

    def to_state(self) -> WorkspaceState:
        return WorkspaceState(
            tasks=self.tasks,
            constraints=self.constraints,
            current_strategy=self.current_strategy,
            result=self.result,
        )

    @classmethod
    def from_state(
        cls, state: WorkspaceState, config: SolverConfig | None = None
    ) -> "SelectionWorkspace":
        return cls(
            tasks=state.tasks,
            constraints=state.constraints,
            current_strategy=state.current_strategy,
            result=state.result,
            config=config,
        )

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.to_state().model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise WorkspaceError(f"Could not write workspace to {path}: {e}") from e
        logger.debug(f"Workspace saved to {path}")
        return path

    @classmethod
    def load(
        cls, path: str | Path, config: SolverConfig | None = None
    ) -> "SelectionWorkspace":
        """Read a saved workspace; a missing file gives the sample workspace."""
        path = Path(path)
        if not path.exists():
            logger.info(f"No workspace at {path}; starting from the sample project")
            return cls(config=config)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            state = WorkspaceState.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise WorkspaceError(f"Could not read workspace from {path}: {e}") from e
        return cls.from_state(state, config=config)
