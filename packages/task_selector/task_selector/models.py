"""
Data models for task selection using Pydantic.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(str, Enum):
    """Default skill categories a task can contribute to."""
    DESIGN = "D"
    FRONTEND = "FE"
    BACKEND = "BE"
    DEVOPS = "DevOps"
    QA = "QA"


DEFAULT_CATEGORIES = tuple(category.value for category in Category)


class Strategy(str, Enum):
    """Solving strategies, in the order they are offered to callers."""
    BRUTE_FORCE = "Brute Force"
    DYNAMIC_PROGRAMMING = "Dynamic Programming"
    MEET_IN_THE_MIDDLE = "Meet-in-the-Middle"
    BRANCH_AND_BOUND = "Branch & Bound"
    GREEDY = "Greedy"
    BITSET_DP = "Bitset DP"

    @classmethod
    def parse(cls, name) -> Optional["Strategy"]:
        """Return the matching strategy, or None for an unknown name."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            return None


def _check_counts(v: Dict[str, int]) -> Dict[str, int]:
    cleaned = {}
    for key, amount in v.items():
        if isinstance(key, Enum):
            key = key.value
        if amount < 0:
            raise ValueError(f"Category '{key}' must be >= 0")
        cleaned[str(key)] = int(amount)
    return cleaned


class Task(BaseModel):
    """A selectable unit of work."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique task identifier")
    name: str = Field(..., description="Task name")
    cost: int = Field(..., ge=0, description="Price of doing the task")
    hours: int = Field(..., ge=0, description="Effort in hours")
    value: int = Field(..., ge=0, description="Benefit of doing the task")
    categories: Dict[str, int] = Field(
        default_factory=dict, description="Contribution per skill category"
    )

    @field_validator("categories")
    @classmethod
    def validate_categories(cls, v):
        return _check_counts(v)

    def contribution(self, category: str) -> int:
        return self.categories.get(category, 0)


class Constraints(BaseModel):
    """Ceilings and category minima a selection must respect."""
    model_config = ConfigDict(frozen=True)

    max_cost: int = Field(..., ge=0, description="Total cost ceiling")
    max_hours: int = Field(..., ge=0, description="Total hours ceiling")
    min_category_totals: Dict[str, int] = Field(
        default_factory=dict, description="Minimum total per skill category"
    )

    @field_validator("min_category_totals")
    @classmethod
    def validate_minima(cls, v):
        return _check_counts(v)


class SelectionTotals(BaseModel):
    """Aggregates of a selected subset."""
    total_value: int = Field(0, ge=0)
    total_cost: int = Field(0, ge=0)
    total_hours: int = Field(0, ge=0)
    total_categories: Dict[str, int] = Field(default_factory=dict)


class AlgorithmInfo(BaseModel):
    """Which strategy produced a result, and how."""
    strategy_name: str = Field(..., description="Strategy that produced the selection")
    complexity_label: str = Field(..., description="Big-O annotation of the strategy")
    note: Optional[str] = Field(None, description="Fallback or infeasibility remark")
    fallback_from: Optional[str] = Field(
        None, description="Strategy (or unknown name) that delegated to this one"
    )


class SelectionResult(BaseModel):
    """Result of running one strategy on one task set."""
    selected_tasks: List[Task] = Field(default_factory=list)
    totals: SelectionTotals = Field(default_factory=SelectionTotals)
    algorithm_info: AlgorithmInfo

    @property
    def is_empty(self) -> bool:
        return not self.selected_tasks and self.totals.total_value == 0

    @property
    def selected_ids(self) -> List[str]:
        return [task.id for task in self.selected_tasks]
