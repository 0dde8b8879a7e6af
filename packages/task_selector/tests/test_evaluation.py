"""
Tests for the evaluator and feasibility predicates.
"""

import pytest
from pydantic import ValidationError

from task_selector.evaluation import (
    TaskColumns,
    build_result,
    empty_result,
    evaluate,
    fits_caps,
    is_fully_feasible,
    meets_category_minima,
)
from task_selector.models import Category, Constraints, Task
from task_selector.samples import sample_constraints, sample_tasks


def _task(task_id, cost, hours, value, **categories):
    return Task(id=task_id, name=task_id, cost=cost, hours=hours, value=value, categories=categories)


class TestEvaluate:
    """Test cases for subset aggregation."""

    def test_empty_subset_is_all_zero(self):
        """Empty subset yields zero totals for every configured category."""
        totals = evaluate([])

        assert totals.total_value == 0
        assert totals.total_cost == 0
        assert totals.total_hours == 0
        assert totals.total_categories == {"D": 0, "FE": 0, "BE": 0, "DevOps": 0, "QA": 0}

    def test_sums_all_fields(self):
        """Totals are the plain sums of the subset."""
        tasks = [_task("a", 100, 2, 5, FE=1), _task("b", 250, 3, 7, FE=2, QA=1)]

        totals = evaluate(tasks)

        assert totals.total_value == 12
        assert totals.total_cost == 350
        assert totals.total_hours == 5
        assert totals.total_categories["FE"] == 3
        assert totals.total_categories["QA"] == 1
        assert totals.total_categories["D"] == 0

    def test_custom_category_set(self):
        """A configured category list replaces the default keys."""
        totals = evaluate([_task("a", 1, 1, 1, ML=3)], categories=("ML", "Ops"))

        assert totals.total_categories == {"ML": 3, "Ops": 0}


class TestFeasibility:
    """Test cases for the three feasibility predicates."""

    def test_caps_are_inclusive(self):
        """Totals equal to the ceilings are within them."""
        constraints = Constraints(max_cost=100, max_hours=5)
        totals = evaluate([_task("a", 100, 5, 1)])

        assert fits_caps(totals, constraints) is True

    def test_caps_exceeded(self):
        """One unit over either ceiling fails."""
        constraints = Constraints(max_cost=100, max_hours=5)

        assert fits_caps(evaluate([_task("a", 101, 5, 1)]), constraints) is False
        assert fits_caps(evaluate([_task("a", 100, 6, 1)]), constraints) is False

    def test_category_minima(self):
        """Every minimum must be reached."""
        constraints = Constraints(max_cost=1000, max_hours=100, min_category_totals={"BE": 2, "QA": 1})

        assert meets_category_minima(evaluate([_task("a", 1, 1, 1, BE=2, QA=1)]), constraints)
        assert not meets_category_minima(evaluate([_task("a", 1, 1, 1, BE=2)]), constraints)

    def test_zero_minima_always_met(self):
        """Zero minima are satisfied by the empty subset."""
        constraints = Constraints(max_cost=0, max_hours=0, min_category_totals={"D": 0})

        assert is_fully_feasible(evaluate([]), constraints) is True

    def test_full_feasibility_on_sample_optimum(self):
        """The known sample optimum passes every check."""
        by_id = {task.id: task for task in sample_tasks()}
        subset = [by_id[i] for i in ("T1", "T2", "T3", "T5", "T7")]

        assert is_fully_feasible(evaluate(subset), sample_constraints()) is True


class TestResults:
    """Test cases for result construction helpers."""

    def test_empty_result(self):
        """Empty result carries the strategy label and a note."""
        result = empty_result("Greedy", note="nothing fits")

        assert result.is_empty
        assert result.selected_tasks == []
        assert result.algorithm_info.strategy_name == "Greedy"
        assert result.algorithm_info.complexity_label == "O(n log n)"
        assert result.algorithm_info.note == "nothing fits"
        assert result.algorithm_info.fallback_from is None

    def test_build_result_keeps_task_objects(self):
        """Selected tasks are the input objects and totals match them."""
        tasks = sample_tasks()[:2]

        result = build_result(tasks, "Brute Force")

        assert result.selected_tasks[0] is tasks[0]
        assert result.selected_ids == ["T1", "T2"]
        assert result.totals == evaluate(tasks)

    def test_task_columns(self):
        """Columns keep only categories that carry a minimum."""
        constraints = Constraints(max_cost=10, max_hours=10, min_category_totals={"QA": 1, "D": 2})
        columns = TaskColumns([_task("a", 3, 4, 5, D=1, QA=2)], constraints)

        assert columns.minimum_keys == ["QA", "D"]
        assert columns.contributions == [[2, 1]]
        assert columns.meets_minima([1, 2]) is True
        assert columns.meets_minima([1, 1]) is False


class TestModels:
    """Test cases for model validation."""

    def test_negative_fields_rejected(self):
        """Negative cost, hours or value fail validation."""
        with pytest.raises(ValidationError):
            _task("a", -1, 1, 1)
        with pytest.raises(ValidationError):
            _task("a", 1, -1, 1)
        with pytest.raises(ValidationError):
            _task("a", 1, 1, -1)

    def test_negative_category_rejected(self):
        """Category contributions must be non-negative."""
        with pytest.raises(ValidationError):
            _task("a", 1, 1, 1, QA=-1)

    def test_category_enum_keys(self):
        """Enum keys are stored by their value."""
        task = Task(id="a", name="a", cost=1, hours=1, value=1, categories={Category.BACKEND: 2})

        assert task.categories == {"BE": 2}
        assert task.contribution("BE") == 2
        assert task.contribution("QA") == 0

    def test_task_is_immutable(self):
        """Tasks are frozen once built."""
        task = _task("a", 1, 1, 1)

        with pytest.raises(ValidationError):
            task.cost = 5
