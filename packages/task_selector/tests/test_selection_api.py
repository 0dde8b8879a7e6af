"""
Tests for the dictionary-based API wrappers.
"""

from task_selector.api import (
    create_task_from_dict,
    format_selection_result,
    solve_selection_api,
    validate_selection_request,
)
from task_selector.core import solve
from task_selector.samples import sample_constraints, sample_tasks


def _request(strategy="Brute Force"):
    return {
        "tasks": [task.model_dump() for task in sample_tasks()],
        "constraints": sample_constraints().model_dump(),
        "strategy": strategy,
    }


class TestSelectionAPI:
    """Test cases for the selection API wrapper."""

    def test_solve_selection_api(self):
        """Valid request returns a JSON-ready result."""
        response = solve_selection_api(_request())

        assert "request_id" in response
        assert "generated_at" in response
        result = response["result"]
        assert result["totals"]["total_value"] == 51
        assert sorted(t["id"] for t in result["selected_tasks"]) == ["T1", "T2", "T3", "T5", "T7"]
        assert result["algorithm_info"]["strategy_name"] == "Brute Force"

    def test_default_strategy_is_greedy(self):
        request = _request()
        del request["strategy"]

        response = solve_selection_api(request)

        assert response["result"]["algorithm_info"]["strategy_name"] == "Greedy"

    def test_invalid_request_returns_error_note(self):
        """Validation failures come back as an empty result with a note."""
        request = _request()
        request["constraints"]["max_cost"] = -1

        response = solve_selection_api(request)

        result = response["result"]
        assert result["selected_tasks"] == []
        assert result["totals"]["total_value"] == 0
        assert result["algorithm_info"]["note"].startswith("ERROR:")

    def test_duplicate_ids_rejected(self):
        request = _request()
        request["tasks"].append(dict(request["tasks"][0]))

        response = solve_selection_api(request)

        assert "Duplicate task id" in response["result"]["algorithm_info"]["note"]

    def test_create_task_from_dict(self):
        """Legacy field names are accepted."""
        task = create_task_from_dict(
            {"id": 7, "name": "Legacy", "price": 1200, "hours": 3, "value": 4, "skills": {"QA": 1}}
        )

        assert task.id == "7"
        assert task.cost == 1200
        assert task.categories == {"QA": 1}

    def test_create_task_defaults_name(self):
        task = create_task_from_dict({"id": "T1", "cost": 1, "hours": 1, "value": 1})

        assert task.name == "T1"
        assert task.categories == {}

    def test_format_selection_result(self):
        result = solve(sample_tasks(), sample_constraints(), "Greedy")

        formatted = format_selection_result(result)

        assert [t["id"] for t in formatted["selected_tasks"]] == ["T7", "T1", "T5", "T3", "T2"]
        assert formatted["total_cost"] == 19000
        assert formatted["total_categories"]["QA"] == 2
        assert formatted["algorithm_info"] == {
            "name": "Greedy",
            "complexity": "O(n log n)",
            "note": None,
            "fallback_from": None,
        }


class TestValidateSelectionRequest:
    """Test cases for request validation."""

    def test_valid(self):
        assert validate_selection_request(_request()) is None

    def test_missing_field(self):
        request = _request()
        del request["constraints"]

        assert validate_selection_request(request) == "Missing required field: constraints"

    def test_negative_cost(self):
        request = _request()
        request["tasks"][0]["cost"] = -5

        assert validate_selection_request(request) == "Task 0 field cost must be a non-negative integer"

    def test_duplicate_id(self):
        request = _request()
        request["tasks"][1]["id"] = "T1"

        assert validate_selection_request(request) == "Duplicate task id: T1"

    def test_unknown_strategy(self):
        assert validate_selection_request(_request("Quantum")) == "Unknown strategy: Quantum"
