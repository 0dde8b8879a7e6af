"""
Tests for the persisted selection workspace.
"""

import json

import pytest

from task_selector.errors import TaskNotFoundError, WorkspaceError
from task_selector.models import Constraints, Strategy
from task_selector.workspace import SelectionWorkspace


@pytest.fixture
def workspace():
    return SelectionWorkspace()


class TestSelectionWorkspace:
    """Test cases for workspace editing and runs."""

    def test_defaults_to_sample_project(self, workspace):
        """A new workspace holds the sample tasks and a blank result."""
        assert [task.id for task in workspace.tasks] == [f"T{i}" for i in range(1, 9)]
        assert workspace.constraints.max_cost == 19000
        assert workspace.current_strategy is None
        assert workspace.result.is_empty

    def test_add_task_assigns_next_id(self, workspace):
        """New tasks get the next free T<k> id with every category present."""
        task = workspace.add_task("Docs", cost=1000, hours=2, value=3, categories={"FE": 1})

        assert task.id == "T9"
        assert task.categories == {"D": 0, "FE": 1, "BE": 0, "DevOps": 0, "QA": 0}
        assert workspace.tasks[-1] is task

    def test_ids_not_reused_after_delete(self, workspace):
        """Deleting a middle task does not produce a duplicate id."""
        workspace.delete_task("T3")

        task = workspace.add_task("Extra", cost=1, hours=1, value=1)

        assert task.id == "T9"
        assert len({t.id for t in workspace.tasks}) == len(workspace.tasks)

    def test_delete_unknown_task(self, workspace):
        with pytest.raises(TaskNotFoundError) as exc_info:
            workspace.delete_task("T99")

        assert exc_info.value.error_code == "TASK_NOT_FOUND"

    def test_run_replaces_result(self, workspace):
        """Each run overwrites the previous result."""
        first = workspace.run_strategy(Strategy.BRUTE_FORCE)
        second = workspace.run_strategy("Greedy")

        assert first.algorithm_info.strategy_name == "Brute Force"
        assert workspace.result is second
        assert workspace.current_strategy == "Greedy"

    def test_constraints_change_reruns_current_strategy(self, workspace):
        """New constraints re-run the strategy in use."""
        workspace.run_strategy("Brute Force")

        result = workspace.set_constraints(Constraints(max_cost=10000, max_hours=40))

        assert result is workspace.result
        assert result.algorithm_info.strategy_name == "Brute Force"
        assert result.totals.total_cost <= 10000

    def test_constraints_change_without_strategy(self, workspace):
        """Nothing runs before a strategy has been chosen."""
        assert workspace.set_constraints(Constraints(max_cost=5, max_hours=5)) is None
        assert workspace.result.is_empty

    def test_export_result(self, workspace):
        workspace.run_strategy("Brute Force")

        exported = workspace.export_result()

        assert exported["total_value"] == 51
        assert exported["algorithm_info"]["name"] == "Brute Force"
        assert exported["algorithm_info"]["complexity"] == "O(2^n)"
        json.dumps(exported)


class TestWorkspacePersistence:
    """Test cases for saving and loading."""

    def test_round_trip(self, workspace, tmp_path):
        """Saved state loads back unchanged."""
        workspace.add_task("Docs", cost=1000, hours=2, value=3)
        workspace.run_strategy("Dynamic Programming")
        path = workspace.save(tmp_path / "nested" / "workspace.json")

        loaded = SelectionWorkspace.load(path)

        assert loaded.to_state() == workspace.to_state()

    def test_missing_file_gives_sample(self, tmp_path):
        loaded = SelectionWorkspace.load(tmp_path / "absent.json")

        assert len(loaded.tasks) == 8

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "workspace.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(WorkspaceError):
            SelectionWorkspace.load(path)

    def test_invalid_state(self, tmp_path):
        path = tmp_path / "workspace.json"
        path.write_text(json.dumps({"tasks": [{"id": "x"}]}), encoding="utf-8")

        with pytest.raises(WorkspaceError) as exc_info:
            SelectionWorkspace.load(path)

        assert exc_info.value.error_code == "WORKSPACE_ERROR"
