"""
Tests for service settings.
"""

from taskpicker_api.config import Settings


class TestSettings:

    def test_comma_separated_lists(self):
        """Origins and categories accept comma-separated strings"""
        settings = Settings(cors_origins="http://a, http://b", categories="X,Y")

        assert settings.cors_origins_list == ["http://a", "http://b"]
        assert settings.categories_list == ["X", "Y"]

    def test_solver_config(self):
        """Solver limits and categories flow into the library config"""
        settings = Settings(categories=["ML", "Ops"], brute_force_max_tasks=10)

        config = settings.solver_config()

        assert config.categories == ("ML", "Ops")
        assert config.brute_force_max_tasks == 10
        assert config.meet_in_middle_max_tasks == 30

    def test_environment_from_env(self, monkeypatch):
        monkeypatch.setenv("MEET_IN_MIDDLE_MAX_TASKS", "12")
        monkeypatch.setenv("WORKSPACE_FILE", "/tmp/picker.json")

        settings = Settings()

        assert settings.meet_in_middle_max_tasks == 12
        assert settings.workspace_file == "/tmp/picker.json"
