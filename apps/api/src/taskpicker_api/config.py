from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from task_selector.config import SolverConfig


class Settings(BaseSettings):
    """Application settings"""

    # API Configuration
    api_title: str = "TaskPicker API"
    api_version: str = "0.1.0"
    api_description: str = "Task selection under budget, hours and skill constraints"

    # Server Configuration
    host: str = "0.0.0.0"  # nosec B104
    port: int = 8000
    debug: bool = False

    # Environment
    environment: str = Field(
        default="development", pattern="^(development|staging|production|test)$"
    )

    # CORS Configuration
    cors_origins: list[str] | str = Field(
        default="http://localhost:3000,http://localhost:3001",
        description="Allowed CORS origins, as a list or comma-separated string",
    )

    # Solver Configuration
    categories: list[str] | str = Field(
        default="D,FE,BE,DevOps,QA",
        description="Skill categories every task reports",
    )
    brute_force_max_tasks: int = Field(default=22, ge=0)
    meet_in_middle_max_tasks: int = Field(default=30, ge=0)
    solve_timeout_seconds: float = Field(
        default=10.0, description="Deadline for a single solve request"
    )

    # Workspace storage
    workspace_file: str = Field(
        default="workspace.json", description="JSON file holding the shared workspace"
    )

    @staticmethod
    def _split(value: list[str] | str) -> list[str]:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list, supporting both list and comma-separated string"""
        return self._split(self.cors_origins)

    @property
    def categories_list(self) -> list[str]:
        return self._split(self.categories)

    def solver_config(self) -> SolverConfig:
        """Library configuration derived from these settings."""
        return SolverConfig(
            categories=tuple(self.categories_list),
            brute_force_max_tasks=self.brute_force_max_tasks,
            meet_in_middle_max_tasks=self.meet_in_middle_max_tasks,
        )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )


# Global settings instance
settings = Settings()
