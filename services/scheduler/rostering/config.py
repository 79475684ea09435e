from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scheduler service settings, read from SCHEDULER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SCHEDULER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_title: str = "Day Roster Scheduler"
    api_version: str = "0.1.0"

    # Solver
    solver_time_limit_seconds: float = Field(
        default=10.0, gt=0, description="Wall-clock ceiling for a single CP-SAT solve"
    )
    solver_num_workers: int = Field(default=8, ge=1)

    # Background jobs
    max_concurrent_solves: int = Field(default=4, ge=1)
    job_retention_seconds: int = Field(
        default=3600, ge=0, description="How long finished jobs stay pollable"
    )

    log_level: str = "INFO"


settings = Settings()


def get_settings() -> Settings:
    return settings
