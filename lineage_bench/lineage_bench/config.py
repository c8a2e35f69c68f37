"""Benchmark configuration loaded from environment variables."""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class BenchSettings(BaseSettings):
    """Benchmark settings loaded from environment variables with LINEAGE_BENCH_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="LINEAGE_BENCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    debug: bool = False

    # Metadata store
    database_url: str = "sqlite+aiosqlite:///.lineage_bench/metadata.db"
    database_pool_size: int = 10
    database_max_overflow: int = 20

    # Naming
    run_id: str | None = Field(default=None, min_length=1)
    name_prefix: str = Field(default="pre_insert", min_length=1)

    # Seeding
    num_artifact_types: int = Field(default=0, ge=0)
    num_execution_types: int = Field(default=0, ge=0)
    num_context_types: int = Field(default=0, ge=0)
    num_artifacts: int = Field(default=0, ge=0)
    num_executions: int = Field(default=0, ge=0)
    num_contexts: int = Field(default=0, ge=0)

    # Telemetry
    structured_logging: bool = False

    def has_seed_counts(self) -> bool:
        return any(
            (
                self.num_artifact_types,
                self.num_execution_types,
                self.num_context_types,
                self.num_artifacts,
                self.num_executions,
                self.num_contexts,
            )
        )


def load_settings(**overrides: object) -> BenchSettings:
    """Load settings from environment, with optional overrides for testing."""
    settings = BenchSettings(**overrides)  # type: ignore[arg-type]

    if settings.debug:
        logger.info("Loaded settings for database: %s", settings.database_url)

    return settings
