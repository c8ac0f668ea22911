"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for skill-matrix-extractor."""

    model_config = SettingsConfigDict(env_prefix="SKILL_MATRIX_", env_file=".env")

    # --- Remote strategy ---
    anthropic_api_key: SecretStr | None = Field(
        default=None,
        description="Anthropic API key; the remote strategy is disabled without it",
    )
    remote_model: str = Field(
        default="claude-haiku-4-5-20251001",
        description="Model ID used by the remote extraction strategy",
    )
    remote_max_tokens: int = Field(
        default=2048,
        description="Completion token budget per remote attempt",
    )
    remote_max_attempts: int = Field(
        default=2,
        ge=1,
        le=5,
        description="Repair-retry attempts, including the first request",
    )
    remote_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Time budget for the whole remote strategy before falling back",
    )

    # --- Transport retries ---
    transport_retry_max: int = Field(
        default=3,
        ge=0,
        description="Transport retries per remote attempt, after the first request",
    )
    transport_retry_wait_min: float = Field(
        default=1.0,
        description="Minimum retry wait in seconds",
    )
    transport_retry_wait_max: float = Field(
        default=10.0,
        description="Maximum retry wait in seconds",
    )

    # --- Strategy selection ---
    strategy: Literal["auto", "heuristic", "remote"] = Field(
        default="auto",
        description="'auto' tries remote then falls back, or force one strategy",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level name",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for machines",
    )

    @property
    def remote_enabled(self) -> bool:
        """Whether the remote strategy has the credentials it needs."""
        return self.anthropic_api_key is not None and bool(
            self.anthropic_api_key.get_secret_value()
        )

    @model_validator(mode="after")
    def validate_strategy_config(self) -> Settings:
        """Forcing the remote strategy requires an API key."""
        if self.strategy == "remote" and not self.remote_enabled:
            msg = "anthropic_api_key required when strategy=remote"
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def validate_retry_config(self) -> Settings:
        """Backoff bounds must be ordered."""
        if self.transport_retry_wait_min > self.transport_retry_wait_max:
            msg = "transport_retry_wait_min must not exceed transport_retry_wait_max"
            raise ValueError(msg)
        return self
