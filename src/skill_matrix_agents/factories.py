"""Factory functions for creating extraction strategies from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from skill_matrix_core.interfaces.strategy import ExtractionStrategy

if TYPE_CHECKING:
    from anthropic import AsyncAnthropic

    from skill_matrix_core.config.settings import Settings


def create_remote_strategy(
    settings: Settings,
    client: AsyncAnthropic | None = None,
) -> ExtractionStrategy:
    """Create the Anthropic-backed strategy wrapped in the repair-retry loop.

    Raises StrategyFailedError when no API key is configured and no client
    is supplied.
    """
    from skill_matrix_agents.remote.anthropic_attempt import AnthropicRepairAttempt
    from skill_matrix_agents.remote.repair import RepairRetryStrategy

    attempt = AnthropicRepairAttempt(settings, client=client)
    return RepairRetryStrategy(attempt, max_attempts=settings.remote_max_attempts)


def create_heuristic_strategy() -> ExtractionStrategy:
    """Create the deterministic fallback strategy with the built-in keyword tables."""
    from skill_matrix_agents.extractor import HeuristicStrategy

    return HeuristicStrategy()
