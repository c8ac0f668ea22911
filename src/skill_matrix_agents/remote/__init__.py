"""Remote, model-backed extraction strategy."""

from skill_matrix_agents.remote.anthropic_attempt import AnthropicRepairAttempt, build_messages
from skill_matrix_agents.remote.repair import RepairRetryStrategy, parse_candidate

__all__ = [
    "AnthropicRepairAttempt",
    "RepairRetryStrategy",
    "build_messages",
    "parse_candidate",
]
