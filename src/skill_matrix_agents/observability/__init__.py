"""Observability: structured logging."""

from skill_matrix_agents.observability.logging import configure_logging, document_context

__all__ = [
    "configure_logging",
    "document_context",
]
