"""Public interface re-exports for skill_matrix_core."""

from skill_matrix_core.interfaces.strategy import ExtractionStrategy, RepairAttempt

__all__ = [
    "ExtractionStrategy",
    "RepairAttempt",
]
