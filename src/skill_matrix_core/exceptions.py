"""Custom exception hierarchy for skill-matrix-extractor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Violation:
    """A single schema violation tagged with its field path."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class SkillMatrixError(Exception):
    """Base exception for all skill-matrix-extractor errors."""


class SkillMatrixValidationError(SkillMatrixError):
    """Raised when a candidate record does not satisfy the SkillMatrix schema."""

    def __init__(self, violations: list[Violation]) -> None:
        self.violations = list(violations)
        lines = "; ".join(str(v) for v in self.violations)
        super().__init__(f"{len(self.violations)} schema violation(s): {lines}")


class ExtractionError(SkillMatrixError):
    """Raised when the heuristic extractor produces a record that fails validation."""


class StrategyFailedError(SkillMatrixError):
    """Raised when a remote extraction strategy cannot produce a valid record."""

    def __init__(self, message: str, violations: list[Violation] | None = None) -> None:
        self.violations = list(violations or [])
        super().__init__(message)


class NoStrategySucceededError(SkillMatrixError):
    """Raised when every configured extraction strategy failed."""
