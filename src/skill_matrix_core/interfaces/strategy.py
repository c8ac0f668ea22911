"""Abstract extraction strategy interfaces."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from skill_matrix_core.exceptions import Violation
    from skill_matrix_core.models.skill_matrix import SkillMatrix


@runtime_checkable
class ExtractionStrategy(Protocol):
    """Turns one job description into a validated SkillMatrix or fails.

    Implementations raise ``StrategyFailedError`` with a human-readable
    message instead of returning partial records.
    """

    name: str

    async def extract(self, document: str) -> SkillMatrix:
        """Extract a schema-valid SkillMatrix from free text."""
        ...


@runtime_checkable
class RepairAttempt(Protocol):
    """One request to a remote model, optionally repairing a previous answer.

    The first call gets no prior violations. Later calls receive the previous
    raw output together with every violation it produced, so the model can fix
    its answer instead of starting over.
    """

    async def attempt(
        self,
        document: str,
        prior_violations: Sequence[Violation] = (),
        prior_output: str | None = None,
    ) -> str:
        """Return the raw candidate text (expected to be a JSON object)."""
        ...
