"""Strategy selection: prefer the remote model, fall back to the heuristic extractor."""

from __future__ import annotations

import asyncio
import hashlib
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

import structlog

from skill_matrix_agents.factories import create_heuristic_strategy, create_remote_strategy
from skill_matrix_agents.observability.logging import document_context
from skill_matrix_core.exceptions import (
    ExtractionError,
    NoStrategySucceededError,
    StrategyFailedError,
)
from skill_matrix_core.models.skill_matrix import SkillMatrix
from skill_matrix_core.validation import validate

if TYPE_CHECKING:
    from skill_matrix_core.config.settings import Settings
    from skill_matrix_core.interfaces.strategy import ExtractionStrategy

logger = structlog.get_logger()


@dataclass(frozen=True)
class ExtractionOutcome:
    """A validated SkillMatrix plus how it was obtained."""

    matrix: SkillMatrix
    strategy: Literal["remote", "heuristic"]
    warning: str | None = None

    @property
    def status(self) -> Literal["ok", "partial"]:
        """'partial' when the remote strategy failed and the fallback answered."""
        return "partial" if self.warning else "ok"

    def to_response(self) -> dict[str, object]:
        """Return the ``{"data": ..., "error": ...}`` envelope."""
        return {"data": self.matrix.to_payload(), "error": self.warning}


def document_id(document: str) -> str:
    """Short stable identifier used to correlate log events for one document."""
    return hashlib.sha256(document.encode()).hexdigest()[:12]


class SkillMatrixService:
    """Run the configured strategies over one job description."""

    def __init__(
        self,
        settings: Settings,
        remote: ExtractionStrategy | None = None,
        fallback: ExtractionStrategy | None = None,
    ) -> None:
        """Initialize with settings; strategies default to the factory-built ones."""
        self.settings = settings
        if remote is None and settings.strategy != "heuristic" and settings.remote_enabled:
            remote = create_remote_strategy(settings)
        self.remote = remote if settings.strategy != "heuristic" else None
        self.fallback = fallback or create_heuristic_strategy()

    async def extract(self, document: str) -> ExtractionOutcome:
        """Extract a SkillMatrix, preferring the remote strategy when available.

        Raises ValueError for an empty document and NoStrategySucceededError
        when no strategy could produce a valid record.
        """
        text = document.strip()
        if not text:
            msg = "Job description is required."
            raise ValueError(msg)

        with document_context(document_id(text)):
            return await self._extract(text)

    async def _extract(self, text: str) -> ExtractionOutcome:
        remote_error: str | None = None

        if self.remote is not None:
            try:
                matrix = await self._run_remote(self.remote, text)
            except StrategyFailedError as exc:
                remote_error = str(exc) or "AI extraction failed."
            else:
                return ExtractionOutcome(matrix=matrix, strategy="remote")

            if self.settings.strategy == "remote":
                raise NoStrategySucceededError(remote_error)
            logger.warning("strategy_fallback", reason=remote_error)
        elif self.settings.strategy == "remote":
            msg = "Remote strategy requested but not configured."
            raise NoStrategySucceededError(msg)

        try:
            matrix = await self.fallback.extract(text)
        except ExtractionError as exc:
            logger.error("fallback_failed", error=str(exc), remote_error=remote_error)
            msg = f"{remote_error} (fallback: {exc})" if remote_error else str(exc)
            raise NoStrategySucceededError(msg) from exc

        return ExtractionOutcome(matrix=matrix, strategy="heuristic", warning=remote_error)

    async def _run_remote(self, remote: ExtractionStrategy, text: str) -> SkillMatrix:
        """Run the remote strategy within the time budget and re-validate its output."""
        timeout = self.settings.remote_timeout_seconds
        try:
            matrix = await asyncio.wait_for(remote.extract(text), timeout=timeout)
        except TimeoutError as exc:
            msg = f"AI extraction timed out after {timeout:g}s."
            raise StrategyFailedError(msg) from exc
        except StrategyFailedError:
            raise
        except Exception as exc:
            logger.exception("remote_strategy_error", strategy=remote.name)
            msg = str(exc) or "Unexpected error in AI extraction."
            raise StrategyFailedError(msg) from exc

        result = validate(matrix)
        if not result.ok:
            msg = "Extraction did not match the expected schema."
            raise StrategyFailedError(msg, result.violations)
        return result.unwrap()
