"""Bounded repair-retry loop around any remote candidate source."""

from __future__ import annotations

import json
import re
import time

import structlog

from skill_matrix_core.exceptions import StrategyFailedError, Violation
from skill_matrix_core.interfaces.strategy import RepairAttempt
from skill_matrix_core.models.skill_matrix import SkillMatrix
from skill_matrix_core.validation import validate

logger = structlog.get_logger()

_FENCED_JSON_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)


def parse_candidate(raw: str) -> tuple[object | None, list[Violation]]:
    """Parse the JSON object in a model response.

    Tolerates a fenced code block or prose around the object. Returns the
    parsed value, or None with a violation describing why parsing failed.
    """
    text = raw.strip()
    fenced = _FENCED_JSON_RE.search(text)
    if fenced:
        text = fenced.group(1).strip()
    else:
        start, end = text.find("{"), text.rfind("}")
        if start != -1 and end > start:
            text = text[start : end + 1]

    if not text:
        return None, [Violation(path="$", message="response was empty")]
    try:
        return json.loads(text), []
    except json.JSONDecodeError as exc:
        return None, [Violation(path="$", message=f"response is not valid JSON: {exc.msg}")]


class RepairRetryStrategy:
    """Ask a remote source for a candidate, feeding violations back until it validates.

    Works with any ``RepairAttempt``. Transport failures from the attempt
    propagate as ``StrategyFailedError``; schema failures are retried up to
    ``max_attempts`` requests in total.
    """

    def __init__(self, attempt: RepairAttempt, max_attempts: int = 2, name: str = "remote") -> None:
        """Initialize with the attempt source and the total request budget."""
        if max_attempts < 1:
            msg = "max_attempts must be at least 1"
            raise ValueError(msg)
        self.name = name
        self._attempt = attempt
        self.max_attempts = max_attempts

    async def extract(self, document: str) -> SkillMatrix:
        """Return a schema-valid SkillMatrix or raise StrategyFailedError."""
        start = time.monotonic()
        violations: list[Violation] = []
        prior_output: str | None = None

        for attempt_number in range(1, self.max_attempts + 1):
            raw = await self._attempt.attempt(document, violations, prior_output)
            candidate, violations = parse_candidate(raw)
            if not violations:
                result = validate(candidate)
                if result.ok:
                    logger.info(
                        "extraction_end",
                        strategy=self.name,
                        attempts=attempt_number,
                        duration_seconds=round(time.monotonic() - start, 2),
                    )
                    return result.unwrap()
                violations = result.violations

            logger.warning(
                "remote_attempt_invalid",
                strategy=self.name,
                attempt=attempt_number,
                max_attempts=self.max_attempts,
                violations=[str(v) for v in violations],
            )
            prior_output = raw

        msg = (
            f"No valid JSON after {self.max_attempts} attempt(s): "
            + "; ".join(str(v) for v in violations)
        )
        raise StrategyFailedError(msg, violations)
