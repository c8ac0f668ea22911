"""Seniority inference from keyword matches."""

from __future__ import annotations

import re
from typing import cast

from skill_matrix_core.constants import SENIORITY_PATTERNS
from skill_matrix_core.models.skill_matrix import Seniority

_COMPILED_SENIORITY: tuple[tuple[Seniority, re.Pattern[str]], ...] = tuple(
    (cast(Seniority, level), re.compile(pattern, re.IGNORECASE))
    for level, pattern in SENIORITY_PATTERNS
)


def infer_seniority(document: str) -> Seniority:
    """Return the first level in declared order whose keyword appears as a whole word.

    The order is junior, mid, senior, lead, so a posting mentioning both
    "senior" and "lead" resolves to ``senior``.
    """
    for level, pattern in _COMPILED_SENIORITY:
        if pattern.search(document):
            return level
    return "unknown"
