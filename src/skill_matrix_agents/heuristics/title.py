"""Job title detection."""

from __future__ import annotations

import re

from skill_matrix_agents.heuristics.text import normalize_line, split_lines
from skill_matrix_core.constants import TITLE_FALLBACK, TITLE_MAX_FIRST_LINE_CHARS

_LABELLED_TITLE_RE = re.compile(r"(?:title|role|position)\s*[:\-]\s*(.+)", re.IGNORECASE)


def detect_title(document: str) -> str:
    """Detect the job title.

    Priority: an explicit ``Title:`` / ``Role -`` / ``Position:`` label, then a
    short first non-empty line, then the generic fallback.
    """
    labelled = _LABELLED_TITLE_RE.search(document)
    if labelled:
        title = normalize_line(labelled.group(1))
        if title:
            return title

    first_line = next(
        (line for line in (normalize_line(raw) for raw in split_lines(document)) if line),
        None,
    )
    if first_line and len(first_line) <= TITLE_MAX_FIRST_LINE_CHARS:
        return first_line

    return TITLE_FALLBACK
