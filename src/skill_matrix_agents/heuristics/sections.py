"""Section-aware extraction of must-have and nice-to-have bullet lines."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal

from skill_matrix_agents.heuristics.text import normalize_line, split_lines, unique
from skill_matrix_core.constants import MUST_HAVE_HEADER_PATTERN, NICE_TO_HAVE_HEADER_PATTERN

SectionState = Literal["must", "nice", "other"]

_MUST_HEADER_RE = re.compile(MUST_HAVE_HEADER_PATTERN)
_NICE_HEADER_RE = re.compile(NICE_TO_HAVE_HEADER_PATTERN)
_BULLET_RE = re.compile(r"^\s*(?:[-*•]|\d+\.)\s*(.+)$")


@dataclass
class RequirementSections:
    """Bullet lines grouped by the header they were listed under."""

    must: list[str] = field(default_factory=list)
    nice: list[str] = field(default_factory=list)


def _header_state(lowered: str) -> SectionState | None:
    """Return the section a header line opens, or None for non-header lines."""
    if _MUST_HEADER_RE.match(lowered):
        return "must"
    if _NICE_HEADER_RE.match(lowered):
        return "nice"
    return None


def extract_requirement_sections(document: str) -> RequirementSections:
    """Collect bullet lines under requirement and nice-to-have headers.

    Header lines switch the current section and are not kept. Bullets seen
    before any recognised header, and prose lines anywhere, are dropped.
    """
    state: SectionState = "other"
    sections = RequirementSections()

    for raw_line in split_lines(document):
        line = raw_line.strip()
        if not line:
            continue

        header = _header_state(line.lower())
        if header is not None:
            state = header
            continue

        bullet = _BULLET_RE.match(line)
        if not bullet:
            continue
        item = normalize_line(bullet.group(1))
        if state == "must":
            sections.must.append(item)
        elif state == "nice":
            sections.nice.append(item)

    return RequirementSections(must=unique(sections.must), nice=unique(sections.nice))
