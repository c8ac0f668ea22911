"""Skill categorization over a token sequence."""

from __future__ import annotations

from collections.abc import Sequence

from skill_matrix_agents.heuristics.text import unique
from skill_matrix_core.constants import DEFAULT_KEYWORD_TABLES, KeywordTables
from skill_matrix_core.models.skill_matrix import SKILL_CATEGORIES


def categorize_skills(
    tokens: Sequence[str],
    tables: KeywordTables = DEFAULT_KEYWORD_TABLES,
) -> dict[str, list[str]]:
    """Bucket known technology keywords into the five skill categories.

    Named categories are filled first, in keyword-table order. The ``other``
    bucket then takes generic technology tokens (in document order) that are
    long enough, not purely numeric, and not already claimed by a named
    category.
    """
    present = set(tokens)
    buckets: dict[str, list[str]] = {category: [] for category in SKILL_CATEGORIES}
    categorized: set[str] = set()

    for category, keywords in tables.categories.items():
        for keyword in keywords:
            if keyword in present:
                buckets[category].append(keyword)
                categorized.add(keyword)

    generic = set(tables.generic)
    buckets["other"].extend(
        token
        for token in tokens
        if len(token) >= tables.generic_min_length
        and not token.isdigit()
        and token not in categorized
        and token in generic
    )

    return {category: unique(values) for category, values in buckets.items()}
