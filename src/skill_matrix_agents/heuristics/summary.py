"""Deterministic summary synthesis from already-extracted fields."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from skill_matrix_core.constants import (
    ELLIPSIS,
    SUMMARY_HIGHLIGHT_COUNT,
    SUMMARY_MAX_WORDS,
)
from skill_matrix_core.models.skill_matrix import SKILL_CATEGORIES, SUMMARY_MAX_CHARS


def _format_amount(value: float) -> str:
    """Render whole amounts without a trailing ``.0``."""
    return str(int(value)) if float(value).is_integer() else str(value)


def _highlights(values: Sequence[str]) -> str:
    return ", ".join(values[:SUMMARY_HIGHLIGHT_COUNT])


def compose_sentences(
    title: str,
    seniority: str,
    skills: Mapping[str, Sequence[str]],
    must_have: Sequence[str],
    salary: Mapping[str, object] | None,
) -> list[str]:
    """Build the summary sentences in their fixed order."""
    descriptor = "role" if seniority == "unknown" else f"{seniority} role"
    sentences = [f"Detected {descriptor}: {title}."]

    skill_parts = [
        f"{category} ({_highlights(skills[category])})"
        for category in SKILL_CATEGORIES
        if skills.get(category)
    ]
    if skill_parts:
        sentences.append(f"Key skills include {', '.join(skill_parts)}.")

    if must_have:
        sentences.append(f"Core requirements mention {_highlights(must_have)}.")

    if salary is not None:
        bounds = [
            _format_amount(value)  # type: ignore[arg-type]
            for value in (salary.get("min"), salary.get("max"))
            if value is not None
        ]
        suffix = f": {'-'.join(bounds)}" if bounds else ""
        sentences.append(f"Advertised salary in {salary['currency']}{suffix}.")

    return sentences


def truncate_summary(
    text: str,
    max_words: int = SUMMARY_MAX_WORDS,
    max_chars: int = SUMMARY_MAX_CHARS,
) -> str:
    """Cap a summary at ``max_words`` words, then at ``max_chars`` characters.

    Each cut appends an ellipsis; the character cut is applied to the
    already word-limited text, so both markers can compound.
    """
    words = text.split()
    limited = text if len(words) <= max_words else " ".join(words[:max_words]) + ELLIPSIS
    if len(limited) <= max_chars:
        return limited
    # Keep three characters of headroom for the marker
    return limited[: max_chars - 3].rstrip() + ELLIPSIS


def build_summary(
    title: str,
    seniority: str,
    skills: Mapping[str, Sequence[str]],
    must_have: Sequence[str],
    salary: Mapping[str, object] | None,
) -> str:
    """Compose and bound the natural-language summary for a draft record."""
    sentences = compose_sentences(title, seniority, skills, must_have, salary)
    return truncate_summary(" ".join(sentences).strip())
