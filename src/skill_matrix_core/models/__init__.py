"""Domain models for skill-matrix-extractor."""

from skill_matrix_core.models.skill_matrix import (
    SKILL_CATEGORIES,
    SUMMARY_MAX_CHARS,
    Currency,
    SalaryRange,
    Seniority,
    SkillBuckets,
    SkillCategory,
    SkillMatrix,
)

__all__ = [
    "SKILL_CATEGORIES",
    "SUMMARY_MAX_CHARS",
    "Currency",
    "SalaryRange",
    "Seniority",
    "SkillBuckets",
    "SkillCategory",
    "SkillMatrix",
]
