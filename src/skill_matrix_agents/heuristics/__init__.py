"""Deterministic field extractors for job description text."""

from skill_matrix_agents.heuristics.salary import ParsedSalary, parse_salary
from skill_matrix_agents.heuristics.sections import (
    RequirementSections,
    extract_requirement_sections,
)
from skill_matrix_agents.heuristics.seniority import infer_seniority
from skill_matrix_agents.heuristics.skills import categorize_skills
from skill_matrix_agents.heuristics.summary import build_summary, truncate_summary
from skill_matrix_agents.heuristics.text import normalize_line, tokenize, unique
from skill_matrix_agents.heuristics.title import detect_title

__all__ = [
    "ParsedSalary",
    "RequirementSections",
    "build_summary",
    "categorize_skills",
    "detect_title",
    "extract_requirement_sections",
    "infer_seniority",
    "normalize_line",
    "parse_salary",
    "tokenize",
    "truncate_summary",
    "unique",
]
