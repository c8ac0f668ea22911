"""Heuristic extraction orchestrator: runs every field extractor and validates the result."""

from __future__ import annotations

import time

import structlog

from skill_matrix_agents.heuristics.salary import parse_salary
from skill_matrix_agents.heuristics.sections import extract_requirement_sections
from skill_matrix_agents.heuristics.seniority import infer_seniority
from skill_matrix_agents.heuristics.skills import categorize_skills
from skill_matrix_agents.heuristics.summary import build_summary
from skill_matrix_agents.heuristics.text import tokenize
from skill_matrix_agents.heuristics.title import detect_title
from skill_matrix_core.constants import DEFAULT_KEYWORD_TABLES, KeywordTables
from skill_matrix_core.exceptions import ExtractionError, SkillMatrixValidationError
from skill_matrix_core.models.skill_matrix import SkillMatrix
from skill_matrix_core.validation import validate

logger = structlog.get_logger()


def build_draft(
    document: str,
    tables: KeywordTables = DEFAULT_KEYWORD_TABLES,
) -> dict[str, object]:
    """Run the field extractors over one document and assemble a camelCase draft.

    The summary is synthesized last, from the fields already in the draft.
    """
    cleaned = document.strip()

    title = detect_title(cleaned)
    seniority = infer_seniority(cleaned)
    skills = categorize_skills(tokenize(cleaned), tables)
    sections = extract_requirement_sections(cleaned)
    salary = parse_salary(cleaned)
    salary_data = salary.to_dict() if salary else None

    draft: dict[str, object] = {
        "title": title,
        "seniority": seniority,
        "skills": skills,
        "mustHave": sections.must,
        "niceToHave": sections.nice,
        "summary": build_summary(title, seniority, skills, sections.must, salary_data),
    }
    if salary_data is not None:
        draft["salary"] = salary_data
    return draft


def extract_skill_matrix(
    document: str,
    tables: KeywordTables = DEFAULT_KEYWORD_TABLES,
) -> SkillMatrix:
    """Extract a validated SkillMatrix from free text without any remote calls.

    Raises ExtractionError if the assembled draft fails validation, which
    means the extractors broke their own output contract.
    """
    start = time.monotonic()
    logger.debug("extraction_start", strategy="heuristic", document_length=len(document))

    draft = build_draft(document, tables)
    result = validate(draft)
    if not result.ok:
        logger.error(
            "heuristic_draft_invalid",
            violations=[str(v) for v in result.violations],
        )
        msg = "Fallback extractor produced invalid payload"
        raise ExtractionError(msg) from SkillMatrixValidationError(result.violations)

    matrix = result.unwrap()
    logger.info(
        "extraction_end",
        strategy="heuristic",
        duration_seconds=round(time.monotonic() - start, 4),
        seniority=matrix.seniority,
        skills_count=sum(len(values) for _, values in matrix.skills.non_empty()),
        must_have_count=len(matrix.must_have),
        nice_to_have_count=len(matrix.nice_to_have),
        has_salary=matrix.salary is not None,
    )
    return matrix


class HeuristicStrategy:
    """Deterministic, dependency-free extraction strategy used as the fallback."""

    name = "heuristic"

    def __init__(self, tables: KeywordTables = DEFAULT_KEYWORD_TABLES) -> None:
        """Initialize with the keyword tables to categorize against."""
        self.tables = tables

    async def extract(self, document: str) -> SkillMatrix:
        """Extract a SkillMatrix; never touches the network."""
        return extract_skill_matrix(document, self.tables)
