"""Tests for seniority inference."""

from __future__ import annotations

import pytest

from skill_matrix_agents.heuristics.seniority import infer_seniority


@pytest.mark.unit
class TestInferSeniority:
    """Test infer_seniority."""

    @pytest.mark.parametrize(
        ("document", "expected"),
        [
            ("Junior QA Engineer", "junior"),
            ("Mid-level backend developer", "mid"),
            ("We want a MID developer", "mid"),
            ("Senior Data Scientist", "senior"),
            ("Tech Lead, Payments", "lead"),
            ("You will be leading the platform team", "lead"),
            ("Software Engineer", "unknown"),
            ("", "unknown"),
        ],
    )
    def test_levels(self, document: str, expected: str) -> None:
        """Whole-word keywords map to their level."""
        assert infer_seniority(document) == expected

    def test_senior_beats_lead(self) -> None:
        """senior is checked before lead."""
        assert infer_seniority("Lead the team as our new Senior engineer") == "senior"

    def test_junior_beats_everything(self) -> None:
        """junior is first in declared order."""
        assert infer_seniority("Senior mentors will guide this junior hire") == "junior"

    def test_partial_words_do_not_match(self) -> None:
        """Keywords embedded in longer words are ignored."""
        assert infer_seniority("Seniority matters, mileage varies, leader board, midnight") == (
            "unknown"
        )
