"""Tests for section-aware bullet extraction."""

from __future__ import annotations

import pytest

from skill_matrix_agents.heuristics.sections import extract_requirement_sections


@pytest.mark.unit
class TestExtractRequirementSections:
    """Test extract_requirement_sections."""

    def test_basic_sections(self, bullet_jd: str) -> None:
        """Bullets are grouped by header and the stray bullet is dropped."""
        sections = extract_requirement_sections(bullet_jd)
        assert sections.must == ["React", "3 years experience"]
        assert sections.nice == ["Docker"]

    def test_bullet_styles(self) -> None:
        """Dash, star, bullet and numbered lines are all bullets."""
        document = "Qualifications\n- one\n* two\n• three\n4. four\n  5.   five  "
        assert extract_requirement_sections(document).must == ["one", "two", "three", "four", "five"]

    def test_prose_lines_dropped(self) -> None:
        """Non-bulleted lines are ignored even inside a section."""
        document = "Must have:\nYou should be curious.\n- Python"
        assert extract_requirement_sections(document).must == ["Python"]

    @pytest.mark.parametrize(
        "header",
        ["Requirements:", "Must-have", "must have skills", "QUALIFICATIONS", "Required skill"],
    )
    def test_must_headers(self, header: str) -> None:
        """Each must-have header variant opens the must section."""
        sections = extract_requirement_sections(f"{header}\n- item")
        assert sections.must == ["item"]
        assert sections.nice == []

    @pytest.mark.parametrize(
        "header",
        ["Nice to have:", "nice-to-have", "Preferred qualifications", "Bonus points", "Optional"],
    )
    def test_nice_headers(self, header: str) -> None:
        """Each nice-to-have header variant opens the nice section."""
        sections = extract_requirement_sections(f"{header}\n- item")
        assert sections.nice == ["item"]
        assert sections.must == []

    def test_header_must_start_line(self) -> None:
        """Header keywords in the middle of a line do not switch sections."""
        document = "Our requirements are simple\n- stray"
        assert extract_requirement_sections(document).must == []

    def test_sections_can_alternate(self) -> None:
        """Later headers switch back and forth."""
        document = "Requirements\n- a\nBonus\n- b\nRequirements\n- c"
        sections = extract_requirement_sections(document)
        assert sections.must == ["a", "c"]
        assert sections.nice == ["b"]

    def test_duplicates_removed(self) -> None:
        """Repeated bullets keep their first position only."""
        document = "Requirements\n- React\n-   React\n- Vue"
        assert extract_requirement_sections(document).must == ["React", "Vue"]

    def test_empty_document(self) -> None:
        """An empty document yields empty sections."""
        sections = extract_requirement_sections("")
        assert sections.must == []
        assert sections.nice == []
