"""Tests for SkillMatrix domain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from skill_matrix_core.models.skill_matrix import SalaryRange, SkillBuckets, SkillMatrix
from tests.mocks.mock_factories import make_payload, make_skill_matrix


@pytest.mark.unit
class TestSkillMatrix:
    """Test SkillMatrix model."""

    def test_valid_from_camel_case(self) -> None:
        """camelCase payload populates snake_case attributes."""
        matrix = make_skill_matrix()
        assert matrix.must_have == ("5+ years with React",)
        assert matrix.nice_to_have == ("Kubernetes",)
        assert matrix.skills.frontend == ("react", "next")

    def test_valid_from_attribute_names(self) -> None:
        """Attribute names are accepted as well as aliases."""
        payload = make_payload()
        payload["must_have"] = payload.pop("mustHave")
        payload["nice_to_have"] = payload.pop("niceToHave")
        matrix = SkillMatrix.model_validate(payload)
        assert matrix.must_have == ("5+ years with React",)

    def test_frozen(self) -> None:
        """A validated matrix cannot be mutated."""
        matrix = make_skill_matrix()
        with pytest.raises(ValidationError):
            matrix.title = "Other"  # type: ignore[misc]

    def test_summary_too_long(self) -> None:
        """Summaries over 300 characters are rejected."""
        with pytest.raises(ValidationError, match="summary"):
            make_skill_matrix(summary="x" * 301)

    def test_extra_field_dropped(self) -> None:
        """Unknown keys are stripped, not kept on the record."""
        matrix = SkillMatrix.model_validate({**make_payload(), "company": "Acme"})
        assert "company" not in matrix.to_payload()
        assert matrix == make_skill_matrix()

    def test_to_payload_omits_absent_salary(self) -> None:
        """No salary key is emitted when the salary is absent."""
        payload = make_skill_matrix(salary=None).to_payload()
        assert "salary" not in payload
        assert payload["mustHave"] == ["5+ years with React"]

    def test_to_payload_omits_missing_bounds(self) -> None:
        """Salary bounds that are None are left out."""
        payload = make_skill_matrix(salary={"currency": "EUR", "max": 5000}).to_payload()
        assert payload["salary"] == {"currency": "EUR", "max": 5000}

    def test_payload_roundtrip(self) -> None:
        """to_payload output validates back into an equal matrix."""
        matrix = make_skill_matrix()
        assert SkillMatrix.model_validate(matrix.to_payload()) == matrix


@pytest.mark.unit
class TestSalaryRange:
    """Test SalaryRange model."""

    def test_range_valid(self) -> None:
        """min <= max passes."""
        assert SalaryRange(currency="PLN", min=10, max=10).max == 10

    def test_range_invalid(self) -> None:
        """min > max raises."""
        with pytest.raises(ValidationError, match="min"):
            SalaryRange(currency="USD", min=200, max=100)

    def test_unknown_currency(self) -> None:
        """Only the four currencies are accepted."""
        with pytest.raises(ValidationError):
            SalaryRange(currency="JPY")  # type: ignore[arg-type]

    def test_numeric_strings_not_coerced(self) -> None:
        """Bounds must already be numbers."""
        with pytest.raises(ValidationError):
            SalaryRange.model_validate({"currency": "USD", "min": "1000"})


@pytest.mark.unit
class TestSkillBuckets:
    """Test SkillBuckets model."""

    def test_duplicates_rejected(self) -> None:
        """A category may not repeat a value."""
        with pytest.raises(ValidationError, match="duplicate"):
            SkillBuckets(
                frontend=("react", "react"), backend=(), devops=(), web3=(), other=()
            )

    def test_non_empty_in_fixed_order(self) -> None:
        """non_empty lists categories in their fixed order."""
        buckets = SkillBuckets(frontend=(), backend=("node",), devops=(), web3=(), other=("sql",))
        assert buckets.non_empty() == [("backend", ("node",)), ("other", ("sql",))]
