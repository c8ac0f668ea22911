"""Skill matrix models for the single validated output record."""

from __future__ import annotations

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

Seniority = Literal["junior", "mid", "senior", "lead", "unknown"]
Currency = Literal["USD", "EUR", "PLN", "GBP"]
SkillCategory = Literal["frontend", "backend", "devops", "web3", "other"]

SKILL_CATEGORIES: tuple[SkillCategory, ...] = ("frontend", "backend", "devops", "web3", "other")
SUMMARY_MAX_CHARS = 300


def _reject_duplicates(values: tuple[str, ...]) -> tuple[str, ...]:
    """Ordered sets may not repeat an entry."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for value in values:
        if value in seen and value not in duplicates:
            duplicates.append(value)
        seen.add(value)
    if duplicates:
        msg = f"duplicate entries: {', '.join(duplicates)}"
        raise ValueError(msg)
    return values


class SkillBuckets(BaseModel):
    """Technology tokens grouped into the five fixed categories."""

    model_config = ConfigDict(frozen=True)

    frontend: tuple[StrictStr, ...] = Field(description="Frontend frameworks and tooling")
    backend: tuple[StrictStr, ...] = Field(description="Backend frameworks and runtimes")
    devops: tuple[StrictStr, ...] = Field(description="Infrastructure and delivery tooling")
    web3: tuple[StrictStr, ...] = Field(description="Blockchain and web3 tooling")
    other: tuple[StrictStr, ...] = Field(description="Generic technologies")

    @field_validator("frontend", "backend", "devops", "web3", "other")
    @classmethod
    def validate_unique(cls, values: tuple[str, ...]) -> tuple[str, ...]:
        """Each category is an ordered set."""
        return _reject_duplicates(values)

    def non_empty(self) -> list[tuple[SkillCategory, tuple[str, ...]]]:
        """Return (category, values) pairs for categories with at least one value."""
        return [
            (category, getattr(self, category))
            for category in SKILL_CATEGORIES
            if getattr(self, category)
        ]


class SalaryRange(BaseModel):
    """Advertised salary signal."""

    model_config = ConfigDict(frozen=True)

    currency: Currency = Field(description="ISO currency code")
    min: StrictInt | StrictFloat | None = Field(default=None, description="Lower bound")
    max: StrictInt | StrictFloat | None = Field(default=None, description="Upper bound")

    @model_validator(mode="after")
    def validate_range(self) -> SalaryRange:
        """Ensure min <= max when both are set."""
        if self.min is not None and self.max is not None and self.min > self.max:
            msg = f"min ({self.min}) > max ({self.max})"
            raise ValueError(msg)
        return self


class SkillMatrix(BaseModel):
    """Structured summary of one job description."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: StrictStr = Field(min_length=1, description="Job title")
    seniority: Seniority = Field(description="Inferred experience level")
    skills: SkillBuckets = Field(description="Categorized technology tokens")
    must_have: tuple[StrictStr, ...] = Field(
        alias="mustHave", description="Requirement lines listed as required"
    )
    nice_to_have: tuple[StrictStr, ...] = Field(
        alias="niceToHave", description="Requirement lines listed as optional"
    )
    salary: SalaryRange | None = Field(default=None, description="Salary range if advertised")
    summary: StrictStr = Field(
        min_length=1, max_length=SUMMARY_MAX_CHARS, description="Short synthesis"
    )

    @field_validator("must_have", "nice_to_have")
    @classmethod
    def validate_unique(cls, values: tuple[str, ...]) -> tuple[str, ...]:
        """Requirement lists are ordered sets."""
        return _reject_duplicates(values)

    def to_payload(self) -> dict[str, object]:
        """Serialize to the camelCase JSON shape, omitting an absent salary."""
        payload = self.model_dump(mode="json", by_alias=True)
        if payload.get("salary") is None:
            payload.pop("salary", None)
        else:
            payload["salary"] = {
                key: value for key, value in payload["salary"].items() if value is not None
            }
        return payload
