"""Schema validation for candidate skill matrix records.

Wraps pydantic validation of :class:`SkillMatrix` so that callers get every
violation as a ``(path, message)`` pair instead of an exception, which is the
shape a repair loop needs to feed errors back to a remote model.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import pydantic

from skill_matrix_core.exceptions import SkillMatrixValidationError, Violation
from skill_matrix_core.models.skill_matrix import SkillMatrix


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one candidate record."""

    value: SkillMatrix | None = None
    violations: list[Violation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when the candidate satisfied the schema."""
        return self.value is not None

    def unwrap(self) -> SkillMatrix:
        """Return the validated record or raise with every violation."""
        if self.value is None:
            raise SkillMatrixValidationError(self.violations)
        return self.value


def validate(candidate: object) -> ValidationResult:
    """Validate an unstructured candidate record against the SkillMatrix schema.

    Accepts a mapping (camelCase or attribute names) or an existing
    ``SkillMatrix``. Never raises for bad input; all problems are reported
    in ``ValidationResult.violations``.
    """
    if isinstance(candidate, SkillMatrix):
        candidate = candidate.model_dump(by_alias=True)
    if not isinstance(candidate, Mapping):
        return ValidationResult(
            violations=[Violation(path="$", message="expected an object")],
        )

    try:
        value = SkillMatrix.model_validate(dict(candidate))
    except pydantic.ValidationError as exc:
        return ValidationResult(violations=_to_violations(exc))
    return ValidationResult(value=value)


def _to_violations(exc: pydantic.ValidationError) -> list[Violation]:
    """Flatten pydantic errors into field-path violations."""
    violations: list[Violation] = []
    for error in exc.errors(include_url=False):
        violation = Violation(
            path=_format_path(error["loc"]),
            message=_clean_message(error["msg"]),
        )
        if violation not in violations:
            violations.append(violation)
    return violations


_UNION_TAGS = frozenset({"int", "float", "str", "none", "strict-int", "strict-float"})


def _format_path(loc: tuple[int | str, ...]) -> str:
    """Render an error location as a dotted field path."""
    # Union members add their type name to the location; drop them
    parts = [
        str(part)
        for part in loc
        if not (isinstance(part, str) and (part in _UNION_TAGS or part.startswith("function-")))
    ]
    return ".".join(parts) or "$"


def _clean_message(message: str) -> str:
    """Strip the pydantic prefix added to messages raised from validators."""
    prefix = "Value error, "
    return message[len(prefix) :] if message.startswith(prefix) else message
