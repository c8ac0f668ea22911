"""Salary range parsing with currency and thousands-suffix normalization."""

from __future__ import annotations

import re
from dataclasses import dataclass

from skill_matrix_core.constants import CURRENCY_ALIASES, THOUSANDS_MULTIPLIER

_CODE = r"usd|eur|pln|gbp|zł|zl"

_SALARY_RE = re.compile(
    rf"""
    (?:\b(?P<code>{_CODE})(?=[\s$€£\d]|$)\s*)?
    (?:(?P<symbol>[$€£])\s*)?
    (?<![\d.,])(?<!\d\s)(?P<min>\d{{2,5}})(?!\d|,\d)(?:(?P<min_k>k)(?![a-z]))?
    (?:
        \s*(?:-|–|to)\s*[$€£]?
        (?P<max>\d{{2,5}})(?!\d|,\d)(?:(?P<max_k>k)(?![a-z]))?
    )?
    (?:\s*(?P<trailing>{_CODE})\b)?
    (?:\s*/?\s*(?:year|month))?
    """,
    re.IGNORECASE | re.VERBOSE,
)


@dataclass(frozen=True)
class ParsedSalary:
    """Salary signal found in a document."""

    currency: str
    min: int | None = None
    max: int | None = None

    def to_dict(self) -> dict[str, object]:
        """Return the schema shape, leaving out bounds that were not found."""
        data: dict[str, object] = {"currency": self.currency}
        if self.min is not None:
            data["min"] = self.min
        if self.max is not None:
            data["max"] = self.max
        return data


def _resolve_currency(match: re.Match[str]) -> str | None:
    """Explicit codes win over symbols; leading codes win over trailing ones."""
    for key in (match.group("code"), match.group("trailing"), match.group("symbol")):
        if key:
            currency = CURRENCY_ALIASES.get(key.lower())
            if currency:
                return currency
    return None


def _to_amount(raw: str | None, suffix: str | None) -> int | None:
    """Convert a captured number, applying the ``k`` thousands suffix."""
    if raw is None:
        return None
    value = int(raw)
    return value * THOUSANDS_MULTIPLIER if suffix else value


def parse_salary(document: str) -> ParsedSalary | None:
    """Find the first salary signal that carries a currency.

    Numbers without any currency marker never produce a salary. A reversed
    range such as ``100k-80k`` is swapped so that ``min <= max``.
    """
    for match in _SALARY_RE.finditer(document):
        currency = _resolve_currency(match)
        if currency is None:
            continue

        low = _to_amount(match.group("min"), match.group("min_k"))
        high = _to_amount(match.group("max"), match.group("max_k"))
        if low is None and high is None:
            continue
        if low is not None and high is not None and high < low:
            low, high = high, low
        return ParsedSalary(currency=currency, min=low, max=high)

    return None
