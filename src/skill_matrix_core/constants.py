"""Shared constants and keyword tables for skill-matrix-extractor."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Prompt versions; increment when prompt templates change
SKILL_MATRIX_PROMPT_VERSION = "v1"

TITLE_FALLBACK = "Job Opportunity"
TITLE_MAX_FIRST_LINE_CHARS = 80

SUMMARY_MAX_WORDS = 60
SUMMARY_HIGHLIGHT_COUNT = 3
ELLIPSIS = "…"

# Declared order is the tie-break: the first matching level wins
SENIORITY_PATTERNS: tuple[tuple[str, str], ...] = (
    ("junior", r"\bjunior\b"),
    ("mid", r"\bmid(?:-level)?\b"),
    ("senior", r"\bsenior\b"),
    ("lead", r"\blead(?:ing)?\b"),
)

CATEGORY_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "frontend": ("react", "vue", "angular", "next"),
        "backend": ("node", "express", "django", "nest"),
        "devops": ("docker", "aws", "ci", "kubernetes"),
        "web3": ("solidity", "wagmi", "viem", "merkle", "staking"),
    }
)

GENERIC_TECH_KEYWORDS: tuple[str, ...] = (
    "typescript",
    "javascript",
    "python",
    "java",
    "go",
    "graphql",
    "rest",
    "sql",
    "redis",
    "postgres",
    "mysql",
    "tailwind",
    "sass",
    "terraform",
    "gcp",
    "azure",
)

# Minimum length for a token to be considered by the generic "other" pass
GENERIC_TOKEN_MIN_LENGTH = 3

MUST_HAVE_HEADER_PATTERN = r"^(?:requirements|must[-\s]?have|qualifications|required skills?)\b"
NICE_TO_HAVE_HEADER_PATTERN = r"^(?:nice[-\s]?to[-\s]?have|preferred|bonus|optional)\b"

CURRENCY_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "$": "USD",
        "usd": "USD",
        "€": "EUR",
        "eur": "EUR",
        "£": "GBP",
        "gbp": "GBP",
        "pln": "PLN",
        "zł": "PLN",
        "zl": "PLN",
    }
)

THOUSANDS_MULTIPLIER = 1000


@dataclass(frozen=True)
class KeywordTables:
    """Keyword configuration consumed by the skill categorizer.

    Defaults to the built-in tables; pass a customised instance to extend
    the vocabulary without touching extractor logic.
    """

    categories: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: CATEGORY_KEYWORDS)
    generic: tuple[str, ...] = GENERIC_TECH_KEYWORDS
    generic_min_length: int = GENERIC_TOKEN_MIN_LENGTH

    def __post_init__(self) -> None:
        """Only the four named categories can carry keywords."""
        unknown = sorted(set(self.categories) - set(CATEGORY_KEYWORDS))
        if unknown:
            msg = f"unknown skill category: {', '.join(unknown)}"
            raise ValueError(msg)

    def extended(
        self,
        categories: Mapping[str, tuple[str, ...]] | None = None,
        generic: tuple[str, ...] = (),
    ) -> KeywordTables:
        """Return a copy with extra keywords appended to the given tables."""
        merged = {name: tuple(words) for name, words in self.categories.items()}
        for name, words in (categories or {}).items():
            if name not in merged:
                msg = f"unknown skill category: {name}"
                raise ValueError(msg)
            merged[name] = merged[name] + tuple(w for w in words if w not in merged[name])
        return KeywordTables(
            categories=MappingProxyType(merged),
            generic=self.generic + tuple(w for w in generic if w not in self.generic),
            generic_min_length=self.generic_min_length,
        )


DEFAULT_KEYWORD_TABLES = KeywordTables()
