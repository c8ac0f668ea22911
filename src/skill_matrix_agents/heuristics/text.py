"""Line normalization and tokenization shared by the field extractors."""

from __future__ import annotations

import re
from collections.abc import Iterable

_WHITESPACE_RE = re.compile(r"\s+")
_LINE_SPLIT_RE = re.compile(r"\r?\n")
# Letters, digits, whitespace and + # . / - survive; everything else (and "_") is a separator
_NON_TOKEN_RE = re.compile(r"[^\w+#./\s-]|_")


def normalize_line(value: str) -> str:
    """Trim and collapse internal whitespace runs to a single space."""
    return _WHITESPACE_RE.sub(" ", value.strip())


def split_lines(document: str) -> list[str]:
    """Split a document on LF or CRLF line endings."""
    return _LINE_SPLIT_RE.split(document)


def tokenize(document: str) -> list[str]:
    """Lower-case a document and split it into technology-friendly tokens.

    Punctuation is replaced by spaces except for characters that carry meaning
    in technology names (``c++``, ``c#``, ``node.js``, ``ci/cd``, ``mid-level``).
    Order is preserved and tokens may repeat.
    """
    cleaned = _NON_TOKEN_RE.sub(" ", document.lower())
    return [token for token in cleaned.split() if token]


def unique(values: Iterable[str]) -> list[str]:
    """Drop duplicates while keeping first-seen order."""
    return list(dict.fromkeys(values))
