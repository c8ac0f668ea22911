"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from skill_matrix_core.models.skill_matrix import SkillMatrix
from tests.mocks.mock_factories import BULLET_JD, SAMPLE_JD, make_payload, make_skill_matrix
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with the remote strategy disabled."""
    return make_settings()


@pytest.fixture
def sample_jd() -> str:
    """Return a realistic job description touching every extractor."""
    return SAMPLE_JD


@pytest.fixture
def bullet_jd() -> str:
    """Return a short document with headers and bullets only."""
    return BULLET_JD


@pytest.fixture
def valid_payload() -> dict[str, object]:
    """Return a valid camelCase SkillMatrix payload."""
    return make_payload()


@pytest.fixture
def sample_matrix() -> SkillMatrix:
    """Return a validated SkillMatrix."""
    return make_skill_matrix()
