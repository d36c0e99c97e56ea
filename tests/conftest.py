"""Shared fixtures for the sentiment playground tests."""

import pytest

from achievement_store import AchievementStore


@pytest.fixture
def badges_path(tmp_path):
    """Location of a badge file that does not exist yet."""
    return tmp_path / "state" / "badges.json"


@pytest.fixture
def store(badges_path):
    """Fresh, empty achievement store backed by a temp file."""
    return AchievementStore(badges_path)
