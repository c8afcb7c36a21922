"""Test configuration for Result Hub."""

import pytest

from result_hub.config import AppSettings, get_settings
from result_hub.models.results import ResultRecord, ViewType
from result_hub.providers import DatabaseResultProvider, InstalledAppResultProvider

DB = DatabaseResultProvider.provider_id()
APPS = InstalledAppResultProvider.provider_id()


def make_record(stable_id: int, rank: int = 0, **kwargs) -> ResultRecord:
    """Build a record with a title derived from its id."""
    kwargs.setdefault("title", f"Result {stable_id}")
    kwargs.setdefault("view_type", ViewType.INTENT)
    return ResultRecord(stable_id=stable_id, rank=rank, **kwargs)


@pytest.fixture
def record():
    """Factory fixture for result records."""
    return make_record


@pytest.fixture
def settings():
    """Default settings isolated from the environment."""
    return AppSettings(_env_file=None)


@pytest.fixture
def ranking_settings():
    """Settings with smart ranking switched on."""
    return AppSettings(_env_file=None, ranking={"smart_ranking_enabled": True})


@pytest.fixture
def mock_env(monkeypatch):
    """Mock environment variables for testing."""
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("RANKING__SMART_RANKING_ENABLED", "true")
    monkeypatch.setenv("MERGER__BOTTOM_RANK", "4")

    # Clear lru_cache to ensure it picks up the new env vars
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
