"""Tests for the settings module."""

import pytest
from pydantic import ValidationError

from result_hub.config import AppSettings, MergerSettings, get_settings
from result_hub.models.results import BOTTOM_RANK, TOP_RANK
from result_hub.providers import DatabaseResultProvider, InstalledAppResultProvider


class TestAppSettings:
    """Test AppSettings class."""

    def test_default_values(self):
        settings = AppSettings(_env_file=None)

        assert settings.app_name == "Result Hub"
        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.merger.top_rank == TOP_RANK
        assert settings.merger.bottom_rank == BOTTOM_RANK
        assert settings.merger.source_precedence == [
            DatabaseResultProvider.provider_id(),
            InstalledAppResultProvider.provider_id(),
        ]
        assert settings.merger.include_undeclared_sources is True
        assert settings.ranking.smart_ranking_enabled is False
        assert settings.differ.always_detect_moves is False
        assert settings.differ.detect_content_changes is True

    def test_environment_overrides(self, mock_env):
        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.environment == "test"
        assert settings.ranking.smart_ranking_enabled is True
        assert settings.merger.bottom_rank == 4

    def test_get_settings_is_cached(self, mock_env):
        assert get_settings() is get_settings()

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, log_level="LOUD")

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, environment="moon")


class TestMergerSettings:
    """Test MergerSettings validation."""

    def test_inverted_rank_range(self):
        with pytest.raises(ValidationError):
            MergerSettings(top_rank=5, bottom_rank=1)

    def test_single_rank_range(self):
        assert MergerSettings(top_rank=3, bottom_rank=3).top_rank == 3

    def test_duplicate_sources(self):
        with pytest.raises(ValidationError):
            MergerSettings(source_precedence=["a", "b", "a"])
