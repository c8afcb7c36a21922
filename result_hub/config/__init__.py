"""Configuration management module."""

from .settings import (
    AppSettings,
    DifferSettings,
    MergerSettings,
    RankingSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "DifferSettings",
    "MergerSettings",
    "RankingSettings",
    "get_settings",
]
