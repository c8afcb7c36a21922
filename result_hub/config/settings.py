"""Application settings with Pydantic v2 patterns."""

from functools import lru_cache

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.results import BOTTOM_RANK, TOP_RANK
from ..providers.database import DatabaseResultProvider
from ..providers.installed_apps import InstalledAppResultProvider


class MergerSettings(BaseModel):
    """Merger configuration settings."""

    top_rank: int = Field(default=TOP_RANK, description="First rank drained")
    bottom_rank: int = Field(default=BOTTOM_RANK, description="Last rank drained")
    source_precedence: list[str] = Field(
        default_factory=lambda: [
            DatabaseResultProvider.provider_id(),
            InstalledAppResultProvider.provider_id(),
        ],
        description="Provider ids in merge precedence order for equal ranks",
    )
    include_undeclared_sources: bool = Field(
        default=True,
        description="Merge providers missing from source_precedence after the rest",
    )

    @model_validator(mode="after")
    def validate_rank_bounds(self) -> "MergerSettings":
        """Validate that the rank range is not inverted."""
        if self.top_rank > self.bottom_rank:
            raise ValueError(
                f"top_rank ({self.top_rank}) must not exceed bottom_rank ({self.bottom_rank})"
            )
        return self

    @field_validator("source_precedence")
    @classmethod
    def validate_source_precedence(cls, v: list[str]) -> list[str]:
        """Reject duplicate provider ids."""
        if len(set(v)) != len(v):
            raise ValueError(f"Duplicate provider ids in source_precedence: {v}")
        return v


class RankingSettings(BaseModel):
    """External ranking settings."""

    smart_ranking_enabled: bool = Field(
        default=False, description="Reorder merged results with the external ranker"
    )


class DifferSettings(BaseModel):
    """Sequence differ settings."""

    always_detect_moves: bool = Field(
        default=False,
        description="Detect moves even when external ranking did not run",
    )
    detect_content_changes: bool = Field(
        default=True, description="Emit change operations for updated records"
    )


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
        validate_default=True,
    )

    app_name: str = Field(default="Result Hub", description="Application name")
    environment: str = Field(default="development", description="Runtime environment")
    log_level: str = Field(default="INFO", description="Logging level")

    merger: MergerSettings = Field(
        default_factory=MergerSettings, description="Merger settings"
    )
    ranking: RankingSettings = Field(
        default_factory=RankingSettings, description="Ranking settings"
    )
    differ: DifferSettings = Field(
        default_factory=DifferSettings, description="Differ settings"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "staging", "production", "test"}
        if v.lower() not in valid_envs:
            raise ValueError(f"Invalid environment: {v}. Must be one of {valid_envs}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Get cached application settings."""
    return AppSettings()
