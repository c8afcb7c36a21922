"""Base model definitions."""

from enum import Enum

from pydantic import BaseModel, Field


class HealthStatus(str, Enum):
    """Health status of a component."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class ControllerState(str, Enum):
    """Lifecycle of a result set between queries."""

    IDLE = "idle"
    COLLECTING = "collecting"
    MERGING = "merging"
    PUBLISHED = "published"


class MetricsData(BaseModel):
    """Data structure for tracking pipeline metrics."""

    batches_received: int = 0
    total_merges: int = 0
    total_merged_results: int = 0
    avg_merge_time_ms: float = 0.0
    ranking_runs: int = 0
    ranking_failures: int = 0
    total_publishes: int = 0
    full_replaces: int = 0
    operations_emitted: int = 0
    provider_usage: dict[str, int] = Field(default_factory=dict)
    last_publish_time: float | None = None
