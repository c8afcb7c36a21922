"""Result models."""

from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Rank bounds; lower values are shown first
TOP_RANK = 0
BOTTOM_RANK = 9


class ViewType(IntEnum):
    """Rendering strategy for a result."""

    INTENT = 0
    INLINE_SWITCH = 1
    SAVED_QUERY = 2


class ResultRecord(BaseModel):
    """A single search result produced by a provider."""

    model_config = ConfigDict(frozen=True)

    stable_id: int = Field(..., description="Identity stable across updates")
    rank: int = Field(..., description="Priority, lower is better")
    view_type: ViewType = Field(ViewType.INTENT, description="Rendering strategy")
    title: str = Field("", description="Result title")
    summary: str = Field("", description="Result summary")
    breadcrumbs: tuple[str, ...] = Field(
        default_factory=tuple, description="Path to the result's location"
    )
    icon: str | None = Field(None, description="Icon resource name")
    payload: dict[str, Any] = Field(
        default_factory=dict, description="Provider-specific payload"
    )

    def __hash__(self) -> int:
        return hash(self.stable_id)

    @property
    def sort_key(self) -> tuple[int, int]:
        """Total order used when sorting a provider's batch."""
        return self.rank, self.stable_id
