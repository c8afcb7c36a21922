"""Edit script and publish notification models."""

from enum import Enum

from pydantic import BaseModel, Field

from .results import ResultRecord


class EditType(str, Enum):
    """Kind of edit operation."""

    INSERT = "insert"
    REMOVE = "remove"
    MOVE = "move"
    CHANGE = "change"


class EditOperation(BaseModel):
    """One step of an edit script, applied to the list as it is at that step."""

    type: EditType = Field(..., description="Operation kind")
    position: int = Field(..., ge=0, description="Index the operation starts at")
    count: int = Field(1, ge=1, description="Number of consecutive items affected")
    to_position: int | None = Field(
        None, ge=0, description="Destination index for moves"
    )
    items: list[ResultRecord] = Field(
        default_factory=list, description="New items for inserts and changes"
    )


class EditScript(BaseModel):
    """Ordered operations transforming one sequence into another."""

    operations: list[EditOperation] = Field(default_factory=list)
    old_size: int = Field(0, ge=0, description="Size of the source sequence")
    new_size: int = Field(0, ge=0, description="Size of the resulting sequence")

    def __len__(self) -> int:
        return len(self.operations)

    @property
    def is_empty(self) -> bool:
        return not self.operations

    def count(self, edit_type: EditType) -> int:
        """Count items touched by operations of the given kind."""
        return sum(op.count for op in self.operations if op.type == edit_type)


class UpdateKind(str, Enum):
    """How observers should apply an update."""

    FULL = "full"
    INCREMENTAL = "incremental"


class ResultSetUpdate(BaseModel):
    """Notification sent to observers each time a sequence is published."""

    kind: UpdateKind = Field(..., description="Full replace or incremental")
    script: EditScript | None = Field(
        None, description="Edit script for incremental updates"
    )
    items: list[ResultRecord] = Field(
        default_factory=list, description="Complete sequence for full replaces"
    )
    previous_size: int = Field(0, ge=0, description="Size before this update")
    size: int = Field(0, ge=0, description="Size after this update")
    query: str | None = Field(None, description="Query that produced the update")
