"""Protocol definitions for pipeline collaborators.

These protocols use Python's typing.Protocol for structural subtyping, so an
external ranking service or a presentation layer only has to provide the
right methods to plug into the controller.
"""

from abc import abstractmethod
from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from .base import HealthStatus
from .results import ResultRecord
from .updates import ResultSetUpdate


@runtime_checkable
class ServiceLifecycle(Protocol):
    """Core lifecycle protocol that all service components should implement."""

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the component, setting up required resources."""
        ...

    @abstractmethod
    async def cleanup(self) -> None:
        """Clean up resources used by the component."""
        ...


@runtime_checkable
class HealthCheck(Protocol):
    """Health checking protocol for components."""

    @abstractmethod
    async def check_health(self) -> tuple[HealthStatus, str]:
        """
        Check the health status of the component.

        Returns:
            A tuple of (status, message)
        """
        ...

    @abstractmethod
    def is_healthy(self) -> bool:
        """Check if the component is in a healthy state."""
        ...


@runtime_checkable
class ExternalRanker(Protocol):
    """Optional post-merge reordering service."""

    @abstractmethod
    def is_enabled(self, context: Any) -> bool:
        """
        Check whether ranking should run.

        Args:
            context: Application settings of the calling controller

        Returns:
            True if rank() should be invoked
        """
        ...

    @abstractmethod
    def rank(self, query: str, results: list[ResultRecord]) -> None:
        """
        Reorder results in place for the given query.

        Implementations must keep the same elements; only their order may change.
        """
        ...


@runtime_checkable
class ResultSink(Protocol):
    """Anything that accepts provider batches."""

    @abstractmethod
    def add_search_results(
        self, batch: Iterable[ResultRecord] | None, provider_id: str
    ) -> None:
        """Store the latest batch for a provider."""
        ...


@runtime_checkable
class ResultSetObserver(Protocol):
    """Presentation-side listener for published updates."""

    @abstractmethod
    def on_results_changed(self, update: ResultSetUpdate) -> None:
        """Apply a published update."""
        ...
