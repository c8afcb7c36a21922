"""Per-provider batch storage."""

from collections.abc import Iterable, Iterator

from ..models.results import ResultRecord
from ..utils.errors import InvalidProviderError
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ResultCollector:
    """Holds the latest batch delivered by each provider.

    A new batch from a provider replaces the previous one outright. Not
    thread-safe: all calls must come from the coordinating thread.
    """

    def __init__(self):
        self._batches: dict[str, frozenset[ResultRecord]] = {}

    def add_search_results(
        self, batch: Iterable[ResultRecord] | None, provider_id: str
    ) -> bool:
        """
        Store the results from a provider, replacing any earlier batch.

        Args:
            batch: The provider's results, or None if it has nothing yet
            provider_id: Key identifying the provider

        Returns:
            True if a batch was stored
        """
        if not isinstance(provider_id, str) or not provider_id:
            raise InvalidProviderError(provider_id)

        if batch is None:
            return False

        stored = frozenset(batch)
        if provider_id in self._batches:
            logger.debug(
                f"Replacing batch from {provider_id} "
                f"({len(self._batches[provider_id])} -> {len(stored)} results)"
            )
        self._batches[provider_id] = stored
        return True

    def get_batch(self, provider_id: str) -> frozenset[ResultRecord] | None:
        """Get the stored batch for a provider, if any."""
        return self._batches.get(provider_id)

    def batches(self) -> dict[str, frozenset[ResultRecord]]:
        """Get a snapshot of all stored batches."""
        return dict(self._batches)

    @property
    def provider_ids(self) -> list[str]:
        return list(self._batches)

    @property
    def total_results(self) -> int:
        return sum(len(batch) for batch in self._batches.values())

    def clear(self) -> None:
        """Remove all batches."""
        self._batches.clear()

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._batches

    def __len__(self) -> int:
        return len(self._batches)

    def __iter__(self) -> Iterator[str]:
        return iter(self._batches)
