"""Base class for result providers.

Providers produce batches of ResultRecord objects. How they find results is
their own business; this module only fixes how they are identified and how
their batches reach a ResultSink on the coordinating event loop.

Example:
    Creating a new provider:
        >>> class RecentFilesProvider(ResultProvider):
        ...     def load_results(self, query: str) -> set[ResultRecord] | None:
        ...         return {ResultRecord(stable_id=1, rank=0, title=query)}
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import ClassVar

from ..models.interfaces import ResultSink
from ..models.results import ResultRecord
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ResultProvider(ABC):
    """Base class for all result providers."""

    # Overrides the class-derived id so subclasses share one merge slot
    provider_key: ClassVar[str | None] = None

    @classmethod
    def provider_id(cls) -> str:
        """Process-unique key under which this provider's batches are stored."""
        if cls.provider_key:
            return cls.provider_key
        return f"{cls.__module__}.{cls.__qualname__}"

    @abstractmethod
    def load_results(self, query: str) -> Iterable[ResultRecord] | None:
        """
        Produce results for a query.

        Args:
            query: The user's query

        Returns:
            The provider's results, or None when it has nothing to report yet
        """

    def deliver(self, query: str, sink: ResultSink) -> None:
        """Load results for a query and hand them to the sink."""
        results = self.load_results(query)
        sink.add_search_results(
            set(results) if results is not None else None, self.provider_id()
        )


async def _load_in_thread(
    provider: ResultProvider, query: str, timeout: float | None
) -> Iterable[ResultRecord] | None:
    call = asyncio.to_thread(provider.load_results, query)
    if timeout is None:
        return await call
    return await asyncio.wait_for(call, timeout=timeout)


async def gather_results(
    providers: Sequence[ResultProvider],
    query: str,
    sink: ResultSink,
    timeout: float | None = None,
) -> list[str]:
    """Run providers concurrently and deliver their batches on the event loop.

    Each provider's blocking load_results runs in a worker thread. Batches are
    handed to the sink from the calling coroutine only, so the sink never sees
    concurrent calls. A provider that fails or times out is logged and treated
    as an absent batch.

    Args:
        providers: Providers to query
        query: The user's query
        sink: Receiver of the batches, usually a ResultSetController
        timeout: Per-provider timeout in seconds

    Returns:
        Ids of the providers whose batches were delivered
    """
    tasks = [_load_in_thread(provider, query, timeout) for provider in providers]
    results = await asyncio.gather(*tasks, return_exceptions=True)

    delivered = []
    for provider, result in zip(providers, results, strict=True):
        provider_id = provider.provider_id()
        if isinstance(result, TimeoutError):
            logger.error(f"Provider {provider_id} timed out")
            continue
        if isinstance(result, Exception):
            logger.error(f"Provider {provider_id} failed: {result}")
            continue
        if result is None:
            logger.debug(f"Provider {provider_id} returned no batch")
            continue

        sink.add_search_results(set(result), provider_id)
        delivered.append(provider_id)

    return delivered
