"""Rank-ordered merge of provider batches."""

import time
from collections.abc import Iterable, Mapping

from ..config.settings import MergerSettings
from ..models.results import ResultRecord
from ..providers.database import DatabaseResultProvider
from ..providers.installed_apps import InstalledAppResultProvider
from ..utils.logging import get_logger

logger = get_logger(__name__)


class RankMerger:
    """Merges provider batches into one sequence ordered by rank.

    For each rank from top_rank to bottom_rank, the records of every source at
    that rank are drained in source precedence order before moving on to the
    next rank. Whatever is left afterwards (ranks outside the range) is
    appended source by source.
    """

    def __init__(self, config: MergerSettings | None = None):
        """Initialize the merger with configuration options."""
        self.config = config or MergerSettings()
        self.last_merge_time_ms = 0.0

    def order_sources(self, provider_ids: Iterable[str]) -> list[str]:
        """
        Order provider ids by merge precedence.

        Declared sources come first in declared order. Undeclared sources
        follow sorted by id, or are dropped if the config excludes them.
        """
        present = set(provider_ids)
        declared = [p for p in self.config.source_precedence if p in present]
        undeclared = sorted(present.difference(self.config.source_precedence))

        if undeclared and not self.config.include_undeclared_sources:
            logger.warning(f"Ignoring results from undeclared providers: {undeclared}")
            return declared

        return declared + undeclared

    def merge(
        self, batches: Mapping[str, Iterable[ResultRecord] | None]
    ) -> list[ResultRecord]:
        """
        Merge batches keyed by provider id into a single ranked list.

        Args:
            batches: Provider id to results; missing or None batches count as empty

        Returns:
            The merged list
        """
        start_time = time.time()

        sources = [
            sorted(batches[provider_id] or (), key=lambda r: r.sort_key)
            for provider_id in self.order_sources(batches)
        ]
        merged = self._merge_sorted(sources)

        self.last_merge_time_ms = (time.time() - start_time) * 1000
        logger.debug(
            f"Merged {len(sources)} sources into {len(merged)} results "
            f"in {self.last_merge_time_ms:.2f}ms"
        )
        return merged

    def merge_two(
        self,
        database_results: Iterable[ResultRecord] | None,
        app_results: Iterable[ResultRecord] | None,
    ) -> list[ResultRecord]:
        """Merge database and installed-app results, database first on ties."""
        return self.merge(
            {
                DatabaseResultProvider.provider_id(): database_results,
                InstalledAppResultProvider.provider_id(): app_results,
            }
        )

    def _merge_sorted(self, sources: list[list[ResultRecord]]) -> list[ResultRecord]:
        merged: list[ResultRecord] = []
        cursors = [0] * len(sources)
        remaining = sum(len(source) for source in sources)

        rank = self.config.top_rank
        while rank <= self.config.bottom_rank and remaining:
            for i, source in enumerate(sources):
                while cursors[i] < len(source) and source[cursors[i]].rank == rank:
                    merged.append(source[cursors[i]])
                    cursors[i] += 1
                    remaining -= 1
            rank += 1

        # Out-of-range ranks, source by source
        for i, source in enumerate(sources):
            merged.extend(source[cursors[i] :])

        return merged
