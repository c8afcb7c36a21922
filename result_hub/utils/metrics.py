"""Metrics tracking utilities."""

import time

from ..models.base import MetricsData


class PipelineMetrics:
    """Tracker for collect/merge/rank/publish metrics."""

    def __init__(self):
        """Initialize the metrics tracker."""
        self.reset()

    def reset(self) -> None:
        """Reset all counters."""
        self.batches_received = 0
        self.total_merges = 0
        self.total_merged_results = 0
        self.total_merge_time_ms = 0.0
        self.ranking_runs = 0
        self.ranking_failures = 0
        self.total_publishes = 0
        self.full_replaces = 0
        self.operations_emitted = 0
        self.provider_usage: dict[str, int] = {}
        self.last_publish_time: float | None = None

    def record_batch(self, provider_id: str) -> None:
        """Record a batch delivered by a provider."""
        self.batches_received += 1
        if provider_id in self.provider_usage:
            self.provider_usage[provider_id] += 1
        else:
            self.provider_usage[provider_id] = 1

    def record_merge(self, result_count: int, duration: float) -> None:
        """Record a merge and its duration in seconds."""
        self.total_merges += 1
        self.total_merged_results += result_count
        self.total_merge_time_ms += duration * 1000

    def record_ranking(self, success: bool) -> None:
        """Record an external ranking call."""
        self.ranking_runs += 1
        if not success:
            self.ranking_failures += 1

    def record_publish(self, operation_count: int, full_replace: bool) -> None:
        """Record a publish to observers."""
        self.total_publishes += 1
        self.operations_emitted += operation_count
        if full_replace:
            self.full_replaces += 1
        self.last_publish_time = time.time()

    def get_metrics(self) -> MetricsData:
        """Get current metrics data."""
        avg_merge_time = 0.0
        if self.total_merges > 0:
            avg_merge_time = self.total_merge_time_ms / self.total_merges

        return MetricsData(
            batches_received=self.batches_received,
            total_merges=self.total_merges,
            total_merged_results=self.total_merged_results,
            avg_merge_time_ms=avg_merge_time,
            ranking_runs=self.ranking_runs,
            ranking_failures=self.ranking_failures,
            total_publishes=self.total_publishes,
            full_replaces=self.full_replaces,
            operations_emitted=self.operations_emitted,
            provider_usage=dict(self.provider_usage),
            last_publish_time=self.last_publish_time,
        )
