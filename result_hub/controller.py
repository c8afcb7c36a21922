"""Result set controller.

Orchestrates collect -> merge -> rank -> diff -> publish for one search
surface. Everything runs on the caller's thread; providers must hand their
batches over on that same thread (see providers.base.gather_results).
"""

import time
from collections.abc import Iterable, Sequence

from .config.settings import AppSettings, get_settings
from .models.base import ControllerState, MetricsData
from .models.component import ConfigurableComponentBase
from .models.interfaces import ExternalRanker, ResultSetObserver
from .models.results import ResultRecord
from .models.updates import EditScript, ResultSetUpdate, UpdateKind
from .result_processing.collector import ResultCollector
from .result_processing.differ import SequenceDiffer
from .result_processing.merger import RankMerger
from .result_processing.ranker import apply_external_ranking
from .utils.errors import ReentrantDisplayError
from .utils.logging import get_logger, log_query, log_results
from .utils.metrics import PipelineMetrics

logger = get_logger(__name__)


class ResultSetController(ConfigurableComponentBase[AppSettings]):
    """Owns provider batches and the published result sequence."""

    def __init__(
        self,
        name: str = "result_set",
        config: AppSettings | None = None,
        ranker: ExternalRanker | None = None,
    ):
        super().__init__(name, config or get_settings())
        self.ranker = ranker
        self.collector = ResultCollector()
        self.merger = RankMerger(self.config.merger)
        self.differ = SequenceDiffer(self.config.differ)
        self.metrics = PipelineMetrics()
        self.last_ranking_error = None

        self._results: list[ResultRecord] = []
        self._observers: list[ResultSetObserver] = []
        self._state = ControllerState.IDLE
        self._published = False

    def configure(self, config: AppSettings) -> None:
        """Swap settings and rebuild the merger and differ."""
        super().configure(config)
        self.merger = RankMerger(config.merger)
        self.differ = SequenceDiffer(config.differ)

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def results(self) -> tuple[ResultRecord, ...]:
        """The currently published sequence."""
        return tuple(self._results)

    def add_observer(self, observer: ResultSetObserver) -> None:
        """Register an observer, catching it up on the published sequence."""
        if observer in self._observers:
            return
        self._observers.append(observer)
        if self._published:
            self._notify(
                observer,
                ResultSetUpdate(
                    kind=UpdateKind.FULL,
                    items=list(self._results),
                    size=len(self._results),
                ),
            )

    def remove_observer(self, observer: ResultSetObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def add_search_results(
        self, batch: Iterable[ResultRecord] | None, provider_id: str
    ) -> None:
        """
        Store the results from a provider to be merged on the next display.

        Args:
            batch: The provider's results; None leaves any earlier batch in place
            provider_id: Key of the provider, usually its qualified class name
        """
        if self.collector.add_search_results(batch, provider_id):
            self.metrics.record_batch(provider_id)
            if self._state != ControllerState.MERGING:
                self._state = ControllerState.COLLECTING

    def display_search_results(self, query: str) -> int:
        """
        Merge the stored batches and publish them as an incremental update.

        Database results take precedence over installed apps at equal rank.
        The external ranker, if enabled, reorders the merged list before it is
        diffed against the published one.

        Args:
            query: User query corresponding to these results

        Returns:
            Number of published results
        """
        if self._state == ControllerState.MERGING:
            raise ReentrantDisplayError(query=query)

        previous_state = self._state
        self._state = ControllerState.MERGING
        try:
            batches = self.collector.batches()
            log_query(
                logger, query, {pid: len(batch) for pid, batch in batches.items()}
            )

            start_time = time.time()
            merged = self.merger.merge(batches)
            self.metrics.record_merge(len(merged), time.time() - start_time)

            outcome = apply_external_ranking(self.ranker, self.config, query, merged)
            if outcome.attempted or outcome.error is not None:
                self.metrics.record_ranking(success=outcome.error is None)
            self.last_ranking_error = outcome.error

            detect_moves = outcome.attempted or self.config.differ.always_detect_moves
            script = self.differ.diff(self._results, outcome.results, detect_moves)
        except Exception:
            self._state = previous_state
            raise

        self._publish(outcome.results, script=script, query=query)
        log_results(
            logger,
            {
                "total_results": len(self._results),
                "ranked": outcome.applied,
                "operations": len(script),
            },
        )
        return len(self._results)

    def display_saved_query(self, data: Sequence[ResultRecord]) -> int:
        """
        Display recently saved queries, bypassing the merge.

        Returns:
            Number of saved queries displayed
        """
        self.collector.clear()
        self._publish(list(data))
        return len(self._results)

    def clear_results(self) -> None:
        """Drop all batches and publish an empty sequence."""
        self.collector.clear()
        self._publish([])

    def get_metrics(self) -> MetricsData:
        """Get pipeline metrics."""
        return self.metrics.get_metrics()

    def _publish(
        self,
        results: list[ResultRecord],
        script: EditScript | None = None,
        query: str | None = None,
    ) -> None:
        previous_size = len(self._results)
        self._results = results
        self._state = ControllerState.PUBLISHED
        self._published = True

        if script is None:
            update = ResultSetUpdate(
                kind=UpdateKind.FULL,
                items=list(results),
                previous_size=previous_size,
                size=len(results),
                query=query,
            )
        else:
            update = ResultSetUpdate(
                kind=UpdateKind.INCREMENTAL,
                script=script,
                previous_size=previous_size,
                size=len(results),
                query=query,
            )

        self.metrics.record_publish(len(script) if script else 0, script is None)
        logger.debug(
            f"Published {update.kind.value} update: {previous_size} -> {len(results)}"
        )

        for observer in list(self._observers):
            self._notify(observer, update)

    def _notify(self, observer: ResultSetObserver, update: ResultSetUpdate) -> None:
        # Every observer gets every update, even if another one raises
        try:
            observer.on_results_changed(update)
        except Exception as e:
            logger.error(f"Observer {type(observer).__name__} failed: {e}")

    async def _perform_health_check(self) -> None:
        if self.last_ranking_error is not None:
            self.healthy = False
            self.health_message = (
                f"Last ranking failed: {self.last_ranking_error.message}"
            )
        else:
            self.healthy = True
            self.health_message = "Healthy"
