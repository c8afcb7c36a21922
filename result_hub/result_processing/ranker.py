"""External ranking adapters and guarded invocation."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ..config.settings import AppSettings
from ..models.interfaces import ExternalRanker
from ..models.results import ResultRecord
from ..utils.errors import RankingError
from ..utils.logging import get_logger

logger = get_logger(__name__)

ScoreFunction = Callable[[str, ResultRecord], float]


def rank_by_weighted_score(
    results: list[ResultRecord],
    scores: Mapping[int, float],
    default_score: float = 0.0,
) -> None:
    """
    Reorder results in place by descending score.

    Args:
        results: List of results to rank
        scores: Scores keyed by stable id
        default_score: Score for results missing from scores
    """
    results.sort(key=lambda r: scores.get(r.stable_id, default_score), reverse=True)


class ScoreFunctionRanker:
    """ExternalRanker backed by an opaque scoring function."""

    def __init__(self, score: ScoreFunction, default_score: float = 0.0):
        self.score = score
        self.default_score = default_score

    def is_enabled(self, context: Any) -> bool:
        if isinstance(context, AppSettings):
            return context.ranking.smart_ranking_enabled
        return False

    def rank(self, query: str, results: list[ResultRecord]) -> None:
        scores = {r.stable_id: self.score(query, r) for r in results}
        rank_by_weighted_score(results, scores, self.default_score)


@dataclass
class RankingOutcome:
    """Result of a guarded ranking call."""

    results: list[ResultRecord]
    attempted: bool = False
    applied: bool = False
    error: RankingError | None = None


def _ranker_name(ranker: Any) -> str:
    return type(ranker).__name__


def apply_external_ranking(
    ranker: ExternalRanker | None,
    context: Any,
    query: str,
    merged: list[ResultRecord],
) -> RankingOutcome:
    """
    Run the external ranker over a copy of the merged results.

    Any failure is converted into "ranking skipped": the merged order is kept
    and the wrapped error is returned for the caller to record.

    Args:
        ranker: The ranker, or None if no ranking service is installed
        context: Settings passed to the ranker's is_enabled
        query: Query the results belong to
        merged: Merged results; never mutated

    Returns:
        The ranking outcome
    """
    if ranker is None:
        return RankingOutcome(results=merged)

    name = _ranker_name(ranker)
    try:
        enabled = ranker.is_enabled(context)
    except Exception as e:
        logger.warning(f"Ranker {name} is_enabled failed, skipping ranking: {e}")
        return RankingOutcome(
            results=merged,
            error=RankingError.from_exception(e, ranker=name, query=query),
        )

    if not enabled:
        return RankingOutcome(results=merged)

    ranked = list(merged)
    try:
        ranker.rank(query, ranked)
    except Exception as e:
        logger.warning(f"Ranker {name} failed, publishing merged order: {e}")
        return RankingOutcome(
            results=merged,
            attempted=True,
            error=RankingError.from_exception(e, ranker=name, query=query),
        )

    logger.debug(f"Ranker {name} reordered {len(ranked)} results")
    return RankingOutcome(results=ranked, attempted=True, applied=True)
