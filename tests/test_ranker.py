"""Tests for external ranking."""

from result_hub.models.interfaces import ExternalRanker
from result_hub.result_processing.ranker import (
    ScoreFunctionRanker,
    apply_external_ranking,
    rank_by_weighted_score,
)
from result_hub.utils.errors import RankingError

from .conftest import make_record


class ReversingRanker:
    def __init__(self, enabled=True):
        self.enabled = enabled
        self.calls = []

    def is_enabled(self, context):
        return self.enabled

    def rank(self, query, results):
        self.calls.append(query)
        results.reverse()


class ExplodingRanker:
    def is_enabled(self, context):
        return True

    def rank(self, query, results):
        results.pop()
        raise RuntimeError("scoring service unavailable")


class BrokenSwitchRanker:
    def is_enabled(self, context):
        raise KeyError("flag")

    def rank(self, query, results):
        raise AssertionError("rank must not be called")


def test_rank_by_weighted_score():
    """Results sort by descending score, missing scores use the default."""
    results = [make_record(1), make_record(2), make_record(3)]
    rank_by_weighted_score(results, {1: 0.2, 3: 0.9}, default_score=0.5)
    assert [r.stable_id for r in results] == [3, 2, 1]


def test_rank_by_weighted_score_is_stable():
    """Equal scores keep merged order."""
    results = [make_record(4), make_record(1), make_record(2)]
    rank_by_weighted_score(results, {})
    assert [r.stable_id for r in results] == [4, 1, 2]


def test_score_function_ranker(settings, ranking_settings):
    """The adapter follows the smart ranking switch and orders by score."""
    ranker = ScoreFunctionRanker(lambda query, r: len(r.title) if query else 0)
    assert isinstance(ranker, ExternalRanker)
    assert not ranker.is_enabled(settings)
    assert ranker.is_enabled(ranking_settings)
    assert not ranker.is_enabled(None)

    results = [make_record(1, title="a"), make_record(2, title="abc")]
    ranker.rank("q", results)
    assert [r.stable_id for r in results] == [2, 1]


def test_no_ranker():
    """Without a ranker the merged list passes through untouched."""
    merged = [make_record(1), make_record(2)]
    outcome = apply_external_ranking(None, None, "q", merged)

    assert outcome.results is merged
    assert not outcome.attempted
    assert not outcome.applied


def test_disabled_ranker_is_not_called():
    ranker = ReversingRanker(enabled=False)
    merged = [make_record(1), make_record(2)]
    outcome = apply_external_ranking(ranker, None, "q", merged)

    assert outcome.results == merged
    assert ranker.calls == []
    assert not outcome.attempted


def test_enabled_ranker_works_on_a_copy():
    ranker = ReversingRanker()
    merged = [make_record(1), make_record(2)]
    outcome = apply_external_ranking(ranker, None, "wifi", merged)

    assert [r.stable_id for r in outcome.results] == [2, 1]
    assert [r.stable_id for r in merged] == [1, 2]
    assert outcome.attempted and outcome.applied
    assert outcome.error is None
    assert ranker.calls == ["wifi"]


def test_failing_ranker_falls_back_to_merged_order():
    """A ranker failure means ranking skipped, even after partial mutation."""
    merged = [make_record(1), make_record(2), make_record(3)]
    outcome = apply_external_ranking(ExplodingRanker(), None, "q", merged)

    assert outcome.results == merged
    assert len(outcome.results) == 3
    assert outcome.attempted
    assert not outcome.applied
    assert isinstance(outcome.error, RankingError)
    assert isinstance(outcome.error.original_error, RuntimeError)
    assert outcome.error.details == {"ranker": "ExplodingRanker", "query": "q"}


def test_failing_switch_counts_as_disabled():
    merged = [make_record(1)]
    outcome = apply_external_ranking(BrokenSwitchRanker(), None, "q", merged)

    assert outcome.results is merged
    assert not outcome.attempted
    assert isinstance(outcome.error, RankingError)
