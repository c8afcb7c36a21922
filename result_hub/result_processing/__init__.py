"""Result processing package.

This package contains the stages of the result pipeline:
- collector: Keep the latest batch delivered by each provider
- merger: Merge batches into one rank-ordered sequence
- ranker: Guarded invocation of an external ranking service
- differ: Compute edit scripts between published sequences
"""

from .collector import ResultCollector
from .differ import SequenceDiffer, apply_edit_script
from .merger import RankMerger
from .ranker import ScoreFunctionRanker, apply_external_ranking

__all__ = [
    "RankMerger",
    "ResultCollector",
    "ScoreFunctionRanker",
    "SequenceDiffer",
    "apply_edit_script",
    "apply_external_ranking",
]
