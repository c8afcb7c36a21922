"""Result Hub - merge, rank and diff search results from multiple providers."""

from .controller import ResultSetController
from .models.results import BOTTOM_RANK, TOP_RANK, ResultRecord, ViewType

__version__ = "0.1.0"

__all__ = [
    "BOTTOM_RANK",
    "TOP_RANK",
    "ResultRecord",
    "ResultSetController",
    "ViewType",
]
