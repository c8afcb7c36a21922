"""Result providers package."""

from .base import ResultProvider, gather_results
from .database import DatabaseResultProvider
from .installed_apps import InstalledAppResultProvider

__all__ = [
    "DatabaseResultProvider",
    "InstalledAppResultProvider",
    "ResultProvider",
    "gather_results",
]
