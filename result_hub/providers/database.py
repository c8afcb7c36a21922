"""Provider slot for results indexed in the local search database."""

from .base import ResultProvider


class DatabaseResultProvider(ResultProvider):
    """Results from the local search index.

    Concrete implementations query the index; all of them share this class's
    provider id so the merger gives them database precedence.
    """

    provider_key = "result_hub.providers.database.DatabaseResultProvider"
