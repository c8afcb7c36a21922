"""Provider slot for results matching installed applications."""

from .base import ResultProvider


class InstalledAppResultProvider(ResultProvider):
    """Results for installed applications.

    Merged after database results of the same rank.
    """

    provider_key = "result_hub.providers.installed_apps.InstalledAppResultProvider"
