"""Presentation-side helpers.

A ResultListMirror keeps a local copy of the published sequence by applying
each update it is notified of, and answers the questions a list view asks:
how many items, which stable id and which view type sits at a position.
ViewBinderRegistry dispatches view creation on the record's view type.
"""

from collections.abc import Callable
from typing import Any

from .models.results import ResultRecord, ViewType
from .models.updates import ResultSetUpdate, UpdateKind
from .result_processing.differ import apply_edit_script
from .utils.logging import get_logger

logger = get_logger(__name__)

ViewFactory = Callable[[], Any]


class ResultListMirror:
    """ResultSetObserver that mirrors the published sequence."""

    def __init__(self):
        self.items: list[ResultRecord] = []
        self.updates: list[ResultSetUpdate] = []

    def on_results_changed(self, update: ResultSetUpdate) -> None:
        if update.kind == UpdateKind.FULL:
            self.items = list(update.items)
        else:
            self.items = apply_edit_script(self.items, update.script)
        self.updates.append(update)

    @property
    def item_count(self) -> int:
        return len(self.items)

    def get_item(self, position: int) -> ResultRecord:
        return self.items[position]

    def get_item_id(self, position: int) -> int:
        return self.items[position].stable_id

    def get_item_view_type(self, position: int) -> ViewType:
        return self.items[position].view_type


class ViewBinderRegistry:
    """Maps view types to view factories."""

    def __init__(self, factories: dict[ViewType, ViewFactory] | None = None):
        self._factories: dict[ViewType, ViewFactory] = dict(factories or {})

    def register(self, view_type: ViewType, factory: ViewFactory) -> None:
        self._factories[view_type] = factory

    def create_view(self, view_type: ViewType | int) -> Any | None:
        """
        Create a view for a view type.

        Returns:
            The new view, or None if no factory handles the view type
        """
        try:
            factory = self._factories.get(ViewType(view_type))
        except ValueError:
            factory = None

        if factory is None:
            logger.debug(f"No view factory for view type {view_type!r}")
            return None
        return factory()
