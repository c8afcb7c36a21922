"""Tests for the presentation helpers."""

from result_hub.models.results import ViewType
from result_hub.models.updates import ResultSetUpdate, UpdateKind
from result_hub.presentation import ResultListMirror, ViewBinderRegistry

from .conftest import make_record


def test_mirror_applies_full_update():
    mirror = ResultListMirror()
    items = [make_record(5), make_record(6, view_type=ViewType.INLINE_SWITCH)]
    mirror.on_results_changed(
        ResultSetUpdate(kind=UpdateKind.FULL, items=items, size=2)
    )

    assert mirror.item_count == 2
    assert mirror.get_item(0) == items[0]
    assert mirror.get_item_id(1) == 6
    assert mirror.get_item_view_type(1) == ViewType.INLINE_SWITCH


def test_registry_dispatches_on_view_type():
    registry = ViewBinderRegistry({ViewType.INTENT: lambda: "intent-view"})
    registry.register(ViewType.SAVED_QUERY, lambda: "saved-view")

    assert registry.create_view(ViewType.INTENT) == "intent-view"
    assert registry.create_view(2) == "saved-view"


def test_registry_unknown_view_type_returns_none():
    registry = ViewBinderRegistry({ViewType.INTENT: lambda: "intent-view"})

    assert registry.create_view(ViewType.INLINE_SWITCH) is None
    assert registry.create_view(42) is None
