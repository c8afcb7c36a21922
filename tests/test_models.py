"""Tests for result and update models."""

import pytest
from pydantic import ValidationError

from result_hub.models.results import BOTTOM_RANK, TOP_RANK, ResultRecord, ViewType
from result_hub.models.updates import EditOperation, EditScript, EditType

from .conftest import make_record


def test_rank_bounds():
    """Top rank sorts before bottom rank."""
    assert TOP_RANK == 0
    assert BOTTOM_RANK == 9
    assert TOP_RANK < BOTTOM_RANK


def test_records_hash_by_stable_id():
    """Records with the same id hash alike but compare by content."""
    first = make_record(1, rank=0, title="Wi-Fi")
    renamed = make_record(1, rank=0, title="Wireless")

    assert hash(first) == hash(renamed)
    assert first != renamed
    assert first == make_record(1, rank=0, title="Wi-Fi")
    assert len({first, renamed}) == 2


def test_records_usable_in_sets_with_payload():
    """A mutable payload does not make the record unhashable."""
    result = make_record(7, payload={"intent": "open_settings"})
    assert result in {result}


def test_records_are_frozen():
    """Providers cannot mutate a record after handing it over."""
    result = make_record(1)
    with pytest.raises(ValidationError):
        result.rank = 3


def test_sort_key_breaks_rank_ties_by_stable_id():
    """Equal ranks order by stable id."""
    results = [make_record(5, rank=1), make_record(2, rank=1), make_record(9, rank=0)]
    assert [r.stable_id for r in sorted(results, key=lambda r: r.sort_key)] == [
        9,
        2,
        5,
    ]


def test_view_type_defaults_to_intent():
    """Plain records render as intent results."""
    assert ResultRecord(stable_id=1, rank=0).view_type == ViewType.INTENT


def test_edit_script_counts():
    """EditScript reports operation and item counts."""
    script = EditScript(
        operations=[
            EditOperation(type=EditType.REMOVE, position=3, count=2),
            EditOperation(
                type=EditType.INSERT, position=0, items=[make_record(1)], count=1
            ),
        ],
        old_size=5,
        new_size=4,
    )

    assert len(script) == 2
    assert not script.is_empty
    assert script.count(EditType.REMOVE) == 2
    assert script.count(EditType.INSERT) == 1
    assert script.count(EditType.MOVE) == 0
    assert EditScript().is_empty


def test_edit_operation_rejects_negative_positions():
    """Positions are non-negative."""
    with pytest.raises(ValidationError):
        EditOperation(type=EditType.REMOVE, position=-1)
