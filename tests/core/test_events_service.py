import json

import pytest

from packages.core.errors import NotFoundError, ValidationError
from packages.core.events.service import create_event, delete_event, list_events
from packages.core.storage.json_file import JsonFileEventStore
from packages.core.storage.memory import InMemoryEventStore


def test_create_then_list_contains_new_event(tmp_path):
    store = JsonFileEventStore(str(tmp_path / "db.json"))
    existing = create_event(store, "2024-05-30", "08:00", "Breakfast")

    event = create_event(store, date="2024-06-01", time="14:30", description="Team sync")

    assert event.id
    assert event.id != existing.id
    matches = [item for item in list_events(store) if item.id == event.id]
    assert len(matches) == 1
    assert (matches[0].date, matches[0].time, matches[0].description) == (
        "2024-06-01",
        "14:30",
        "Team sync",
    )


def test_created_values_round_trip_unchanged(tmp_path):
    store = JsonFileEventStore(str(tmp_path / "db.json"))
    description = "  Dentist é \U0001f9b7 "

    event = create_event(store, "2024-06-01", "07:05", description)

    stored = JsonFileEventStore(str(tmp_path / "db.json")).list_events()
    assert stored == [event]
    assert stored[0].description == description


@pytest.mark.parametrize(
    "date,time,description",
    [
        ("", "14:30", "Team sync"),
        ("2024-06-01", "", "x"),
        ("2024-06-01", "14:30", ""),
        (None, "14:30", "Team sync"),
        ("2024-06-01", None, "Team sync"),
        ("2024-06-01", "14:30", None),
        ("2024-06-01", "14:30", "   "),
    ],
)
def test_create_missing_field_is_rejected_without_writing(tmp_path, date, time, description):
    db_path = tmp_path / "db.json"
    store = JsonFileEventStore(str(db_path))
    create_event(store, "2024-05-30", "08:00", "Breakfast")
    before = db_path.read_text()

    with pytest.raises(ValidationError) as excinfo:
        create_event(store, date, time, description)

    assert "required" in excinfo.value.message
    assert db_path.read_text() == before


def test_delete_removes_exactly_one_event():
    store = InMemoryEventStore()
    first = create_event(store, "2024-06-01", "09:00", "One")
    second = create_event(store, "2024-06-01", "10:00", "Two")
    third = create_event(store, "2024-06-02", "09:00", "Three")

    delete_event(store, second.id)

    remaining = list_events(store)
    assert len(remaining) == 2
    assert {event.id for event in remaining} == {first.id, third.id}


def test_delete_unknown_id_raises_and_leaves_store(tmp_path):
    db_path = tmp_path / "db.json"
    store = JsonFileEventStore(str(db_path))
    create_event(store, "2024-06-01", "09:00", "One")
    before = json.loads(db_path.read_text())

    with pytest.raises(NotFoundError):
        delete_event(store, "never-created")

    assert json.loads(db_path.read_text()) == before


def test_list_is_stable_without_mutation(tmp_path):
    store = JsonFileEventStore(str(tmp_path / "db.json"))
    for idx in range(3):
        create_event(store, "2024-06-01", f"0{idx}:00", f"Event {idx}")

    snapshots = [set(list_events(store)) for _ in range(3)]
    assert snapshots[0] == snapshots[1] == snapshots[2]
    assert len(snapshots[0]) == 3


def test_ids_stay_unique_across_many_creates():
    store = InMemoryEventStore()
    ids = {create_event(store, "2024-06-01", "09:00", "Same").id for _ in range(50)}
    assert len(ids) == 50
