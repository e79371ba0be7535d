from __future__ import annotations

from mapty.workout.model import Coordinates, create_cycling, create_running
from mapty.workout.store import WorkoutStore


def test_append_preserves_insertion_order() -> None:
    store = WorkoutStore()
    a = create_running(Coordinates(1.0, 1.0), 5.0, 25.0, 180.0)
    b = create_cycling(Coordinates(2.0, 2.0), 20.0, 50.0, 120.0)

    store.append(a)
    store.append(b)

    assert store.all() == (a, b)
    assert list(store) == [a, b]
    assert len(store) == 2


def test_append_does_not_deduplicate() -> None:
    store = WorkoutStore()
    a = create_running(Coordinates(1.0, 1.0), 5.0, 25.0, 180.0)

    store.append(a)
    store.append(a)

    assert len(store) == 2


def test_all_returns_a_snapshot() -> None:
    store = WorkoutStore()
    snapshot = store.all()
    store.append(create_running(Coordinates(1.0, 1.0), 5.0, 25.0, 180.0))

    assert snapshot == ()
    assert len(store.all()) == 1
