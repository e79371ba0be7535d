"""In-memory workout store for one page session."""

from __future__ import annotations

from typing import Iterator

from mapty.workout.model import Workout


class WorkoutStore:
    """Append-only, insertion-ordered collection of workouts."""

    def __init__(self) -> None:
        self._workouts: list[Workout] = []

    def append(self, workout: Workout) -> None:
        self._workouts.append(workout)

    def all(self) -> tuple[Workout, ...]:
        return tuple(self._workouts)

    def __len__(self) -> int:
        return len(self._workouts)

    def __iter__(self) -> Iterator[Workout]:
        return iter(self.all())
