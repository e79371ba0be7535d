"""Workout domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal
from uuid import uuid4

from mapty.workout.validation import check_cycling_metrics, check_running_metrics


WorkoutKind = Literal["running", "cycling"]
WORKOUT_KINDS: tuple[WorkoutKind, ...] = ("running", "cycling")

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.lat, self.lng)


def _new_workout_id() -> str:
    return str(uuid4())


def _now_utc() -> datetime:
    return datetime.now(tz=timezone.utc)


@dataclass(frozen=True)
class Running:
    coordinates: Coordinates
    distance_km: float
    duration_min: float
    cadence_steps_per_min: float
    id: str = field(default_factory=_new_workout_id)
    created_at: datetime = field(default_factory=_now_utc)
    kind: Literal["running"] = field(default="running", init=False)
    pace_min_per_km: float = field(init=False)

    def __post_init__(self) -> None:
        check_running_metrics(
            self.distance_km, self.duration_min, self.cadence_steps_per_min
        )
        # min/km
        object.__setattr__(self, "pace_min_per_km", self.duration_min / self.distance_km)

    @property
    def description(self) -> str:
        return _describe(self.kind, self.created_at)


@dataclass(frozen=True)
class Cycling:
    coordinates: Coordinates
    distance_km: float
    duration_min: float
    elevation_gain_m: float
    id: str = field(default_factory=_new_workout_id)
    created_at: datetime = field(default_factory=_now_utc)
    kind: Literal["cycling"] = field(default="cycling", init=False)
    speed_km_per_h: float = field(init=False)

    def __post_init__(self) -> None:
        check_cycling_metrics(self.distance_km, self.duration_min, self.elevation_gain_m)
        # km/h
        object.__setattr__(
            self, "speed_km_per_h", self.distance_km / (self.duration_min / 60)
        )

    @property
    def description(self) -> str:
        return _describe(self.kind, self.created_at)


Workout = Running | Cycling


def _describe(kind: WorkoutKind, created_at: datetime) -> str:
    return f"{kind.capitalize()} on {MONTHS[created_at.month - 1]} {created_at.day}"


def create_running(
    coordinates: Coordinates,
    distance_km: float,
    duration_min: float,
    cadence: float,
) -> Running:
    return Running(
        coordinates=coordinates,
        distance_km=distance_km,
        duration_min=duration_min,
        cadence_steps_per_min=cadence,
    )


def create_cycling(
    coordinates: Coordinates,
    distance_km: float,
    duration_min: float,
    elevation_gain_m: float,
) -> Cycling:
    return Cycling(
        coordinates=coordinates,
        distance_km=distance_km,
        duration_min=duration_min,
        elevation_gain_m=elevation_gain_m,
    )
