"""Popup content and options for workout markers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mapty.geo.constants import (
    POPUP_AUTO_CLOSE,
    POPUP_CLOSE_ON_CLICK,
    POPUP_MAX_WIDTH,
    POPUP_MIN_WIDTH,
)
from mapty.workout.model import Workout, WorkoutKind


@dataclass(frozen=True)
class PopupOptions:
    max_width: int = POPUP_MAX_WIDTH
    min_width: int = POPUP_MIN_WIDTH
    auto_close: bool = POPUP_AUTO_CLOSE
    close_on_click: bool = POPUP_CLOSE_ON_CLICK
    class_name: str | None = None

    def to_leaflet(self) -> dict[str, Any]:
        options: dict[str, Any] = {
            "maxWidth": self.max_width,
            "minWidth": self.min_width,
            "autoClose": self.auto_close,
            "closeOnClick": self.close_on_click,
        }
        if self.class_name:
            options["className"] = self.class_name
        return options


_KIND_ICONS: dict[WorkoutKind, str] = {
    "running": "🏃‍♂️",
    "cycling": "🚴‍♀️",
}


def popup_options_for(kind: WorkoutKind) -> PopupOptions:
    return PopupOptions(class_name=f"{kind}-popup")


def _fmt_number(value: float, digits: int = 1) -> str:
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def popup_content(workout: Workout) -> str:
    return (
        f"{_KIND_ICONS[workout.kind]} {workout.description} "
        f"· {_fmt_number(workout.distance_km, 2)} km"
    )


def metric_summary(workout: Workout) -> str:
    if workout.kind == "running":
        return (
            f"{_fmt_number(workout.pace_min_per_km)} min/km, "
            f"{_fmt_number(workout.cadence_steps_per_min, 0)} spm"
        )
    return (
        f"{_fmt_number(workout.speed_km_per_h)} km/h, "
        f"{_fmt_number(workout.elevation_gain_m, 0)} m"
    )
