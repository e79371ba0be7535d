from __future__ import annotations

from datetime import datetime, timezone

from mapty.core.rendering import PopupOptions, metric_summary, popup_content, popup_options_for
from mapty.workout.model import Coordinates, Cycling, Running


def test_popup_options_to_leaflet() -> None:
    assert popup_options_for("cycling").to_leaflet() == {
        "maxWidth": 250,
        "minWidth": 100,
        "autoClose": False,
        "closeOnClick": False,
        "className": "cycling-popup",
    }
    assert "className" not in PopupOptions().to_leaflet()


def test_popup_content_and_summary() -> None:
    run = Running(
        coordinates=Coordinates(0.0, 0.0),
        distance_km=4.25,
        duration_min=21.25,
        cadence_steps_per_min=178.0,
        created_at=datetime(2026, 10, 3, tzinfo=timezone.utc),
    )

    assert popup_content(run).endswith("Running on October 3 · 4.25 km")
    assert metric_summary(run) == "5 min/km, 178 spm"


def test_cycling_summary_rounds_for_display_only() -> None:
    ride = Cycling(
        coordinates=Coordinates(0.0, 0.0),
        distance_km=10.0,
        duration_min=35.0,
        elevation_gain_m=152.4,
    )

    assert metric_summary(ride) == "17.1 km/h, 152 m"
    assert ride.speed_km_per_h == 10.0 / (35.0 / 60)
