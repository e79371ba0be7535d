"""NiceGUI web UI for Mapty."""

from __future__ import annotations

from typing import Any

from nicegui import Client, events, ui

from mapty.core.controller import ClickCallback, SessionController
from mapty.core.rendering import PopupOptions, metric_summary
from mapty.geo.constants import (
    DEFAULT_LOCATION_TIMEOUT_SEC,
    DEFAULT_ZOOM,
    TILE_ATTRIBUTION,
    TILE_URL_TEMPLATE,
)
from mapty.geo.location import (
    BrowserLocationSource,
    LocationSource,
    SimulatedLocationSource,
)
from mapty.workout.model import Coordinates, WorkoutKind
from mapty.workout.store import WorkoutStore

# Shown until the user's position is known.
PLACEHOLDER_CENTER = (0.0, 0.0)

_HEAD_HTML = """
<style>
  :root {
    --color-brand--1: #ffb545;
    --color-brand--2: #00c46a;
    --color-dark--1: #2d3439;
    --color-dark--2: #42484d;
    --color-light--2: #ececec;
  }
  body {
    background: var(--color-dark--1);
    color: var(--color-light--2);
    font-family: "Manrope", Arial, sans-serif;
  }
  .mapty-sidebar {
    background: var(--color-dark--1);
    min-width: 320px;
  }
  .mapty-form {
    background: var(--color-dark--2);
    border-radius: 5px;
  }
  .leaflet-popup .leaflet-popup-content-wrapper {
    background: var(--color-dark--1);
    color: var(--color-light--2);
    border-radius: 5px;
    padding-right: 0.6rem;
  }
  .leaflet-popup .leaflet-popup-tip {
    background: var(--color-dark--1);
  }
  .running-popup .leaflet-popup-content-wrapper {
    border-left: 5px solid var(--color-brand--2);
  }
  .cycling-popup .leaflet-popup-content-wrapper {
    border-left: 5px solid var(--color-brand--1);
  }
</style>
"""


class LeafletMapAdapter:
    def __init__(self, leaflet: Any) -> None:
        self._map = leaflet

    def init_view(self, center: Coordinates, zoom: int) -> None:
        self._map.set_center(center.as_tuple())
        self._map.set_zoom(zoom)

    def add_marker(self, coordinates: Coordinates) -> Any:
        return self._map.marker(latlng=coordinates.as_tuple())

    def bind_popup(self, marker: Any, content: str, options: PopupOptions) -> None:
        marker.run_method("bindPopup", content, options.to_leaflet())
        marker.run_method("openPopup")

    def on_click(self, callback: ClickCallback) -> None:
        def _on_map_click(e: events.GenericEventArguments) -> None:
            latlng = e.args["latlng"]
            callback(Coordinates(lat=float(latlng["lat"]), lng=float(latlng["lng"])))

        self._map.on("map-click", _on_map_click)


class WebWorkoutForm:
    """Workout entry form bound to NiceGUI inputs."""

    def __init__(self) -> None:
        with ui.card().classes("w-full mapty-form") as self._card:
            with ui.grid(columns=2).classes("w-full gap-2"):
                self._type = ui.select(
                    {"running": "Running", "cycling": "Cycling"},
                    value="running",
                    label="Type",
                )
                self._distance = ui.input("Distance", placeholder="km")
                self._duration = ui.input("Duration", placeholder="min")
                self._cadence = ui.input("Cadence", placeholder="step/min")
                self._elevation = ui.input("Elev Gain", placeholder="meters")
            self.save_btn = ui.button("OK").props("color=positive")
        self._elevation.set_visibility(False)
        self._card.set_visibility(False)

    @property
    def type_select(self) -> Any:
        return self._type

    @property
    def inputs(self) -> tuple[Any, ...]:
        return (self._distance, self._duration, self._cadence, self._elevation)

    @property
    def kind(self) -> str:
        return str(self._type.value or "")

    @property
    def distance(self) -> object:
        return self._distance.value

    @property
    def duration(self) -> object:
        return self._duration.value

    @property
    def cadence(self) -> object:
        return self._cadence.value

    @property
    def elevation(self) -> object:
        return self._elevation.value

    def show(self) -> None:
        self._card.set_visibility(True)

    def hide(self) -> None:
        self._card.set_visibility(False)

    def focus_distance(self) -> None:
        self._distance.run_method("focus")

    def clear_inputs(self) -> None:
        for field in self.inputs:
            field.set_value("")

    def show_kind_fields(self, kind: WorkoutKind) -> None:
        self._cadence.set_visibility(kind == "running")
        self._elevation.set_visibility(kind == "cycling")


def _build_location_source(
    client: Client,
    sim_location: Coordinates | None,
    simulate: bool,
    location_timeout: float,
) -> LocationSource:
    if simulate:
        return SimulatedLocationSource(sim_location)
    return BrowserLocationSource(client, timeout=location_timeout)


def run_web_ui(
    *,
    host: str = "127.0.0.1",
    port: int = 8080,
    zoom: int = DEFAULT_ZOOM,
    location_timeout: float = DEFAULT_LOCATION_TIMEOUT_SEC,
    simulate_location: bool = False,
    sim_location: Coordinates | None = None,
) -> int:
    @ui.page("/")
    async def index(client: Client) -> None:
        ui.add_head_html(_HEAD_HTML)
        store = WorkoutStore()

        with ui.row().classes("w-full h-screen no-wrap gap-0"):
            with ui.column().classes("mapty-sidebar h-full p-4 gap-3"):
                ui.label("Mapty").classes("text-2xl font-bold")
                ui.label("Click on the map to log a workout").classes("text-sm")
                form = WebWorkoutForm()
            leaflet = ui.leaflet(center=PLACEHOLDER_CENTER, zoom=2).classes("grow h-full")
            leaflet.clear_layers()
            leaflet.tile_layer(
                url_template=TILE_URL_TEMPLATE,
                options={"attribution": TILE_ATTRIBUTION},
            )

        controller = SessionController(
            map_adapter=LeafletMapAdapter(leaflet),
            form=form,
            location=_build_location_source(
                client, sim_location, simulate_location, location_timeout
            ),
            notify=lambda message: ui.notify(message, color="negative"),
            store=store,
            zoom=zoom,
        )

        def on_submit() -> None:
            if controller.phase != "form_open":
                return
            workout = controller.submit()
            if workout is not None:
                ui.notify(
                    f"{workout.description}: {metric_summary(workout)}",
                    color="positive",
                )

        form.type_select.on_value_change(
            lambda e: controller.handle_kind_change(str(e.value))
        )
        for field in form.inputs:
            field.on("keydown.enter", lambda _: on_submit())
        form.save_btn.on_click(on_submit)

        await client.connected()
        await leaflet.initialized()
        await controller.start()

    print(f"Mapty listening on http://{host}:{port}")
    ui.run(host=host, port=port, reload=False, title="Mapty", show=False)
    return 0
