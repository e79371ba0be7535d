"""Workout creation controller shared by the web UI and tests."""

from __future__ import annotations

from typing import Any, Callable, Protocol

from mapty.core.rendering import PopupOptions, popup_content, popup_options_for
from mapty.core.state import SessionState
from mapty.geo.constants import (
    CURRENT_LOCATION_POPUP,
    DEFAULT_ZOOM,
    INVALID_INPUT_MESSAGE,
    LOCATION_UNAVAILABLE_MESSAGE,
)
from mapty.geo.location import LocationSource, LocationUnavailable
from mapty.workout.model import (
    WORKOUT_KINDS,
    Coordinates,
    Workout,
    WorkoutKind,
    create_cycling,
    create_running,
)
from mapty.workout.store import WorkoutStore
from mapty.workout.validation import InvalidMetric, parse_number


ClickCallback = Callable[[Coordinates], None]
Notifier = Callable[[str], None]


class MapAdapter(Protocol):
    def init_view(self, center: Coordinates, zoom: int) -> None: ...

    def add_marker(self, coordinates: Coordinates) -> Any: ...

    def bind_popup(self, marker: Any, content: str, options: PopupOptions) -> None: ...

    def on_click(self, callback: ClickCallback) -> None: ...


class WorkoutForm(Protocol):
    """Input boundary: raw field values plus the few writes the flow needs."""

    @property
    def kind(self) -> str: ...

    @property
    def distance(self) -> object: ...

    @property
    def duration(self) -> object: ...

    @property
    def cadence(self) -> object: ...

    @property
    def elevation(self) -> object: ...

    def show(self) -> None: ...

    def hide(self) -> None: ...

    def focus_distance(self) -> None: ...

    def clear_inputs(self) -> None: ...

    def show_kind_fields(self, kind: WorkoutKind) -> None: ...


class SessionController:
    def __init__(
        self,
        map_adapter: MapAdapter,
        form: WorkoutForm,
        location: LocationSource,
        notify: Notifier,
        store: WorkoutStore | None = None,
        zoom: int = DEFAULT_ZOOM,
    ) -> None:
        self._map = map_adapter
        self._form = form
        self._location = location
        self._notify = notify
        self._store = store if store is not None else WorkoutStore()
        self._zoom = zoom
        self.state = SessionState()

    @property
    def phase(self) -> str:
        return self.state.phase

    @property
    def workouts(self) -> tuple[Workout, ...]:
        return self._store.all()

    async def start(self) -> bool:
        """Resolve the user's position and open the map around it.

        Returns False when no position could be obtained; the session then
        stays in ``location_unavailable`` for good.
        """
        if self.state.phase != "awaiting_position":
            raise RuntimeError(f"Session already started ({self.state.phase})")
        try:
            position = await self._location.get_current_position()
        except LocationUnavailable:
            self.state.phase = "location_unavailable"
            self._notify(LOCATION_UNAVAILABLE_MESSAGE)
            return False

        self._load_map(position)
        self._map.on_click(self.handle_map_click)
        self.state.phase = "awaiting_click"
        return True

    def _load_map(self, position: Coordinates) -> None:
        self.state.position = position
        self._map.init_view(position, self._zoom)
        marker = self._map.add_marker(position)
        self._map.bind_popup(marker, CURRENT_LOCATION_POPUP, PopupOptions())
        self.state.phase = "map_ready"

    def handle_map_click(self, coordinates: Coordinates) -> None:
        if self.state.phase not in ("awaiting_click", "form_open"):
            return
        self.state.pending_click = coordinates
        self._form.show()
        self._form.focus_distance()
        self.state.phase = "form_open"

    def handle_kind_change(self, kind: str) -> None:
        self._form.show_kind_fields(_require_kind(kind))

    def submit(self) -> Workout | None:
        """Turn the current form values into a workout.

        Returns None when the input is rejected; the form then stays open
        with the same pending click.
        """
        if self.state.phase != "form_open" or self.state.pending_click is None:
            raise RuntimeError("Workout submitted without a pending map click")

        kind = _require_kind(self._form.kind)
        distance = parse_number(self._form.distance)
        duration = parse_number(self._form.duration)
        coordinates = self.state.pending_click

        try:
            workout: Workout
            if kind == "running":
                cadence = parse_number(self._form.cadence)
                workout = create_running(coordinates, distance, duration, cadence)
            else:
                elevation = parse_number(self._form.elevation)
                workout = create_cycling(coordinates, distance, duration, elevation)
        except InvalidMetric:
            self._notify(INVALID_INPUT_MESSAGE)
            return None

        self._store.append(workout)
        self.render_workout_marker(workout)

        self._form.clear_inputs()
        self._form.hide()
        self.state.pending_click = None
        self.state.phase = "awaiting_click"
        return workout

    def render_workout_marker(self, workout: Workout) -> None:
        marker = self._map.add_marker(workout.coordinates)
        self._map.bind_popup(marker, popup_content(workout), popup_options_for(workout.kind))


def _require_kind(kind: str) -> WorkoutKind:
    for known in WORKOUT_KINDS:
        if kind == known:
            return known
    raise ValueError(f"Unknown workout kind '{kind}'")
