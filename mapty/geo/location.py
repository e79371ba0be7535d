"""Location sources: browser geolocation or a simulated fixed position."""

from __future__ import annotations

from typing import Any, Optional, Protocol

from mapty.geo.constants import DEFAULT_LOCATION_TIMEOUT_SEC
from mapty.workout.model import Coordinates


class LocationUnavailable(RuntimeError):
    """Raised when the user's position cannot be determined."""


class LocationSource(Protocol):
    async def get_current_position(self) -> Coordinates: ...


_GEOLOCATION_JS = """
new Promise((resolve) => {
  if (!navigator.geolocation) {
    resolve(null);
    return;
  }
  navigator.geolocation.getCurrentPosition(
    (position) => resolve({lat: position.coords.latitude, lng: position.coords.longitude}),
    () => resolve(null),
  );
})
"""


def parse_position(payload: Any) -> Coordinates:
    """Convert the JS bridge payload into coordinates."""
    if not isinstance(payload, dict):
        raise LocationUnavailable("Geolocation is unavailable or was denied")
    try:
        return Coordinates(lat=float(payload["lat"]), lng=float(payload["lng"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise LocationUnavailable(f"Invalid geolocation payload: {payload!r}") from exc


def parse_lat_lng(raw: str) -> Coordinates:
    """Parse ``"LAT,LNG"`` as used by the ``--debug-sim-location`` flag."""
    parts = [part.strip() for part in raw.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected LAT,LNG but got '{raw}'")
    lat, lng = float(parts[0]), float(parts[1])
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"Latitude out of range: {lat}")
    if not -180.0 <= lng <= 180.0:
        raise ValueError(f"Longitude out of range: {lng}")
    return Coordinates(lat=lat, lng=lng)


class SimulatedLocationSource:
    """Resolve to a fixed position, or fail when none is configured."""

    def __init__(self, position: Optional[Coordinates]) -> None:
        self._position = position
        self.requests = 0

    async def get_current_position(self) -> Coordinates:
        self.requests += 1
        if self._position is None:
            raise LocationUnavailable("Simulated location disabled")
        return self._position


class BrowserLocationSource:
    """Ask the connected browser through NiceGUI's JavaScript bridge."""

    def __init__(
        self,
        client: Any,
        timeout: float = DEFAULT_LOCATION_TIMEOUT_SEC,
    ) -> None:
        self._client = client
        self._timeout = timeout

    async def get_current_position(self) -> Coordinates:
        try:
            payload = await self._client.run_javascript(
                _GEOLOCATION_JS, timeout=self._timeout
            )
        except TimeoutError as exc:
            raise LocationUnavailable(
                f"No position received within {self._timeout:.0f}s"
            ) from exc
        return parse_position(payload)
