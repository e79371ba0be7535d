"""Map and popup constants shared by the controller and the web UI."""

from __future__ import annotations

DEFAULT_ZOOM = 13

TILE_URL_TEMPLATE = "https://tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)

CURRENT_LOCATION_POPUP = "This is your current location!"
LOCATION_UNAVAILABLE_MESSAGE = "Couldn't fetch your location!"
INVALID_INPUT_MESSAGE = "Inputs have to be positive number"

POPUP_MAX_WIDTH = 250
POPUP_MIN_WIDTH = 100
POPUP_AUTO_CLOSE = False
POPUP_CLOSE_ON_CLICK = False

# Browser geolocation has no deadline of its own, but the JS bridge needs one.
DEFAULT_LOCATION_TIMEOUT_SEC = 60.0
