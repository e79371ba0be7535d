"""Mutable state owned by one workout session controller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from mapty.workout.model import Coordinates


SessionPhase = Literal[
    "awaiting_position",
    "map_ready",
    "awaiting_click",
    "form_open",
    "location_unavailable",
]


@dataclass
class SessionState:
    phase: SessionPhase = "awaiting_position"
    position: Coordinates | None = None
    pending_click: Coordinates | None = None
