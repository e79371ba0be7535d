"""Form value parsing and the workout metric policy."""

from __future__ import annotations

import math
import re


class InvalidMetric(ValueError):
    """Raised when a submitted workout metric is not acceptable."""


# Python float() also takes "1_000", "inf" and "nan"; browsers do not.
_DECIMAL_RE = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_NON_DECIMAL_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def parse_number(raw: object) -> float:
    """Coerce a raw form value the way a browser number conversion does.

    Blank input becomes 0.0 and anything unparsable becomes NaN, so the
    positivity/finiteness policy below decides what is rejected.
    """
    if raw is None:
        return math.nan
    if isinstance(raw, bool):
        return float(raw)
    if isinstance(raw, (int, float)):
        return float(raw)
    text = str(raw).strip()
    if text == "":
        return 0.0
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    if _NON_DECIMAL_RE.fullmatch(text):
        return float(int(text, 0))
    return math.nan


def all_finite(*values: float) -> bool:
    return all(math.isfinite(value) for value in values)


def all_positive(*values: float) -> bool:
    return all(value > 0 for value in values)


def check_running_metrics(distance_km: float, duration_min: float, cadence: float) -> None:
    if not all_finite(distance_km, duration_min, cadence) or not all_positive(
        distance_km, duration_min, cadence
    ):
        raise InvalidMetric("Inputs have to be positive number")


def check_cycling_metrics(
    distance_km: float, duration_min: float, elevation_gain_m: float
) -> None:
    # Elevation may be zero or negative (downhill rides); only finiteness applies.
    if not all_finite(distance_km, duration_min, elevation_gain_m) or not all_positive(
        distance_km, duration_min
    ):
        raise InvalidMetric("Inputs have to be positive number")
