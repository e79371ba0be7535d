"""CLI entrypoint for the Mapty workout tracker."""

from __future__ import annotations

import argparse

from mapty.geo.constants import DEFAULT_LOCATION_TIMEOUT_SEC, DEFAULT_ZOOM
from mapty.geo.location import parse_lat_lng
from mapty.workout.model import Coordinates


def _lat_lng_arg(raw: str) -> Coordinates:
    try:
        return parse_lat_lng(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mapty: log workouts on a map")
    parser.add_argument("--host", default="127.0.0.1", help="Host bind for the web UI")
    parser.add_argument("--port", type=int, default=8080, help="Port for the web UI")
    parser.add_argument(
        "--zoom",
        type=int,
        default=DEFAULT_ZOOM,
        help="Map zoom level once the user's position is known",
    )
    parser.add_argument(
        "--location-timeout",
        type=float,
        default=DEFAULT_LOCATION_TIMEOUT_SEC,
        help="Seconds to wait for the browser to report a position",
    )
    sim = parser.add_mutually_exclusive_group()
    sim.add_argument(
        "--debug-sim-location",
        type=_lat_lng_arg,
        default=None,
        metavar="LAT,LNG",
        help="Skip browser geolocation and start at a fixed position",
    )
    sim.add_argument(
        "--debug-sim-no-location",
        action="store_true",
        help="Simulate a browser that refuses to share its position",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.zoom < 0:
        parser.error("--zoom must be >= 0")
    if args.location_timeout <= 0:
        parser.error("--location-timeout must be > 0")

    from mapty.ui.web_app import run_web_ui

    return run_web_ui(
        host=args.host,
        port=args.port,
        zoom=args.zoom,
        location_timeout=args.location_timeout,
        simulate_location=args.debug_sim_location is not None or args.debug_sim_no_location,
        sim_location=args.debug_sim_location,
    )


if __name__ == "__main__":
    raise SystemExit(main())
