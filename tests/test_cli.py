from __future__ import annotations

from typing import Any

import pytest

import mapty.ui.web_app as web_app
from mapty.cli.main import build_parser, main
from mapty.workout.model import Coordinates


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])

    assert args.host == "127.0.0.1"
    assert args.port == 8080
    assert args.zoom == 13
    assert args.debug_sim_location is None
    assert args.debug_sim_no_location is False


def test_parser_sim_location() -> None:
    args = build_parser().parse_args(["--debug-sim-location", "51.5,-0.1"])
    assert args.debug_sim_location == Coordinates(51.5, -0.1)


def test_parser_rejects_bad_sim_location() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--debug-sim-location", "nowhere"])


def test_sim_flags_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(
            ["--debug-sim-location", "1,2", "--debug-sim-no-location"]
        )


def test_main_launches_web_ui(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, Any]] = []

    def fake_run_web_ui(**kwargs: Any) -> int:
        calls.append(kwargs)
        return 0

    monkeypatch.setattr(web_app, "run_web_ui", fake_run_web_ui)

    assert main(["--port", "9000", "--debug-sim-no-location"]) == 0
    assert calls[0]["port"] == 9000
    assert calls[0]["simulate_location"] is True
    assert calls[0]["sim_location"] is None


def test_main_rejects_non_positive_timeout() -> None:
    with pytest.raises(SystemExit):
        main(["--location-timeout", "0"])
