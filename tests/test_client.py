"""Tests for the OpenF1 client class."""

from __future__ import annotations

import httpx
import pytest
import respx

from f1laps import OpenF1Client
from f1laps.exceptions import OpenF1APIError, OpenF1ValidationError
from f1laps.models.lap import Lap
from f1laps.models.position import Position
from f1laps.models.session import Session
from tests.conftest import SAMPLE_LAP, SAMPLE_POSITION, SAMPLE_SESSION

BASE_URL = "https://api.openf1.org/v1"


class TestOpenF1Client:
    @respx.mock
    def test_sessions_defaults_to_races(self) -> None:
        route = respx.get(f"{BASE_URL}/sessions").mock(
            return_value=httpx.Response(200, json=[SAMPLE_SESSION])
        )
        with OpenF1Client() as f1:
            sessions = f1.sessions(year=2023)
        assert len(sessions) == 1
        assert isinstance(sessions[0], Session)
        assert sessions[0].session_key == 7953
        params = route.calls.last.request.url.params
        assert params["year"] == "2023"
        assert params["session_name"] == "Race"

    @respx.mock
    def test_laps_for_driver(self) -> None:
        route = respx.get(f"{BASE_URL}/laps").mock(
            return_value=httpx.Response(200, json=[SAMPLE_LAP])
        )
        with OpenF1Client() as f1:
            laps = f1.laps(session_key=7953, driver_number=1)
        assert len(laps) == 1
        assert isinstance(laps[0], Lap)
        params = route.calls.last.request.url.params
        assert params["session_key"] == "7953"
        assert params["driver_number"] == "1"

    @respx.mock
    def test_laps_whole_field_omits_driver(self) -> None:
        route = respx.get(f"{BASE_URL}/laps").mock(
            return_value=httpx.Response(200, json=[])
        )
        with OpenF1Client() as f1:
            f1.laps(session_key=7953)
        assert "driver_number" not in route.calls.last.request.url.params

    @respx.mock
    def test_position(self) -> None:
        respx.get(f"{BASE_URL}/position").mock(
            return_value=httpx.Response(200, json=[SAMPLE_POSITION])
        )
        with OpenF1Client() as f1:
            events = f1.position(session_key=7953)
        assert isinstance(events[0], Position)
        assert events[0].position == 1

    @respx.mock
    def test_empty_response(self) -> None:
        respx.get(f"{BASE_URL}/sessions").mock(
            return_value=httpx.Response(200, json=[])
        )
        with OpenF1Client() as f1:
            assert f1.sessions(year=1900) == []

    @respx.mock
    def test_malformed_required_field(self) -> None:
        respx.get(f"{BASE_URL}/laps").mock(
            return_value=httpx.Response(200, json=[{**SAMPLE_LAP, "driver_number": "abc"}])
        )
        with OpenF1Client() as f1:
            with pytest.raises(OpenF1ValidationError, match="Lap"):
                f1.laps(session_key=7953)

    @respx.mock
    def test_missing_session_key(self) -> None:
        bad = {k: v for k, v in SAMPLE_SESSION.items() if k != "session_key"}
        respx.get(f"{BASE_URL}/sessions").mock(return_value=httpx.Response(200, json=[bad]))
        with OpenF1Client() as f1:
            with pytest.raises(OpenF1ValidationError):
                f1.sessions(year=2023)

    @respx.mock
    def test_api_error_propagates(self) -> None:
        respx.get(f"{BASE_URL}/position").mock(
            return_value=httpx.Response(503, text="Service Unavailable")
        )
        with OpenF1Client() as f1:
            with pytest.raises(OpenF1APIError) as exc_info:
                f1.position(session_key=7953)
        assert exc_info.value.status_code == 503

    @respx.mock
    def test_calls_are_logged(self, tmp_path) -> None:
        import f1laps.api_logging as mod

        mod.configure_log_dir(tmp_path)
        respx.get(f"{BASE_URL}/laps").mock(
            return_value=httpx.Response(200, json=[SAMPLE_LAP, SAMPLE_LAP])
        )
        with OpenF1Client() as f1:
            f1.laps(session_key=7953)
        for handler in mod.get_logger().handlers:
            handler.flush()
        content = (tmp_path / "api_calls.log").read_text(encoding="utf-8")
        assert "CALL: OpenF1Client.laps(session_key=7953)" in content
        assert "-> 2 items" in content
