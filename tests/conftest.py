"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import pytest

from f1laps.models.lap import Lap
from f1laps.models.position import Position
from f1laps.models.session import Session

BASE_URL = "https://api.openf1.org/v1"


SAMPLE_SESSION = {
    "circuit_key": 61,
    "circuit_short_name": "Sakhir",
    "country_code": "BRN",
    "country_name": "Bahrain",
    "date_end": "2023-03-05T17:00:00+00:00",
    "date_start": "2023-03-05T15:00:00+00:00",
    "gmt_offset": "03:00:00",
    "location": "Sakhir",
    "meeting_key": 1141,
    "session_key": 7953,
    "session_name": "Race",
    "session_type": "Race",
    "year": 2023,
}

SAMPLE_LAP = {
    "date_start": "2023-03-05T15:10:00",
    "driver_number": 1,
    "duration_sector_1": 30.0,
    "duration_sector_2": 35.0,
    "duration_sector_3": 28.0,
    "i1_speed": 305,
    "i2_speed": 280,
    "is_pit_out_lap": False,
    "lap_duration": 93.0,
    "lap_number": 5,
    "meeting_key": 1141,
    "segments_sector_1": [2048, 2049, 2051],
    "segments_sector_2": [2048, 2049],
    "segments_sector_3": [2048, 2049, 2050],
    "session_key": 7953,
    "st_speed": 310,
}

SAMPLE_POSITION = {
    "date": "2023-03-05T16:35:12.123000+00:00",
    "driver_number": 1,
    "meeting_key": 1141,
    "position": 1,
    "session_key": 7953,
}

# Season with a sprint race mixed in: only "Race" sessions count as rounds.
SEASON_SESSIONS = [
    {**SAMPLE_SESSION, "session_key": 7953, "circuit_short_name": "Sakhir",
     "country_name": "Bahrain", "date_start": "2023-03-05T15:00:00+00:00"},
    {**SAMPLE_SESSION, "session_key": 7779, "circuit_short_name": "Jeddah",
     "country_name": "Saudi Arabia", "date_start": "2023-03-19T17:00:00+00:00"},
    {**SAMPLE_SESSION, "session_key": 9070, "session_name": "Sprint",
     "circuit_short_name": "Baku", "country_name": "Azerbaijan",
     "date_start": "2023-04-29T13:30:00+00:00"},
    {**SAMPLE_SESSION, "session_key": 9072, "circuit_short_name": "Baku",
     "country_name": "Azerbaijan", "date_start": "2023-04-30T11:00:00+00:00"},
]


def make_lap_dict(
    lap_number: int,
    lap_duration: float | None = 93.0,
    is_pit_out_lap: bool | None = False,
    s1: float | None = 30.0,
    s2: float | None = 35.0,
    s3: float | None = 28.0,
    driver_number: int = 1,
) -> dict:
    return {
        "driver_number": driver_number,
        "lap_number": lap_number,
        "lap_duration": lap_duration,
        "is_pit_out_lap": is_pit_out_lap,
        "duration_sector_1": s1,
        "duration_sector_2": s2,
        "duration_sector_3": s3,
        "session_key": 7953,
    }


def make_lap(lap_number: int, **kwargs) -> Lap:
    return Lap.model_validate(make_lap_dict(lap_number, **kwargs))


def make_position(driver_number: int, position: int) -> Position:
    return Position(driver_number=driver_number, position=position)


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def season_sessions() -> list[Session]:
    return [Session.model_validate(s) for s in SEASON_SESSIONS]


@pytest.fixture
def race_laps() -> list[Lap]:
    """Two drivers; driver 1 has a pit-out lap and an untimed lap."""
    return [
        make_lap(1, lap_duration=98.2, is_pit_out_lap=True, driver_number=1),
        make_lap(2, lap_duration=95.0, driver_number=1),
        make_lap(3, lap_duration=None, driver_number=1),
        make_lap(4, lap_duration=94.1, driver_number=1),
        make_lap(1, lap_duration=96.5, driver_number=44),
        make_lap(2, lap_duration=94.9, driver_number=44),
        make_lap(3, lap_duration=95.3, driver_number=44),
    ]


@pytest.fixture(autouse=True)
def _isolated_api_log(tmp_path):
    """Keep the API log file out of the working tree."""
    import f1laps.api_logging as mod

    mod.configure_log_dir(tmp_path / "logs")
    yield
    mod.configure_log_dir(tmp_path / "logs")
