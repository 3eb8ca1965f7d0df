"""Round-to-session resolution and the season race list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from f1laps.exceptions import SessionNotFoundError
from f1laps.models.session import Session

UNKNOWN_CIRCUIT = "Unknown Circuit"
UNKNOWN_COUNTRY = "Unknown Country"
UNKNOWN_DATE = "Unknown Date"


@dataclass(frozen=True)
class SessionIdentity:
    season: int
    round: int
    session_key: int


@dataclass(frozen=True)
class RaceListing:
    round: int
    circuit_name: str
    country_name: str
    date: str
    session_key: int


def race_sessions(sessions: Iterable[Session]) -> list[Session]:
    """Keep race sessions only, in source (chronological) order."""
    return [s for s in sessions if s.is_race]


def resolve_session(sessions: Iterable[Session], season: int, round_number: int) -> SessionIdentity:
    """Return the identity of the ``round_number``-th race session.

    Rounds are counted by position in the source list since sessions carry no
    round field of their own.

    Raises:
        SessionNotFoundError: if ``round_number`` is below 1 or exceeds the
            number of race sessions.
    """
    races = race_sessions(sessions)
    if not 1 <= round_number <= len(races):
        raise SessionNotFoundError(season, round_number, len(races))
    return SessionIdentity(
        season=season,
        round=round_number,
        session_key=races[round_number - 1].session_key,
    )


def _calendar_date(date_start: str | None) -> str:
    if not date_start:
        return UNKNOWN_DATE
    return date_start[:10]


def build_race_listings(sessions: Iterable[Session]) -> list[RaceListing]:
    """Number the race sessions from 1 and fill display defaults."""
    return [
        RaceListing(
            round=index,
            circuit_name=session.circuit_short_name or UNKNOWN_CIRCUIT,
            country_name=session.country_name or UNKNOWN_COUNTRY,
            date=_calendar_date(session.date_start),
            session_key=session.session_key,
        )
        for index, session in enumerate(race_sessions(sessions), start=1)
    ]
