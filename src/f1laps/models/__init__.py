"""OpenF1 wire models."""

from f1laps.models.lap import Lap
from f1laps.models.position import Position
from f1laps.models.session import RACE_SESSION_NAME, Session

__all__ = [
    "Lap",
    "Position",
    "RACE_SESSION_NAME",
    "Session",
]
