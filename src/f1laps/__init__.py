"""f1laps — per-driver lap time analysis over the OpenF1 API."""

from f1laps.aggregation import DriverSummary, LapAggregator, aggregate_laps, sort_by_finishing_position
from f1laps.client import OpenF1Client
from f1laps.drivers import DriverDirectory
from f1laps.exceptions import (
    F1LapsError,
    MissingSectorDataError,
    OpenF1APIError,
    OpenF1ConnectionError,
    OpenF1Error,
    OpenF1TimeoutError,
    OpenF1ValidationError,
    SessionNotFoundError,
)
from f1laps.sectors import SectorComparison, SectorSplit
from f1laps.service import LapTimeService
from f1laps.sessions import RaceListing, SessionIdentity

__all__ = [
    "DriverDirectory",
    "DriverSummary",
    "F1LapsError",
    "LapAggregator",
    "LapTimeService",
    "MissingSectorDataError",
    "OpenF1APIError",
    "OpenF1Client",
    "OpenF1ConnectionError",
    "OpenF1Error",
    "OpenF1TimeoutError",
    "OpenF1ValidationError",
    "RaceListing",
    "SectorComparison",
    "SectorSplit",
    "SessionIdentity",
    "SessionNotFoundError",
    "aggregate_laps",
    "sort_by_finishing_position",
]

__version__ = "0.1.0"
