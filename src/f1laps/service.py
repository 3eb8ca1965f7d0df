"""Lap-time analysis service: the fetch, aggregate, classify and compare flow."""

from __future__ import annotations

from typing import Iterable

from f1laps.aggregation import DriverSummary, LapAggregator, sort_by_finishing_position
from f1laps.api_logging import get_logger, log_service_call
from f1laps.client import OpenF1Client
from f1laps.drivers import DriverDirectory
from f1laps.positions import apply_finishing_positions
from f1laps.sectors import SectorComparison, SectorSplit, compare_sectors, fastest_sector_split
from f1laps.sessions import RaceListing, SessionIdentity, build_race_listings, resolve_session


class LapTimeService:
    """Encapsulates the business logic behind each console menu action."""

    def __init__(self, client: OpenF1Client, directory: DriverDirectory | None = None) -> None:
        self._client = client
        self._directory = directory or DriverDirectory()

    @property
    def directory(self) -> DriverDirectory:
        return self._directory

    @log_service_call
    def list_races(self, season: int) -> list[RaceListing]:
        """List the season's races numbered by round."""
        return build_race_listings(self._client.sessions(year=season))

    @log_service_call
    def resolve_session(self, season: int, round_number: int) -> SessionIdentity:
        """Map a season round onto its race session key."""
        return resolve_session(self._client.sessions(year=season), season, round_number)

    @log_service_call
    def load_driver_summaries(self, identity: SessionIdentity) -> list[DriverSummary]:
        """Aggregate the session's laps per driver, ordered by finishing position."""
        aggregator = LapAggregator(self._directory)
        accepted = aggregator.extend(self._client.laps(session_key=identity.session_key))
        summaries = aggregator.summaries()
        get_logger().debug(
            "session %d: %d laps accepted, %d skipped, %d drivers",
            identity.session_key, accepted, aggregator.skipped, len(summaries),
        )

        # One request for the whole field rather than one per driver.
        events = self._client.position(session_key=identity.session_key)
        placed = apply_finishing_positions(summaries, events)
        get_logger().debug(
            "session %d: %d of %d drivers classified",
            identity.session_key, placed, len(summaries),
        )
        return sort_by_finishing_position(summaries)

    @log_service_call
    def fetch_sector_splits(
        self,
        identity: SessionIdentity,
        driver_numbers: Iterable[int],
    ) -> dict[int, SectorSplit]:
        """Fastest-lap sector splits per driver; drivers without one are omitted."""
        splits: dict[int, SectorSplit] = {}
        for driver_number in driver_numbers:
            laps = self._client.laps(
                session_key=identity.session_key,
                driver_number=driver_number,
            )
            split = fastest_sector_split(laps)
            if split is None:
                get_logger().debug(
                    "session %d: no complete lap for driver %d",
                    identity.session_key, driver_number,
                )
                continue
            splits[driver_number] = split
        return splits

    @log_service_call
    def compare_drivers(
        self,
        identity: SessionIdentity,
        first_driver: int,
        second_driver: int,
    ) -> SectorComparison:
        """Compare two drivers' fastest-lap sectors."""
        splits = self.fetch_sector_splits(identity, [first_driver, second_driver])
        return compare_sectors(splits, first_driver, second_driver)
