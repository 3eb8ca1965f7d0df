"""Per-driver lap aggregation: fastest lap, average and finishing order."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from f1laps.drivers import DriverDirectory
from f1laps.models.lap import Lap


@dataclass
class DriverSummary:
    """Accepted laps and derived statistics for one driver in one session.

    ``finishing_position`` stays ``None`` for drivers that never appear in the
    position stream (DNF, DNS or DSQ); those sort after every classified driver.
    """

    driver_number: int
    driver_name: str
    lap_times: list[tuple[int, float]] = field(default_factory=list)
    fastest_duration: float = math.inf
    fastest_lap_number: int | None = None
    finishing_position: int | None = None

    def record_lap(self, lap_number: int, duration: float) -> None:
        self.lap_times.append((lap_number, duration))
        if duration < self.fastest_duration:
            self.fastest_duration = duration
            self.fastest_lap_number = lap_number

    @property
    def total_laps(self) -> int:
        return len(self.lap_times)

    @property
    def average_lap_time(self) -> float:
        if not self.lap_times:
            return 0.0
        return sum(duration for _, duration in self.lap_times) / len(self.lap_times)

    @property
    def is_classified(self) -> bool:
        return self.finishing_position is not None


class LapAggregator:
    """Groups a flat lap stream into one DriverSummary per car number."""

    def __init__(self, directory: DriverDirectory | None = None) -> None:
        self._directory = directory or DriverDirectory()
        self._summaries: dict[int, DriverSummary] = {}
        self.skipped = 0

    def add(self, lap: Lap) -> bool:
        """Record ``lap`` if it is timed; pit-out and untimed laps are skipped."""
        if not lap.is_timed:
            self.skipped += 1
            return False
        summary = self._summaries.get(lap.driver_number)
        if summary is None:
            summary = DriverSummary(
                driver_number=lap.driver_number,
                driver_name=self._directory.name_for(lap.driver_number),
            )
            self._summaries[lap.driver_number] = summary
        summary.record_lap(lap.lap_number, lap.lap_duration)  # type: ignore[arg-type]
        return True

    def extend(self, laps: Iterable[Lap]) -> int:
        return sum(1 for lap in laps if self.add(lap))

    def summaries(self) -> list[DriverSummary]:
        return list(self._summaries.values())


def aggregate_laps(
    laps: Iterable[Lap],
    directory: DriverDirectory | None = None,
) -> list[DriverSummary]:
    """Build driver summaries from ``laps`` in one pass."""
    aggregator = LapAggregator(directory)
    aggregator.extend(laps)
    return aggregator.summaries()


def _finishing_order_key(summary: DriverSummary) -> tuple[bool, int]:
    return (summary.finishing_position is None, summary.finishing_position or 0)


def sort_by_finishing_position(summaries: Iterable[DriverSummary]) -> list[DriverSummary]:
    """Return summaries by ascending finishing position, unclassified last."""
    return sorted(summaries, key=_finishing_order_key)


def fastest_drivers(summaries: Iterable[DriverSummary], count: int = 3) -> list[DriverSummary]:
    """Return the ``count`` drivers with the quickest single lap."""
    timed = [s for s in summaries if s.total_laps]
    return sorted(timed, key=lambda s: s.fastest_duration)[:count]


def find_driver(summaries: Iterable[DriverSummary], driver_number: int) -> DriverSummary | None:
    return next((s for s in summaries if s.driver_number == driver_number), None)
