"""Fastest-lap sector splits and two-driver sector comparison."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from f1laps.exceptions import MissingSectorDataError
from f1laps.models.lap import Lap


@dataclass(frozen=True)
class SectorSplit:
    """Sector durations of a driver's fastest complete lap."""

    sector_1: float
    sector_2: float
    sector_3: float

    @property
    def sectors(self) -> tuple[float, float, float]:
        return (self.sector_1, self.sector_2, self.sector_3)

    @property
    def total(self) -> float:
        return self.sector_1 + self.sector_2 + self.sector_3


@dataclass(frozen=True)
class SectorComparison:
    first_driver: int
    second_driver: int
    first: SectorSplit
    second: SectorSplit

    @property
    def deltas(self) -> tuple[float, float, float]:
        """Per-sector ``first - second``; positive means the first driver was slower."""
        return tuple(  # type: ignore[return-value]
            a - b for a, b in zip(self.first.sectors, self.second.sectors)
        )


def _is_comparable(lap: Lap) -> bool:
    return lap.is_timed and lap.has_sectors


def fastest_sector_split(laps: Iterable[Lap]) -> SectorSplit | None:
    """Return the sector split of the quickest complete lap, if there is one."""
    fastest: Lap | None = None
    for lap in laps:
        if not _is_comparable(lap):
            continue
        if fastest is None or lap.lap_duration < fastest.lap_duration:  # type: ignore[operator]
            fastest = lap
    if fastest is None:
        return None
    return SectorSplit(
        sector_1=fastest.duration_sector_1,  # type: ignore[arg-type]
        sector_2=fastest.duration_sector_2,  # type: ignore[arg-type]
        sector_3=fastest.duration_sector_3,  # type: ignore[arg-type]
    )


def compare_sectors(
    splits: Mapping[int, SectorSplit],
    first_driver: int,
    second_driver: int,
) -> SectorComparison:
    """Pair two drivers' splits.

    Raises:
        MissingSectorDataError: naming each driver without a split.
    """
    missing = [n for n in (first_driver, second_driver) if n not in splits]
    if missing:
        raise MissingSectorDataError(missing)
    return SectorComparison(
        first_driver=first_driver,
        second_driver=second_driver,
        first=splits[first_driver],
        second=splits[second_driver],
    )
