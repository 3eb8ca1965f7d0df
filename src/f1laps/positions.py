"""Final classification from the position-change stream."""

from __future__ import annotations

from typing import Iterable

from f1laps.aggregation import DriverSummary
from f1laps.models.position import Position


def final_positions(events: Iterable[Position]) -> dict[int, int]:
    """Map each driver to the last position reported for them.

    Events are taken in stream order, which the API is assumed to deliver
    chronologically, so the last occurrence wins.
    """
    positions: dict[int, int] = {}
    for event in events:
        positions[event.driver_number] = event.position
    return positions


def apply_finishing_positions(
    summaries: Iterable[DriverSummary],
    events: Iterable[Position],
) -> int:
    """Set ``finishing_position`` on every summary found in ``events``.

    Drivers missing from the stream are left unclassified. Returns the number
    of summaries that received a position.
    """
    positions = final_positions(events)
    placed = 0
    for summary in summaries:
        position = positions.get(summary.driver_number)
        if position is not None:
            summary.finishing_position = position
            placed += 1
    return placed
