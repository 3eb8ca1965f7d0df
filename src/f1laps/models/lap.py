"""Lap timing model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class Lap(BaseModel):
    """Individual lap data with sector times."""

    model_config = ConfigDict(frozen=True)

    driver_number: int
    lap_number: int
    lap_duration: float | None = None
    is_pit_out_lap: bool = False
    duration_sector_1: float | None = None
    duration_sector_2: float | None = None
    duration_sector_3: float | None = None

    @field_validator("is_pit_out_lap", mode="before")
    @classmethod
    def _null_means_not_pit_out(cls, value: object) -> object:
        return False if value is None else value

    @property
    def is_timed(self) -> bool:
        """True when the lap counts towards lap-time statistics."""
        return self.lap_duration is not None and not self.is_pit_out_lap

    @property
    def has_sectors(self) -> bool:
        """True when all three sector durations are present."""
        return None not in (
            self.duration_sector_1,
            self.duration_sector_2,
            self.duration_sector_3,
        )
