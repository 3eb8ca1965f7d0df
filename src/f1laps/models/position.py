"""Driver position model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Position(BaseModel):
    """Driver position change during a session."""

    model_config = ConfigDict(frozen=True)

    driver_number: int
    position: int
