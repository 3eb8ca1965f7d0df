"""Session model (practice, qualifying, sprint, race)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

RACE_SESSION_NAME = "Race"


class Session(BaseModel):
    """F1 session as listed by the ``/sessions`` endpoint."""

    model_config = ConfigDict(frozen=True)

    session_key: int
    session_name: str
    circuit_short_name: str | None = None
    country_name: str | None = None
    date_start: str | None = None

    @property
    def is_race(self) -> bool:
        return self.session_name == RACE_SESSION_NAME
