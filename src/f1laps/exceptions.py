"""Custom exceptions for the f1laps client and analysis layer."""

from __future__ import annotations


class F1LapsError(Exception):
    """Base exception for all f1laps errors."""


class OpenF1Error(F1LapsError):
    """Base exception for OpenF1 transport and decoding errors."""


class OpenF1ConnectionError(OpenF1Error):
    """Raised when the client cannot connect to the API."""


class OpenF1TimeoutError(OpenF1Error):
    """Raised when a request to the API times out."""


class OpenF1APIError(OpenF1Error):
    """Raised when the API answers with anything other than HTTP 200."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class OpenF1ValidationError(OpenF1Error):
    """Raised when API response data fails model validation."""


class SessionNotFoundError(F1LapsError):
    """Raised when a season has no race session for the requested round."""

    def __init__(self, season: int, round_number: int, race_count: int) -> None:
        self.season = season
        self.round_number = round_number
        self.race_count = race_count
        super().__init__(
            f"No race session for round {round_number} of {season} "
            f"({race_count} race sessions found)"
        )


class MissingSectorDataError(F1LapsError):
    """Raised when one or more drivers have no lap with complete sector times."""

    def __init__(self, driver_numbers: list[int]) -> None:
        self.driver_numbers = driver_numbers
        listed = ", ".join(f"#{n}" for n in driver_numbers)
        super().__init__(f"No valid sector data for driver(s) {listed}")
