"""Public client class for the OpenF1 API."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter

from f1laps._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, SyncTransport, build_query_params
from f1laps.api_logging import log_api_call
from f1laps.exceptions import OpenF1ValidationError
from f1laps.models.lap import Lap
from f1laps.models.position import Position
from f1laps.models.session import RACE_SESSION_NAME, Session

T = TypeVar("T")


def _validate_list(model_type: type[T], data: list[dict[str, Any]]) -> list[T]:
    """Validate a list of dicts against a Pydantic model."""
    try:
        adapter = TypeAdapter(list[model_type])
        return adapter.validate_python(data)
    except Exception as exc:
        raise OpenF1ValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


class OpenF1Client:
    """Synchronous client for the OpenF1 endpoints used by the lap analyzer.

    Usage:
        with OpenF1Client() as f1:
            races = f1.sessions(year=2023)
            laps = f1.laps(session_key=9161, driver_number=1)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> OpenF1Client:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def _get(self, endpoint: str, model: type[T], **kwargs: Any) -> list[T]:
        params = build_query_params(**kwargs)
        data = self._transport.get(endpoint, params)
        return _validate_list(model, data)

    # ── Endpoints ──────────────────────────────────────────────

    @log_api_call
    def sessions(
        self,
        year: int | None = None,
        session_name: str | None = RACE_SESSION_NAME,
        **kwargs: Any,
    ) -> list[Session]:
        """Get the sessions of a season, race sessions only by default."""
        return self._get("/sessions", Session, year=year, session_name=session_name, **kwargs)

    @log_api_call
    def laps(
        self,
        session_key: int,
        driver_number: int | None = None,
        **kwargs: Any,
    ) -> list[Lap]:
        """Get lap data with sector times, optionally for a single driver."""
        return self._get(
            "/laps", Lap, session_key=session_key, driver_number=driver_number, **kwargs
        )

    @log_api_call
    def position(self, session_key: int, **kwargs: Any) -> list[Position]:
        """Get every driver position change throughout a session."""
        return self._get("/position", Position, session_key=session_key, **kwargs)
