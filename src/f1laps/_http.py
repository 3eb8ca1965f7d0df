"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from f1laps.exceptions import (
    OpenF1APIError,
    OpenF1ConnectionError,
    OpenF1TimeoutError,
    OpenF1ValidationError,
)

DEFAULT_BASE_URL = "https://api.openf1.org/v1"
DEFAULT_TIMEOUT = 30.0


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build query parameter tuples from keyword arguments, skipping None values."""
    return [(key, str(value)) for key, value in kwargs.items() if value is not None]


def _handle_response(response: httpx.Response) -> list[dict[str, Any]]:
    """Validate response status and return parsed JSON."""
    if response.status_code != 200:
        raise OpenF1APIError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        data = response.json()
    except ValueError as exc:
        raise OpenF1ValidationError(f"Response is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise OpenF1ValidationError(
            f"Expected a JSON array, got {type(data).__name__}"
        )
    return data


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(self, endpoint: str, params: list[tuple[str, str]]) -> list[dict[str, Any]]:
        """Perform a GET request and return parsed JSON."""
        try:
            response = self._client.get(endpoint, params=params)
        except httpx.ConnectError as exc:
            raise OpenF1ConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise OpenF1TimeoutError(str(exc)) from exc
        except httpx.RequestError as exc:
            raise OpenF1ConnectionError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()
