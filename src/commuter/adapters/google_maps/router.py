"""Google Maps router adapter.

Computes travel durations with the Distance Matrix API and finds the
current position with the Geolocation API.
"""

import asyncio
import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Any

import aiohttp

from commuter.adapters.api_request_logger import log_api_request
from commuter.adapters.google_maps.constants import (
    DISTANCE_MATRIX_URL,
    GEOLOCATION_URL,
    MODE_PARAMS,
    STATUS_OK,
    TIME_DEPENDENT_MODES,
)
from commuter.domain.errors import ProviderConstructionError, ProviderError, RouteNotFoundError
from commuter.domain.models import TravelMode
from commuter.domain.ports.router import Router

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class GoogleMapsRouter(Router):
    """Adapter for the Google Maps Distance Matrix and Geolocation APIs."""

    def __init__(
        self, api_key: str, session: "ClientSession", timeout_seconds: float = 10
    ) -> None:
        """Initialize with an API key and an aiohttp session.

        Raises:
            ProviderConstructionError: If the API key is empty.
        """
        if not api_key or not api_key.strip():
            raise ProviderConstructionError(
                "a Google Maps API key is required, run commuter without arguments to set one"
            )
        self._api_key = api_key.strip()
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    @staticmethod
    async def _read_json(response: "ClientResponse") -> dict[str, Any]:
        """Decode a JSON object response, raising ProviderError on failure."""
        if response.status != 200:
            response_text = await response.text()
            raise ProviderError(
                f"Google Maps returned status {response.status}: {response_text[:200]}"
            )
        data = await response.json()
        if not isinstance(data, dict):
            raise ProviderError("unexpected response from Google Maps")
        return data

    async def _get_json(self, url: str, params: dict[str, str]) -> dict[str, Any]:
        log_api_request("GET", url, params=params)
        try:
            async with self._session.get(url, params=params, timeout=self._timeout) as response:
                return await self._read_json(response)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ProviderError(f"request to Google Maps failed: {e!r}") from e

    async def _post_json(
        self, url: str, params: dict[str, str], payload: dict[str, Any]
    ) -> dict[str, Any]:
        log_api_request("POST", url, params=params, payload=payload)
        try:
            async with self._session.post(
                url, params=params, json=payload, timeout=self._timeout
            ) as response:
                return await self._read_json(response)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ProviderError(f"request to Google Maps failed: {e!r}") from e

    async def duration(self, origin: str, destination: str, mode: TravelMode) -> timedelta:
        """Get the travel duration between two locations.

        Driving uses the duration in current traffic when Google provides one.

        Raises:
            RouteNotFoundError: If Google has no route for the locations and mode.
            ProviderError: If the request fails or the response is malformed.
        """
        params = {
            "origins": origin,
            "destinations": destination,
            "mode": MODE_PARAMS[mode],
            "key": self._api_key,
        }
        if mode in TIME_DEPENDENT_MODES:
            params["departure_time"] = "now"

        logger.debug(f"Requesting {mode.value} duration from '{origin}' to '{destination}'")
        data = await self._get_json(DISTANCE_MATRIX_URL, params)

        status = data.get("status")
        if status != STATUS_OK:
            message = data.get("error_message", "")
            raise ProviderError(f"Distance Matrix request failed: {status} {message}".strip())

        try:
            element = data["rows"][0]["elements"][0]
        except (KeyError, IndexError, TypeError):
            raise ProviderError("Distance Matrix response has no result") from None

        element_status = element.get("status")
        if element_status != STATUS_OK:
            raise RouteNotFoundError(origin, destination, str(element_status))

        duration = element.get("duration_in_traffic") or element.get("duration") or {}
        seconds = duration.get("value")
        if seconds is None:
            raise ProviderError("Distance Matrix response has no duration")
        return timedelta(seconds=seconds)

    async def current_location(self) -> tuple[float, float]:
        """Get the current (latitude, longitude) estimated from the client's IP address."""
        data = await self._post_json(
            GEOLOCATION_URL, params={"key": self._api_key}, payload={"considerIp": True}
        )
        try:
            location = data["location"]
            return float(location["lat"]), float(location["lng"])
        except (KeyError, TypeError, ValueError):
            raise ProviderError("Geolocation response has no location") from None
