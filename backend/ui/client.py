"""HTTP client the UI uses to talk to the location API."""
import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from schemas.locations import LocationResponse

LOG = logging.getLogger(__name__)

LOCATIONS_PATH = "/api/location"


class LocationsClientError(Exception):
    """The location API could not be reached or answered with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class LocationsClient:
    """
    Fetches locations from the API and keeps the last fetched list.

    locations is empty until the first refresh() completes.
    """

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http
        self.locations: list[LocationResponse] = []

    async def refresh(self) -> list[LocationResponse]:
        """Call GET /api/location again and replace the cached list."""
        response = await self._request("GET", LOCATIONS_PATH)
        try:
            self.locations = [LocationResponse.model_validate(item) for item in response.json()]
        except (ValueError, TypeError, ValidationError) as e:
            raise LocationsClientError("Unexpected response from location API") from e
        return self.locations

    async def create(self, draft: dict[str, Any]) -> LocationResponse:
        """POST a draft location and return the created location."""
        response = await self._request("POST", LOCATIONS_PATH, json=draft)
        try:
            return LocationResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise LocationsClientError("Unexpected response from location API") from e

    async def delete(self, cuid: str) -> None:
        """DELETE a location by cuid."""
        await self._request("DELETE", f"{LOCATIONS_PATH}/{cuid}")

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise LocationsClientError("Location API timed out") from e
        except httpx.HTTPError as e:
            raise LocationsClientError(f"Location API unreachable: {e}") from e
        if response.is_error:
            LOG.warning("%s %s returned %d", method, url, response.status_code)
            raise LocationsClientError(_error_message(response), status_code=response.status_code)
        return response


def _error_message(response: httpx.Response) -> str:
    """Use the API's error field when it sent one."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return f"Location API returned {response.status_code}"
