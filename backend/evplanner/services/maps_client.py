"""
EVPlanner - Maps API Client
HTTP client the map editor uses to list, load, save and delete maps
"""
import httpx
import logging
from typing import Any, Dict, List, Optional

from evplanner.config import get_settings
from evplanner.schemas.map import MapResponse, MapSummary

settings = get_settings()
logger = logging.getLogger(__name__)


class MapsApiError(Exception):
    """A maps API call failed (network error or non-2xx response)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MapsClient:
    """
    Thin async wrapper over /api/maps.

    Every call opens its own httpx.AsyncClient; there is no retry.
    """

    def __init__(
        self,
        base_url: str = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url or settings.api_base_url
        self.timeout = timeout
        self.transport = transport

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport
            ) as client:
                response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Maps API {method} {path} failed: {e}")
            raise MapsApiError(f"Maps API unreachable: {e}") from e

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = body.get("error", response.text) if isinstance(body, dict) else response.text
            logger.error(f"Maps API {method} {path} returned {response.status_code}: {message}")
            raise MapsApiError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise MapsApiError(f"Maps API {method} {path} returned invalid JSON", status_code=response.status_code) from e

    async def list_maps(self) -> List[MapSummary]:
        data = await self._request("GET", "maps")
        return [MapSummary.model_validate(item) for item in data]

    async def get_map(self, map_id: int) -> MapResponse:
        data = await self._request("GET", f"maps/{map_id}")
        return MapResponse.model_validate(data)

    async def create_map(self, payload: Dict[str, Any]) -> MapResponse:
        data = await self._request("POST", "maps", json=payload)
        return MapResponse.model_validate(data["map"])

    async def update_map(self, map_id: int, payload: Dict[str, Any]) -> MapResponse:
        data = await self._request("PUT", f"maps/{map_id}", json=payload)
        return MapResponse.model_validate(data["map"])

    async def delete_map(self, map_id: int) -> None:
        await self._request("DELETE", f"maps/{map_id}")
