"""
EVPlanner - Geocoding Service
Address / ZIP code lookup through OpenStreetMap Nominatim
"""
import httpx
import logging
from typing import Optional, Tuple

from evplanner.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)


class GeocodingError(Exception):
    """The geocoding service could not be queried."""


class GeocodingClient:
    """Best-effort lookup of a place name or ZIP code to [lat, lng]."""

    def __init__(
        self,
        url: str = None,
        country_codes: str = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.url = url or settings.geocoding_url
        self.country_codes = country_codes if country_codes is not None else settings.geocoding_country_codes
        self.timeout = timeout
        self.transport = transport

    async def lookup(self, query: str) -> Optional[Tuple[float, float]]:
        """
        Return the best match for `query`, or None when nothing matches.

        Raises GeocodingError when the service is unreachable or answers
        with an error.
        """
        params = {"format": "json", "q": query, "limit": 1}
        if self.country_codes:
            params["countrycodes"] = self.country_codes

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(
                    self.url,
                    params=params,
                    headers={"User-Agent": f"{settings.app_name}/0.1.0"}
                )
                response.raise_for_status()
                results = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Geocoding lookup for '{query}' failed: {e}")
            raise GeocodingError(str(e)) from e

        if results == []:
            logger.info(f"No geocoding match for '{query}'")
            return None

        # Nominatim answers errors (rate limits, bad queries) with an object, not a list
        try:
            return float(results[0]["lat"]), float(results[0]["lon"])
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error(f"Unexpected geocoding reply for '{query}': {results!r}")
            raise GeocodingError(f"Unexpected geocoding reply: {e!r}") from e
