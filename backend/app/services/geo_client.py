"""
IP geolocation client (ipapi.co).

ipapi.co answers some failures (reserved ranges, quota exhaustion) with a
200 and `{"error": true, "reason": ...}`; those count as failures here too.
"""
import httpx
import logging
from typing import Optional

from pydantic import ValidationError

from app.core.errors import VisitorInfoUnavailable
from app.core.visitor_schema import IpApiPayload, VisitorInfo

logger = logging.getLogger(__name__)


class GeoClient:
    """Resolve an IP address to city, country, network owner and coordinates."""

    def __init__(
        self,
        base_url: str = "https://ipapi.co",
        timeout: float = 5.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = http_client

    async def _fetch(self, url: str) -> httpx.Response:
        if self._http is not None:
            return await self._http.get(url, timeout=self.timeout)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(url)

    async def resolve(self, ip_address: str) -> VisitorInfo:
        if not ip_address:
            # an empty path segment makes ipapi.co describe the server itself
            logger.warning("No client address to geolocate")
            raise VisitorInfoUnavailable("no client address")

        url = f"{self.base_url}/{ip_address}/json/"

        try:
            response = await self._fetch(url)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Geolocation for {ip_address} returned {e.response.status_code}")
            raise VisitorInfoUnavailable(f"geolocation answered {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Geolocation for {ip_address} failed: {e!r}")
            raise VisitorInfoUnavailable("geolocation service unreachable") from e
        except ValueError as e:
            logger.warning(f"Geolocation response for {ip_address} is not JSON: {e}")
            raise VisitorInfoUnavailable("malformed geolocation payload") from e

        try:
            payload = IpApiPayload.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Geolocation payload for {ip_address} is incomplete: {e.error_count()} error(s)")
            raise VisitorInfoUnavailable("malformed geolocation payload") from e

        if payload.error:
            logger.warning(f"Geolocation refused {ip_address}: {payload.reason or 'unknown reason'}")
            raise VisitorInfoUnavailable(payload.reason or "lookup refused")

        if not payload.has_coordinates():
            logger.warning(f"Geolocation payload for {ip_address} has no coordinates")
            raise VisitorInfoUnavailable("malformed geolocation payload")

        return payload.to_visitor()
