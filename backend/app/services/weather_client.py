import httpx
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from app.core.errors import WeatherDataUnavailable
from app.core.visitor_schema import OpenWeatherPayload, WeatherInfo

logger = logging.getLogger(__name__)


class WeatherClient:
	"""Fetch current weather from the OpenWeather API."""

	PATH = "/data/2.5/weather"

	def __init__(
		self,
		api_key: Optional[str],
		base_url: str = "https://api.openweathermap.org",
		timeout: float = 5.0,
		http_client: Optional[httpx.AsyncClient] = None,
	) -> None:
		self.api_key = api_key
		self.base_url = base_url.rstrip("/")
		self.timeout = timeout
		self._http = http_client

	async def _fetch(self, params: Dict[str, Any]) -> httpx.Response:
		url = self.base_url + self.PATH
		if self._http is not None:
			return await self._http.get(url, params=params, timeout=self.timeout)
		async with httpx.AsyncClient(timeout=self.timeout) as client:
			return await client.get(url, params=params)

	async def current_weather(self, lat: float, lon: float) -> WeatherInfo:
		"""Get current weather for a given lat/lon in metric units."""

		params = {
			"lat": f"{lat:.6f}",
			"lon": f"{lon:.6f}",
			"units": "metric",
			"appid": self.api_key or "",
		}

		try:
			response = await self._fetch(params)
			response.raise_for_status()
		except httpx.HTTPStatusError as e:
			logger.warning(f"Weather lookup for ({lat:.4f}, {lon:.4f}) returned {e.response.status_code}")
			raise WeatherDataUnavailable(f"weather service answered {e.response.status_code}") from e
		except httpx.HTTPError as e:
			logger.warning(f"Weather lookup for ({lat:.4f}, {lon:.4f}) failed: {e!r}")
			raise WeatherDataUnavailable("weather service unreachable") from e

		try:
			payload = OpenWeatherPayload.model_validate(response.json())
		except (ValueError, ValidationError) as e:
			logger.warning(f"Weather response could not be parsed: {e}")
			raise WeatherDataUnavailable("malformed weather payload") from e

		description = payload.first_description()
		if description is None:
			logger.warning(f"Weather response for ({lat:.4f}, {lon:.4f}) has no description")
			raise WeatherDataUnavailable("no weather description available")

		return WeatherInfo(
			temperature=payload.main.temp,
			pressure=payload.main.pressure,
			humidity=payload.main.humidity,
			visibility=payload.resolved_visibility(),
			wind_speed=payload.wind.speed,
			description=description,
			timezone_offset=payload.timezone,
		)
