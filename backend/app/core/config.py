import os
import logging
from dotenv import load_dotenv

# Reload .env file to pick up changes
load_dotenv(override=True)  # override=True ensures new values replace old ones

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: str) -> bool:
	return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
	APP_NAME: str = os.getenv("APP_NAME", "Visitor Weather Box")
	LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

	# Port is fixed; the box is served the same way everywhere
	HOST: str = "0.0.0.0"
	PORT: int = 8080

	# Weather API configuration
	WEATHER_API_KEY: str | None = os.getenv("OPENWEATHERMAP_API_KEY")
	WEATHER_API_BASE_URL: str = os.getenv("WEATHER_API_BASE_URL", "https://api.openweathermap.org")

	# Geolocation (ipapi.co compatible)
	GEO_API_BASE_URL: str = os.getenv("GEO_API_BASE_URL", "https://ipapi.co")

	# Upper bound for each outbound call
	HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "5"))

	# Box rendering
	BOX_WIDTH: int = int(os.getenv("BOX_WIDTH", "60"))
	SHOW_LOCAL_TIME: bool = _env_bool("SHOW_LOCAL_TIME", "true")

	def __init__(self):
		"""Validate configuration on initialization"""
		self._validate_config()

	def _validate_config(self):
		"""Log warnings for settings that will make requests fail"""
		if not self.WEATHER_API_KEY:
			logger.warning(
				"OPENWEATHERMAP_API_KEY is not set. Weather lookups will be rejected upstream "
				"and every request will answer with 'Unable to fetch weather data'."
			)
		if self.BOX_WIDTH < 5:
			logger.error(f"BOX_WIDTH={self.BOX_WIDTH} is too narrow; rendering will fail")
		if self.HTTP_TIMEOUT_SECONDS <= 0:
			logger.warning(
				f"HTTP_TIMEOUT_SECONDS={self.HTTP_TIMEOUT_SECONDS} is not positive; falling back to 5 seconds"
			)
			self.HTTP_TIMEOUT_SECONDS = 5.0


settings = Settings()
