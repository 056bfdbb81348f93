"""Failures the visitor box can report to a caller."""


class UpstreamError(Exception):
	"""A third-party lookup could not produce usable data."""

	public_message = "Upstream service unavailable"


class VisitorInfoUnavailable(UpstreamError):
	public_message = "Unable to fetch visitor information"


class WeatherDataUnavailable(UpstreamError):
	public_message = "Unable to fetch weather data"
