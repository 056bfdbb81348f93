"""
Visitor weather box route.

GET / resolves the caller's IP to a location, fetches the weather there and
answers with a plain-text box.
"""
from datetime import datetime, timedelta, timezone
from typing import List
import logging

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from app.core.box_renderer import render
from app.core.config import settings
from app.core.errors import UpstreamError
from app.core.visitor_schema import VisitorInfo, WeatherInfo
from app.services.geo_client import GeoClient
from app.services.weather_client import WeatherClient

router = APIRouter(tags=["visitor"])
logger = logging.getLogger(__name__)


def _shared_http(request: Request) -> httpx.AsyncClient | None:
    return getattr(request.app.state, "http_client", None)


def get_geo_client(request: Request) -> GeoClient:
    return GeoClient(
        base_url=settings.GEO_API_BASE_URL,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
        http_client=_shared_http(request),
    )


def get_weather_client(request: Request) -> WeatherClient:
    return WeatherClient(
        api_key=settings.WEATHER_API_KEY,
        base_url=settings.WEATHER_API_BASE_URL,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
        http_client=_shared_http(request),
    )


def get_now() -> datetime:
    return datetime.now(timezone.utc)


def client_ip(request: Request) -> str:
    """Prefer the first X-Forwarded-For hop over the socket peer"""
    forwarded = request.headers.get("x-forwarded-for", "")
    first_hop = forwarded.split(",")[0].strip()
    if first_hop:
        return first_hop
    return request.client.host if request.client else ""


def format_local_time(now_utc: datetime, offset_seconds: int) -> str:
    """Render `now_utc` shifted by a UTC offset, e.g. '3:04 PM UTC+08:00'"""
    local = now_utc.astimezone(timezone(timedelta(seconds=offset_seconds)))
    hour = local.hour % 12 or 12
    return f"{hour}:{local:%M %p} {local.tzname()}"


def build_box_lines(
    visitor: VisitorInfo,
    weather: WeatherInfo,
    show_local_time: bool = True,
    now_utc: datetime | None = None,
) -> List[str]:
    location = f"{visitor.city.strip()}, {visitor.country.strip()}".strip()
    lines = [
        f"IP Address: {visitor.ip}",
        f"ASN: {visitor.asn.strip()}",
        f"ISP: {visitor.isp.strip()}",
        f"Location: {location}",
        "",
        f"Temperature: {weather.temperature:.2f} °C",
        f"Pressure: {weather.pressure} hPa",
        f"Humidity: {weather.humidity}%",
        f"Visibility: {weather.visibility} m",
    ]
    if show_local_time:
        now_utc = now_utc or get_now()
        lines.append(f"Time: {format_local_time(now_utc, weather.timezone_offset)}")
    lines.extend([
        f"Wind Speed: {weather.wind_speed:.2f} m/s",
        f"Description: {weather.description}",
    ])
    return lines


@router.get("/", response_class=PlainTextResponse)
async def visitor_box(
    request: Request,
    geo_client: GeoClient = Depends(get_geo_client),
    weather_client: WeatherClient = Depends(get_weather_client),
    now_utc: datetime = Depends(get_now),
) -> PlainTextResponse:
    """Return the visitor and weather summary box"""
    ip = client_ip(request)
    try:
        visitor = await geo_client.resolve(ip)
        weather = await weather_client.current_weather(visitor.latitude, visitor.longitude)
    except UpstreamError as e:
        logger.error(f"{type(e).__name__} for {ip}: {e}")
        return PlainTextResponse(e.public_message, status_code=500)

    lines = build_box_lines(visitor, weather, settings.SHOW_LOCAL_TIME, now_utc)
    return PlainTextResponse(render(lines, settings.BOX_WIDTH))
