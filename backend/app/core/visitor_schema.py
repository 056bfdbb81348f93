"""
Data shapes for the visitor weather box.

`VisitorInfo` and `WeatherInfo` are what the rest of the app works with.
The pydantic models describe the upstream JSON payloads and only live
long enough to be converted.
"""
from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class VisitorInfo:
    """Geolocation and network ownership for one caller"""
    ip: str
    city: str
    country: str
    asn: str
    isp: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class WeatherInfo:
    """Current conditions at the visitor's coordinates"""
    temperature: float  # °C
    pressure: int  # hPa
    humidity: int  # %
    visibility: int  # meters
    wind_speed: float  # m/s
    description: str
    timezone_offset: int = 0  # seconds east of UTC


class IpApiPayload(BaseModel):
    ip: str = Field(..., description="Address the lookup was made for")
    city: Optional[str] = None
    country: Optional[str] = None
    asn: Optional[str] = None
    org: Optional[str] = Field(None, description="Network provider name")
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    # ipapi.co failure markers (reserved ranges, quota exhaustion)
    error: bool = False
    reason: Optional[str] = None

    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def to_visitor(self) -> VisitorInfo:
        return VisitorInfo(
            ip=self.ip,
            city=self.city or "",
            country=self.country or "",
            asn=self.asn or "",
            isp=self.org or "",
            latitude=self.latitude,
            longitude=self.longitude,
        )


class MainBlock(BaseModel):
    temp: float = 0.0
    pressure: int = 0
    humidity: int = 0
    visibility: Optional[int] = None


class WeatherEntry(BaseModel):
    description: Optional[str] = None


class WindBlock(BaseModel):
    speed: float = 0.0


class OpenWeatherPayload(BaseModel):
    # Missing numeric fields default to zero, matching what OpenWeather
    # clients have always shown for partial responses
    main: MainBlock = Field(default_factory=MainBlock)
    visibility: Optional[int] = None
    # seconds east of UTC; real zone offsets stay within a day
    timezone: int = Field(0, gt=-86400, lt=86400)
    weather: List[WeatherEntry] = []
    wind: WindBlock = Field(default_factory=WindBlock)

    def first_description(self) -> Optional[str]:
        if not self.weather:
            return None
        return self.weather[0].description

    def resolved_visibility(self) -> int:
        if self.visibility is not None:
            return self.visibility
        if self.main.visibility is not None:
            return self.main.visibility
        return 0
