from typing import Callable, List

import httpx
import pytest

PERTH_VISITOR = {
    "ip": "203.0.113.7",
    "city": "Perth",
    "country": "AU",
    "asn": " AS1221 ",
    "org": "Telstra Corporation ",
    "latitude": -31.95,
    "longitude": 115.86,
}

PERTH_WEATHER = {
    "main": {"temp": 21.5, "pressure": 1012, "humidity": 60},
    "visibility": 10000,
    "timezone": 28800,
    "weather": [{"description": "clear sky"}],
    "wind": {"speed": 3.4},
}


class Upstream:
    """Stub upstream that records requests and answers through a handler"""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self._handle))


def json_upstream(payload, status_code: int = 200) -> Upstream:
    return Upstream(lambda request: httpx.Response(status_code, json=payload))


@pytest.fixture
def perth_geo() -> Upstream:
    return json_upstream(PERTH_VISITOR)


@pytest.fixture
def perth_weather() -> Upstream:
    return json_upstream(PERTH_WEATHER)
