from __future__ import annotations

import pytest
from _gateway_stubs import StubAsyncClient, StubResponse, connect_error, install

from sunrise_alarm.domain.entities.errors import (
    LocationPermissionDeniedError,
    LocationUnavailableError,
)
from sunrise_alarm.domain.entities.location import Coordinate
from sunrise_alarm.infrastructure.gateways.ip_location_gateway import IpLocationGateway

LOOKUP_URL = "https://ipapi.co/json/"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"latitude": 48.85, "longitude": 2.35, "city": "Paris"},
        {"lat": 48.85, "lon": 2.35},
    ],
)
async def test_lookup_returns_coordinate(monkeypatch, payload) -> None:
    install(monkeypatch, StubAsyncClient(StubResponse(200, payload)))

    coordinate = await IpLocationGateway(LOOKUP_URL).get_current_coordinate()

    assert coordinate == Coordinate(48.85, 2.35)


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [401, 403])
async def test_refused_lookup_raises_permission_denied(
    monkeypatch, status_code
) -> None:
    install(monkeypatch, StubAsyncClient(StubResponse(status_code)))

    with pytest.raises(LocationPermissionDeniedError):
        await IpLocationGateway(LOOKUP_URL).get_current_coordinate()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "client",
    [
        StubAsyncClient(StubResponse(429)),
        StubAsyncClient(error=connect_error()),
        StubAsyncClient(StubResponse(200, invalid_json=True)),
        StubAsyncClient(StubResponse(200, {"latitude": "n/a", "longitude": 2.35})),
        StubAsyncClient(StubResponse(200, {"latitude": 95.0, "longitude": 2.35})),
    ],
)
async def test_failed_lookup_raises_unavailable(monkeypatch, client) -> None:
    install(monkeypatch, client)

    with pytest.raises(LocationUnavailableError):
        await IpLocationGateway(LOOKUP_URL).get_current_coordinate()
