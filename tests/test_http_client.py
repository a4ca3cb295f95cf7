"""Tests del builder `build_async_client`."""

from __future__ import annotations

import httpx
import pytest

from adapters.http_client import build_async_client
from conftest import RecordingHandler, json_response
from core.config import AppSettings


@pytest.mark.asyncio
async def test_client_defaults_come_from_settings(settings):
    async with build_async_client(settings) as client:
        assert client.base_url == httpx.URL("https://api.spacexdata.com")
        assert client.headers["accept"] == "application/json"
        assert client.headers["user-agent"] == settings.user_agent
        assert client.timeout.connect == settings.http_timeout_seconds
        assert client.timeout.read == settings.http_timeout_seconds
        assert client.follow_redirects is True


@pytest.mark.asyncio
async def test_requests_go_through_injected_transport():
    settings = AppSettings(_env_file=None, user_agent="launch-tests/2.0", http_timeout_seconds=3.5)
    handler = RecordingHandler(json_response({}))

    async with build_async_client(settings, transport=httpx.MockTransport(handler)) as client:
        response = await client.get("/v5/launches/latest")

    assert response.status_code == 200
    request = handler.requests[-1]
    assert str(request.url) == "https://api.spacexdata.com/v5/launches/latest"
    assert request.headers["user-agent"] == "launch-tests/2.0"
    assert request.headers["accept"] == "application/json"
    assert request.extensions["timeout"]["read"] == 3.5
