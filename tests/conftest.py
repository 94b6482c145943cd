from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import httpx
import pytest

from wifi_panel.services.device_client import DeviceClient

pytest_plugins = ["nicegui.testing.user_plugin"]

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator


class DeviceStub:
    """
    In-process stand-in for the device's HTTP endpoints.

    Tests set ``status_body``/``save_status``/``clear_status`` (or ``raise_error``)
    and inspect ``requests`` afterwards.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_body: object = {
            "connected": True,
            "mode": "STA",
            "ip": "192.168.1.42",
            "ssid": "MyWiFi",
            "rssi": -67,
        }
        self.status_code = 200
        self.save_status = 200
        self.clear_status = 200
        self.raise_error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_error is not None:
            raise self.raise_error
        if request.method == "GET" and request.url.path == "/status":
            if isinstance(self.status_body, (bytes, str)):
                return httpx.Response(self.status_code, content=self.status_body)
            return httpx.Response(
                self.status_code, content=json.dumps(self.status_body).encode()
            )
        if request.method == "POST" and request.url.path == "/save":
            return httpx.Response(self.save_status, text="OK")
        if request.method == "POST" and request.url.path == "/clear":
            return httpx.Response(self.clear_status, text="OK")
        return httpx.Response(404)


@pytest.fixture
def device() -> DeviceStub:
    return DeviceStub()


@pytest.fixture
async def device_client(device: DeviceStub) -> AsyncIterator[DeviceClient]:
    dc = DeviceClient(
        base_url="http://device.test",
        timeout=1.0,
        transport=httpx.MockTransport(device.handler),
    )
    try:
        yield dc
    finally:
        await dc.aclose()


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Snapshot root logger handlers/level and put them back after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
