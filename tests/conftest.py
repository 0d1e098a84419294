"""
pytest configuration and shared fixtures

Usage:
    async def test_something(provider, endpoint):
        config = await provider.get_config_async()
        assert len(endpoint.calls) == 1
"""

import asyncio
import json
import logging
from typing import Any, Callable

import httpx
import pytest
import pytest_asyncio

from imgconf import ImageConfigProvider, ProviderSettings

TEST_URL = "https://config.test/img.conf.json"


# ============================================
# Payloads
# ============================================

def make_payload(avatar_width: int = 100) -> dict[str, Any]:
    """Well-formed remote config"""
    return {
        "thumbnails": {
            "avatar": {
                "mobile": {"width": avatar_width, "height": avatar_width},
                "tablet": {"width": 120, "height": 120},
                "desktop": {"width": 200, "height": 200},
            },
            "school-thumbnail": {
                "mobile": [{"width": 400, "height": 250}],
                "tablet": [{"width": 500, "height": 260}, {"width": 320, "height": 166}],
                "desktop": [{"width": 800, "height": 360}],
            },
        },
        "original": {
            "content": {"max_width": 1200, "max_height": 800},
        },
    }


@pytest.fixture
def payload() -> dict[str, Any]:
    return make_payload()


# ============================================
# Clock and endpoint
# ============================================

class FakeClock:
    """Monotonic clock advanced by hand"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class MockEndpoint:
    """Records requests and answers with the current responder"""

    def __init__(self, responder: Callable[[httpx.Request], Any]):
        self.responder = responder
        self.calls: list[httpx.Request] = []

    def handler(self, request: httpx.Request):
        self.calls.append(request)
        return self.responder(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def respond_json(self, body: Any, status_code: int = 200) -> None:
        self.responder = lambda request: httpx.Response(status_code, json=body)

    def respond_status(self, status_code: int) -> None:
        self.responder = lambda request: httpx.Response(status_code)

    def respond_body(self, content: bytes) -> None:
        self.responder = lambda request: httpx.Response(200, content=content)

    def fail_with(self, exc_factory: Callable[[httpx.Request], Exception]) -> None:
        def raise_error(request: httpx.Request):
            raise exc_factory(request)
        self.responder = raise_error


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def endpoint(payload) -> MockEndpoint:
    return MockEndpoint(lambda request: httpx.Response(200, json=payload))


@pytest.fixture
def imgconf_caplog(caplog):
    """caplog wired to the imgconf logger, which does not propagate"""
    logger = logging.getLogger("imgconf")
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)


@pytest.fixture
def settings() -> ProviderSettings:
    return ProviderSettings(config_url=TEST_URL)


@pytest_asyncio.fixture
async def provider(settings, endpoint, clock):
    """Isolated provider wired to the mock endpoint and fake clock"""
    provider = ImageConfigProvider(
        settings=settings,
        transport=endpoint.transport,
        clock=clock,
    )
    yield provider
    await provider.close()


@pytest_asyncio.fixture
async def trickle_url():
    """Local HTTP server that sends a valid JSON body one byte every 50 ms"""
    body = json.dumps({"thumbnails": {}, "original": {}}).encode()

    async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter):
        try:
            await reader.readuntil(b"\r\n\r\n")
            writer.write(
                b"HTTP/1.1 200 OK\r\n"
                b"Content-Type: application/json\r\n"
                b"Content-Length: " + str(len(body)).encode() + b"\r\n\r\n"
            )
            for i in range(len(body)):
                if writer.is_closing():
                    break
                writer.write(body[i:i + 1])
                await writer.drain()
                await asyncio.sleep(0.05)
        except (ConnectionError, asyncio.IncompleteReadError):
            pass
        finally:
            writer.close()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    yield f"http://127.0.0.1:{port}/img.conf.json"
    server.close()
    await server.wait_closed()
