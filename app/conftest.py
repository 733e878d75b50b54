"""Pytest 配置文件"""

import httpx
import pytest

from configs import AppConfig
from libs.http_client import HttpClient
from services.request_composer import RequestComposer


class RecordingAlertSink:
    """Alert sink that acknowledges immediately and remembers what it showed."""

    def __init__(self):
        self.alerts: list[tuple[str, str, str]] = []

    async def alert(self, message: str, title: str, ok_label: str) -> None:
        self.alerts.append((message, title, ok_label))


def json_ok_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(
        200,
        headers=[("Content-Type", "application/json"), ("X-Request-Id", "abc-123")],
        content=b'{"ok":true}',
    )


@pytest.fixture
def app_settings():
    return AppConfig()


@pytest.fixture
def alert_sink():
    return RecordingAlertSink()


@pytest.fixture
def sent_requests():
    """Requests that reached the mock transport."""
    return []


@pytest.fixture
def http_handler():
    return json_ok_handler


@pytest.fixture
def client_factory(http_handler, sent_requests):
    async def recording_handler(request: httpx.Request) -> httpx.Response:
        sent_requests.append(request)
        response = http_handler(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response

    def factory() -> HttpClient:
        return HttpClient(transport=httpx.MockTransport(recording_handler))

    return factory


@pytest.fixture
def composer(alert_sink, client_factory, app_settings):
    return RequestComposer(
        alert_sink=alert_sink,
        client_factory=client_factory,
        config=app_settings,
    )
