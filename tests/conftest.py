"""Shared fakes for the request pipeline tests."""

from typing import Any, Optional

import pytest

from parse_rest.config import ParseConfig
from parse_rest.controller import RESTController
from parse_rest.identity import MemoryUserController
from parse_rest.models.envelope import TransportResponse
from parse_rest.transport.dispatcher import Dispatcher


def ok_response(body: Any = None) -> TransportResponse:
    return TransportResponse(status=200, body={} if body is None else body)


def status_response(code: int, body: Any = None) -> TransportResponse:
    return TransportResponse(status=code, body=body)


class FakeTransport:
    """Replays canned responses (or raises canned exceptions) in order."""

    def __init__(self, responses: list[Any]):
        self._responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    async def perform(self, url: str, method: str, data: Any, headers: dict[str, str]) -> TransportResponse:
        self.calls.append({"url": url, "method": method, "data": data, "headers": dict(headers)})
        result = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(result, Exception):
            raise result
        return result


class FakeInstallations:
    def __init__(self, iid: str = "iid-123", error: Optional[Exception] = None):
        self.iid = iid
        self.error = error
        self.calls = 0

    async def current_installation_id(self) -> str:
        self.calls += 1
        if self.error:
            raise self.error
        return self.iid


class RecordingSleep:
    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def ok():
    return ok_response


@pytest.fixture
def status():
    return status_response


@pytest.fixture
def fake_transport():
    return FakeTransport


@pytest.fixture
def fake_installations():
    return FakeInstallations


@pytest.fixture
def config() -> ParseConfig:
    return ParseConfig(
        server_url="https://api.example.com/parse",
        application_id="app-id",
        javascript_key="js-key",
        version="py0.1.0",
        request_attempt_limit=5,
    )


@pytest.fixture
def sleeps() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def build(config, sleeps):
    """Factory: ``build(responses, **config_overrides) -> (controller, transport)``."""

    def _build(
        responses: list[Any],
        users: Optional[MemoryUserController] = None,
        installations: Optional[FakeInstallations] = None,
        sleep: Any = None,
        rng: Any = None,
        **overrides: Any,
    ):
        cfg = config.model_copy(update=overrides)
        transport = FakeTransport(responses)
        dispatcher = Dispatcher(cfg, transport, sleep=sleep or sleeps, rng=rng or (lambda: 0.5))
        controller = RESTController(cfg, dispatcher, installations or FakeInstallations(), users)
        return controller, transport

    return _build
