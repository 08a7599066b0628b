import threading
from typing import Callable, List, Optional, Union

import pytest

from network_manager import (
    Config,
    NetworkManager,
    RequestDescriptor,
    ResponseDescriptor,
)


class FakeTransport:
    """In-memory transport: records requests and replays a canned outcome."""

    def __init__(
        self,
        response: Optional[ResponseDescriptor] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        self.response = response or ResponseDescriptor(status_code=200, body=b"{}")
        self.error = error
        self.requests: List[RequestDescriptor] = []
        self.threads: List[str] = []
        self._lock = threading.Lock()

    def _reply(self, request: RequestDescriptor) -> ResponseDescriptor:
        with self._lock:
            self.requests.append(request)
            self.threads.append(threading.current_thread().name)
        if self.error is not None:
            raise self.error
        return self.response

    def send(self, request: RequestDescriptor) -> ResponseDescriptor:
        return self._reply(request)

    async def send_async(self, request: RequestDescriptor) -> ResponseDescriptor:
        return self._reply(request)


FakeTransportFactory = Callable[..., FakeTransport]


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("NETWORK_MANAGER_LOG_BODIES", raising=False)
    monkeypatch.delenv("NETWORK_MANAGER_MAX_WORKERS", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def make_transport() -> FakeTransportFactory:
    def _factory(
        status_code: int = 200,
        body: Union[bytes, None] = b"{}",
        error: Optional[BaseException] = None,
    ) -> FakeTransport:
        return FakeTransport(
            response=ResponseDescriptor(status_code=status_code, body=body),
            error=error,
        )

    return _factory


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def manager(config: Config, fake_transport: FakeTransport):
    with NetworkManager(config=config, transport=fake_transport) as network_manager:
        yield network_manager
