import asyncio
from logging import getLogger
from typing import Any, Dict, Optional, Protocol, Set, runtime_checkable

from httpx import AsyncClient, Client, Headers, Response

from ._utils import RequestDescriptor, ResponseDescriptor
from ._utils._ssl_context import get_httpx_client_kwargs
from ._utils.constants import HEADER_USER_AGENT
from ._version import __version__

logger = getLogger("network_manager")


def user_agent_value() -> str:
    return f"network-manager-python/{__version__}"


@runtime_checkable
class Transport(Protocol):
    """The network engine a NetworkManager sends requests through.

    Implementations raise their own exceptions for transport-level failures
    (DNS, refused connections, TLS). The manager maps them to UnknownError.
    A ``body`` of ``None`` in the returned descriptor signals "no data".
    """

    def send(self, request: RequestDescriptor) -> ResponseDescriptor: ...

    async def send_async(self, request: RequestDescriptor) -> ResponseDescriptor: ...


def _to_descriptor(response: Response) -> ResponseDescriptor:
    return ResponseDescriptor(
        status_code=response.status_code,
        body=response.content,
        headers=dict(response.headers),
    )


class HttpxTransport:
    """Transport backed by ``httpx.Client`` and ``httpx.AsyncClient``.

    Nothing beyond TLS verification and a User-Agent header is configured,
    so timeouts, redirects and pooling are whatever httpx does by default.
    """

    def __init__(
        self,
        *,
        client: Optional[Client] = None,
        async_client: Optional[AsyncClient] = None,
    ) -> None:
        client_kwargs: Dict[str, Any] = {}
        if client is None or async_client is None:
            client_kwargs = {
                **get_httpx_client_kwargs(),
                "headers": Headers({HEADER_USER_AGENT: user_agent_value()}),
            }

        self._client = client if client is not None else Client(**client_kwargs)
        self._client_async = (
            async_client if async_client is not None else AsyncClient(**client_kwargs)
        )
        self._closing: Set["asyncio.Task[None]"] = set()

    def send(self, request: RequestDescriptor) -> ResponseDescriptor:
        response = self._client.request(
            request.method.value,
            request.url,
            headers=dict(request.headers),
            content=request.body,
        )
        return _to_descriptor(response)

    async def send_async(self, request: RequestDescriptor) -> ResponseDescriptor:
        response = await self._client_async.request(
            request.method.value,
            request.url,
            headers=dict(request.headers),
            content=request.body,
        )
        return _to_descriptor(response)

    def close(self) -> None:
        """Close both clients.

        The async client is closed on a fresh event loop when none is running
        in this thread, and by a task on the running loop otherwise. Inside
        async code prefer ``aclose``.
        """
        self._client.close()
        if self._client_async.is_closed:
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is not None:
            task = loop.create_task(self._client_async.aclose())
            self._closing.add(task)
            task.add_done_callback(self._closing.discard)
            return

        try:
            asyncio.run(self._client_async.aclose())
        except RuntimeError as e:
            # pooled connections belong to an event loop that is already closed
            logger.warning(
                f"Could not close the async client outside its event loop: {e}. "
                "Use aclose() from async code."
            )

    async def aclose(self) -> None:
        await self._client_async.aclose()
        self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
