import asyncio
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from logging import getLogger
from typing import Any, Callable, Mapping, Optional, Type, TypeVar

from .._config import Config
from .._transport import HttpxTransport, Transport
from .._utils import (
    RequestDescriptor,
    ResponseDescriptor,
    build_form_request,
    build_request,
    decode,
    describe_body,
    redact_headers,
    require_body,
    validate_status,
)
from ..models import (
    Failure,
    HTTPMethod,
    NetworkError,
    Result,
    Success,
    UnknownError,
)

T = TypeVar("T")

Completion = Callable[[Result[T]], None]


def _reraise(error: Exception) -> Callable[[], Any]:
    def call() -> Any:
        raise error

    return call


class NetworkManager:
    """Typed HTTP client facade.

    Builds a request from a URL, a verb, optional JSON parameters and
    headers, sends it through a transport, checks the status code and
    decodes the JSON body into the requested type. Every failure is raised
    (or delivered) as a ``NetworkError``.

    Three call shapes are offered for both JSON and multipart requests:

    - ``request_async`` / ``post_form_data_async``: coroutines; awaiting the
      transport is the only suspension point.
    - ``request`` / ``post_form_data``: the same pipeline, blocking the
      calling thread.
    - ``request_with_completion`` / ``post_form_data_with_completion``: run
      in a worker thread and hand exactly one ``Result`` to ``completion``.
      The callback runs on the worker thread, concurrently with the caller.

    Nothing is retried and no timeout is imposed beyond the transport's own
    defaults.

    Examples:
        ```python
        from pydantic import BaseModel
        from network_manager import HTTPMethod, NetworkManager

        class Todo(BaseModel):
            id: int
            title: str

        with NetworkManager() as manager:
            todo = manager.request(
                "https://example.com/todos/1",
                HTTPMethod.GET,
                response_type=Todo,
            )
        ```
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        self._logger = getLogger("network_manager")
        self._config = config or Config()
        self._owns_transport = transport is None
        self._transport: Transport = (
            transport if transport is not None else HttpxTransport()
        )
        self._executor: Optional[ThreadPoolExecutor] = None
        self._executor_lock = threading.Lock()

    @property
    def config(self) -> Config:
        return self._config

    @property
    def transport(self) -> Transport:
        return self._transport

    def request(
        self,
        url: str,
        method: HTTPMethod | str,
        *,
        response_type: Type[T],
        parameters: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> T:
        """Send a request and decode its JSON response, blocking until done.

        Args:
            url (str): Absolute http(s) URL.
            method (HTTPMethod | str): The HTTP verb.
            response_type (Type[T]): The type the JSON body is decoded into.
            parameters (Optional[Mapping[str, Any]]): JSON parameters sent as the
                request body with ``Content-Type: application/json``.
            headers (Optional[Mapping[str, str]]): Extra request headers.

        Returns:
            T: The decoded response body.

        Raises:
            InvalidURLError: The URL is not a valid absolute URL.
            UnknownError: Parameters could not be serialized or the transport failed.
            HttpError: The status code is outside 200..299.
            NoDataError: The transport returned no body.
            DecodingError: The body does not match ``response_type``.
        """
        spec = build_request(url, method, parameters, headers)
        response = self._send(spec)
        return self._decode_response(response, response_type)

    async def request_async(
        self,
        url: str,
        method: HTTPMethod | str,
        *,
        response_type: Type[T],
        parameters: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> T:
        """Asynchronously send a request and decode its JSON response.

        Args:
            url (str): Absolute http(s) URL.
            method (HTTPMethod | str): The HTTP verb.
            response_type (Type[T]): The type the JSON body is decoded into.
            parameters (Optional[Mapping[str, Any]]): JSON parameters sent as the
                request body with ``Content-Type: application/json``.
            headers (Optional[Mapping[str, str]]): Extra request headers.

        Returns:
            T: The decoded response body.

        Raises:
            NetworkError: See ``request``.
        """
        spec = build_request(url, method, parameters, headers)
        response = await self._send_async(spec)
        return self._decode_response(response, response_type)

    def request_with_completion(
        self,
        url: str,
        method: HTTPMethod | str,
        *,
        response_type: Type[T],
        completion: Completion[T],
        parameters: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "Future[None]":
        """Send a request in the background and report through ``completion``.

        Returns immediately. ``completion`` is called exactly once, from a
        worker thread, with ``Success(value)`` or ``Failure(error)``. Errors
        that are not a ``NetworkError`` are delivered as ``UnknownError``.

        The request is built before this returns, so later changes to
        ``parameters`` or ``headers`` do not affect what is sent. Build errors
        are still delivered through ``completion``.

        Returns:
            Future[None]: Resolves once ``completion`` has returned. It holds
            the exception if ``completion`` itself raised.
        """
        try:
            spec = build_request(url, method, parameters, headers)
        except Exception as e:
            return self._submit(_reraise(e), completion)

        return self._submit(
            lambda: self._decode_response(self._send(spec), response_type),
            completion,
        )

    def post_form_data(
        self,
        url: str,
        fields: Mapping[str, str],
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> bytes:
        """POST string fields as multipart/form-data and return the raw body.

        A fresh random boundary is used for every call.

        Raises:
            InvalidURLError: The URL is not a valid absolute URL.
            UnknownError: The transport failed.
            HttpError: The status code is outside 200..299.
            NoDataError: The transport returned no body.
        """
        spec = build_form_request(url, fields, headers=headers)
        response = self._send(spec)
        return self._raw_response(response)

    async def post_form_data_async(
        self,
        url: str,
        fields: Mapping[str, str],
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> bytes:
        """Asynchronously POST string fields as multipart/form-data."""
        spec = build_form_request(url, fields, headers=headers)
        response = await self._send_async(spec)
        return self._raw_response(response)

    def post_form_data_with_completion(
        self,
        url: str,
        fields: Mapping[str, str],
        *,
        completion: Completion[bytes],
        headers: Optional[Mapping[str, str]] = None,
    ) -> "Future[None]":
        """POST multipart/form-data in the background.

        Same delivery rules as ``request_with_completion``; the success value
        is the raw response body. The body is encoded before this returns.
        """
        try:
            spec = build_form_request(url, fields, headers=headers)
        except Exception as e:
            return self._submit(_reraise(e), completion)

        return self._submit(
            lambda: self._raw_response(self._send(spec)), completion
        )

    def close(self) -> None:
        """Wait for pending background calls and release the transport."""
        self._shutdown_executor()
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            self._transport.close()

    async def aclose(self) -> None:
        """Release the transport and wait for pending background calls.

        The worker pool is drained on a separate thread so the event loop
        keeps running meanwhile.
        """
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.aclose()
        await asyncio.to_thread(self._shutdown_executor)

    def __enter__(self) -> "NetworkManager":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "NetworkManager":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def _send(self, spec: RequestDescriptor) -> ResponseDescriptor:
        self._log_request(spec)
        try:
            response = self._transport.send(spec)
        except NetworkError:
            raise
        except Exception as e:
            self._logger.error(f"Transport error: {spec.method} {spec.url}: {e}")
            raise UnknownError(f"Transport error: {e}") from e
        self._log_response(response)
        return response

    async def _send_async(self, spec: RequestDescriptor) -> ResponseDescriptor:
        self._log_request(spec)
        try:
            response = await self._transport.send_async(spec)
        except NetworkError:
            raise
        except Exception as e:
            self._logger.error(f"Transport error: {spec.method} {spec.url}: {e}")
            raise UnknownError(f"Transport error: {e}") from e
        self._log_response(response)
        return response

    def _decode_response(self, response: ResponseDescriptor, response_type: Type[T]) -> T:
        validate_status(response.status_code)
        return decode(require_body(response.body), response_type)

    def _raw_response(self, response: ResponseDescriptor) -> bytes:
        validate_status(response.status_code)
        return require_body(response.body)

    def _submit(
        self, call: Callable[[], T], completion: Completion[T]
    ) -> "Future[None]":
        def run() -> None:
            result: Result[T]
            try:
                result = Success(call())
            except NetworkError as e:
                result = Failure(e)
            except Exception as e:
                self._logger.error(f"Unexpected error in background request: {e!r}")
                error = UnknownError(str(e) or None)
                error.__cause__ = e
                result = Failure(error)

            try:
                completion(result)
            except Exception:
                self._logger.exception("Completion callback raised")
                raise

        # close() must not shut the pool down between lookup and submit
        with self._executor_lock:
            try:
                return self._ensure_executor().submit(run)
            except RuntimeError:
                self._logger.debug("Worker pool was shut down, starting a new one")
                self._executor = None
                return self._ensure_executor().submit(run)

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            return self._ensure_executor()

    def _ensure_executor(self) -> ThreadPoolExecutor:
        # caller holds _executor_lock
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self._config.max_workers,
                thread_name_prefix="network-manager",
            )
        return self._executor

    def _shutdown_executor(self) -> None:
        with self._executor_lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)

    def _log_request(self, spec: RequestDescriptor) -> None:
        self._logger.debug(f"Request: {spec.method} {spec.url}")
        self._logger.debug(
            f"HEADERS: {redact_headers(spec.headers, self._config.redacted_headers)}"
        )
        self._logger.debug(
            f"Request body: {describe_body(spec.body, self._config.log_bodies)}"
        )

    def _log_response(self, response: ResponseDescriptor) -> None:
        self._logger.debug(f"Response: {response.status_code}")
        self._logger.debug(
            f"Response body: {describe_body(response.body, self._config.log_bodies)}"
        )
