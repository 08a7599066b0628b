from typing import Any, ClassVar, Tuple


class NetworkError(Exception):
    """Base class for every failure surfaced by the network manager.

    Variants are a closed set. Each one carries a stable ``kind`` tag and
    can be matched structurally::

        match error:
            case HttpError(status_code=404):
                ...
            case NoDataError():
                ...
    """

    kind: ClassVar[str] = "network_error"
    default_message: ClassVar[str] = "Network error"
    __match_args__: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def _payload(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self.__match_args__)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetworkError):
            return NotImplemented
        return type(self) is type(other) and self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))

    def __repr__(self) -> str:
        payload = ", ".join(
            f"{name}={getattr(self, name)!r}" for name in self.__match_args__
        )
        return f"{type(self).__name__}({payload})"


class InvalidURLError(NetworkError):
    """The URL is not a syntactically valid absolute http(s) URL."""

    kind = "invalid_url"
    default_message = "Invalid URL"


class HttpError(NetworkError):
    """The server answered with a status code outside 200..299."""

    kind = "http_error"
    __match_args__ = ("status_code",)

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"HTTP error {status_code}")


class DecodingError(NetworkError):
    """The response body does not match the requested type."""

    kind = "decoding_error"
    default_message = "Failed to decode response body"


class NoDataError(NetworkError):
    """The transport completed without a response body."""

    kind = "no_data"
    default_message = "No data received"


class UnknownError(NetworkError):
    """Transport failure, parameter serialization failure, or anything else."""

    kind = "unknown"
    default_message = "Unknown network error"
