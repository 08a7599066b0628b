"""Typed HTTP client facade.

Build a request, send it, check the status and decode the body into a
typed value in one call::

    from network_manager import HTTPMethod, NetworkManager

    with NetworkManager() as manager:
        data = manager.request(
            "https://example.com/items",
            HTTPMethod.POST,
            response_type=dict,
            parameters={"name": "widget"},
        )
"""

from ._config import Config
from ._services import NetworkManager
from ._transport import HttpxTransport, Transport
from ._utils import (
    RequestDescriptor,
    ResponseDescriptor,
    build_form_request,
    build_request,
    decode,
    encode_form_body,
    validate_status,
)
from ._version import __version__
from .models import (
    DecodingError,
    Failure,
    HTTPMethod,
    HttpError,
    InvalidURLError,
    JsonValue,
    NetworkError,
    NoDataError,
    Parameters,
    Result,
    Success,
    UnknownError,
)

__all__ = [
    "Config",
    "DecodingError",
    "Failure",
    "HTTPMethod",
    "HttpError",
    "HttpxTransport",
    "InvalidURLError",
    "JsonValue",
    "NetworkError",
    "NetworkManager",
    "NoDataError",
    "Parameters",
    "RequestDescriptor",
    "ResponseDescriptor",
    "Result",
    "Success",
    "Transport",
    "UnknownError",
    "__version__",
    "build_form_request",
    "build_request",
    "decode",
    "encode_form_body",
    "validate_status",
]
