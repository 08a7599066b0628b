from typing import Dict

from pydantic import JsonValue

from .errors import (
    DecodingError,
    HttpError,
    InvalidURLError,
    NetworkError,
    NoDataError,
    UnknownError,
)
from .http_method import HTTPMethod
from .result import Failure, Result, Success

Parameters = Dict[str, JsonValue]

__all__ = [
    "DecodingError",
    "Failure",
    "HTTPMethod",
    "HttpError",
    "InvalidURLError",
    "JsonValue",
    "NetworkError",
    "NoDataError",
    "Parameters",
    "Result",
    "Success",
    "UnknownError",
]
