import json
from typing import Dict, Mapping, Optional

from httpx import URL, InvalidURL
from pydantic import TypeAdapter, ValidationError

from ..models import HTTPMethod, InvalidURLError, Parameters, UnknownError
from ._form_data import encode_form_body, generate_boundary
from ._request_spec import RequestDescriptor
from .constants import (
    ALLOWED_URL_SCHEMES,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_MULTIPART,
    HEADER_CONTENT_TYPE,
)

_parameters_adapter: TypeAdapter[Parameters] = TypeAdapter(Parameters)


def parse_url(url: str) -> URL:
    """Parse ``url`` into an absolute http(s) URL.

    Raises:
        InvalidURLError: If the text is not an absolute URL with a host.
    """
    try:
        parsed = URL(url)
    except (InvalidURL, TypeError) as e:
        raise InvalidURLError(f"Invalid URL: {url!r}") from e

    if parsed.scheme not in ALLOWED_URL_SCHEMES or not parsed.host:
        raise InvalidURLError(f"Invalid URL: {url!r}")
    return parsed


def encode_parameters(parameters: Mapping[str, object]) -> bytes:
    """Serialize a JSON parameter tree to bytes.

    Raises:
        UnknownError: If any value is not representable in JSON, including
            cyclic structures and non-finite floats.
    """
    try:
        validated = _parameters_adapter.validate_python(dict(parameters), strict=True)
        return json.dumps(validated, allow_nan=False).encode("utf-8")
    except (ValidationError, TypeError, ValueError, RecursionError) as e:
        raise UnknownError(f"Parameters are not JSON serializable: {e}") from e


def _with_header(
    headers: Mapping[str, str], name: str, value: str
) -> Dict[str, str]:
    merged = {k: v for k, v in headers.items() if k.lower() != name.lower()}
    merged[name] = value
    return merged


def build_request(
    url: str,
    method: HTTPMethod | str,
    parameters: Optional[Mapping[str, object]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> RequestDescriptor:
    """Build a request descriptor with an optional JSON body.

    Args:
        url: Absolute http(s) URL.
        method: The HTTP verb.
        parameters: Optional JSON parameter tree sent as the request body.
        headers: Optional headers, copied verbatim.

    Returns:
        RequestDescriptor: The request, ready to hand to a transport.

    Raises:
        InvalidURLError: If ``url`` is not a valid absolute URL.
        UnknownError: If ``parameters`` cannot be serialized to JSON.
    """
    parsed = parse_url(url)
    request_headers: Dict[str, str] = dict(headers or {})
    body: Optional[bytes] = None

    if parameters is not None:
        body = encode_parameters(parameters)
        request_headers = _with_header(
            request_headers, HEADER_CONTENT_TYPE, CONTENT_TYPE_JSON
        )

    return RequestDescriptor(
        url=parsed,
        method=HTTPMethod(method),
        headers=request_headers,
        body=body,
    )


def build_form_request(
    url: str,
    fields: Mapping[str, str],
    boundary: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> RequestDescriptor:
    """Build a multipart/form-data POST request.

    A fresh boundary is generated when none is given.

    Raises:
        InvalidURLError: If ``url`` is not a valid absolute URL.
    """
    parsed = parse_url(url)
    boundary = boundary or generate_boundary()
    request_headers = _with_header(
        headers or {},
        HEADER_CONTENT_TYPE,
        f"{CONTENT_TYPE_MULTIPART}; boundary={boundary}",
    )

    return RequestDescriptor(
        url=parsed,
        method=HTTPMethod.POST,
        headers=request_headers,
        body=encode_form_body(fields, boundary),
    )
