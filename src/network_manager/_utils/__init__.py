from ._form_data import encode_form_body, generate_boundary
from ._redaction import describe_body, redact_headers
from ._request_builder import (
    build_form_request,
    build_request,
    encode_parameters,
    parse_url,
)
from ._request_spec import RequestDescriptor, ResponseDescriptor
from ._response import decode, is_success_status, require_body, validate_status

__all__ = [
    "RequestDescriptor",
    "ResponseDescriptor",
    "build_form_request",
    "build_request",
    "decode",
    "describe_body",
    "encode_form_body",
    "encode_parameters",
    "generate_boundary",
    "is_success_status",
    "parse_url",
    "redact_headers",
    "require_body",
    "validate_status",
]
