"""Redaction helpers for request and response logging."""

from typing import AbstractSet, Dict, Mapping, Optional

from .constants import DEFAULT_REDACTED_HEADERS, REDACTED


def redact_headers(
    headers: Mapping[str, str],
    sensitive: AbstractSet[str] = DEFAULT_REDACTED_HEADERS,
) -> Dict[str, str]:
    """Return a copy of ``headers`` with sensitive values masked.

    Header names are compared case-insensitively against ``sensitive``.

    Examples:
        >>> redact_headers({"Authorization": "Bearer abc", "Accept": "*/*"})
        {'Authorization': '***', 'Accept': '*/*'}
    """
    lowered = {name.lower() for name in sensitive}
    return {
        name: REDACTED if name.lower() in lowered else value
        for name, value in headers.items()
    }


def describe_body(body: Optional[bytes], log_bodies: bool) -> str:
    """Render a body for a log record.

    Unless ``log_bodies`` is set only the size is shown.
    """
    if body is None:
        return "<no body>"
    if not log_bodies:
        return f"<{len(body)} bytes>"
    return body.decode("utf-8", errors="replace")
