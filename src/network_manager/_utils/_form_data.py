"""Multipart/form-data body encoding."""

import uuid
from typing import List, Mapping

CRLF = "\r\n"


def generate_boundary() -> str:
    """Return a fresh random boundary token."""
    return str(uuid.uuid4()).upper()


def encode_form_body(fields: Mapping[str, str], boundary: str) -> bytes:
    """Encode string fields as a multipart/form-data body.

    Fields are written in the mapping's iteration order. Names and values are
    written verbatim: nothing is escaped, so a value containing the boundary,
    a quote or CRLF produces a malformed body rather than an error.

    Args:
        fields: Form field names mapped to their values.
        boundary: The token delimiting each section.

    Returns:
        The UTF-8 encoded body, terminated by the closing delimiter.

    Examples:
        >>> encode_form_body({"a": "1"}, "B")
        b'--B\\r\\nContent-Disposition: form-data; name="a"\\r\\n\\r\\n1\\r\\n--B--\\r\\n'
    """
    parts: List[bytes] = []

    for name, value in fields.items():
        parts.append(f"--{boundary}{CRLF}".encode("utf-8"))
        parts.append(
            f'Content-Disposition: form-data; name="{name}"{CRLF}{CRLF}'.encode("utf-8")
        )
        parts.append(f"{value}{CRLF}".encode("utf-8"))

    parts.append(f"--{boundary}--{CRLF}".encode("utf-8"))
    return b"".join(parts)
