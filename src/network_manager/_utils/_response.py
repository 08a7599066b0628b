from functools import lru_cache
from logging import getLogger
from typing import Any, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..models import DecodingError, HttpError, NoDataError
from .constants import SUCCESS_STATUS_MAX, SUCCESS_STATUS_MIN

T = TypeVar("T")

logger = getLogger("network_manager")


def is_success_status(status_code: int) -> bool:
    return SUCCESS_STATUS_MIN <= status_code <= SUCCESS_STATUS_MAX


def validate_status(status_code: int) -> None:
    """Check that ``status_code`` falls in the success range 200..299.

    Raises:
        HttpError: Carrying the exact status code when it is out of range.
    """
    if not is_success_status(status_code):
        raise HttpError(status_code)


def require_body(body: Optional[bytes]) -> bytes:
    """Return ``body`` or raise NoDataError when the transport had none."""
    if body is None:
        raise NoDataError()
    return body


@lru_cache(maxsize=256)
def _adapter_for(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def decode(data: bytes, response_type: Type[T]) -> T:
    """Decode a JSON body into ``response_type``.

    Validation is strict: there is no type coercion, and a body that does not
    parse or does not match the target shape is rejected as a whole.

    Args:
        data: Raw response body.
        response_type: Any type pydantic can validate (models, dataclasses,
            TypedDicts, builtin containers).

    Returns:
        The decoded value.

    Raises:
        DecodingError: If the body is not JSON or does not match the shape.
    """
    try:
        adapter = _adapter_for(response_type)
    except TypeError:
        # unhashable type hints cannot be cached
        adapter = TypeAdapter(response_type)

    try:
        return adapter.validate_json(data, strict=True)
    except ValidationError as e:
        # input values are left out, the body may hold sensitive data
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
            for error in e.errors(include_input=False, include_url=False)
        )
        logger.warning(
            f"Decoding error for {getattr(response_type, '__name__', response_type)}: "
            f"{details}"
        )
        raise DecodingError(f"Failed to decode response body: {details}") from e
