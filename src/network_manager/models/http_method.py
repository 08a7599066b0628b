from enum import Enum
from typing import Optional


class HTTPMethod(str, Enum):
    """HTTP verbs supported by the network manager."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def _missing_(cls, value: object) -> Optional["HTTPMethod"]:
        if isinstance(value, str):
            for member in cls:
                if member.value == value.upper():
                    return member
        return None

    def __str__(self) -> str:
        return self.value
