from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from .errors import NetworkError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome delivered to a completion callback."""

    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Failed outcome delivered to a completion callback."""

    error: NetworkError

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Success[T], Failure]
