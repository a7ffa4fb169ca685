"""Tagged result type returned by the Vikunja client."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Category of a failed Vikunja call."""

    NETWORK = "network"
    REMOTE = "remote"
    DECODE = "decode"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    detail: str

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
