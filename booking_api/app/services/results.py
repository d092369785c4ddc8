"""
Result types returned by the booking service.

Service operations do not raise for expected failures.  They return
either ``Success`` wrapping the value or ``Failure`` carrying an
``ErrorKind`` and a message, so every caller has to handle each case
explicitly (see ``api/v1/endpoints/bookings.py``).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union


T = TypeVar("T")


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"
    FORMAT_ERROR = "format_error"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    detail: str


Result = Union[Success[T], Failure]
