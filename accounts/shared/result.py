"""
Result values returned by use cases.

A use case returns ``Ok(value)`` on success or ``Err(error)`` when it
decides the request cannot be served. Callers branch on the type;
nothing is raised for expected failures.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the use case output."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying an error descriptor."""

    error: E


Result = Union[Ok[T], Err[E]]
