"""Ok / Err values for outcomes a caller is expected to handle.

Saving a draft that fails validation, or updating a task another command
already deleted, is an ordinary outcome. Store and service functions
return ``Ok(value)`` or ``Err(error)`` for these and keep exceptions for
programming errors.

    >>> def row_at(rows: list[str], index: int) -> Result[str, str]:
    ...     if not 0 <= index < len(rows):
    ...         return Err(f"No row {index}")
    ...     return Ok(rows[index])
    ...
    >>> row_at(["design", "review"], 1)
    Ok(value='review')
    >>> is_err(row_at([], 0))
    True
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carrying ``error``: an ``InputError`` or a message."""

    error: E


Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Result[T, E]) -> bool:
    return isinstance(result, Ok)


def is_err(result: Result[T, E]) -> bool:
    return isinstance(result, Err)


def map_result(result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:
    """Transform the value of an ``Ok``; pass an ``Err`` through untouched.

    Services return ``Ok((task, event))``; callers that only want the task
    use ``map_result(result, lambda pair: pair[0])``.
    """
    if isinstance(result, Err):
        return result
    return Ok(fn(result.value))
