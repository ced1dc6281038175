"""Consuming and transforming ``RemoteData`` values.

Every function takes the ``RemoteData`` instance as its last argument, so
partially applied combinators compose left to right::

    map_both(len, str, rd)  # == map_error(str, map(len, rd))
"""

from __future__ import annotations

from typing import Callable, TypedDict, assert_never

from remotedata.variants import Failed, Loading, NotAsked, RemoteData, Success


class Matcher[E, T, R](TypedDict):
    """One handler per variant. Every key is required.

    Usage:
        match(
            {
                "not_asked": lambda: "Not Asked",
                "loading": lambda: "Loading",
                "failed": lambda err: f"The error was {err}",
                "success": lambda data: f"Got {len(data)} items",
            },
            rd,
        )
    """

    not_asked: Callable[[], R]
    loading: Callable[[], R]
    failed: Callable[[E], R]
    success: Callable[[T], R]


def match[E, T, R](matcher: Matcher[E, T, R], rd: RemoteData[E, T]) -> R:
    """Run the handler of the variant ``rd`` holds and return its result."""
    match rd:
        case Success(value=value):
            return matcher["success"](value)
        case Failed(error=error):
            return matcher["failed"](error)
        case Loading():
            return matcher["loading"]()
        case NotAsked():
            return matcher["not_asked"]()
        case _:
            assert_never(rd)


def unwrap[E, T, U](default: U, fn: Callable[[T], U], rd: RemoteData[E, T]) -> U:
    """Apply ``fn`` to a ``Success`` value, or return ``default`` for any other variant.

    ``Failed`` errors are discarded.
    """
    if isinstance(rd, Success):
        return fn(rd.value)
    return default


def with_default[E, T](default: T, rd: RemoteData[E, T]) -> T:
    """Return the ``Success`` value, or ``default``."""
    return unwrap(default, _identity, rd)


def map[E, T, U](fn: Callable[[T], U], rd: RemoteData[E, T]) -> RemoteData[E, U]:
    """Transform the value inside a ``Success``.

    Other variants are returned as the same instance.

    Usage:
        map(lambda n: n + 1, Success(1))  # Success(value=2)
    """
    if isinstance(rd, Success):
        return Success(fn(rd.value))
    return rd


def map_error[E, F, T](fn: Callable[[E], F], rd: RemoteData[E, T]) -> RemoteData[F, T]:
    """Transform the error inside a ``Failed``.

    Usage:
        map_error(str, Failed(ValueError("Network Error")))  # Failed(error='Network Error')
    """
    if isinstance(rd, Failed):
        return Failed(fn(rd.error))
    return rd


def map_both[E, F, T, U](
    map_success: Callable[[T], U],
    map_err: Callable[[E], F],
    rd: RemoteData[E, T],
) -> RemoteData[F, U]:
    """Transform the value of a ``Success`` or the error of a ``Failed``."""
    return map_error(map_err, map(map_success, rd))


def and_then[E, T, U](
    fn: Callable[[T], RemoteData[E, U]], rd: RemoteData[E, T]
) -> RemoteData[E, U]:
    """Chain a dependent step onto a ``Success``.

    ``fn`` may return any variant, which replaces ``rd`` entirely. For
    ``NotAsked``, ``Loading`` and ``Failed`` the original instance is
    returned and ``fn`` is not called.
    """
    if isinstance(rd, Success):
        return fn(rd.value)
    return rd


def _identity[T](x: T) -> T:
    return x
