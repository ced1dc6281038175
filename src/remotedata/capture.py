"""Turn the outcome of a caller's operation into ``Success`` or ``Failed``.

These helpers never fetch anything themselves: they run the callable or
await the awaitable they are handed, exactly once, and record how it ended.
``NotAsked`` and ``Loading`` are never produced here; those are the
caller's states before and while the operation runs.
"""

from __future__ import annotations

import asyncio
import functools
import inspect
import time
from typing import Any, Awaitable, Callable, Coroutine, Protocol, overload

from remotedata._logging import get_logger, summarize_args
from remotedata.variants import Failed, RemoteData, Success

DEFAULT_CATCH: tuple[type[BaseException], ...] = (Exception,)

logger = get_logger("capture")


def _resolve_catch(
    catch: tuple[type[BaseException], ...] | None,
) -> tuple[type[BaseException], ...]:
    return DEFAULT_CATCH if catch is None else catch


def _label(obj: object) -> str:
    return getattr(obj, "__qualname__", None) or repr(obj)


def _call_logged[T](
    fn: Callable[..., T],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    catch: tuple[type[BaseException], ...],
) -> RemoteData[BaseException, T]:
    label = _label(fn)
    arg_str = summarize_args(args, kwargs)
    logger.info("CALL: %s(%s)", label, arg_str)

    start = time.monotonic()
    try:
        value = fn(*args, **kwargs)
    except catch as exc:
        elapsed = time.monotonic() - start
        logger.error(
            "FAIL: %s(%s) -> %s: %s (%.3fs)",
            label, arg_str, type(exc).__name__, exc, elapsed,
        )
        return Failed(exc)
    except Exception as exc:
        elapsed = time.monotonic() - start
        logger.error(
            "FAIL: %s(%s) -> %s: %s (%.3fs), not captured",
            label, arg_str, type(exc).__name__, exc, elapsed,
        )
        raise

    elapsed = time.monotonic() - start
    logger.info("OK: %s(%s) -> Success (%.3fs)", label, arg_str, elapsed)
    return Success(value)


async def _await_logged[T](
    awaitable: Awaitable[T],
    label: str,
    arg_str: str,
    catch: tuple[type[BaseException], ...],
) -> RemoteData[BaseException, T]:
    logger.info("CALL: %s(%s)", label, arg_str)

    start = time.monotonic()
    try:
        value = await awaitable
    except asyncio.CancelledError:
        raise
    except catch as exc:
        elapsed = time.monotonic() - start
        logger.error(
            "FAIL: %s(%s) -> %s: %s (%.3fs)",
            label, arg_str, type(exc).__name__, exc, elapsed,
        )
        return Failed(exc)
    except Exception as exc:
        elapsed = time.monotonic() - start
        logger.error(
            "FAIL: %s(%s) -> %s: %s (%.3fs), not captured",
            label, arg_str, type(exc).__name__, exc, elapsed,
        )
        raise

    elapsed = time.monotonic() - start
    logger.info("OK: %s(%s) -> Success (%.3fs)", label, arg_str, elapsed)
    return Success(value)


def from_call[T](
    fn: Callable[..., T],
    *args: Any,
    catch: tuple[type[BaseException], ...] | None = None,
    **kwargs: Any,
) -> RemoteData[BaseException, T]:
    """Call ``fn(*args, **kwargs)`` once and wrap its outcome.

    Returns ``Success(result)``, or ``Failed(exc)`` if it raised one of
    ``catch`` (``DEFAULT_CATCH`` when omitted). Anything else propagates.
    The ``catch`` keyword is consumed here and never forwarded to ``fn``.

    Usage:
        rd = from_call(json.loads, payload)
        rd = from_call(client.get, "/drivers", catch=(httpx.HTTPError,))
    """
    return _call_logged(fn, args, kwargs, _resolve_catch(catch))


async def from_awaitable[T](
    awaitable: Awaitable[T],
    *,
    catch: tuple[type[BaseException], ...] | None = None,
    label: str | None = None,
) -> RemoteData[BaseException, T]:
    """Await ``awaitable`` once and wrap its outcome.

    ``label`` names the operation in log lines; it defaults to the
    awaitable's ``__qualname__``. ``asyncio.CancelledError`` always
    propagates, even when ``catch`` names ``BaseException``.

    Usage:
        rd = await from_awaitable(client.get("/drivers"))
    """
    return await _await_logged(
        awaitable, label or _label(awaitable), "", _resolve_catch(catch),
    )


class _Decorator(Protocol):
    @overload
    def __call__[**P, R](
        self, fn: Callable[P, Coroutine[Any, Any, R]]
    ) -> Callable[P, Coroutine[Any, Any, RemoteData[BaseException, R]]]: ...

    @overload
    def __call__[**P, R](
        self, fn: Callable[P, R]
    ) -> Callable[P, RemoteData[BaseException, R]]: ...


@overload
def capture[**P, R](
    fn: Callable[P, Coroutine[Any, Any, R]],
    *,
    catch: tuple[type[BaseException], ...] | None = None,
) -> Callable[P, Coroutine[Any, Any, RemoteData[BaseException, R]]]: ...


@overload
def capture[**P, R](
    fn: Callable[P, R],
    *,
    catch: tuple[type[BaseException], ...] | None = None,
) -> Callable[P, RemoteData[BaseException, R]]: ...


@overload
def capture(
    fn: None = None,
    *,
    catch: tuple[type[BaseException], ...] | None = None,
) -> _Decorator: ...


def capture(
    fn: Callable[..., Any] | None = None,
    *,
    catch: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator making a function return ``RemoteData`` instead of raising.

    Works on plain functions and on coroutine functions (the wrapper is then
    a coroutine function too). Usable bare or with arguments::

        @capture
        def load_laps(session_key: int) -> list[Lap]: ...

        @capture(catch=(httpx.HTTPError,))
        async def load_drivers(session_key: int) -> list[Driver]: ...
    """

    def decorate(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await _await_logged(
                    func(*args, **kwargs),
                    _label(func),
                    summarize_args(args, kwargs),
                    _resolve_catch(catch),
                )

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return _call_logged(func, args, kwargs, _resolve_catch(catch))

        return wrapper

    if fn is None:
        return decorate
    return decorate(fn)
