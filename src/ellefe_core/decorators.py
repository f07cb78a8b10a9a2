"""@safe and @safe_async decorators for turning raised exceptions into Err."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from ellefe_core._async import resolve
from ellefe_core._config import report_captured
from ellefe_core.result import Err, Ok, Result
from ellefe_core.result_async import ResultAsync

__all__ = ['safe', 'safe_async']


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Result[T, Exception]]: ...


@overload
def safe[**P, T, E: Exception](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Result[T, E]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator form of ``wrap``: return Ok(value) or Err(exception).

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, KeyError))
        def specific(): ...

    Exceptions outside ``exceptions`` propagate unchanged.

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to capture. Defaults to (Exception,).

    Example:
        ```python
        @safe
        def parse_port(raw: str) -> int:
            return int(raw)

        parse_port('8080')  # Ok(value=8080)
        parse_port('http')  # Err(error=ValueError(...))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[T, Any]:
        try:
            return Ok(wrapped(*args, **kwargs))
        except catch as e:
            report_captured(wrapped, e)
            return Err(e)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, ResultAsync[T, Exception]]: ...


@overload
def safe_async[**P, T, E: Exception](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, ResultAsync[T, E]]]: ...


def safe_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator form of ``wrap_async``: calls return a ResultAsync.

    The decorated function is not started by the call itself; it runs the
    first time the returned ResultAsync is awaited.

    Example:
        ```python
        @safe_async
        async def fetch(url: str) -> bytes:
            return await http_get(url)

        body = await fetch(url).unwrap_or(b'')
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> ResultAsync[T, Any]:
        async def _call() -> Result[T, Any]:
            try:
                return Ok(await resolve(wrapped(*args, **kwargs)))
            except catch as e:
                report_captured(wrapped, e)
                return Err(e)

        return ResultAsync._defer(_call)

    if func is not None:
        return wrapper(func)
    return wrapper
