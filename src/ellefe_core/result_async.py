"""ResultAsync: a Result whose outcome is still being computed.

ResultAsync wraps an awaitable of a Result and provides the Result
operations lifted across the pending boundary. Chaining methods return new
ResultAsync instances; terminal methods (``match``, ``unwrap_or`` ...) are
coroutines.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User, str]: ...

    result = await (
        ResultAsync(fetch_user(1))
        .and_then(validate_user)
        .map(format_response)
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

from ellefe_core._async import AsyncWrapper, close_pending, resolve
from ellefe_core._config import report_captured
from ellefe_core.option_async import OptionAsync
from ellefe_core.result import Err, Ok, Result, from_or, from_or_else
from ellefe_core.unit import UNIT, Unit

__all__ = [
    'ResultAsync',
    'all_ok_async',
    'any_ok_async',
    'err_async',
    'from_or_async',
    'from_or_else_async',
    'ok_async',
    'wrap_async',
    'wrap_or_async',
    'wrap_or_else_async',
]

type ResultLike[T, E] = Result[T, E] | ResultAsync[T, E] | Awaitable[Result[T, E]]


class ResultAsync[T, E](AsyncWrapper[Result[T, E]]):
    """Async-aware Result wrapper for composing async Result operations.

    ResultAsync holds one pending computation of a Result[T, E]. Every
    method lifts the corresponding Result method, so for any operation
    ``await r.op(f) == (await r).op(f)``.

    Note:
        The wrapped computation is memoized. Awaiting the same ResultAsync
        several times, or deriving several chains from it, runs the wrapped
        awaitable once and shares its outcome, including a raised exception.
        Nothing runs until the first await: ``wrap_async(send)`` or
        ``ok_async(1).map(send)`` left unawaited never calls ``send``.

    Example:
        ```python
        async def get_data() -> Result[int, str]:
            return Ok(42)

        async def main():
            result = await ResultAsync(get_data()).map(lambda x: x * 2)
            assert result == Ok(84)
        ```
    """

    __slots__ = ()

    @classmethod
    def from_result(cls, result: Result[T, E]) -> ResultAsync[T, E]:
        """Create a ResultAsync already holding ``result``."""

        async def _result() -> Result[T, E]:
            return result

        return cls._defer(_result)

    @classmethod
    def from_ok(cls, value: T) -> ResultAsync[T, E]:
        """Create a ResultAsync already holding Ok(value)."""
        return cls.from_result(Ok(value))

    @classmethod
    def from_err(cls, error: E) -> ResultAsync[T, E]:
        """Create a ResultAsync already holding Err(error)."""
        return cls.from_result(Err(error))

    async def is_ok(self) -> bool:
        return (await self).is_ok()

    async def is_err(self) -> bool:
        return (await self).is_err()

    async def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        return (await self).is_ok_and(pred)

    async def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        return (await self).is_err_and(pred)

    def map[U](self, f: Callable[[T], Awaitable[U] | U]) -> ResultAsync[U, E]:
        """Apply a sync or async function to the Ok value.

        If the underlying Result is Ok, applies f to the value and awaits
        the outcome if needed. If Err, returns the Err unchanged.

        Example:
            ```python
            async def example():
                result = await ResultAsync.from_ok(5).map(lambda x: x * 2)
                assert result == Ok(10)
            ```
        """
        return self.lift(lambda result: result.map_async(f))

    def map_async[U](self, f: Callable[[T], Awaitable[U] | U]) -> ResultAsync[U, E]:
        """Alias of map, mirroring Result.map_async."""
        return self.map(f)

    def map_err[F](self, f: Callable[[E], Awaitable[F] | F]) -> ResultAsync[T, F]:
        """Apply a sync or async function to the Err value; Ok passes through."""
        return self.lift(lambda result: result.map_err_async(f))

    def map_err_async[F](self, f: Callable[[E], Awaitable[F] | F]) -> ResultAsync[T, F]:
        """Alias of map_err, mirroring Result.map_err_async."""
        return self.map_err(f)

    def and_then[U, F](self, f: Callable[[T], ResultLike[U, F]]) -> ResultAsync[U, E | F]:
        """Chain with a function returning a Result, a ResultAsync or an awaitable Result.

        If Ok, calls f(value) and settles to its (awaited) result.
        If Err, returns the Err unchanged without calling f.

        Example:
            ```python
            def validate(x: int) -> Result[int, str]:
                return Ok(x) if x > 0 else Err('not positive')

            async def example():
                result = await ok_async(5).and_then(validate)
                assert result == Ok(5)
            ```
        """
        return self.lift(lambda result: result.and_then(f))

    def and_then_async[U, F](self, f: Callable[[T], ResultLike[U, F]]) -> ResultAsync[U, E | F]:
        """Alias of and_then, mirroring Result.and_then_async."""
        return self.and_then(f)

    def or_else[U, F](self, f: Callable[[E], ResultLike[U, F]]) -> ResultAsync[T | U, F]:
        """Recover from an Err with a function returning a Result, ResultAsync or awaitable.

        If Err, calls f(error) and settles to its result.
        If Ok, returns the Ok unchanged.
        """
        return self.lift(lambda result: result.or_else(f))

    def or_else_async[U, F](self, f: Callable[[E], ResultLike[U, F]]) -> ResultAsync[T | U, F]:
        """Alias of or_else, mirroring Result.or_else_async."""
        return self.or_else(f)

    async def match[U](self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Match the settled result, calling exactly one branch."""
        return (await self).match(ok=ok, err=err)

    def ok(self) -> OptionAsync[T]:
        """Project to OptionAsync: Some(value) for Ok, Nothing for Err."""
        return self.lift(lambda result: result.ok(), OptionAsync)

    def err(self) -> OptionAsync[E]:
        """Project to OptionAsync: Some(error) for Err, Nothing for Ok."""
        return self.lift(lambda result: result.err(), OptionAsync)

    async def unwrap_or[U](self, default: U) -> T | U:
        """Unwrap with a default value."""
        return (await self).unwrap_or(default)

    async def unwrap_or_else[U](self, f: Callable[[], Awaitable[U] | U]) -> T | U:
        """Unwrap, computing (and awaiting) the fallback for Err."""
        result = await self
        if isinstance(result, Ok):
            return result.value
        return await resolve(f())

    async def unwrap_err_or[U](self, default: U) -> E | U:
        """Unwrap the error with a default for Ok."""
        return (await self).unwrap_err_or(default)

    async def unwrap_err_or_else[U](self, f: Callable[[], Awaitable[U] | U]) -> E | U:
        """Unwrap the error, computing (and awaiting) the fallback for Ok."""
        result = await self
        if isinstance(result, Err):
            return result.error
        return await resolve(f())

    async def _unwrap(self) -> T:
        """Test-only: return the Ok value or raise UnwrapError."""
        return (await self)._unwrap()

    async def _unwrap_err(self) -> E:
        """Test-only: return the Err error or raise UnwrapError."""
        return (await self)._unwrap_err()


@overload
def ok_async() -> ResultAsync[Unit, Any]: ...


@overload
def ok_async[T](value: Awaitable[T] | T) -> ResultAsync[T, Any]: ...


def ok_async(value: Any = UNIT) -> ResultAsync[Any, Any]:
    """Create a ResultAsync settling to Ok of ``value``, awaiting it if needed."""

    async def _ok() -> Result[Any, Any]:
        return Ok(await resolve(value))

    return ResultAsync._defer(_ok)


@overload
def err_async() -> ResultAsync[Any, Unit]: ...


@overload
def err_async[E](error: Awaitable[E] | E) -> ResultAsync[Any, E]: ...


def err_async(error: Any = UNIT) -> ResultAsync[Any, Any]:
    """Create a ResultAsync settling to Err of ``error``, awaiting it if needed."""

    async def _err() -> Result[Any, Any]:
        return Err(await resolve(error))

    return ResultAsync._defer(_err)


def from_or_async[T, E](data: Awaitable[T | Result[T, Any] | None], error: E) -> ResultAsync[T, E]:
    """Async from_or over an awaitable or a ResultAsync."""

    async def _from() -> Result[T, E]:
        return from_or(await data, error)

    return ResultAsync._defer(_from)


def from_or_else_async[T, E](
    data: Awaitable[T | Result[T, Any] | None],
    error_fn: Callable[[], E],
) -> ResultAsync[T, E]:
    """Async from_or_else over an awaitable or a ResultAsync."""

    async def _from() -> Result[T, E]:
        return from_or_else(await data, error_fn)

    return ResultAsync._defer(_from)


def wrap_async[T](f: Callable[[], Awaitable[T] | T]) -> ResultAsync[T, Exception]:
    """Call ``f`` and await its result into Ok, or Err(exception) if it raises.

    Example:
        ```python
        async def fetch() -> bytes: ...

        body = await wrap_async(fetch).unwrap_or(b'')
        ```
    """

    async def _wrapped() -> Result[T, Exception]:
        try:
            return Ok(await resolve(f()))
        except Exception as e:
            report_captured(f, e)
            return Err(e)

    return ResultAsync._defer(_wrapped)


def wrap_or_async[T, E](f: Callable[[], Awaitable[T] | T], error: E) -> ResultAsync[T, E]:
    """Async wrap_or: substitute ``error`` for any raised exception."""

    async def _wrapped() -> Result[T, E]:
        try:
            return Ok(await resolve(f()))
        except Exception as e:
            report_captured(f, e)
            return Err(error)

    return ResultAsync._defer(_wrapped)


def wrap_or_else_async[T, E](
    f: Callable[[], Awaitable[T] | T],
    error_fn: Callable[[Exception], E],
) -> ResultAsync[T, E]:
    """Async wrap_or_else: map any raised exception through ``error_fn``."""

    async def _wrapped() -> Result[T, E]:
        try:
            return Ok(await resolve(f()))
        except Exception as e:
            report_captured(f, e)
            return Err(error_fn(e))

    return ResultAsync._defer(_wrapped)


def all_ok_async(*results: ResultLike[Any, Any]) -> ResultAsync[list[Any], Any]:
    """Async all_ok over Results, ResultAsyncs and awaitables of Results.

    Inputs are awaited one at a time in argument order, never concurrently,
    so the outcome does not depend on completion order. The first Err stops
    the iteration; raw coroutines after it are closed without running.
    """

    async def _all() -> Result[list[Any], Any]:
        values: list[Any] = []
        for i, item in enumerate(results):
            result = await resolve(item)
            if isinstance(result, Err):
                close_pending(results[i + 1 :])
                return result
            values.append(result.value)
        return Ok(values)

    return ResultAsync._defer(_all)


def any_ok_async(*results: ResultLike[Any, Any]) -> ResultAsync[Any, list[Any]]:
    """Async any_ok: the first Ok, or Err of every error in argument order."""

    async def _any() -> Result[Any, list[Any]]:
        errors: list[Any] = []
        for i, item in enumerate(results):
            result = await resolve(item)
            if isinstance(result, Ok):
                close_pending(results[i + 1 :])
                return result
            errors.append(result.error)
        return Err(errors)

    return ResultAsync._defer(_any)
