"""Result type: Ok[T] | Err[E] for explicit error handling.

A Result is either ``Ok(value)`` or ``Err(error)``. Chaining operations
transform one channel and pass the other through untouched, so a pipeline
reads top to bottom and the first failure flows to the end.

Example:
    ```python
    from ellefe_core import Result, err, ok

    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return err('Cannot divide by zero')
        return ok(a / b)

    divide(10, 2).map(lambda r: r * 2)  # Ok(value=10.0)
    divide(10, 0).map(lambda r: r * 2)  # Err(error='Cannot divide by zero')
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs, overload

import msgspec

from ellefe_core._async import resolve
from ellefe_core._config import report_captured
from ellefe_core.codec import dumps
from ellefe_core.errors import UnwrapError
from ellefe_core.option import Nothing, NothingType, Some
from ellefe_core.unit import UNIT, Unit
from ellefe_core.utils import to_string

if TYPE_CHECKING:
    from ellefe_core.result_async import ResultAsync

__all__ = [
    'Err',
    'Ok',
    'Result',
    'all_ok',
    'any_ok',
    'err',
    'from_or',
    'from_or_else',
    'ok',
    'wrap',
    'wrap_or',
    'wrap_or_else',
]


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or carried through a chain of
    Result-returning operations.

    Examples:
        >>> result = Ok(42)
        >>> result.map(lambda x: x * 2)
        Ok(value=84)
        >>> result.map_err(str.upper)
        Ok(value=42)
        >>> str(result), result.to_json()
        ('Ok(42)', '42')
    """

    value: T

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements of the value if it is iterable, otherwise nothing."""
        if isinstance(self.value, Iterable):
            yield from self.value

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        """Return True if the predicate holds for the contained value."""
        return pred(self.value)

    def is_err_and(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False since this is Ok; the predicate is not called."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_async[U](self, f: Callable[[T], Awaitable[U] | U]) -> ResultAsync[U, Any]:
        """Apply a possibly async function to the contained value.

        Args:
            f: Function returning the new value or an awaitable of it.

        Returns:
            ResultAsync settling to Ok of the awaited result.
        """
        from ellefe_core.result_async import ResultAsync

        value = self.value

        async def _mapped() -> Result[U, Any]:
            return Ok(await resolve(f(value)))

        return ResultAsync._defer(_mapped)

    def map_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def map_err_async(self, _f: Callable[[Any], Any]) -> ResultAsync[T, Any]:
        """Return an already settled ResultAsync of self."""
        from ellefe_core.result_async import ResultAsync

        return ResultAsync.from_result(self)

    def and_then[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def and_then_async[U, E](self, f: Callable[[T], Awaitable[Result[U, E]]]) -> ResultAsync[U, E]:
        """Async bind on the success channel.

        Args:
            f: Function that takes T and returns an awaitable of Result[U, E].

        Returns:
            ResultAsync settling to the Result produced by f.
        """
        from ellefe_core.result_async import ResultAsync

        value = self.value
        return ResultAsync._defer(lambda: resolve(f(value)))

    def or_else(self, _f: Callable[[Any], Result[Any, Any]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def or_else_async(self, _f: Callable[[Any], Awaitable[Result[Any, Any]]]) -> ResultAsync[T, Any]:
        """Return an already settled ResultAsync of self."""
        from ellefe_core.result_async import ResultAsync

        return ResultAsync.from_result(self)

    def match[U](self, *, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:
        """Call ``ok`` with the contained value and return its result."""
        return ok(self.value)

    def ok(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        return Some(self.value)

    def err(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Ok."""
        return Nothing

    def unwrap_or[U](self, _default: U) -> T:
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else[U](self, _f: Callable[[], U]) -> T:
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def unwrap_err_or[U](self, default: U) -> U:
        """Return the default since there is no error."""
        return default

    def unwrap_err_or_else[U](self, f: Callable[[], U]) -> U:
        """Compute and return a default error since there is no error."""
        return f()

    def _unwrap(self) -> T:
        """Return the contained value.

        Warning:
            Test-only escape hatch. Production code should use unwrap_or
            or unwrap_or_else.
        """
        return self.value

    def _unwrap_err(self) -> NoReturn:
        """Raise since Ok holds no error.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError('Tried unwrapping an Ok value as an error.', self.value)

    def to_json(self) -> str:
        """Return the JSON encoding of the contained value."""
        return dumps(self.value)

    def _json_payload(self) -> T:
        return self.value

    def __str__(self) -> str:
        return f'Ok({to_string(self.value)})'


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value, exception or otherwise, that can be transformed, recovered from,
    or carried to the end of a chain.

    Examples:
        >>> failure = Err('something went wrong')
        >>> failure.is_err()
        True
        >>> failure.unwrap_or(0)
        0
        >>> failure.to_json()
        'null'
    """

    error: E

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def is_ok_and(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False since this is Err; the predicate is not called."""
        return False

    def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        """Return True if the predicate holds for the contained error."""
        return pred(self.error)

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_async(self, _f: Callable[[Any], Any]) -> ResultAsync[Any, E]:
        """Return an already settled ResultAsync of self."""
        from ellefe_core.result_async import ResultAsync

        return ResultAsync.from_result(self)

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def map_err_async[F](self, f: Callable[[E], Awaitable[F] | F]) -> ResultAsync[Any, F]:
        """Apply a possibly async function to the contained error."""
        from ellefe_core.result_async import ResultAsync

        error = self.error

        async def _mapped() -> Result[Any, F]:
            return Err(await resolve(f(error)))

        return ResultAsync._defer(_mapped)

    def and_then(self, _f: Callable[[Any], Result[Any, Any]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def and_then_async(self, _f: Callable[[Any], Awaitable[Result[Any, Any]]]) -> ResultAsync[Any, E]:
        """Return an already settled ResultAsync of self."""
        from ellefe_core.result_async import ResultAsync

        return ResultAsync.from_result(self)

    def or_else[T, F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def or_else_async[T, F](self, f: Callable[[E], Awaitable[Result[T, F]]]) -> ResultAsync[T, F]:
        """Async recovery: apply a function returning an awaitable Result."""
        from ellefe_core.result_async import ResultAsync

        error = self.error
        return ResultAsync._defer(lambda: resolve(f(error)))

    def match[U](self, *, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:
        """Call ``err`` with the contained error and return its result."""
        return err(self.error)

    def ok(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Err."""
        return Nothing

    def err(self) -> Some[E]:
        """Convert to Option, returning Some(error)."""
        return Some(self.error)

    def unwrap_or[U](self, default: U) -> U:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[U](self, f: Callable[[], U]) -> U:
        """Compute and return a default value since this is Err."""
        return f()

    def unwrap_err_or[U](self, _default: U) -> E:
        """Return the contained error, ignoring the default."""
        return self.error

    def unwrap_err_or_else[U](self, _f: Callable[[], U]) -> E:
        """Return the contained error, ignoring the fallback function."""
        return self.error

    def _unwrap(self) -> NoReturn:
        """Raise since Err holds no value.

        The raised UnwrapError carries the error as ``.value`` and, when the
        error is an exception, chains it as the cause.

        Raises:
            UnwrapError: Always.
        """
        exc = UnwrapError(f'Attempted to unwrap err result: {to_string(self.error)}', self.error)
        if isinstance(self.error, BaseException):
            raise exc from self.error
        raise exc

    def _unwrap_err(self) -> E:
        """Return the contained error.

        Warning:
            Test-only escape hatch.
        """
        return self.error

    def to_json(self) -> str:
        """Return the JSON literal null."""
        return 'null'

    def _json_payload(self) -> None:
        return None

    def __str__(self) -> str:
        return f'Err({to_string(self.error)})'


type Result[T, E] = Ok[T] | Err[E]


@overload
def ok() -> Ok[Unit]: ...


@overload
def ok[T](value: T) -> Ok[T]: ...


def ok(value: Any = UNIT) -> Ok[Any]:
    """Create an Ok holding ``value`` (Unit when omitted)."""
    return Ok(value)


@overload
def err() -> Err[Unit]: ...


@overload
def err[E](error: E) -> Err[E]: ...


def err(error: Any = UNIT) -> Err[Any]:
    """Create an Err holding ``error`` (Unit when omitted)."""
    return Err(error)


def from_or[T, E](data: T | Result[T, Any] | None, error: E) -> Result[T, E]:
    """Convert a nullable value to a Result.

    ``None`` becomes Err(error) and any other value is wrapped in Ok. A
    Result argument keeps its Ok; an Err has its error replaced by ``error``.

    Examples:
        >>> from_or(None, 'missing')
        Err(error='missing')
        >>> from_or(5, 'missing')
        Ok(value=5)
        >>> from_or(Err('stale'), 'missing')
        Err(error='missing')
    """
    if data is None or isinstance(data, Err):
        return Err(error)
    if isinstance(data, Ok):
        return data
    return Ok(data)


def from_or_else[T, E](data: T | Result[T, Any] | None, error_fn: Callable[[], E]) -> Result[T, E]:
    """Like from_or, computing the error only when ``data`` is None or an Err."""
    if data is None or isinstance(data, Err):
        return Err(error_fn())
    if isinstance(data, Ok):
        return data
    return Ok(data)


def wrap[T](f: Callable[[], T]) -> Result[T, Exception]:
    """Call ``f``, returning Ok(result) or Err(exception) if it raises.

    Example:
        ```python
        wrap(lambda: int('42'))    # Ok(value=42)
        wrap(lambda: int('nope'))  # Err(error=ValueError(...))
        ```
    """
    try:
        return Ok(f())
    except Exception as e:
        report_captured(f, e)
        return Err(e)


def wrap_or[T, E](f: Callable[[], T], error: E) -> Result[T, E]:
    """Call ``f``, substituting ``error`` for any raised exception."""
    try:
        return Ok(f())
    except Exception as e:
        report_captured(f, e)
        return Err(error)


def wrap_or_else[T, E](f: Callable[[], T], error_fn: Callable[[Exception], E]) -> Result[T, E]:
    """Call ``f``, mapping any raised exception through ``error_fn``."""
    try:
        return Ok(f())
    except Exception as e:
        report_captured(f, e)
        return Err(error_fn(e))


def all_ok(*results: Result[Any, Any]) -> Result[list[Any], Any]:
    """Collect Results into a Result of list.

    Short-circuits on the first Err in argument order.

    Examples:
        >>> all_ok(Ok(1), Ok(2), Ok(3))
        Ok(value=[1, 2, 3])
        >>> all_ok(Ok(1), Err('x'), Ok(3))
        Err(error='x')
    """
    values: list[Any] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


def any_ok(*results: Result[Any, Any]) -> Result[Any, list[Any]]:
    """Return the first Ok in argument order.

    Unlike all_ok, the error side accumulates: when every result is Err the
    returned Err holds all errors in argument order.

    Examples:
        >>> any_ok(Err('a'), Ok(2), Ok(3))
        Ok(value=2)
        >>> any_ok(Err('a'), Err('b'), Err('c'))
        Err(error=['a', 'b', 'c'])
    """
    errors: list[Any] = []
    for result in results:
        if isinstance(result, Ok):
            return result
        errors.append(result.error)
    return Err(errors)
