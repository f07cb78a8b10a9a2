"""OptionAsync: an Option whose value is still being computed.

OptionAsync wraps one pending computation of an Option and exposes the same
operations as Option. Each chaining method lifts the matching Option method
across the pending boundary, so ``await opt_async.map(f)`` always equals
``(await opt_async).map(f)``.

Example:
    ```python
    async def find_user(id: int) -> Option[User]: ...

    name = await (
        OptionAsync(find_user(1))
        .map(lambda user: user.name)
        .unwrap_or('anonymous')
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, overload

from ellefe_core._async import AsyncWrapper, close_pending, resolve
from ellefe_core._config import report_captured
from ellefe_core.option import Nothing, NothingType, Option, Some, from_nullable
from ellefe_core.result import Err, Ok
from ellefe_core.unit import UNIT, Unit

if TYPE_CHECKING:
    from ellefe_core.result_async import ResultAsync

__all__ = [
    'OptionAsync',
    'all_some_async',
    'any_some_async',
    'from_nullable_async',
    'none_async',
    'some_async',
    'wrap_opt_async',
]

type OptionLike[T] = Option[T] | OptionAsync[T] | Awaitable[Option[T]]


class OptionAsync[T](AsyncWrapper[Option[T]]):
    """Async-aware Option wrapper.

    The wrapped computation runs the first time the wrapper is awaited and
    settles once; every later await, and every wrapper derived from it,
    observes that same Option. A chain that is never awaited never runs, so
    side effects in mapped functions need an ``await`` somewhere downstream.

    Examples:
        ```python
        async def example():
            assert await some_async(2).map(lambda x: x + 1) == Some(3)
            assert await none_async().unwrap_or(0) == 0
        ```
    """

    __slots__ = ()

    @classmethod
    def from_option(cls, option: Option[T]) -> OptionAsync[T]:
        """Create an OptionAsync already holding ``option``."""

        async def _option() -> Option[T]:
            return option

        return cls._defer(_option)

    async def is_some(self) -> bool:
        """Return True if the settled option is Some."""
        return (await self).is_some()

    async def is_none(self) -> bool:
        """Return True if the settled option is Nothing."""
        return (await self).is_none()

    def map[U](self, f: Callable[[T], Awaitable[U] | U]) -> OptionAsync[U]:
        """Transform the Some value with a sync or async function.

        Args:
            f: Function returning the new value or an awaitable of it.

        Returns:
            New OptionAsync with the transformed value; Nothing passes through
            without calling f.
        """
        return self.lift(lambda option: option.map_async(f))

    def map_async[U](self, f: Callable[[T], Awaitable[U] | U]) -> OptionAsync[U]:
        """Alias of map, mirroring Option.map_async."""
        return self.map(f)

    def and_then[U](self, f: Callable[[T], OptionLike[U]]) -> OptionAsync[U]:
        """Chain with a function returning an Option, OptionAsync or awaitable Option.

        Example:
            ```python
            async def lookup(key: str) -> Option[int]: ...

            await some_async('a').and_then(lookup).and_then(lambda v: some(v + 1))
            ```
        """
        return self.lift(lambda option: option.and_then(f))

    def and_then_async[U](self, f: Callable[[T], OptionLike[U]]) -> OptionAsync[U]:
        """Alias of and_then, mirroring Option.and_then_async."""
        return self.and_then(f)

    async def match[U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:
        """Match the settled option, calling exactly one branch."""
        return (await self).match(some=some, none=none)

    def ok_or[E](self, error: E) -> ResultAsync[T, E]:
        """Convert to ResultAsync, using ``error`` for Nothing."""
        from ellefe_core.result_async import ResultAsync

        return self.lift(lambda option: option.ok_or(error), ResultAsync)

    def ok_or_else[E](self, f: Callable[[], Awaitable[E] | E]) -> ResultAsync[T, E]:
        """Convert to ResultAsync, computing (and awaiting) the error for Nothing."""
        from ellefe_core.result_async import ResultAsync

        async def _convert(option: Option[T]) -> Any:
            if isinstance(option, Some):
                return Ok(option.value)
            return Err(await resolve(f()))

        return self.lift(_convert, ResultAsync)

    async def unwrap_or[U](self, default: U) -> T | U:
        """Return the Some value or ``default``."""
        return (await self).unwrap_or(default)

    async def unwrap_or_else[U](self, f: Callable[[], Awaitable[U] | U]) -> T | U:
        """Return the Some value or the (awaited) result of ``f``."""
        option = await self
        if isinstance(option, Some):
            return option.value
        return await resolve(f())

    async def _unwrap(self) -> T:
        """Test-only: return the Some value or raise UnwrapError."""
        return (await self)._unwrap()


@overload
def some_async() -> OptionAsync[Unit]: ...


@overload
def some_async[T](value: Awaitable[T] | T) -> OptionAsync[T]: ...


def some_async(value: Any = UNIT) -> OptionAsync[Any]:
    """Create an OptionAsync settling to Some of ``value``, awaiting it if needed."""

    async def _some() -> Option[Any]:
        return Some(await resolve(value))

    return OptionAsync._defer(_some)


def none_async() -> OptionAsync[Any]:
    """Create an OptionAsync settling to Nothing."""
    return OptionAsync.from_option(Nothing)


def from_nullable_async[T](value: Awaitable[T | None]) -> OptionAsync[T]:
    """Async from_nullable: None becomes Nothing, other values Some."""

    async def _from() -> Option[T]:
        return from_nullable(await value)

    return OptionAsync._defer(_from)


def wrap_opt_async[T](f: Callable[[], Awaitable[T] | T]) -> OptionAsync[T]:
    """Call ``f`` and await its result into Some, or Nothing if it raises.

    ``f`` is called when the returned OptionAsync is first awaited.
    """

    async def _wrapped() -> Option[T]:
        try:
            return Some(await resolve(f()))
        except Exception as e:
            report_captured(f, e)
            return Nothing

    return OptionAsync._defer(_wrapped)


def all_some_async(*options: OptionLike[Any]) -> OptionAsync[list[Any]]:
    """Async all_some over Options, OptionAsyncs and awaitables of Options.

    Inputs are awaited one at a time in argument order. At the first
    Nothing the remaining inputs are not awaited; raw coroutines among them
    are closed.
    """

    async def _all() -> Option[list[Any]]:
        values: list[Any] = []
        for i, item in enumerate(options):
            option = await resolve(item)
            if isinstance(option, NothingType):
                close_pending(options[i + 1 :])
                return option
            values.append(option.value)
        return Some(values)

    return OptionAsync._defer(_all)


def any_some_async(*options: OptionLike[Any]) -> OptionAsync[Any]:
    """Async any_some: the first Some in argument order, awaiting sequentially."""

    async def _any() -> Option[Any]:
        for i, item in enumerate(options):
            option = await resolve(item)
            if isinstance(option, Some):
                close_pending(options[i + 1 :])
                return option
        return Nothing

    return OptionAsync._defer(_any)
