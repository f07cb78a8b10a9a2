"""Pending-computation adapter shared by OptionAsync and ResultAsync.

Every async operation in the package goes through ``AsyncWrapper.lift``:
await the wrapped computation, apply the synchronous variant's own method,
then normalize whatever that method returned. The async algebra is thereby
derived from the sync one instead of being written twice.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Generator, Iterable
from types import TracebackType
from typing import Any, Self

import aiologic

from ellefe_core.errors import AbandonedComputationError

__all__ = ['AsyncWrapper', 'Deferred', 'close_pending', 'resolve']


async def resolve(value: Any) -> Any:
    """Await ``value`` until it is no longer awaitable.

    Flattens a variant, an async wrapper, or an awaitable of either into
    the settled variant. Non-awaitable values are returned unchanged.
    """
    while inspect.isawaitable(value):
        value = await value
    return value


def close_pending(items: Iterable[object]) -> None:
    """Close raw coroutine objects that will never be awaited.

    Used after an aggregation short-circuits so skipped coroutines do not
    trigger "never awaited" warnings. Tasks, futures and wrappers are left
    alone.
    """
    for item in items:
        if inspect.iscoroutine(item):
            item.close()


class Deferred[T]:
    """A memoized pending computation.

    The factory runs on the first await, never at construction: a computation
    nobody awaits has no side effects. Its outcome, value or exception, is
    stored and replayed to every later awaiter, so the underlying awaitable is
    driven exactly once no matter how many consumers observe it.

    Note:
        An interruption that is not an ``Exception`` (``asyncio.CancelledError``,
        ``KeyboardInterrupt``) propagates to the awaiter that was driving the
        computation. The computation is then settled as abandoned and later
        awaiters raise ``AbandonedComputationError``.
    """

    __slots__ = ('_error', '_factory', '_lock', '_settled', '_traceback', '_value')

    def __init__(self, factory: Callable[[], Awaitable[T]]) -> None:
        self._factory: Callable[[], Awaitable[T]] | None = factory
        self._lock = aiologic.Lock()
        self._settled = False
        self._value: T | None = None
        self._error: Exception | None = None
        self._traceback: TracebackType | None = None

    @property
    def settled(self) -> bool:
        """True once the computation has produced a value or an exception."""
        return self._settled

    async def get(self) -> T:
        """Drive the computation if needed and return its value."""
        if not self._settled:
            async with self._lock:
                if not self._settled:
                    await self._run()
        if self._error is not None:
            # Reset to the captured traceback so replays do not accumulate frames.
            raise self._error.with_traceback(self._traceback)
        return self._value  # type: ignore[return-value]

    async def _run(self) -> None:
        factory = self._factory
        if factory is None:
            raise RuntimeError('Deferred computation has already settled')
        try:
            self._value = await factory()
        except Exception as e:
            self._settle(e)
        except BaseException as e:
            abandoned = AbandonedComputationError(
                f'Computation was interrupted before it settled: {type(e).__name__}'
            )
            abandoned.__cause__ = e
            self._settle(abandoned)
            raise
        else:
            self._settle(None)

    def _settle(self, error: Exception | None) -> None:
        self._error = error
        self._traceback = error.__traceback__ if error is not None else None
        self._settled = True
        self._factory = None

    def __await__(self) -> Generator[Any, Any, T]:
        return self.get().__await__()


class AsyncWrapper[S]:
    """Base class for async wrappers around a pending variant ``S``.

    Subclasses only declare which operations they lift; all scheduling,
    memoization and normalization lives here.
    """

    __slots__ = ('_pending',)

    _pending: Deferred[S]

    def __init__(self, awaitable: Awaitable[S] | S) -> None:
        """Wrap an awaitable that produces a variant.

        Args:
            awaitable: An awaitable resolving to the variant, another wrapper,
                or an already settled variant.
        """

        async def _settle() -> S:
            return await resolve(awaitable)

        self._pending = Deferred(_settle)

    @classmethod
    def _defer(cls, factory: Callable[[], Awaitable[S]]) -> Self:
        """Build a wrapper whose computation is ``factory``, run on first await."""
        wrapper = cls.__new__(cls)
        wrapper._pending = Deferred(factory)
        return wrapper

    def __await__(self) -> Generator[Any, Any, S]:
        """Support await syntax to get the settled variant."""
        return self._pending.get().__await__()

    def lift[W: AsyncWrapper[Any]](self, op: Callable[[S], Any], into: type[W] | None = None) -> W:
        """Apply ``op`` to the settled variant inside a new wrapper.

        ``op`` may return a variant, an async wrapper, or any awaitable of a
        variant; the result is flattened before it settles the new wrapper.

        Args:
            op: Operation applied to the settled variant.
            into: Wrapper class of the result. Defaults to this wrapper's class.

        Returns:
            New wrapper settling to the normalized result of ``op``.
        """
        target: type[Any] = into if into is not None else type(self)

        async def _lifted() -> Any:
            return await resolve(op(await self))

        return target._defer(_lifted)

    def __repr__(self) -> str:
        state = 'settled' if self._pending.settled else 'pending'
        return f'{type(self).__name__}(<{state}>)'
