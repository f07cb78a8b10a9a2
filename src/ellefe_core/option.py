"""Option type: Some[T] | Nothing for optional values.

An Option is either ``Some(value)``, holding exactly one immutable value, or
``Nothing``, holding none. Operations never mutate a variant; they return a
new Option or the receiver itself when short-circuiting.

Example:
    ```python
    from ellefe_core import Nothing, from_nullable, some

    port = from_nullable(os.environ.get('PORT')).map(int).unwrap_or(8080)

    some(2).and_then(lambda x: some(x * 10))  # Some(value=20)
    Nothing.map(lambda x: x * 10)             # NothingType()
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
from ellefe_core.unit import UNIT, Unit
from ellefe_core.utils import to_string

if TYPE_CHECKING:
    from ellefe_core.option_async import OptionAsync
    from ellefe_core.result import Err, Ok

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'all_some',
    'any_some',
    'from_nullable',
    'none',
    'some',
    'wrap_opt',
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It wraps a value that can be
    extracted, transformed, or carried through a chain of Option-returning
    operations. ``Some(None)`` is a present value and is not ``Nothing``.

    Examples:
        >>> some = Some(42)
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> str(some)
        'Some(42)'
        >>> some.to_json()
        '42'
        >>> list(Some([1, 2, 3]))
        [1, 2, 3]
    """

    value: T

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements of the value if it is iterable, otherwise nothing."""
        if isinstance(self.value, Iterable):
            yield from self.value

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_async[U](self, f: Callable[[T], Awaitable[U] | U]) -> OptionAsync[U]:
        """Apply a possibly async function to the contained value.

        The function runs when the returned OptionAsync is first awaited.

        Args:
            f: Function returning the new value or an awaitable of it.

        Returns:
            OptionAsync settling to Some of the awaited result.
        """
        from ellefe_core.option_async import OptionAsync

        value = self.value

        async def _mapped() -> Option[U]:
            return Some(await resolve(f(value)))

        return OptionAsync._defer(_mapped)

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind. The returned Option is not wrapped
        again.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def and_then_async[U](self, f: Callable[[T], Awaitable[Option[U]]]) -> OptionAsync[U]:
        """Async bind: apply a function returning an awaitable Option.

        Args:
            f: Function that takes T and returns an awaitable of Option[U].

        Returns:
            OptionAsync settling to the Option produced by f.
        """
        from ellefe_core.option_async import OptionAsync

        value = self.value
        return OptionAsync._defer(lambda: resolve(f(value)))

    def match[U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:
        """Call ``some`` with the contained value and return its result."""
        return some(self.value)

    def ok_or[E](self, _error: E) -> Ok[T]:
        """Convert to Result, returning Ok(value).

        Args:
            _error: Ignored error value.

        Returns:
            Ok containing the value.
        """
        from ellefe_core.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value) without calling the error factory."""
        from ellefe_core.result import Ok

        return Ok(self.value)

    def unwrap_or[U](self, _default: U) -> T:
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else[U](self, _f: Callable[[], U]) -> T:
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def _unwrap(self) -> T:
        """Return the contained value.

        Warning:
            Test-only escape hatch. Production code should use unwrap_or
            or unwrap_or_else.
        """
        return self.value

    def to_json(self) -> str:
        """Return the JSON encoding of the contained value."""
        return dumps(self.value)

    def _json_payload(self) -> T:
        return self.value

    def __str__(self) -> str:
        return f'Some({to_string(self.value)})'


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is effectively a singleton - use the `Nothing` constant instead of
    instantiating directly. All instances compare equal.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
        >>> str(Nothing)
        'None'
    """

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map_async(self, _f: Callable[[Any], Any]) -> OptionAsync[Any]:
        """Return an already settled OptionAsync of Nothing."""
        from ellefe_core.option_async import OptionAsync

        return OptionAsync.from_option(self)

    def and_then(self, _f: Callable[[Any], Option[Any]]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def and_then_async(self, _f: Callable[[Any], Awaitable[Option[Any]]]) -> OptionAsync[Any]:
        """Return an already settled OptionAsync of Nothing."""
        from ellefe_core.option_async import OptionAsync

        return OptionAsync.from_option(self)

    def match[U](self, *, some: Callable[[Any], U], none: Callable[[], U]) -> U:
        """Call ``none`` and return its result."""
        return none()

    def ok_or[E](self, error: E) -> Err[E]:
        """Convert to Result, returning Err(error).

        Args:
            error: The error value to wrap.

        Returns:
            Err containing the error.
        """
        from ellefe_core.result import Err

        return Err(error)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error.

        Args:
            f: Function that produces the error value.

        Returns:
            Err containing the computed error.
        """
        from ellefe_core.result import Err

        return Err(f())

    def unwrap_or[U](self, default: U) -> U:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[U](self, f: Callable[[], U]) -> U:
        """Compute and return a default value since this is Nothing."""
        return f()

    def _unwrap(self) -> NoReturn:
        """Raise since Nothing has no value.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError('Attempted to unwrap none option')

    def to_json(self) -> str:
        """Return the JSON literal null."""
        return 'null'

    def _json_payload(self) -> None:
        return None

    def __str__(self) -> str:
        return 'None'


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


@overload
def some() -> Some[Unit]: ...


@overload
def some[T](value: T) -> Some[T]: ...


def some(value: Any = UNIT) -> Some[Any]:
    """Create a Some holding ``value`` (Unit when omitted)."""
    return Some(value)


def none() -> NothingType:
    """Return Nothing."""
    return Nothing


def from_nullable[T](value: T | Option[T] | None) -> Option[T]:
    """Convert a nullable value to an Option.

    ``None`` becomes Nothing, an Option is returned unchanged, and any other
    value is wrapped in Some.

    Examples:
        >>> from_nullable(None)
        NothingType()
        >>> from_nullable(3)
        Some(value=3)
        >>> from_nullable(Some(3))
        Some(value=3)
    """
    if value is None:
        return Nothing
    if isinstance(value, Some | NothingType):
        return value
    return Some(value)


def wrap_opt[T](f: Callable[[], T]) -> Option[T]:
    """Call ``f`` and wrap its return value in Some.

    If ``f`` raises an Exception the exception is discarded and Nothing is
    returned, since Option has no error channel. Use ``wrap`` to keep it.
    """
    try:
        return Some(f())
    except Exception as e:
        report_captured(f, e)
        return Nothing


def all_some(*options: Option[Any]) -> Option[list[Any]]:
    """Collect Options into an Option of list.

    Returns Nothing at the first Nothing in argument order.

    Examples:
        >>> all_some(Some(1), Some(2), Some(3))
        Some(value=[1, 2, 3])
        >>> all_some(Some(1), Nothing, Some(3))
        NothingType()
    """
    values: list[Any] = []
    for option in options:
        if isinstance(option, NothingType):
            return option
        values.append(option.value)
    return Some(values)


def any_some(*options: Option[Any]) -> Option[Any]:
    """Return the first Some in argument order, or Nothing if there is none."""
    for option in options:
        if isinstance(option, Some):
            return option
    return Nothing
