"""Runtime type guards.

Every guard is a predicate ``(value) -> bool`` annotated with ``TypeIs`` so a
type checker narrows the argument on the true branch. The factories
(``is_list_of``, ``is_shaped``, ``is_union`` ...) combine guards into new
ones.

Example:
    ```python
    is_user = is_shaped({'name': is_str, 'age': is_number})

    if is_user(payload):
        greet(payload['name'])
    ```
"""

from __future__ import annotations

import enum
import math
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeIs

__all__ = [
    'Guard',
    'has_key',
    'is_bool',
    'is_enum',
    'is_intersection',
    'is_list',
    'is_list_of',
    'is_mapping',
    'is_mapping_of',
    'is_none',
    'is_number',
    'is_numeric',
    'is_numeric_string',
    'is_optional',
    'is_primitive',
    'is_shaped',
    'is_str',
    'is_union',
]

type Guard[T] = Callable[[object], TypeIs[T]]


def is_bool(value: object) -> TypeIs[bool]:
    return isinstance(value, bool)


def is_none(value: object) -> TypeIs[None]:
    return value is None


def is_number(value: object) -> TypeIs[int | float]:
    """True for int and float values. ``bool`` is not a number here."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_str(value: object) -> TypeIs[str]:
    return isinstance(value, str)


def is_numeric_string(value: object) -> TypeIs[str]:
    """True for strings that parse as a finite or infinite float, such as '1.5' or '-3'.

    Blank strings and 'nan' are rejected.
    """
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        parsed = float(value)
    except ValueError:
        return False
    return not math.isnan(parsed)


def is_primitive(value: object) -> TypeIs[str | int | float | bool | None]:
    return value is None or isinstance(value, str | int | float | bool)


def is_numeric(value: object) -> TypeIs[int | float | str]:
    """True for numbers and numeric strings."""
    return is_number(value) or is_numeric_string(value)


def is_list(value: object) -> TypeIs[list[Any] | tuple[Any, ...]]:
    """True for lists and tuples."""
    return isinstance(value, list | tuple)


def is_list_of[T](guard: Guard[T]) -> Guard[list[T] | tuple[T, ...]]:
    """Guard for lists or tuples whose every element passes ``guard``.

    Examples:
        >>> is_list_of(is_number)([1, 2, 3])
        True
        >>> is_list_of(is_number)([1, '2', 3])
        False
    """

    def _guard(value: object) -> TypeIs[list[T] | tuple[T, ...]]:
        return is_list(value) and all(guard(item) for item in value)

    return _guard


def is_mapping(value: object) -> TypeIs[Mapping[Any, Any]]:
    return isinstance(value, Mapping)


def has_key[V](key: Any, guard: Guard[V] | None = None) -> Guard[Mapping[Any, V]]:
    """Guard for mappings containing ``key``.

    When ``guard`` is given the value under ``key`` must also pass it; a
    missing key is then checked as ``None``.
    """

    def _guard(value: object) -> TypeIs[Mapping[Any, V]]:
        if not is_mapping(value):
            return False
        if guard is not None:
            return guard(value.get(key))
        return key in value

    return _guard


def is_mapping_of[T](guard: Guard[T]) -> Guard[Mapping[Any, T]]:
    """Guard for mappings whose every value passes ``guard``."""

    def _guard(value: object) -> TypeIs[Mapping[Any, T]]:
        return is_mapping(value) and all(guard(item) for item in value.values())

    return _guard


def is_shaped(shape: Mapping[str, Guard[Any]]) -> Callable[..., bool]:
    """Guard for mappings with a given shape.

    Each key of ``shape`` maps to the guard its value must pass. Extra keys
    are allowed unless the returned guard is called with ``strict=True``.

    Examples:
        >>> is_person = is_shaped({'name': is_str, 'age': is_number})
        >>> is_person({'name': 'Alice', 'age': 30})
        True
        >>> is_person({'name': 'Alice'})
        False
        >>> is_person({'name': 'Alice', 'age': 30, 'foo': 'bar'}, strict=True)
        False
    """

    def _guard(value: object, strict: bool = False) -> TypeIs[Mapping[str, Any]]:
        if not is_mapping(value):
            return False
        if not all(guard(value.get(key)) for key, guard in shape.items()):
            return False
        return not strict or all(key in shape for key in value)

    return _guard


def is_union(*guards: Guard[Any]) -> Guard[Any]:
    """Guard passing when any of ``guards`` passes."""

    def _guard(value: object) -> TypeIs[Any]:
        return any(guard(value) for guard in guards)

    return _guard


def is_intersection(*guards: Guard[Any]) -> Guard[Any]:
    """Guard passing when every one of ``guards`` passes."""

    def _guard(value: object) -> TypeIs[Any]:
        return all(guard(value) for guard in guards)

    return _guard


def is_enum(options: Iterable[Any] | Mapping[Any, Any] | type[enum.Enum]) -> Guard[Any]:
    """Guard for membership in an enum-like collection.

    Args:
        options: A sequence of allowed values, a mapping whose values are
            allowed, or an ``enum.Enum`` subclass whose members and member
            values are allowed.

    Examples:
        >>> is_direction = is_enum(['up', 'down'])
        >>> is_direction('up'), is_direction('left')
        (True, False)
    """
    if isinstance(options, type) and issubclass(options, enum.Enum):
        values = [*options, *(member.value for member in options)]
    elif isinstance(options, Mapping):
        values = list(options.values())
    else:
        values = list(options)

    def _guard(value: object) -> TypeIs[Any]:
        return value in values

    return _guard


def is_optional[T](guard: Guard[T]) -> Guard[T | None]:
    """Guard allowing ``None`` in addition to whatever ``guard`` accepts."""
    return is_union(is_none, guard)
