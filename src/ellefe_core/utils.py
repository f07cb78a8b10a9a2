"""Small value utilities: string coercion and literal matching."""

from __future__ import annotations

from collections.abc import Callable, Mapping

import msgspec

from ellefe_core.codec import dumps

__all__ = ['match', 'to_string']


def _has_default_rendering(val: object) -> bool:
    cls = type(val)
    return cls.__str__ is object.__str__ and cls.__repr__ is object.__repr__


def to_string(val: object) -> str:
    """Convert any value to a string.

    Uses ``str(val)``. When that only produces the generic
    ``<module.Class object at 0x...>`` rendering, the instance attributes are
    rendered as JSON instead; if they cannot be encoded the generic rendering
    is kept.

    Examples:
        >>> to_string(42)
        '42'
        >>> class Point:
        ...     def __init__(self) -> None:
        ...         self.x, self.y = 1, 2
        >>> to_string(Point())
        '{"x":1,"y":2}'
    """
    value = str(val)
    if not _has_default_rendering(val):
        return value
    try:
        return dumps(vars(val))
    except (TypeError, msgspec.EncodeError):
        return value


def match[K, R](on: K, cases: Mapping[K, Callable[[K], R]]) -> R:
    """Dispatch on a literal value.

    Calls the case registered for ``on`` with ``on`` itself.

    Args:
        on: The literal to switch on.
        cases: Mapping from every expected literal to its handler.

    Returns:
        The handler's result.

    Raises:
        KeyError: If no case is registered for ``on``.

    Example:
        ```python
        match('get', {'get': lambda m: 200, 'post': lambda m: 201})  # 200
        ```
    """
    return cases[on](on)
