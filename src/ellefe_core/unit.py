"""Unit: the zero-information marker type."""

from __future__ import annotations

import msgspec

__all__ = ['UNIT', 'Unit', 'unit']


class Unit(msgspec.Struct, frozen=True, gc=False):
    """A type with exactly one logical value.

    Unit stands in for "no meaningful value" when an Option or Result
    variant carries no payload, e.g. ``ok()`` for an operation that only
    reports success. It has no fields, so every instance compares and
    hashes equal.

    Examples:
        >>> Unit() == unit()
        True
        >>> from ellefe_core import ok
        >>> ok().value == UNIT
        True
    """


UNIT: Unit = Unit()
"""Shared Unit instance used as the default variant payload."""


def unit() -> Unit:
    """Return the shared Unit value."""
    return UNIT
