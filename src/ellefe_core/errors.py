"""Exception types raised by ellefe-core itself.

Represented failures (``Err``/``Nothing``) are returned, never raised. The
exceptions here only signal programming errors, such as unwrapping the wrong
variant through the test-only ``_unwrap`` escape hatches.
"""

from __future__ import annotations

from typing import Any

__all__ = ['AbandonedComputationError', 'EllefeError', 'UnwrapError']


class EllefeError(Exception):
    """Base class for all exceptions raised by ellefe-core."""


class UnwrapError(EllefeError):
    """An unsafe unwrap was attempted on the wrong variant.

    Attributes:
        value: The payload held by the variant that was unwrapped, if any.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        self.value = value
        super().__init__(message)


class AbandonedComputationError(EllefeError):
    """An async computation was interrupted before it settled.

    The first awaiter sees the interruption itself (for example
    ``asyncio.CancelledError``); every later awaiter of the same wrapper gets
    this error, chained from that interruption.
    """
