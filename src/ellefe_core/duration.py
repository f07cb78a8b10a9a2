"""Duration: an immutable amount of time stored in milliseconds."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar, Literal

__all__ = ['DAY', 'HOUR', 'MILLISECOND', 'MINUTE', 'SECOND', 'WEEK', 'Duration', 'DurationUnit']

MILLISECOND = 1
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY

type DurationUnit = Literal[
    'ms', 's', 'm', 'h', 'd', 'w',
    'millisecond', 'second', 'minute', 'hour', 'day', 'week',
    'milliseconds', 'seconds', 'minutes', 'hours', 'days', 'weeks',
]  # fmt: skip

_UNIT_MS: dict[str, int] = {
    name: ms
    for names, ms in (
        (('ms', 'millisecond', 'milliseconds'), MILLISECOND),
        (('s', 'second', 'seconds'), SECOND),
        (('m', 'minute', 'minutes'), MINUTE),
        (('h', 'hour', 'hours'), HOUR),
        (('d', 'day', 'days'), DAY),
        (('w', 'week', 'weeks'), WEEK),
    )
    for name in names
}


@dataclass(slots=True, frozen=True, order=True)
class Duration:
    """An amount of time with millisecond resolution.

    Durations compare and hash by their millisecond value, so
    ``Duration.minutes(1) == Duration.seconds(60)``.

    Examples:
        >>> Duration.hours(1).in_minutes()
        60.0
        >>> (Duration.seconds(90) + Duration.seconds(30)).in_minutes()
        2.0
        >>> Duration.from_(2, 'days') == Duration.days(2)
        True
    """

    ms: float

    MILLISECOND: ClassVar[int] = MILLISECOND
    SECOND: ClassVar[int] = SECOND
    MINUTE: ClassVar[int] = MINUTE
    HOUR: ClassVar[int] = HOUR
    DAY: ClassVar[int] = DAY
    WEEK: ClassVar[int] = WEEK

    @classmethod
    def milliseconds(cls, value: float) -> Duration:
        return cls(value * MILLISECOND)

    @classmethod
    def seconds(cls, value: float) -> Duration:
        return cls(value * SECOND)

    @classmethod
    def minutes(cls, value: float) -> Duration:
        return cls(value * MINUTE)

    @classmethod
    def hours(cls, value: float) -> Duration:
        return cls(value * HOUR)

    @classmethod
    def days(cls, value: float) -> Duration:
        return cls(value * DAY)

    @classmethod
    def weeks(cls, value: float) -> Duration:
        return cls(value * WEEK)

    @classmethod
    def from_(cls, value: float, unit: DurationUnit = 'ms') -> Duration:
        """Build a Duration from ``value`` expressed in ``unit``.

        Args:
            value: Number of units.
            unit: Abbreviation ('ms', 's', 'm', 'h', 'd', 'w') or the singular
                or plural unit name.

        Raises:
            ValueError: If ``unit`` is not a known unit name.
        """
        try:
            factor = _UNIT_MS[unit]
        except KeyError:
            raise ValueError(f'Unknown duration unit: {unit!r}') from None
        return cls(value * factor)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        return cls(delta / timedelta(milliseconds=1))

    def in_milliseconds(self) -> float:
        return self.ms

    def in_seconds(self) -> float:
        return self.ms / SECOND

    def in_minutes(self) -> float:
        return self.ms / MINUTE

    def in_hours(self) -> float:
        return self.ms / HOUR

    def in_days(self) -> float:
        return self.ms / DAY

    def in_weeks(self) -> float:
        return self.ms / WEEK

    def add(self, other: Duration) -> Duration:
        return Duration(self.ms + other.ms)

    def subtract(self, other: Duration) -> Duration:
        return Duration(self.ms - other.ms)

    def multiply(self, factor: float) -> Duration:
        return Duration(self.ms * factor)

    def divide(self, divisor: float) -> Duration:
        """Scale the duration down by ``divisor``.

        Raises:
            ZeroDivisionError: If ``divisor`` is zero.
        """
        return Duration(self.ms / divisor)

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.ms)

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor: object) -> Duration:
        if not isinstance(factor, int | float):
            return NotImplemented
        return self.multiply(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: object) -> Duration:
        if not isinstance(divisor, int | float):
            return NotImplemented
        return self.divide(divisor)

    def __str__(self) -> str:
        return f'{self.ms:g}ms'
