"""Tests for the Duration value type."""

from datetime import timedelta

import pytest
from ellefe_core import Duration
from ellefe_core.duration import DAY, HOUR, MINUTE, SECOND, WEEK
from hypothesis import given
from hypothesis import strategies as st


class TestConstants:
    def test_unit_sizes(self):
        assert SECOND == 1000
        assert MINUTE == 60_000
        assert HOUR == 3_600_000
        assert DAY == 86_400_000
        assert WEEK == 7 * DAY
        assert Duration.HOUR == HOUR


class TestConstruction:
    def test_constructors(self):
        assert Duration.milliseconds(5).in_milliseconds() == 5
        assert Duration.seconds(2).in_milliseconds() == 2000
        assert Duration.minutes(1) == Duration.seconds(60)
        assert Duration.hours(1) == Duration.minutes(60)
        assert Duration.days(1) == Duration.hours(24)
        assert Duration.weeks(1) == Duration.days(7)

    @pytest.mark.parametrize('unit', ['h', 'hour', 'hours'])
    def test_from_unit_names(self, unit):
        assert Duration.from_(2, unit) == Duration.hours(2)

    def test_from_defaults_to_milliseconds(self):
        assert Duration.from_(250) == Duration.milliseconds(250)

    def test_from_unknown_unit(self):
        with pytest.raises(ValueError, match='Unknown duration unit'):
            Duration.from_(1, 'fortnight')  # type: ignore[arg-type]

    def test_timedelta_round_trip(self):
        duration = Duration.minutes(90)
        assert duration.to_timedelta() == timedelta(hours=1, minutes=30)
        assert Duration.from_timedelta(timedelta(seconds=3)) == Duration.seconds(3)


class TestAccessors:
    def test_conversions(self):
        duration = Duration.weeks(1)
        assert duration.in_weeks() == 1
        assert duration.in_days() == 7
        assert duration.in_hours() == 168
        assert duration.in_minutes() == 10_080
        assert duration.in_seconds() == 604_800


class TestArithmetic:
    def test_methods(self):
        assert Duration.seconds(1).add(Duration.seconds(2)) == Duration.seconds(3)
        assert Duration.seconds(3).subtract(Duration.seconds(1)) == Duration.seconds(2)
        assert Duration.seconds(2).multiply(3) == Duration.seconds(6)
        assert Duration.seconds(6).divide(4) == Duration.milliseconds(1500)

    def test_operators(self):
        assert Duration.minutes(1) + Duration.seconds(30) == Duration.seconds(90)
        assert Duration.minutes(1) - Duration.seconds(30) == Duration.seconds(30)
        assert 2 * Duration.seconds(1) == Duration.seconds(2)
        assert Duration.seconds(1) * 2 == Duration.seconds(2)
        assert Duration.seconds(1) / 4 == Duration.milliseconds(250)

    def test_mixed_operand_types_rejected(self):
        with pytest.raises(TypeError):
            Duration.seconds(1) + 5  # type: ignore[operator]

    def test_divide_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            Duration.seconds(1).divide(0)

    def test_ordering_and_immutability(self):
        assert Duration.seconds(1) < Duration.minutes(1)
        assert max(Duration.hours(1), Duration.minutes(90)) == Duration.minutes(90)
        with pytest.raises(AttributeError):
            Duration.seconds(1).ms = 5  # type: ignore[misc]

    @given(st.integers(min_value=0, max_value=10**9), st.integers(min_value=0, max_value=10**9))
    def test_addition_commutes(self, a, b):
        left = Duration.milliseconds(a) + Duration.milliseconds(b)
        right = Duration.milliseconds(b) + Duration.milliseconds(a)
        assert left == right

    def test_str(self):
        assert str(Duration.seconds(1.5)) == '1500ms'
