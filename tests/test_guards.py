"""Tests for runtime type guards."""

import enum

import pytest
from ellefe_core.guards import (
    has_key,
    is_bool,
    is_enum,
    is_intersection,
    is_list,
    is_list_of,
    is_mapping,
    is_mapping_of,
    is_none,
    is_number,
    is_numeric,
    is_numeric_string,
    is_optional,
    is_primitive,
    is_shaped,
    is_str,
    is_union,
)


class Direction(enum.Enum):
    UP = 'up'
    DOWN = 'down'


class TestPrimitives:
    @pytest.mark.parametrize(
        ('guard', 'accepted', 'rejected'),
        [
            (is_bool, [True, False], [0, 1, 'true', None]),
            (is_none, [None], [0, '', False]),
            (is_number, [0, 1.5, -3], [True, '1', None]),
            (is_str, ['', 'a'], [b'a', 1]),
            (is_primitive, [None, 1, 1.0, 'a', True], [[], {}, object()]),
        ],
    )
    def test_primitive_guards(self, guard, accepted, rejected):
        assert all(guard(value) for value in accepted)
        assert not any(guard(value) for value in rejected)

    def test_numeric_string(self):
        assert is_numeric_string('42')
        assert is_numeric_string('-1.5e3')
        assert is_numeric_string('inf')
        assert not is_numeric_string('')
        assert not is_numeric_string('   ')
        assert not is_numeric_string('nan')
        assert not is_numeric_string('12px')
        assert not is_numeric_string(12)

    def test_numeric(self):
        assert is_numeric(3)
        assert is_numeric('3.0')
        assert not is_numeric('three')
        assert not is_numeric(False)


class TestCollections:
    def test_is_list(self):
        assert is_list([1])
        assert is_list((1, 2))
        assert not is_list('abc')
        assert not is_list({1})

    def test_is_list_of(self):
        numbers = is_list_of(is_number)
        assert numbers([1, 2, 3])
        assert numbers([])
        assert not numbers([1, '2', 3])
        assert not numbers('123')

    def test_is_mapping(self):
        assert is_mapping({})
        assert not is_mapping([])

    def test_is_mapping_of(self):
        numbers = is_mapping_of(is_number)
        assert numbers({'a': 1, 'b': 2})
        assert not numbers({'a': 1, 'b': '2'})
        assert not numbers([1, 2])

    def test_has_key(self):
        assert has_key('id')({'id': 1})
        assert not has_key('id')({'name': 'x'})
        assert not has_key('id')(['id'])

    def test_has_key_with_guard(self):
        has_numeric_id = has_key('id', is_number)
        assert has_numeric_id({'id': 1})
        assert not has_numeric_id({'id': '1'})
        assert not has_numeric_id({})
        assert has_key('id', is_optional(is_number))({})


class TestShaped:
    is_person = staticmethod(is_shaped({'name': is_str, 'age': is_number}))

    def test_matching_shape(self):
        assert self.is_person({'name': 'Alice', 'age': 30})

    def test_wrong_value_type(self):
        assert not self.is_person({'name': 'Alice', 'age': '30'})

    def test_missing_key(self):
        assert not self.is_person({'name': 'Alice'})

    def test_extra_keys(self):
        value = {'name': 'Alice', 'age': 30, 'foo': 'bar'}
        assert self.is_person(value)
        assert not self.is_person(value, strict=True)
        assert self.is_person({'name': 'Alice', 'age': 30}, strict=True)

    def test_non_mapping(self):
        assert not self.is_person(['Alice', 30])


class TestCombinators:
    def test_union(self):
        str_or_number = is_union(is_str, is_number)
        assert str_or_number('a')
        assert str_or_number(1)
        assert not str_or_number(None)
        assert not is_union()(1)

    def test_intersection(self):
        both = is_intersection(has_key('a'), has_key('b'))
        assert both({'a': 1, 'b': 2})
        assert not both({'a': 1})
        assert is_intersection()(object())

    def test_optional(self):
        maybe_number = is_optional(is_number)
        assert maybe_number(None)
        assert maybe_number(1)
        assert not maybe_number('1')


class TestEnum:
    def test_sequence(self):
        is_direction = is_enum(['up', 'down'])
        assert is_direction('up')
        assert not is_direction('left')

    def test_mapping_values(self):
        is_code = is_enum({'ok': 200, 'missing': 404})
        assert is_code(404)
        assert not is_code('ok')

    def test_enum_class(self):
        is_direction = is_enum(Direction)
        assert is_direction(Direction.UP)
        assert is_direction('down')
        assert not is_direction('left')
