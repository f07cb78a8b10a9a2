"""Tests for JSON encoding of Option and Result variants."""

import msgspec
import pytest
from ellefe_core import UNIT, Nothing, dumps, encode, err, ok, some
from ellefe_core.codec import to_builtins
from hypothesis import given

from tests.strategies import json_values


class TestVariantPayloads:
    def test_present_variants_encode_their_value(self):
        assert dumps(ok(1)) == '1'
        assert dumps(some('a')) == '"a"'

    def test_absent_variants_encode_null(self):
        assert dumps(err('x')) == 'null'
        assert dumps(Nothing) == 'null'

    def test_nested_variants(self):
        assert dumps(some(ok(some(2)))) == '2'
        assert dumps(ok(err('inner'))) == 'null'

    def test_variants_inside_containers(self):
        payload = {'a': some(1), 'b': [Nothing, err('x'), ok(3)], 'c': (ok(True),)}
        assert dumps(payload) == '{"a":1,"b":[null,null,3],"c":[true]}'

    def test_unit_encodes_as_empty_object(self):
        assert dumps(ok()) == '{}'
        assert dumps(UNIT) == '{}'

    def test_encode_returns_bytes(self):
        assert encode(some([1, 2])) == b'[1,2]'


class TestToBuiltins:
    def test_lowers_variants(self):
        assert to_builtins([some(1), Nothing]) == [1, None]

    def test_leaves_plain_values(self):
        marker = object()
        assert to_builtins(marker) is marker

    @given(json_values)
    def test_plain_json_matches_msgspec(self, value):
        assert encode(value) == msgspec.json.encode(value)

    @given(json_values)
    def test_some_is_transparent(self, value):
        assert encode(some(value)) == msgspec.json.encode(value)


class TestUnsupported:
    def test_unencodable_value_raises(self):
        with pytest.raises(TypeError):
            dumps(some(object()))
