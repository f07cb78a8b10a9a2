"""JSON encoding that understands Option and Result variants.

``Some(v)`` and ``Ok(v)`` encode as the JSON of ``v``; ``Nothing`` and
``Err(e)`` encode as ``null``. msgspec would otherwise encode the variants
as ``{"value": ...}`` objects, so containers are lowered to builtins first
and the result is handed to a shared msgspec JSON encoder.

Usage:
    >>> from ellefe_core import Nothing, err, some
    >>> dumps({'a': some(1), 'b': [Nothing, err('x')]})
    '{"a":1,"b":[null,null]}'
"""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = ['dumps', 'encode', 'to_builtins']

_encoder = msgspec.json.Encoder()


def to_builtins(obj: Any) -> Any:
    """Replace every Option/Result variant in ``obj`` by its JSON payload.

    Dicts, lists, tuples and sets are walked recursively; other objects are
    returned as-is for msgspec to encode.
    """
    payload = getattr(type(obj), '_json_payload', None)
    if payload is not None:
        return to_builtins(payload(obj))
    if isinstance(obj, dict):
        return {key: to_builtins(value) for key, value in obj.items()}
    if isinstance(obj, list | tuple | set | frozenset):
        return [to_builtins(item) for item in obj]
    return obj


def encode(obj: Any) -> bytes:
    """Encode ``obj`` as JSON bytes.

    Raises:
        TypeError: If ``obj`` contains a type msgspec cannot encode.
    """
    return _encoder.encode(to_builtins(obj))


def dumps(obj: Any) -> str:
    """Encode ``obj`` as a JSON string."""
    return encode(obj).decode()
