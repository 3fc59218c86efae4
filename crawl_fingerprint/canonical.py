# File: crawl_fingerprint/canonical.py
"""
Canonical serialization of request configs.

A request config is reduced to its identity-relevant fields, every mapping
is rebuilt with its keys in ascending code-point order, and the result is
encoded as compact UTF-8 JSON. Two configs that differ only in operational
fields, or only in key order, encode to the same bytes.
"""
from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any, FrozenSet, List, Sequence, Tuple

from crawl_fingerprint.exceptions import InvalidConfig

__all__: Sequence[str] = (
    "OMITTED_HASH_FIELDS",
    "omit_fields",
    "canonical_tree",
    "canonicalize",
    "decode_canonical",
)

#: Operational options: they change how a request is performed, not what is fetched.
OMITTED_HASH_FIELDS: FrozenSet[str] = frozenset(
    {
        "priority",
        "allowedDomains",
        "delay",
        "retryCount",
        "retryDelay",
        "jQuery",
        "screenshot",
        "username",
        "password",
        "preRequest",
        "evaluatePage",
        "onSuccess",
        "onError",
        "timeout",
        "waitUntil",
    }
)

_SCALARS = (str, int, float, bool, type(None))

#: Above this magnitude JSON number output switches to exponent form.
_MAX_INTEGRAL_FLOAT = 1e21


def omit_fields(config: Mapping[str, Any]) -> dict[str, Any]:
    """Drop top-level operational keys; nested mappings are left untouched."""
    return {key: value for key, value in config.items() if key not in OMITTED_HASH_FIELDS}


def _sorted_pairs(mapping: Mapping[Any, Any], path: str) -> List[Tuple[str, Any]]:
    for key in mapping:
        if not isinstance(key, str):
            raise InvalidConfig(f"mapping key {key!r} is not a string", path)
        _check_text(key, path)
    return sorted(mapping.items(), key=lambda item: item[0])


def _check_text(text: str, path: str) -> None:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidConfig(f"string is not valid UTF-8 ({exc.reason})", path) from None


def _canonical(value: Any, path: str, active: set[int]) -> Any:
    if isinstance(value, _SCALARS):
        if isinstance(value, str):
            _check_text(value, path)
        elif isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidConfig(f"non-finite number {value!r}", path)
            # 1.0 and 1 are the same JSON number
            if value.is_integer() and abs(value) < _MAX_INTEGRAL_FLOAT:
                return int(value)
        return value

    if isinstance(value, (Mapping, list, tuple)):
        marker = id(value)
        if marker in active:
            raise InvalidConfig("cyclic reference", path)
        active.add(marker)
        try:
            if isinstance(value, Mapping):
                return {
                    key: _canonical(item, f"{path}.{key}", active)
                    for key, item in _sorted_pairs(value, path)
                }
            return [_canonical(item, f"{path}[{idx}]", active) for idx, item in enumerate(value)]
        finally:
            active.discard(marker)

    raise InvalidConfig(f"unsupported value of type {type(value).__name__}", path)


def canonical_tree(value: Any) -> Any:
    """
    Return a copy of *value* with every mapping rebuilt in sorted key order.

    Sequence order is preserved. Raises :class:`InvalidConfig` for values that
    have no JSON representation.
    """
    return _canonical(value, "$", set())


def canonicalize(config: Any) -> bytes:
    """
    Serialize a request config to its canonical byte form.

    Operational keys (:data:`OMITTED_HASH_FIELDS`) are removed from the top
    level only. A non-mapping top-level value is encoded without filtering.
    """
    if isinstance(config, Mapping):
        config = omit_fields(config)
    tree = canonical_tree(config)
    try:
        text = json.dumps(
            tree,
            ensure_ascii=False,
            separators=(",", ":"),
            sort_keys=True,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:  # pragma: no cover - canonical_tree rejects these first
        raise InvalidConfig(str(exc)) from exc
    return text.encode("utf-8")


def decode_canonical(data: bytes | str) -> Any:
    """Decode bytes produced by :func:`canonicalize` back into a value tree."""
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    return json.loads(data)
