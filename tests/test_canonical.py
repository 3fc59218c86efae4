# File: tests/test_canonical.py
import math
from collections import OrderedDict

import pytest

from crawl_fingerprint.canonical import (
    OMITTED_HASH_FIELDS,
    canonical_tree,
    canonicalize,
    decode_canonical,
    omit_fields,
)
from crawl_fingerprint.exceptions import InvalidConfig


def test_empty_config_encodes_empty_mapping():
    assert canonicalize({}) == b"{}"


def test_keys_sorted_at_every_depth():
    config = {"b": 1, "a": {"d": [3, {"z": 1, "y": 2}], "c": "é"}}
    expected = '{"a":{"c":"é","d":[3,{"y":2,"z":1}]},"b":1}'.encode("utf-8")
    assert canonicalize(config) == expected


def test_key_order_does_not_matter(request_config):
    reordered = dict(reversed(list(request_config.items())))
    reordered["extraHeaders"] = OrderedDict(
        reversed(list(request_config["extraHeaders"].items()))
    )
    assert canonicalize(reordered) == canonicalize(request_config)


def test_sequence_order_is_significant():
    assert canonicalize({"a": [1, 2]}) != canonicalize({"a": [2, 1]})


def test_omitted_fields_dropped_at_top_level(request_config):
    encoded = canonicalize(request_config)
    decoded = decode_canonical(encoded)
    assert not OMITTED_HASH_FIELDS & decoded.keys()
    assert decoded["url"] == "https://example.com/products"


def test_omitted_fields_kept_when_nested():
    config = {"url": "https://a.com/", "meta": {"priority": 1, "timeout": 5}}
    assert decode_canonical(canonicalize(config))["meta"] == {"priority": 1, "timeout": 5}


def test_omit_fields_is_shallow_copy():
    config = {"url": "x", "delay": 10}
    assert omit_fields(config) == {"url": "x"}
    assert config == {"url": "x", "delay": 10}


def test_exclusion_set_is_canonical():
    assert OMITTED_HASH_FIELDS == {
        "priority", "allowedDomains", "delay", "retryCount", "retryDelay",
        "jQuery", "screenshot", "username", "password", "preRequest",
        "evaluatePage", "onSuccess", "onError", "timeout", "waitUntil",
    }


def test_non_mapping_top_level_encoded_as_is():
    assert canonicalize(["priority", {"b": 1, "a": 2}]) == b'["priority",{"a":2,"b":1}]'
    assert canonicalize("text") == b'"text"'
    assert canonicalize(None) == b"null"


def test_tuples_encode_as_arrays():
    assert canonicalize({"a": (1, 2)}) == canonicalize({"a": [1, 2]})


def test_scalar_types_round_trip(request_config):
    encoded = canonicalize(request_config)
    decoded = decode_canonical(encoded)
    assert decoded["obeyRobotsTxt"] is True
    assert decoded["skipRequestedRedirect"] is None
    assert decoded["maxDepth"] == 2
    assert decoded["cookies"][0] == {"name": "sid", "value": "abc"}


def test_reapplication_is_stable(request_config):
    encoded = canonicalize(request_config)
    assert canonicalize(decode_canonical(encoded)) == encoded
    assert decode_canonical(encoded.decode("utf-8")) == decode_canonical(encoded)


def test_canonical_tree_does_not_mutate_input():
    nested = {"b": 1, "a": 2}
    config = {"x": nested}
    tree = canonical_tree(config)
    assert list(tree["x"]) == ["a", "b"]
    assert list(nested) == ["b", "a"]


def test_shared_subtree_is_not_a_cycle():
    shared = {"k": 1}
    assert canonicalize({"a": shared, "b": [shared, shared]}) == b'{"a":{"k":1},"b":[{"k":1},{"k":1}]}'


def test_cyclic_mapping_rejected():
    config: dict = {"url": "x"}
    config["self"] = config
    with pytest.raises(InvalidConfig) as exc_info:
        canonicalize(config)
    assert exc_info.value.path.startswith("$.self")


def test_cyclic_list_rejected():
    items: list = [1]
    items.append(items)
    with pytest.raises(InvalidConfig):
        canonicalize({"items": items})


@pytest.mark.parametrize(
    "value",
    [
        {1, 2},
        b"raw",
        object(),
        lambda: None,
        math.nan,
        math.inf,
    ],
)
def test_unsupported_values_rejected(value):
    with pytest.raises(InvalidConfig):
        canonicalize({"url": "x", "extra": value})


def test_unsupported_values_under_omitted_keys_are_ignored():
    assert canonicalize({"url": "x", "onSuccess": lambda: None, "delay": math.nan}) == b'{"url":"x"}'


def test_non_string_key_rejected():
    with pytest.raises(InvalidConfig, match="not a string"):
        canonicalize({"headers": {1: "one"}})


def test_invalid_config_is_value_error():
    with pytest.raises(ValueError):
        canonicalize({"x": {3, 4}})


@pytest.mark.parametrize(
    "config,path",
    [
        ({"url": "\ud800"}, "$.url"),
        ({"headers": {"X-\udc00": "1"}}, "$.headers"),
        ({"items": ["ok", "\udfff"]}, "$.items[1]"),
    ],
)
def test_lone_surrogates_rejected(config, path):
    with pytest.raises(InvalidConfig) as exc_info:
        canonicalize(config)
    assert exc_info.value.path == path


def test_integral_floats_encode_as_integers():
    assert canonicalize({"n": 1.0, "m": [-2.0, 0.5], "z": -0.0}) == b'{"m":[-2,0.5],"n":1,"z":0}'


def test_huge_floats_keep_float_form():
    assert canonicalize({"n": 1e21}) == b'{"n":1e+21}'
