"""Unit tests for field normalization helpers.

Tests:
- custom_data prefix filtering, copy semantics and idempotence
- parse_int coercion of event values
- nonInteraction alias fallback and hitCallback filtering
"""

import pytest

from gabridge.core.normalizer import (
    coerce_hit_callback,
    coerce_non_interaction,
    custom_data,
    parse_int,
)

PROPERTIES = {
    "dimension1": "Clearance",
    "dimension200": "x",
    "metric3": 7,
    "dimensionFoo": "loose prefix",
    "category": "Apparel",
    "label": "baz",
    "xdimension1": "not a prefix",
    "Metric1": "case matters",
}


class TestCustomData:
    def test_keeps_only_prefixed_keys(self):
        assert custom_data(PROPERTIES) == {
            "dimension1": "Clearance",
            "dimension200": "x",
            "metric3": 7,
            "dimensionFoo": "loose prefix",
        }

    def test_returns_new_object_and_leaves_input_alone(self):
        properties = dict(PROPERTIES)

        result = custom_data(properties)
        result["dimension1"] = "changed"

        assert result is not properties
        assert properties == PROPERTIES

    def test_idempotent(self):
        assert custom_data(PROPERTIES) == custom_data(PROPERTIES)
        assert custom_data(custom_data(PROPERTIES)) == custom_data(PROPERTIES)

    @pytest.mark.parametrize("empty", [None, {}])
    def test_empty_input(self, empty):
        assert custom_data(empty) == {}

    def test_non_string_keys_ignored(self):
        assert custom_data({1: "a", "metric1": 2}) == {"metric1": 2}


class TestParseInt:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("3", 3),
            ("abc", 0),
            (None, 0),
            (7.9, 7),
            (5, 5),
            ("12px", 12),
            ("  -4", -4),
            ("7.9", 7),
            (True, 0),
            (float("nan"), 0),
            ("٣", 0),
            ("1٣", 1),
        ],
        ids=repr,
    )
    def test_coercion(self, value, expected):
        assert parse_int(value) == expected


class TestNonInteraction:
    def test_canonical_key(self):
        assert coerce_non_interaction({"nonInteraction": True}) is True

    def test_canonical_key_wins_even_when_falsy(self):
        assert coerce_non_interaction({"nonInteraction": False, "noninteraction": True}) is False

    def test_falls_back_to_lowercase_alias(self):
        assert coerce_non_interaction({"noninteraction": True}) is True

    def test_absent(self):
        assert coerce_non_interaction({}) is None


class TestHitCallback:
    def test_callable_kept(self):
        def callback():
            return "biz"

        assert coerce_hit_callback(callback) is callback

    @pytest.mark.parametrize("value", ["not callable", 1, None])
    def test_non_callable_nulled(self, value):
        assert coerce_hit_callback(value) is None
