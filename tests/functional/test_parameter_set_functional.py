"""Functional tests for `ParameterSet`, key normalization and humanize."""

from __future__ import annotations

from enum import Enum

import pytest

from strong_params.logic.humanize import humanize
from strong_params.logic.parameter_set import (
    ParameterSet,
    indifferent_default,
    is_blank,
    normalize_key,
    normalize_keys,
)


class Color(Enum):
    RED = "red"
    NUMBERED = 3


class Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no text form")


def test_normalize_key_maps_every_source_to_str():
    assert normalize_key("id") == "id"
    assert normalize_key(b"id") == "id"
    assert normalize_key(Color.RED) == "red"
    assert normalize_key(Color.NUMBERED) == "NUMBERED"
    assert normalize_key(7) == "7"


def test_normalize_key_swallows_failures():
    bad_bytes = b"\xff\xfe"
    assert normalize_key(bad_bytes) is bad_bytes
    odd = Unprintable()
    assert normalize_key(odd) is odd


def test_normalize_keys_dedupes_in_first_seen_order():
    assert normalize_keys(["b", b"a", "b", Color.RED, "red"]) == ["b", "a", "red"]


@pytest.mark.parametrize("value", [None, "", "  \t", b"", [], {}])
def test_is_blank_true(value):
    assert is_blank(value)


@pytest.mark.parametrize("value", ["x", " x ", 0, False, ["a"]])
def test_is_blank_false(value):
    assert not is_blank(value)


def test_missing_key_without_policy_raises_key_error():
    with pytest.raises(KeyError):
        ParameterSet({"a": 1})["b"]


def test_indifferent_lookup_for_non_canonical_keys():
    params = ParameterSet.from_mapping({b"red": "r", "x": "1"})
    assert params.default_proc is indifferent_default
    assert params[Color.RED] == "r"
    assert params.get(b"x") == "1"
    assert params["nope"] is None


def test_symbolized_is_a_disposable_copy_with_last_write_wins():
    params = ParameterSet({b"id": "first", "id": "second"})
    sym = params.symbolized()
    assert dict(sym) == {"id": "second"}
    assert b"id" in params


def test_select_returns_new_set_without_policy():
    params = ParameterSet.from_mapping({"a": 1, "b": 2})
    picked = params.select([b"a"])
    assert dict(picked) == {"a": 1}
    assert picked.default_proc is None
    assert picked is not params


@pytest.mark.parametrize(
    "name, label",
    [
        ("action", "Action"),
        ("id", "Id"),
        ("first_name", "First name"),
        ("user_id", "User"),
        ("_csrf", "Csrf"),
        ("redirect-to", "Redirect to"),
    ],
)
def test_humanize(name, label):
    assert humanize(name) == label
