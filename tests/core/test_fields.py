import math

import pytest

from autodialog.core.fields import (
    INT_MAX,
    INT_MIN,
    get_field,
    get_string_list,
    number_to_text,
    text_to_number,
)


def test_get_field_returns_value_of_matching_type():
    record = {"name": "n", "x": 3, "ratio": 0.5, "flag": True}
    assert get_field(record, "name") == "n"
    assert get_field(record, "x", 0) == 3
    assert get_field(record, "ratio", 0.0) == 0.5
    assert get_field(record, "flag", False) is True


def test_get_field_missing_key_returns_default():
    assert get_field({}, "name") == ""
    assert get_field({}, "x", 7) == 7
    assert get_field({"x": None}, "x", 7) == 7


def test_get_field_non_mapping_record_returns_default():
    assert get_field(None, "x", 1) == 1
    assert get_field(["x"], "x", "d") == "d"


@pytest.mark.parametrize(
    "value,default,expected",
    [
        ("yes", False, False),
        (1, False, False),
        (True, 0, 0),
        (True, "", ""),
        ([1, 2], "", ""),
        ({"a": 1}, 0.0, 0.0),
        ("abc", 1.5, 1.5),
        (10**400, 0, 0),
        (10**400, 0.0, 0.0),
        (10**400, "", ""),
        ("0x" + "f" * 300, 0.0, 0.0),
    ],
)
def test_get_field_type_mismatch_falls_back(value, default, expected):
    out = get_field({"k": value}, "k", default)
    assert out == expected
    assert type(out) is type(expected)


def test_get_field_numbers_are_read_as_strings():
    assert get_field({"name": 5}, "name") == "5"
    assert get_field({"name": 2.5}, "name") == "2.5"
    assert get_field({"name": 3.0}, "name") == "3"


def test_get_field_numeric_strings_are_read_as_numbers():
    assert get_field({"x": "3"}, "x", 0) == 3
    assert get_field({"x": " 0x10 "}, "x", 0) == 16
    assert get_field({"x": "1e3"}, "x", 0.0) == 1000.0
    assert get_field({"x": "1,5"}, "x", 0.0) == 0.0


def test_get_field_int_truncates_toward_zero():
    assert get_field({"x": 2.7}, "x", 0) == 2
    assert get_field({"x": -2.7}, "x", 0) == -2


def test_get_field_int_out_of_range_or_not_finite_falls_back():
    assert get_field({"x": 2**40}, "x", 5) == 5
    assert get_field({"x": float("nan")}, "x", 1) == 1
    assert get_field({"x": float("inf")}, "x", 1) == 1
    assert get_field({"x": INT_MIN}, "x", 0) == INT_MIN
    assert get_field({"x": INT_MAX}, "x", 0) == INT_MAX


def test_get_field_float_accepts_int():
    out = get_field({"x": 5}, "x", 0.0)
    assert out == 5.0
    assert isinstance(out, float)


def test_get_string_list_keeps_order_and_skips_non_strings():
    record = {"items": ["a", 1, None, "b", 2.5, ["c"]]}
    assert get_string_list(record, "items") == ["a", "1", "b", "2.5"]
    assert get_string_list({"items": ["a", 10**400, "b"]}, "items") == ["a", "b"]


def test_get_string_list_non_list_is_empty():
    assert get_string_list({"items": "abc"}, "items") == []
    assert get_string_list({"items": 3}, "items") == []
    assert get_string_list({}, "items") == []
    assert get_string_list(None, "items") == []


def test_number_to_text_and_back():
    assert number_to_text(3) == "3"
    assert number_to_text(0.1) == "0.1"
    assert number_to_text(1e20) == "1e+20"
    assert text_to_number("  12.5 ") == 12.5
    assert text_to_number("inf") is None
    assert text_to_number("") is None
    assert math.isclose(text_to_number(".5") or 0.0, 0.5)
