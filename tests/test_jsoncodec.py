import json

import pytest

from versionfox.jsoncodec import JsonEncodeError, decode, encode


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "true"),
        (1, "1"),
        (-10, "-10"),
        (None, "null"),
        ({}, "[]"),
        ([], "[]"),
        ([1, 2, 3], "[1,2,3]"),
    ],
)
def test_simple_values(value, expected):
    assert encode(value) == expected


def test_sparse_array():
    with pytest.raises(JsonEncodeError, match="sparse array"):
        encode({1: 1, 2: 2, 10: 3})


def test_mixed_keys():
    with pytest.raises(JsonEncodeError, match="mixed or invalid key types"):
        encode({1: 1, 2: 2, 3: 3, "name": "Tim"})


def test_invalid_keys():
    with pytest.raises(JsonEncodeError, match="mixed or invalid key types"):
        encode({"name": "Tim", False: 123})


def test_array_round_trip():
    obj = ["a", 1, "b", 2, "c", 3]
    decoded = decode(encode(obj))
    assert decoded == obj


def test_object_round_trip():
    obj = {"name": "Tim", "number": 12345}
    decoded = decode(encode(obj))
    assert decoded["name"] == obj["name"]
    assert decoded["number"] == obj["number"]


def test_decode_null():
    assert decode("null") is None


def test_nested_round_trip():
    assert decode(encode({"person": {"name": "tim"}}))["person"]["name"] == "tim"


def test_recursive_nesting():
    obj = {"abc": 123}
    obj2 = {"obj": obj}
    obj["obj2"] = obj2
    with pytest.raises(JsonEncodeError, match="recursively nested"):
        encode(obj)


def test_table_with_consecutive_integer_keys():
    table = {i: i for i in range(1, 6)}
    assert encode(table) == "[1,2,3,4,5]"


def test_object_keys_are_sorted():
    assert encode({"b": 1, "a": 2}) == '{"a":2,"b":1}'


def test_html_characters_escaped():
    assert encode("<a&b>") == '"\\u003ca\\u0026b\\u003e"'


def test_float_formatting():
    assert encode(1.5) == "1.5"
    assert encode(3.0) == "3"
    assert encode(0.00001) == "0.00001"
    assert encode(1e21) == "1e+21"


def test_non_finite_float():
    with pytest.raises(JsonEncodeError):
        encode(float("nan"))


def test_unsupported_type():
    with pytest.raises(JsonEncodeError, match="cannot encode function to JSON"):
        encode(lambda: None)


def test_encoded_text_is_valid_json():
    value = {"list": [1, "two", None, True], "text": 'quote " and \\ slash\n'}
    assert json.loads(encode(value)) == value


def test_decode_numbers_as_float():
    result = decode("[1, 2.5]")
    assert result == [1.0, 2.5]
    assert isinstance(result[0], float)


def test_decode_number_string_stays_string():
    assert decode('"124.11"') == "124.11"


def test_decode_invalid():
    with pytest.raises(ValueError):
        decode("{not json")
    with pytest.raises(ValueError):
        decode("NaN")