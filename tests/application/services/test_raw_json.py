# tests/application/services/test_raw_json.py
import pytest

from application.services.raw_json import decode_object, loads_preserving_numbers


def test_nineteen_digit_integer_keeps_all_digits():
    data = loads_preserving_numbers('{"registrantKey": 1234567890123456789}')
    assert data["registrantKey"] == "1234567890123456789"


def test_floats_keep_source_text():
    assert loads_preserving_numbers('{"score": 1.10}') == {"score": "1.10"}


def test_numbers_inside_strings_are_untouched():
    data = loads_preserving_numbers('{"joinUrl": "https://x/join/123/456", "n": [1, -2]}')
    assert data == {"joinUrl": "https://x/join/123/456", "n": ["1", "-2"]}


def test_booleans_and_null_are_kept():
    assert loads_preserving_numbers('{"a": true, "b": null}') == {"a": True, "b": None}


def test_decode_object_empty_body():
    assert decode_object("") == {}
    assert decode_object("   ") == {}


def test_decode_object_rejects_non_object():
    with pytest.raises(ValueError, match="Expected a JSON object"):
        decode_object("[1, 2]")
