import json

import pytest

from gcommon.jsonformat import FastWriter, value_to_quoted_string, value_to_string


def test_booleans():
    assert value_to_string(True) == "true"
    assert value_to_string(False) == "false"


@pytest.mark.parametrize("number", [0, 7, -5, 2**31 - 1, -(2**31), 4294967295])
def test_integers_round_trip(number):
    assert json.loads(value_to_string(number)) == number


def test_whole_real_keeps_one_zero():
    assert value_to_string(1.0) == "1.0"


def test_fractional_real_keeps_one_trailing_zero():
    assert value_to_string(1.5) == "1.50"


@pytest.mark.parametrize("number", [0.5, -2.25, 1e20, 123456.75, 0.0, -1e-5])
def test_reals_round_trip(number):
    assert json.loads(value_to_string(number)) == number


def test_real_output_is_shorter_than_raw_format():
    assert len(value_to_string(3.0)) < len("%#.16g" % 3.0)


def test_unsupported_scalar():
    with pytest.raises(TypeError):
        value_to_string("text")


@pytest.mark.parametrize(
    "text",
    ["plain", 'a"b', "back\\slash", "tab\there", "line\nbreak\r\n", "\b\f", "\x01\x1f", "slash/"],
)
def test_quoted_round_trip(text):
    assert json.loads(value_to_quoted_string(text)) == text


def test_plain_string_only_gets_quotes():
    assert value_to_quoted_string("hello") == '"hello"'


def test_forward_slash_not_escaped():
    assert "\\/" not in value_to_quoted_string("a/b")


def test_control_characters_use_uppercase_hex():
    assert value_to_quoted_string("\x1f") == '"\\u001F"'


def test_quoted_stops_at_nul():
    assert value_to_quoted_string("ab\x00cd") == value_to_quoted_string("ab")


def test_quoted_rejects_non_string():
    with pytest.raises(TypeError):
        value_to_quoted_string(5)


def test_fast_writer_null():
    assert FastWriter().write(None) == "null\n"


def test_fast_writer_round_trip():
    doc = {"b": [1, 2.5, "x", None, True], "a": {"z": False, "y": []}, "c": {}}
    text = FastWriter().write(doc)
    assert text.endswith("\n")
    assert "\n" not in text[:-1]
    assert " " not in text
    assert json.loads(text) == doc


def test_fast_writer_sorts_members():
    text = FastWriter().write({"zeta": 1, "alpha": 2, "mid": 3})
    assert text.index('"alpha"') < text.index('"mid"') < text.index('"zeta"')


def test_fast_writer_yaml_compatibility():
    writer = FastWriter()
    plain = writer.write({"k": 1})
    writer.enable_yaml_compatibility()
    yaml_text = writer.write({"k": 1})
    assert ": " not in plain
    assert ": " in yaml_text
    assert json.loads(yaml_text) == json.loads(plain)


def test_fast_writer_tuple_is_array():
    assert json.loads(FastWriter().write((1, 2, 3))) == [1, 2, 3]


def test_fast_writer_rejects_non_string_keys():
    with pytest.raises(TypeError):
        FastWriter().write({1: "a"})


def test_fast_writer_rejects_unknown_type():
    with pytest.raises(TypeError):
        FastWriter().write({1, 2})


def test_fast_writer_is_reusable():
    writer = FastWriter()
    writer.write([1, 2])
    assert writer.write(None) == "null\n"