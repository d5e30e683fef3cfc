import pytest

from autodialog.core.string_codec import inline_string_decode, inline_string_encode


def test_encode_escapes_delimiters_and_control_chars():
    assert inline_string_encode("a|b:c") == "a#7Cb#3Ac"
    assert inline_string_encode("#") == "#23"
    assert inline_string_encode(",") == "#2C"
    assert inline_string_encode("line\nnext") == "line#0Anext"
    assert inline_string_encode("plain text") == "plain text"


def test_encode_escapes_non_ascii_bytes():
    assert inline_string_encode("é") == "#C3#A9"


def test_decode_keeps_incomplete_escapes_literally():
    assert inline_string_decode("#zz") == "#zz"
    assert inline_string_decode("#4") == "#4"
    assert inline_string_decode("abc#41") == "abcA"
    assert inline_string_decode("#7c") == "|"


@pytest.mark.parametrize(
    "text",
    ["", "a|b:c", "##", "#41", "改行\nあり", "tab\t,comma", "|:|:"],
)
def test_roundtrip_and_token_has_no_delimiters(text):
    token = inline_string_encode(text)
    assert "|" not in token
    assert ":" not in token
    assert inline_string_decode(token) == text


def test_decode_invalid_utf8_uses_replacement_character():
    assert inline_string_decode("#FF") == "\ufffd"
    assert inline_string_decode("a#C3b") == "a\ufffdb"
