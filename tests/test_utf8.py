import pytest

from aimdtools.utf8 import (
    codepoints_equal,
    codepoints_equal_str,
    codepoints_to_float,
    codepoints_to_int,
    codepoints_to_str,
    codepoints_to_uint,
    print_utf8_codepoints,
    str_to_codepoints,
    utf8_codepoints,
    utf8_encode,
    utf8_len,
)

SAMPLE = bytes(
    [0x24, 0xC2, 0xA3, 0xD0, 0x98, 0xE0, 0xA4, 0xB9, 0xE2,
     0x82, 0xAC, 0xED, 0x95, 0x9C, 0xF0, 0x90, 0x8D, 0x88]
)


def test_len_of_sample():
    assert utf8_len(SAMPLE) == 7


def test_codepoints_match_standard_decoder():
    expected = [ord(ch) for ch in SAMPLE.decode("utf-8")]
    assert utf8_codepoints(SAMPLE) == expected
    assert len(expected) == utf8_len(SAMPLE)


def test_codepoints_respects_max_count():
    full = utf8_codepoints(SAMPLE)
    assert utf8_codepoints(SAMPLE, 3) == full[:3]
    assert utf8_codepoints(SAMPLE, 0) == []


def test_truncated_sequence_is_dropped():
    data = b"a" + "€".encode("utf-8")[:2]
    assert utf8_len(data) == 1
    assert utf8_codepoints(data) == [ord("a")]


def test_invalid_lead_byte_raises():
    with pytest.raises(ValueError):
        utf8_len(b"a\x80b")
    with pytest.raises(ValueError):
        utf8_codepoints(b"\xff")


@pytest.mark.parametrize("ch", ["A", "£", "И", "€", "한", "𐍈"])
def test_encode_matches_standard_encoder(ch):
    assert utf8_encode(ord(ch)) == ch.encode("utf-8")


def test_encode_decode_round_trip():
    encoded = b"".join(utf8_encode(cp) for cp in utf8_codepoints(SAMPLE))
    assert encoded == SAMPLE


def test_str_codepoints_round_trip():
    text = "hello world"
    assert codepoints_to_str(str_to_codepoints(text)) == text


def test_codepoints_to_str_truncates_to_byte():
    assert codepoints_to_str([0x41, 0x141]) == "AA"


def test_codepoints_equal():
    a = str_to_codepoints("abc")
    assert codepoints_equal(a, list(a))
    assert not codepoints_equal(a, str_to_codepoints("abd"))
    assert not codepoints_equal(a, str_to_codepoints("ab"))


def test_codepoints_equal_str():
    cps = str_to_codepoints("key")
    assert codepoints_equal_str(cps, "key")
    assert not codepoints_equal_str(cps, "keys")
    assert not codepoints_equal_str(cps, "kez")


def test_to_int_parses_prefix():
    assert codepoints_to_int(str_to_codepoints("  -42abc")) == -42
    assert codepoints_to_int(str_to_codepoints("abc")) == 0


def test_to_int_clamps():
    assert codepoints_to_int(str_to_codepoints("99999999999999999999")) == 2**63 - 1
    assert codepoints_to_int(str_to_codepoints("-99999999999999999999")) == -(2**63)


def test_to_uint():
    assert codepoints_to_uint(str_to_codepoints("123")) == 123
    assert codepoints_to_uint(str_to_codepoints("-1")) == 2**64 - 1
    assert codepoints_to_uint(str_to_codepoints("999999999999999999999")) == 2**64 - 1


def test_to_float():
    assert codepoints_to_float(str_to_codepoints(" 2.5")) == 2.5
    assert codepoints_to_float(str_to_codepoints("1e3xyz")) == 1e3
    assert codepoints_to_float(str_to_codepoints("nope")) == 0.0
    assert codepoints_to_float(str_to_codepoints("-inf")) == float("-inf")


def test_parse_stops_at_nul():
    assert codepoints_to_int(str_to_codepoints("12") + [0] + str_to_codepoints("34")) == 12


def test_print_codepoints(capsys):
    print_utf8_codepoints(utf8_codepoints(SAMPLE), "!")
    assert capsys.readouterr().out == SAMPLE.decode("utf-8") + "!"


def test_print_to_stdout(capsys):
    print_utf8_codepoints(str_to_codepoints("hi"), "\n")
    assert capsys.readouterr().out == "hi\n"