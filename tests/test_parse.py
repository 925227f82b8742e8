import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from intstr.case import Case
from intstr.fmt import INT_MAX, INT_MIN, UINT_MAX, FormatOptions, format_int, format_uint
from intstr.parse import (
    IntParser,
    ParseOptions,
    ParseResult,
    parse_int,
    parse_int_file,
    parse_int_stream,
    parse_uint,
    parse_uint_file,
    parse_uint_stream,
)
from intstr.plus import Plus
from intstr.pres import Presence


def test_plain_decimal():
    result = parse_int("123")
    assert result == ParseResult(123, 3, None, True)


def test_whitespace_and_sign():
    text = "  -42"
    result = parse_int(text)
    assert result.value == -42
    assert result.read_count == len(text)
    assert result.valid


@pytest.mark.parametrize("text", ["0x1F", "0X1f", "0b101", "0o17", "-0x10"])
def test_prefixed_auto_radix(text):
    result = parse_int(text)
    assert result.value == int(text, 0)
    assert result.read_count == len(text)
    assert result.last_read is None
    assert result.valid


def test_lone_zero_is_valid():
    result = parse_int("0")
    assert result.valid
    assert result.value == 0
    assert result.read_count == len("0")


def test_zero_then_junk_stops_after_zero():
    result = parse_int("0z")
    assert result.valid
    assert result.value == 0
    assert result.read_count == len("0")
    assert result.last_read == "z"


def test_prefix_without_digits_is_invalid():
    result = parse_int("0x")
    assert not result.valid
    assert result.last_read is None


def test_empty_text():
    assert parse_int("") == ParseResult(0, 0, None, False)


def test_letters_are_invalid():
    result = parse_int("abc")
    assert not result.valid
    assert result.last_read == "a"


def test_stops_at_non_digit():
    result = parse_int("12abc")
    assert result.value == 12
    assert result.read_count == 2
    assert result.last_read == "a"


def test_unsigned_rejects_minus():
    result = parse_uint("-5")
    assert not result.valid
    assert result.last_read == "-"


def test_group_separator():
    text = "1,234,567"
    result = parse_int(text, ParseOptions(group_sep=","))
    assert result.value == int(text.replace(",", ""))
    assert result.read_count == len(text)


def test_multi_char_group_separator():
    text = "12::345"
    result = parse_int(text, ParseOptions(group_sep="::"))
    assert result.value == int(text.replace("::", ""))
    assert result.read_count == len(text)


def test_trailing_separator_not_counted():
    result = parse_int("12,", ParseOptions(group_sep=","))
    assert result.value == 12
    assert result.read_count == 2
    assert result.valid


def test_double_separator_stops():
    result = parse_int("1,,2", ParseOptions(group_sep=","))
    assert result.value == 1
    assert result.read_count == 1
    assert result.last_read == ","


def test_required_sign():
    opts = ParseOptions(sign_presence=Presence.REQUIRED)
    assert not parse_int("5", opts).valid
    assert parse_int("+5", opts).value == 5


def test_forbidden_sign():
    result = parse_int("-5", ParseOptions(sign_presence=Presence.NO))
    assert not result.valid
    assert result.last_read == "-"


def test_required_prefix():
    opts = ParseOptions(radix=16, radix_prefix_presence=Presence.REQUIRED)
    assert not parse_int("1F", opts).valid
    assert parse_int("0x1F", opts).value == int("1F", 16)


def test_prefix_forbidden_reads_zero_only():
    opts = ParseOptions(radix=16, radix_prefix_presence=Presence.NO)
    result = parse_int("0x1F", opts)
    assert result.value == 0
    assert result.last_read == "x"
    assert result.valid


def test_wrong_prefix_for_radix():
    result = parse_int("0b1", ParseOptions(radix=16))
    # "0b1" reads as the hexadecimal digits 0, B, 1
    assert result.value == int("0b1", 16)
    assert result.read_count == len("0b1")


def test_digit_case():
    opts = ParseOptions(radix=16, digit_case=Case.UPPER)
    result = parse_int("ff", opts)
    assert not result.valid
    assert result.last_read == "f"
    assert parse_int("FF", opts).value == int("FF", 16)


def test_prefix_case_mismatch():
    opts = ParseOptions(radix_prefix_case=Case.UPPER)
    result = parse_int("0x1", opts)
    assert result.valid
    assert result.value == 0
    assert result.last_read == "x"
    assert parse_int("0X1", opts).value == 1


def test_no_skip_whitespace():
    result = parse_int(" 7", ParseOptions(skip_ws=False))
    assert not result.valid
    assert result.last_read == " "


def test_unsigned_wraps():
    assert parse_uint(str(UINT_MAX + 1)).value == 0
    assert parse_uint(str(UINT_MAX)).value == UINT_MAX


def test_signed_extremes():
    assert parse_int(str(INT_MIN)).value == INT_MIN
    assert parse_int(str(INT_MAX)).value == INT_MAX
    assert parse_int(str(INT_MAX + 1)).value == INT_MIN


def test_parser_object():
    parser = IntParser(False)
    assert parser.parse("7").value == 7
    assert not parser.parse("-7").valid


def test_stream_chunks():
    result = parse_int_stream(iter(["1", "23", "", "4"]))
    assert result.value == 1234
    assert result.read_count == 4
    assert parse_uint_stream(["0x", "ff"]).value == int("ff", 16)


def test_stream_rejects_non_strings():
    with pytest.raises(TypeError):
        parse_int_stream([1, 2])


def test_text_must_be_str():
    with pytest.raises(TypeError):
        parse_int(b"12")


def test_invalid_options():
    with pytest.raises(ValueError):
        ParseOptions(radix=1)
    with pytest.raises(TypeError):
        ParseOptions(sign_presence="optional")
    with pytest.raises(TypeError):
        parse_int("1", options="bad")


def test_file_puts_back_stop_char():
    f = io.StringIO("42 rest")
    result = parse_int_file(f)
    assert result.value == 42
    assert result.last_read == " "
    assert f.read() == " rest"


def test_file_invalid_consumes():
    f = io.StringIO("xyz")
    result = parse_int_file(f)
    assert not result.valid
    assert f.read() == "yz"


def test_binary_file():
    f = io.BytesIO(b"17;")
    result = parse_uint_file(f)
    assert result.value == 17
    assert f.read() == b";"


_RADIXES = st.integers(min_value=2, max_value=36)


@given(st.integers(min_value=INT_MIN, max_value=INT_MAX), _RADIXES)
def test_round_trip_signed(value, radix):
    text = format_int(value, FormatOptions(radix=radix))
    result = parse_int(text, ParseOptions(radix=radix))
    assert result.value == value
    assert result.read_count == len(text)
    assert result.valid


@given(st.integers(min_value=0, max_value=UINT_MAX), st.sampled_from([2, 8, 10, 16]))
def test_round_trip_auto_radix(value, radix):
    text = format_uint(value, FormatOptions(radix=radix))
    result = parse_uint(text)
    assert result.value == value
    assert result.read_count == len(text)


@given(
    st.integers(min_value=INT_MIN, max_value=INT_MAX),
    st.integers(min_value=1, max_value=5),
    st.sampled_from([Plus.NONE, Plus.SIGN, Plus.SPACE]),
)
def test_round_trip_grouped(value, size, plus):
    text = format_int(value, FormatOptions(group_sep="_", group_size=size, plus=plus))
    result = parse_int(text, ParseOptions(group_sep="_"))
    assert result.value == value
    assert result.read_count == len(text)
    assert result.last_read is None