"""Binary-Week Codec — verifies encode/decode bounds, storage form, and rejection rules.

Tests:
    - decode(encode(s)) == s over every 7-bit week
    - encode rejects wrong length, non-binary characters, non-strings
    - decode rejects values outside 0..127 instead of widening
    - split_weeks rejects non-digit tokens
"""

import itertools

import pytest

from availability.core.errors import CorruptWeekValueError, InvalidWeekFormatError
from availability.core.week_codec import (
    MAX_WEEK_VALUE, WEEK_DELIMITER,
    decode_week, decode_weeks, encode_week, encode_weeks,
    is_binary_week, join_weeks, split_weeks,
)


ALL_WEEKS = ["".join(bits) for bits in itertools.product("01", repeat=7)]


def test_every_week_survives_encode_then_decode():
    assert len(ALL_WEEKS) == 128
    for week in ALL_WEEKS:
        assert decode_week(encode_week(week)) == week


def test_encode_reads_week_as_base_two():
    assert encode_week("0000000") == 0
    assert encode_week("0000001") == 1
    assert encode_week("1010101") == 85
    assert encode_week("1111111") == MAX_WEEK_VALUE == 127


def test_decode_zero_pads_to_seven_digits():
    assert decode_week(0) == "0000000"
    assert decode_week(5) == "0000101"


@pytest.mark.parametrize("week", [
    "", "101010", "10101010", "1010102", "abcdefg", "101 101",
    "1010101\n", "１010101", " 1010101",
])
def test_encode_rejects_non_binary_or_wrong_length(week):
    with pytest.raises(InvalidWeekFormatError) as exc_info:
        encode_week(week)
    assert exc_info.value.http_status == 400
    assert exc_info.value.code == "INVALID_FORMAT"


def test_encode_rejects_non_string():
    with pytest.raises(InvalidWeekFormatError):
        encode_week(1010101)


@pytest.mark.parametrize("value", [-1, 128, 255, 1000])
def test_decode_rejects_values_outside_seven_bits(value):
    with pytest.raises(CorruptWeekValueError) as exc_info:
        decode_week(value)
    assert exc_info.value.http_status == 500


def test_decode_rejects_bool():
    with pytest.raises(CorruptWeekValueError):
        decode_week(True)


def test_is_binary_week():
    assert is_binary_week("0110110")
    assert not is_binary_week("011011")
    assert not is_binary_week(None)


def test_storage_form_joins_decimal_tokens_with_pipe():
    assert WEEK_DELIMITER == "|"
    assert join_weeks([85, 0, 127]) == "85|0|127"
    assert encode_weeks(["1010101", "0000000", "1111111"]) == "85|0|127"


def test_single_week_storage_has_no_delimiter():
    assert encode_weeks(["0000011"]) == "3"
    assert decode_weeks("3") == ["0000011"]


def test_decode_weeks_restores_binary_list():
    assert decode_weeks("85|0|127") == ["1010101", "0000000", "1111111"]


@pytest.mark.parametrize("stored", ["", "85||3", "85|x", "-1", "85|1.5"])
def test_split_weeks_rejects_corrupt_tokens(stored):
    with pytest.raises(CorruptWeekValueError):
        split_weeks(stored)


def test_decode_weeks_rejects_out_of_range_stored_value():
    with pytest.raises(CorruptWeekValueError):
        decode_weeks("85|200")
