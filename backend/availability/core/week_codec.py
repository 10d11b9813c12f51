"""Binary-Week Codec — 7-character binary weeks <-> decimal storage values.

Invariants:
    - A week is exactly 7 characters over {'0', '1'}
    - Encoded values are always in 0..127
    - decode_week never yields more or fewer than 7 digits
    - Storage form joins decimal tokens with '|' (never present in a token)

Design Decisions:
    - Out-of-range values are rejected on decode instead of being rendered
      wider than 7 digits: a corrupt record surfaces as CORRUPT_RECORD
    - fullmatch over match+$: '$' also matches before a trailing newline
"""

import re
from typing import Iterable

from availability.core.errors import CorruptWeekValueError, InvalidWeekFormatError

WEEK_LENGTH = 7
MAX_WEEK_VALUE = 2 ** WEEK_LENGTH - 1
WEEK_DELIMITER = "|"

_BINARY_WEEK = re.compile(r"[01]{7}")
_DECIMAL_TOKEN = re.compile(r"[0-9]+")


def is_binary_week(week: object) -> bool:
    """True when week is a 7-character string of '0'/'1'."""
    return isinstance(week, str) and _BINARY_WEEK.fullmatch(week) is not None


def encode_week(week: str) -> int:
    """Binary week -> integer in 0..127. Raises InvalidWeekFormatError."""
    if not is_binary_week(week):
        raise InvalidWeekFormatError(week)
    return int(week, 2)


def decode_week(value: int) -> str:
    """Integer in 0..127 -> zero-padded 7-digit binary week."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise CorruptWeekValueError(value)
    if not 0 <= value <= MAX_WEEK_VALUE:
        raise CorruptWeekValueError(value)
    return format(value, f"0{WEEK_LENGTH}b")


def join_weeks(values: Iterable[int]) -> str:
    return WEEK_DELIMITER.join(str(v) for v in values)


def split_weeks(stored: str) -> list[int]:
    """Storage string -> decimal values. Non-digit tokens are corrupt."""
    values = []
    for token in stored.split(WEEK_DELIMITER):
        if not _DECIMAL_TOKEN.fullmatch(token):
            raise CorruptWeekValueError(token)
        values.append(int(token))
    return values


def encode_weeks(weeks: Iterable[str]) -> str:
    """Binary weeks -> '|'-joined decimal storage string."""
    return join_weeks(encode_week(w) for w in weeks)


def decode_weeks(stored: str) -> list[str]:
    """'|'-joined decimal storage string -> binary weeks."""
    return [decode_week(v) for v in split_weeks(stored)]
