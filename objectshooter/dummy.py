"""Random replacement values for JSON documents."""

from __future__ import annotations

import random
import string
import struct
from datetime import datetime, timedelta
from typing import Any

CHARSET = string.ascii_lowercase + string.ascii_uppercase + string.digits
STRING_MIN_LENGTH = 10
STRING_MAX_LENGTH = 50
NUMBER_LIMIT = 50


def random_string(min_length: int, max_length: int) -> str:
    """Return an alphanumeric string whose length lies in [min_length, max_length]."""
    if min_length > max_length:
        raise ValueError("min length cannot be greater than max length")
    length = random.randint(min_length, max_length)
    return "".join(random.choice(CHARSET) for _ in range(length))


def random_bool() -> bool:
    return random.getrandbits(1) == 1


def random_date(start: datetime, end: datetime) -> datetime:
    """Return a moment in [start, end)."""
    span = end - start
    if span <= timedelta(0):
        raise ValueError("end must be later than start")
    steps = span // timedelta(microseconds=1)
    return start + timedelta(microseconds=random.randrange(steps))


def _fits_float32(value: float) -> bool:
    try:
        return struct.unpack("f", struct.pack("f", value))[0] == value
    except OverflowError:
        return False


def _random_float32() -> float:
    return random.getrandbits(24) / (1 << 24)


def _random_number(value: float) -> int | float:
    if isinstance(value, int) or value.is_integer():
        return random.randrange(NUMBER_LIMIT)
    if _fits_float32(value):
        return _random_float32()
    return random.random()


def fill_with_dummy_data(value: Any) -> Any:
    """Return a copy of a decoded JSON value with every leaf replaced by random data.

    The shape of objects and arrays is kept; strings, booleans and numbers
    become random values of the same kind, and anything else is kept as is.
    """
    if isinstance(value, bool):
        return random_bool()
    if isinstance(value, str):
        return random_string(STRING_MIN_LENGTH, STRING_MAX_LENGTH)
    if isinstance(value, (int, float)):
        return _random_number(value)
    if isinstance(value, dict):
        return {key: fill_with_dummy_data(item) for key, item in value.items()}
    if isinstance(value, list):
        return [fill_with_dummy_data(item) for item in value]
    return value