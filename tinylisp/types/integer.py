from __future__ import annotations

from typing import Any

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def is_integer(value: Any) -> bool:
    # bool is an int subclass but never a tinylisp integer
    return isinstance(value, int) and not isinstance(value, bool)


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX
