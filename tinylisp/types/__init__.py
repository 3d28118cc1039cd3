from tinylisp.types.symbol import Symbol
from tinylisp.types.boolean import BooleanType, T, F, from_bool
from tinylisp.types.integer import INT64_MIN, INT64_MAX, is_integer, fits_int64
from tinylisp.types.quoted import QuotedList
from tinylisp.types.closure import Closure
from tinylisp.types.environment import Environment

__all__ = [
    "Symbol", "BooleanType", "T", "F", "from_bool",
    "INT64_MIN", "INT64_MAX", "is_integer", "fits_int64",
    "QuotedList", "Closure", "Environment",
]
