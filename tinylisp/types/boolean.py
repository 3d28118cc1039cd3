from __future__ import annotations


class BooleanType:
    """The #t/#f values produced by comparisons and consumed by `if`.

    Only the two module-level instances exist; compare them with `is`.
    """

    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = value

    def __repr__(self): return "#t" if self.value else "#f"
    def __bool__(self): return self.value


T = BooleanType(True)
F = BooleanType(False)


def from_bool(value: bool) -> BooleanType:
    return T if value else F
