"""Identifier node: a name resolved against the environment when evaluated."""

from __future__ import annotations
import sys


class Symbol:
    """A symbol name such as `fib`, `setq` or `<=`.

    Names are interned, so equal symbols share one string and compare fast;
    the special-form registry and environment frames key on them.
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name: str = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.name is other.name or self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    def __str__(self) -> str:
        return self.name
