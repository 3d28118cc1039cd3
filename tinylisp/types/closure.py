"""User-defined callable produced by the `lambda` special form."""

from __future__ import annotations

from typing import Iterable

from tinylisp import Node


class Closure:
    """Parameter names plus body items of a lambda.

    No defining environment is captured: free variables in the body resolve
    against whatever frames are live when the closure is called.
    """

    __slots__ = ("formals", "body")

    def __init__(self, formals: Iterable[str], body: Iterable[Node]):
        self.formals: tuple[str, ...] = tuple(formals)
        self.body: tuple[Node, ...] = tuple(body)

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Closure)
            and self.formals == other.formals
            and self.body == other.body
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        from tinylisp.printer import to_source
        return to_source(self)

    def __repr__(self) -> str:
        return f"Closure({list(self.formals)!r}, {list(self.body)!r})"
