"""Quoted list: literal list data that evaluation does not descend into."""

from __future__ import annotations

from typing import Iterable, Iterator

from tinylisp import Node


class QuotedList:
    """Items of a `'( ... )` literal.

    Evaluating a QuotedList yields a plain list holding the same items,
    unevaluated. The items are kept in a tuple and shared, never copied.
    """

    __slots__ = ("items",)

    def __init__(self, items: Iterable[Node] = ()):
        self.items: tuple[Node, ...] = tuple(items)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, QuotedList) and self.items == other.items

    # Items may be plain lists, so quoted lists are not hashable
    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.items)

    def __repr__(self) -> str:
        return f"QuotedList({list(self.items)!r})"

    def __str__(self) -> str:
        from tinylisp.printer import to_source
        return to_source(self)
