"""Render Nodes back to tinylisp source text.

Integers, symbols, lists and quoted lists print in a form the reader accepts
again, so `Parser(lex(to_source(node))).parse() == node` for those. Booleans
print as `#t`/`#f` and closures as `#<closure (params) body>`; neither can be
read back.
"""

from io import StringIO

from tinylisp import Node
from tinylisp.types.boolean import BooleanType
from tinylisp.types.closure import Closure
from tinylisp.types.quoted import QuotedList
from tinylisp.types.symbol import Symbol


def _write_items(items, buffer: StringIO) -> None:
    buffer.write("(")
    for i, item in enumerate(items):
        if i:
            buffer.write(" ")
        _write(item, buffer)
    buffer.write(")")


def _write(node: Node, buffer: StringIO) -> None:
    if isinstance(node, Symbol):
        buffer.write(node.name)
    elif isinstance(node, BooleanType):
        buffer.write(repr(node))
    elif isinstance(node, list):
        _write_items(node, buffer)
    elif isinstance(node, QuotedList):
        buffer.write("'")
        _write_items(node.items, buffer)
    elif isinstance(node, Closure):
        buffer.write("#<closure (")
        buffer.write(" ".join(node.formals))
        buffer.write(") ")
        _write_items(node.body, buffer)
        buffer.write(">")
    else:
        buffer.write(str(node))


def to_source(node: Node) -> str:
    with StringIO() as buffer:
        _write(node, buffer)
        return buffer.getvalue()
