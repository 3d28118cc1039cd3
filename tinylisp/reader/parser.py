"""
  tinylisp parser

Recursive descent over the token stream produced by `lex`:

    - integer token    -> int
    - symbol token     -> Symbol
    - ( ... )          -> list of Nodes
    - '( ... )         -> QuotedList

Malformed input (an unterminated list, a ')' with nothing open, a quote not
followed by '(') raises LispSyntaxError carrying the offending offset, as
does list nesting deeper than `max_depth`.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from tinylisp import Node
from tinylisp.config import get_max_depth
from tinylisp.errors import LispSyntaxError
from tinylisp.reader.lexer import Token, LPAREN, RPAREN, QUOTE, INTEGER, SYMBOL
from tinylisp.types.quoted import QuotedList
from tinylisp.types.symbol import Symbol


class Parser:
    def __init__(self, tokens: Iterable[Token], max_depth: Optional[int] = None):
        self.tokens = iter(tokens)
        self.buffer: list[Token] = []
        # List nesting limit, shared with the evaluation depth limit
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()
        self.depth: int = 0

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse(self) -> Optional[Node]:
        """Parse the next form; None once the tokens are exhausted."""
        token = self.advance()
        if token is None:
            return None

        if token.kind == INTEGER:
            return token.value
        if token.kind == SYMBOL:
            return Symbol(token.value)
        if token.kind == LPAREN:
            return self._parse_list(token)
        if token.kind == QUOTE:
            opener = self.advance()
            if opener is None or opener.kind != LPAREN:
                index = token.index if opener is None else opener.index
                raise LispSyntaxError(f"Expected '(' after quote at {index}", index)
            return QuotedList(self._parse_list(opener))
        if token.kind == RPAREN:
            raise LispSyntaxError(f"Unmatched ')' at {token.index}", token.index)

        raise LispSyntaxError(f"Unknown token at {token.index}: {token.kind}", token.index)

    def _parse_list(self, opener: Token) -> list[Node]:
        if self.depth >= self.max_depth:
            raise LispSyntaxError(
                f"Lists nested deeper than {self.max_depth} at {opener.index}", opener.index
            )
        self.depth += 1
        try:
            items: list[Node] = []
            while True:
                token = self.peek()
                if token is None:
                    raise LispSyntaxError(f"Unmatched '(' at {opener.index}", opener.index)
                if token.kind == RPAREN:
                    self.advance()
                    return items
                items.append(self.parse())
        finally:
            self.depth -= 1

    def parse_all(self) -> Iterator[Node]:
        while self.peek() is not None:
            yield self.parse()
