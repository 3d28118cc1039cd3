"""
  tinylisp lexer

Single pass over the source with one character of pushback:

    - whitespace (space, tab, newline, carriage return) is skipped
    - ( ) '            -> lparen, rparen, quote
    - + - * =          -> one-character symbols
    - / > <            -> one-character symbols, or /= >= <= when '=' follows
    - [A-Za-z0-9][A-Za-z0-9-]*
                       -> integer if every character is a decimal digit,
                          otherwise a symbol

Negative literals are not tokens: `-12` lexes as the symbol `-` followed by
the integer 12.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Union

from tinylisp.errors import LispLexerError
from tinylisp.types.integer import fits_int64

LPAREN = "lparen"
RPAREN = "rparen"
QUOTE = "quote"
INTEGER = "integer"
SYMBOL = "symbol"

WHITESPACE = " \t\n\r"
SINGLE_CHAR_SYMBOLS = "+-*="
# Operators that become two-character tokens when followed by '='
EQ_SUFFIXED_SYMBOLS = "/><"


@dataclass(frozen=True)
class Token:
    kind: str
    value: Union[int, str]
    index: int
    length: int


class _Cursor:
    """Character reader with a pushback buffer, tracking the scan position."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.read_ahead: list[str] = []

    def next(self) -> Optional[str]:
        if self.read_ahead:
            c = self.read_ahead.pop()
        elif self.pos < len(self.source):
            c = self.source[self.pos]
        else:
            return None
        self.pos += 1
        return c

    def return_char(self, c: str) -> None:
        self.read_ahead.append(c)
        self.pos -= 1


def _is_word_start(c: str) -> bool:
    return c.isalnum()


def _is_word_char(c: str) -> bool:
    return c.isalnum() or c == "-"


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Tokens in source order."""
    cursor = _Cursor(source)

    while (c := cursor.next()) is not None:
        start = cursor.pos - 1

        if c in WHITESPACE:
            continue

        if c == "(":
            yield Token(LPAREN, c, start, 1)
        elif c == ")":
            yield Token(RPAREN, c, start, 1)
        elif c == "'":
            yield Token(QUOTE, c, start, 1)
        elif c in SINGLE_CHAR_SYMBOLS:
            yield Token(SYMBOL, c, start, 1)
        elif c in EQ_SUFFIXED_SYMBOLS:
            following = cursor.next()
            if following == "=":
                yield Token(SYMBOL, c + "=", start, 2)
            else:
                if following is not None:
                    cursor.return_char(following)
                yield Token(SYMBOL, c, start, 1)
        elif _is_word_start(c):
            chars = [c]
            while (following := cursor.next()) is not None:
                if not _is_word_char(following):
                    cursor.return_char(following)
                    break
                chars.append(following)
            word = "".join(chars)
            if word.isascii() and word.isdigit():
                value = int(word)
                if not fits_int64(value):
                    raise LispLexerError(
                        f"Integer literal out of range at {start}: {word}", start
                    )
                yield Token(INTEGER, value, start, len(word))
            else:
                yield Token(SYMBOL, word, start, len(word))
        else:
            raise LispLexerError(f"Unexpected character at {start}: {c!r}", start)
