from tinylisp.reader.lexer import Token, lex
from tinylisp.reader.parser import Parser

__all__ = ["Token", "lex", "Parser"]
