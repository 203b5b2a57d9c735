"""
reader — lekser i parser notacji minilog.

Publiczne API:
  Lexer(text)            lekser z podglądem jednego tokenu
  tokenize(text)         → list[Token]
  Parser(lexer)          parser zstępujący
  parse_program(text)    → list[Predicate | Clause]
  parse_query(text)      → Predicate | Clause | None
  ReadError, LexError, ParseError, ErrorCode   błędy czytnika
"""

from .errors import ErrorCode, LexError, ParseError, ReadError
from .lexer import Lexer, tokenize
from .parser import Parser, parse_program, parse_query

__all__ = [
    "ErrorCode",
    "LexError",
    "ParseError",
    "ReadError",
    "Lexer",
    "tokenize",
    "Parser",
    "parse_program",
    "parse_query",
]
