"""
reader/lexer.py — lekser: strumień znaków → strumień tokenów z podglądem jednego tokenu.

Publiczne API:
  Lexer(text)            lekser nad tekstem
    .peek_token()        → Token | None  (bez konsumpcji, idempotentne)
    .pop_token()         → Token | None  (konsumuje)
    .consume(expected)   → bool          (konsumuje tylko przy dokładnym dopasowaniu)
    .expect(expected)    jak consume, ale ParseError przy niedopasowaniu
  tokenize(text)         → list[Token]

Tokenizacja (zachłanna, najdłuższe dopasowanie):
  - pomija ciągi ' ' i '\\n' oraz komentarze '%' do końca linii
  - mała litera   → maksymalny ciąg [a-z0-9] → Atom
  - wielka litera → ta litera + maksymalny ciąg [a-z] → Variable
  - ( ) , .       → Op
  - :-            → Op(":-"); ':' bez '-' to LexError
  - koniec wejścia → None (to nie jest błąd)
"""

from __future__ import annotations

import string
from collections.abc import Iterator

from data_model import Token

from .errors import LexError, ParseError

WHITESPACE:   frozenset[str] = frozenset(" \n")
LOWERCASE:    frozenset[str] = frozenset(string.ascii_lowercase)
UPPERCASE:    frozenset[str] = frozenset(string.ascii_uppercase)
ATOM_CHARS:   frozenset[str] = LOWERCASE | frozenset(string.digits)
SINGLE_OPS:   frozenset[str] = frozenset("(),.")
COMMENT_CHAR: str            = "%"

# Znacznik pustego bufora podglądu (None oznacza już „koniec wejścia”)
_EMPTY = object()


class Lexer:
    """
    Lekser z buforem podglądu jednego tokenu.

    Użycie::

        lx = Lexer("eq(a).")
        lx.peek_token()          # Atom(eq), bez konsumpcji
        lx.consume(Token.atom("eq"))
        lx.expect(Token.op("("))
    """

    def __init__(self, text: str) -> None:
        self._text: str           = text
        self._pos:  int           = 0
        self._peeked: object      = _EMPTY

    # ------------------------------------------------------------------
    # Poziom znaków
    # ------------------------------------------------------------------

    def _peek_char(self) -> str | None:
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def _pop_char(self) -> str | None:
        c = self._peek_char()
        if c is not None:
            self._pos += 1
        return c

    def _skip_layout(self) -> None:
        """Pomija białe znaki i komentarze (dowolnie przeplatane)."""
        while True:
            c = self._peek_char()
            if c in WHITESPACE:
                self._pos += 1
            elif c == COMMENT_CHAR:
                # komentarz do '\n' włącznie albo do końca wejścia
                end = self._text.find("\n", self._pos)
                self._pos = len(self._text) if end < 0 else end + 1
            else:
                return

    def _take_while(self, chars: frozenset[str]) -> str:
        start = self._pos
        while self._peek_char() in chars:
            self._pos += 1
        return self._text[start:self._pos]

    def _read_token(self) -> Token | None:
        self._skip_layout()
        start = self._pos
        c = self._pop_char()

        if c is None:
            return None
        if c in LOWERCASE:
            return Token.atom(c + self._take_while(ATOM_CHARS), start)
        if c in UPPERCASE:
            return Token.variable(c + self._take_while(LOWERCASE), start)
        if c in SINGLE_OPS:
            return Token.op(c, start)
        if c == ":":
            nxt = self._pop_char()
            if nxt != "-":
                raise LexError.expected_dash(nxt, start + 1)
            return Token.op(":-", start)
        raise LexError.unexpected_char(c, start)

    # ------------------------------------------------------------------
    # Poziom tokenów
    # ------------------------------------------------------------------

    @property
    def position(self) -> int:
        """Offset następnego nieodczytanego tokenu (lub końca wejścia)."""
        if isinstance(self._peeked, Token):
            return self._peeked.pos
        return self._pos

    def peek_token(self) -> Token | None:
        """Zwraca następny token bez konsumowania go."""
        if self._peeked is _EMPTY:
            self._peeked = self._read_token()
        return self._peeked  # type: ignore[return-value]

    def pop_token(self) -> Token | None:
        """Zwraca i konsumuje następny token."""
        token = self.peek_token()
        self._peeked = _EMPTY
        return token

    def consume(self, expected: Token) -> bool:
        """Konsumuje następny token tylko gdy równa się expected."""
        if self.peek_token() == expected:
            self._peeked = _EMPTY
            return True
        return False

    def expect(self, expected: Token) -> None:
        """Jak consume, ale podnosi ParseError (EXPECTED_TOKEN) przy niedopasowaniu."""
        if not self.consume(expected):
            raise ParseError.expected_token(expected, self.peek_token(), self.position)

    def at_end(self) -> bool:
        return self.peek_token() is None

    def __iter__(self) -> Iterator[Token]:
        while (token := self.pop_token()) is not None:
            yield token


def tokenize(text: str) -> list[Token]:
    """Zwraca pełną listę tokenów tekstu. Podnosi LexError przy błędzie."""
    return list(Lexer(text))
