"""
reader/errors.py — kody błędów i wyjątki leksera oraz parsera.

ReadError  — wspólna baza: kod, komunikat, pozycja w tekście źródłowym.
LexError   — znak nie należy do żadnej klasy tokenów lub ':' bez '-'.
ParseError — oczekiwanie gramatyki w bieżącym miejscu nie jest spełnione.

Oba rodzaje błędów dotyczą jednej jednostki wejścia (linii / klauzuli);
pętla sesji raportuje je i przechodzi do następnej linii.
"""

from __future__ import annotations

from enum import StrEnum

from data_model import Token


class ErrorCode(StrEnum):
    """Stałe kody błędów czytnika."""

    # Lexer
    UNEXPECTED_CHAR    = "E_UNEXPECTED_CHAR"
    EXPECTED_DASH      = "E_EXPECTED_DASH"

    # Parser
    UNEXPECTED_TOKEN   = "E_UNEXPECTED_TOKEN"
    EXPECTED_TOKEN     = "E_EXPECTED_TOKEN"
    MISSING_TERMINATOR = "E_MISSING_TERMINATOR"


class ReadError(Exception):
    """
    Błąd czytania tekstu programu.

    - code:     stały identyfikator klasy błędu (ErrorCode)
    - message:  czytelny opis błędu
    - position: 0-based offset w tekście źródłowym (-1 gdy nieznany)
    """

    def __init__(self, code: ErrorCode, message: str, position: int = -1) -> None:
        super().__init__(message)
        self.code     = code
        self.message  = message
        self.position = position

    def __str__(self) -> str:
        where = f" (pozycja {self.position})" if self.position >= 0 else ""
        return f"[{self.code}] {self.message}{where}"


class LexError(ReadError):
    """Błąd leksera. char to znak, który spowodował błąd (None na końcu wejścia)."""

    def __init__(
        self,
        code:     ErrorCode,
        message:  str,
        position: int = -1,
        char:     str | None = None,
    ) -> None:
        super().__init__(code, message, position)
        self.char = char

    @classmethod
    def unexpected_char(cls, char: str, position: int) -> LexError:
        return cls(
            ErrorCode.UNEXPECTED_CHAR,
            f"Nieoczekiwany znak {char!r}",
            position,
            char,
        )

    @classmethod
    def expected_dash(cls, found: str | None, position: int) -> LexError:
        shown = repr(found) if found is not None else "koniec wejścia"
        return cls(
            ErrorCode.EXPECTED_DASH,
            f"Oczekiwano '-' po ':', znaleziono {shown}",
            position,
            found,
        )


def _describe(token: Token | None) -> str:
    return str(token) if token is not None else "koniec wejścia"


class ParseError(ReadError):
    """
    Błąd parsera.

    - expected: oczekiwana konstrukcja (opis słowny lub oczekiwany token)
    - found:    token faktycznie napotkany (None na końcu wejścia)
    """

    def __init__(
        self,
        code:     ErrorCode,
        message:  str,
        position: int = -1,
        expected: str | Token | None = None,
        found:    Token | None = None,
    ) -> None:
        super().__init__(code, message, position)
        self.expected = expected
        self.found    = found

    @classmethod
    def unexpected_token(cls, expected: str, found: Token | None, position: int = -1) -> ParseError:
        if found is not None:
            position = found.pos
        return cls(
            ErrorCode.UNEXPECTED_TOKEN,
            f"Oczekiwano {expected}, znaleziono {_describe(found)}",
            position,
            expected,
            found,
        )

    @classmethod
    def expected_token(cls, expected: Token, found: Token | None, position: int = -1) -> ParseError:
        if found is not None:
            position = found.pos
        return cls(
            ErrorCode.EXPECTED_TOKEN,
            f"Oczekiwano {expected}, znaleziono {_describe(found)}",
            position,
            expected,
            found,
        )

    @classmethod
    def missing_terminator(cls, found: Token | None, position: int = -1) -> ParseError:
        if found is not None:
            position = found.pos
        return cls(
            ErrorCode.MISSING_TERMINATOR,
            f"Brak kropki kończącej klauzulę, znaleziono {_describe(found)}",
            position,
            "'.'",
            found,
        )
