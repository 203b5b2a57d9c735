"""
Tokeny leksera: Atom, Variable, Op.

Token jest wartością ulotną: powstaje i jest konsumowany w ramach
jednego wywołania parsera. Komentarze nie produkują tokenów.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class TokenKind(StrEnum):
    """Rodzaj tokenu."""
    ATOM     = "atom"
    VARIABLE = "variable"
    OP       = "op"


# Dozwolone symbole operatorów
OPS: frozenset[str] = frozenset({"(", ")", ",", ".", ":-"})


@dataclass(frozen=True, slots=True)
class Token:
    """
    Pojedynczy token.

    - kind: rodzaj tokenu (TokenKind)
    - text: dosłowny tekst (nazwa atomu/zmiennej lub symbol operatora)
    - pos:  0-based offset w tekście źródłowym; nie bierze udziału w porównaniu
    """
    kind: TokenKind
    text: str
    pos:  int = field(default=-1, compare=False)

    @classmethod
    def atom(cls, text: str, pos: int = -1) -> Token:
        return cls(TokenKind.ATOM, text, pos)

    @classmethod
    def variable(cls, text: str, pos: int = -1) -> Token:
        return cls(TokenKind.VARIABLE, text, pos)

    @classmethod
    def op(cls, symbol: str, pos: int = -1) -> Token:
        if symbol not in OPS:
            raise ValueError(f"Nieznany operator: {symbol!r}")
        return cls(TokenKind.OP, symbol, pos)

    @property
    def is_term(self) -> bool:
        return self.kind in (TokenKind.ATOM, TokenKind.VARIABLE)

    def __str__(self) -> str:
        return f"{self.kind.name.capitalize()}({self.text})"
