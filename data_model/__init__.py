"""
data_model — struktury danych minilog.

Użycie:
  from data_model import Token, TokenKind, Atom, Variable, Predicate, Clause, TRUE

Moduły:
  tokens — Token, TokenKind, OPS
  nodes  — Atom, Variable, Predicate, Clause, TRUE, Term, Node, format_clause
"""

from .tokens import (
    OPS,
    Token,
    TokenKind,
)
from .nodes import (
    TRUE,
    Atom,
    Clause,
    Node,
    Predicate,
    Term,
    Variable,
    format_clause,
)

__all__ = [
    # tokens
    "OPS",
    "Token",
    "TokenKind",
    # nodes
    "TRUE",
    "Atom",
    "Clause",
    "Node",
    "Predicate",
    "Term",
    "Variable",
    "format_clause",
]
