"""
Węzły AST: Atom, Variable, Predicate, Clause oraz wartownik TRUE.

Wszystkie węzły są niemutowalne (frozen dataclass), więc ten sam term
może być współdzielony przez wiele list argumentów bez kopiowania.
Parser interpretuje identyczne termy jako ten sam obiekt (interning).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Wzorce tekstu termów
ATOM_RE     = re.compile(r"^[a-z][a-z0-9]*\Z")
VARIABLE_RE = re.compile(r"^[A-Z][a-z]*\Z")


# ---------------------------------------------------------------------------
# Termy
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Atom:
    """Stała: identyfikator zaczynający się małą literą, wzorzec ^[a-z][a-z0-9]*$."""
    text: str

    def __post_init__(self) -> None:
        if not ATOM_RE.match(self.text):
            raise ValueError(f"Nieprawidłowy atom: {self.text!r}")

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Variable:
    """Zmienna: wielka litera + małe litery, wzorzec ^[A-Z][a-z]*$."""
    text: str

    def __post_init__(self) -> None:
        if not VARIABLE_RE.match(self.text):
            raise ValueError(f"Nieprawidłowa zmienna: {self.text!r}")

    def __str__(self) -> str:
        return self.text


type Term = Atom | Variable


# ---------------------------------------------------------------------------
# Predicate / Clause
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Predicate:
    """
    Predykat: name(arg1, arg2, ...) lub samo name (arność 0).

    - name: tekst atomu nazwy
    - args: krotka termów (Atom | Variable), może być pusta
    """
    name: str
    args: tuple[Term, ...] = ()

    def __post_init__(self) -> None:
        if not ATOM_RE.match(self.name):
            raise ValueError(f"Nieprawidłowa nazwa predykatu: {self.name!r}")

    @property
    def arity(self) -> int:
        return len(self.args)

    @property
    def indicator(self) -> str:
        """Wskaźnik predykatu name/arity, np. "red/1"."""
        return f"{self.name}/{self.arity}"

    def variables(self) -> tuple[Variable, ...]:
        return tuple(a for a in self.args if isinstance(a, Variable))

    def is_ground(self) -> bool:
        """Zwraca True gdy wszystkie argumenty są stałymi."""
        return not self.variables()

    def __str__(self) -> str:
        if not self.args:
            return self.name
        return f"{self.name}({', '.join(str(a) for a in self.args)})"


@dataclass(frozen=True, slots=True)
class Clause:
    """
    Reguła Horna: head :- body.

    - head: predykat w głowie (konkluzja)
    - body: niepusta krotka predykatów (przesłanki, koniunkcja)
    """
    head: Predicate
    body: tuple[Predicate, ...]

    def __post_init__(self) -> None:
        if not self.body:
            raise ValueError(f"Reguła bez ciała: {self.head}")

    @property
    def indicator(self) -> str:
        return self.head.indicator

    def __str__(self) -> str:
        return f"{self.head} :- {', '.join(str(p) for p in self.body)}"


class _True:
    """Wartownik „prawda”, zarezerwowany dla reguły bez ciała; gramatyka go nie produkuje."""

    _instance: _True | None = None

    def __new__(cls) -> _True:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "TRUE"

    def __str__(self) -> str:
        return "true"


TRUE = _True()

type Node = Atom | Variable | Predicate | Clause | _True


def format_clause(node: Node) -> str:
    """Renderuje węzeł najwyższego poziomu jako klauzulę zakończoną kropką."""
    return f"{node}."
