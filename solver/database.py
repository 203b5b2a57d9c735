"""
solver/database.py — baza klauzul i ładowanie wbudowanych faktów.

Publiczne API:
  ClauseDatabase                    uporządkowana, niemutowalna sekwencja klauzul
  ClauseDatabase.from_text(text)    → ClauseDatabase
  ClauseDatabase.from_file(path)    → ClauseDatabase
  BUILTIN_FACTS                     tekst wbudowanych faktów
  load_builtin_database()           → ClauseDatabase (parsowane raz na proces)
"""

from __future__ import annotations

import functools
import logging
import pathlib
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from data_model import Clause, Predicate
from reader import parse_program

log = logging.getLogger(__name__)

type Entry = Predicate | Clause


# ---------------------------------------------------------------------------
# Wbudowane fakty
# ---------------------------------------------------------------------------

BUILTIN_FACTS = """\
% Kolory podstawowe (RGB, zapis szesnastkowy z prefiksem x)
red(xff0000).
green(x00ff00).
blue(x0000ff).

% Kolory pochodne
yellow(xffff00).
cyan(x00ffff).
magenta(xff00ff).
white(xffffff).
black(x000000).
"""


# ---------------------------------------------------------------------------
# Baza klauzul
# ---------------------------------------------------------------------------

def _head(entry: Entry) -> Predicate:
    return entry.head if isinstance(entry, Clause) else entry


@dataclass(frozen=True, slots=True)
class ClauseDatabase:
    """
    Uporządkowana sekwencja klauzul najwyższego poziomu (fakty i reguły).

    Baza jest niemutowalna: extend() zwraca nową bazę z klauzulami
    dopisanymi na końcu, istniejąca pozostaje bez zmian. Dzięki temu
    może być bezpiecznie czytana przez wiele ewaluacji zapytań naraz.
    """
    clauses: tuple[Entry, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> ClauseDatabase:
        """Parsuje tekst programu. Podnosi LexError / ParseError przy błędzie."""
        return cls(tuple(parse_program(text)))

    @classmethod
    def from_file(cls, path: pathlib.Path) -> ClauseDatabase:
        return cls.from_text(path.read_text(encoding="utf-8"))

    def extend(self, entries: Iterable[Entry]) -> ClauseDatabase:
        return ClauseDatabase(self.clauses + tuple(entries))

    def lookup(self, name: str, arity: int) -> list[Entry]:
        """Zwraca klauzule, których głowa ma podaną nazwę i arność (w kolejności)."""
        return [
            e for e in self.clauses
            if _head(e).name == name and _head(e).arity == arity
        ]

    def indicators(self) -> list[str]:
        """Wskaźniki name/arity występujące w bazie, w kolejności pierwszego wystąpienia."""
        seen: dict[str, None] = {}
        for e in self.clauses:
            seen.setdefault(_head(e).indicator, None)
        return list(seen)

    def facts(self) -> list[Predicate]:
        return [e for e in self.clauses if isinstance(e, Predicate)]

    def rules(self) -> list[Clause]:
        return [e for e in self.clauses if isinstance(e, Clause)]

    def __len__(self) -> int:
        return len(self.clauses)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.clauses)

    def __getitem__(self, index: int) -> Entry:
        return self.clauses[index]


@functools.cache
def load_builtin_database() -> ClauseDatabase:
    """
    Parsuje BUILTIN_FACTS tym samym lekserem i parserem co zapytania.

    Wynik jest zapamiętywany: parsowanie odbywa się raz na proces.
    """
    db = ClauseDatabase.from_text(BUILTIN_FACTS)
    log.debug("Wczytano %d wbudowanych klauzul: %s", len(db), ", ".join(db.indicators()))
    return db
