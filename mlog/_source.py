"""Wspólne wczytywanie źródeł dla komend: pliki programów i baza startowa."""

from __future__ import annotations

import logging
import pathlib
import sys

from solver import ClauseDatabase, load_builtin_database

log = logging.getLogger(__name__)

STDIN_NAME = "-"


def read_source(name: str) -> str:
    """Zwraca tekst pliku `name` albo całego stdin dla "-". Podnosi OSError."""
    if name == STDIN_NAME:
        return sys.stdin.read()
    return pathlib.Path(name).read_text(encoding="utf-8")


def load_database(consult: list[str] | None = None) -> ClauseDatabase:
    """
    Buduje bazę startową: fakty wbudowane + klauzule z plików consult (w kolejności).

    Raises:
        OSError, ReadError — błąd odczytu lub parsowania pliku.
    """
    db = load_builtin_database()
    for name in consult or []:
        extra = ClauseDatabase.from_file(pathlib.Path(name))
        log.debug("Dołączono %d klauzul z %s", len(extra), name)
        db = db.extend(extra)
    return db
