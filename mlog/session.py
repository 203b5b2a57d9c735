"""
mlog/session.py — pętla sesji: linia → zapytanie → silnik rezolucji.

Każda linia jest osobną jednostką wejścia: parsowana jako jedna klauzula
i przekazywana razem z (niezmienianą) bazą do ResolutionEngine.evaluate.
Błędy leksera/parsera dotyczą tylko bieżącej linii: są raportowane,
a pętla czyta dalej. Koniec strumienia kończy sesję bez błędu.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape

from data_model import Node, format_clause
from reader import ReadError, parse_query
from solver import ClauseDatabase, ResolutionEngine

log = logging.getLogger(__name__)


@dataclass(slots=True)
class SessionStats:
    """Podsumowanie sesji: linie, zapytania, sukcesy, błędy."""
    lines:     int = 0
    queries:   int = 0
    succeeded: int = 0
    errors:    int = 0


def read_lines(console: Console, prompt: str) -> Iterator[str]:
    """Czyta linie interaktywnie (z promptem) do EOF."""
    while True:
        try:
            yield console.input(prompt)
        except EOFError:
            return


class Session:
    """
    Sesja zapytań nad stałą bazą klauzul.

    Użycie::

        session = Session(load_builtin_database(), FailingEngine(), console)
        stats   = session.run(sys.stdin)
    """

    def __init__(
        self,
        database: ClauseDatabase,
        engine:   ResolutionEngine,
        console:  Console,
        echo:     bool = False,
    ) -> None:
        self._database = database
        self._engine   = engine
        self._console  = console
        self._echo     = echo
        self.stats     = SessionStats()

    @property
    def database(self) -> ClauseDatabase:
        return self._database

    def handle_line(self, line: str) -> bool | None:
        """
        Obsługuje jedną linię.

        Returns:
            Wynik evaluate() albo None, gdy linia była pusta / samym
            komentarzem lub nie dała się sparsować.
        """
        self.stats.lines += 1
        if self._echo:
            self._console.print(f"[dim]{escape(line.rstrip())}[/dim]")

        try:
            query = parse_query(line)
        except ReadError as e:
            self.stats.errors += 1
            log.debug("Linia %d odrzucona: %s", self.stats.lines, e)
            self._console.print(f"[red]Błąd:[/red] {escape(str(e))}")
            return None

        if query is None:
            return None
        return self._evaluate(query)

    def _evaluate(self, query: Node) -> bool:
        self.stats.queries += 1
        self._console.print(f"[cyan]{escape(format_clause(query))}[/cyan]")
        result = self._engine.evaluate(self._database, query)
        if result:
            self.stats.succeeded += 1
            self._console.print("[green]yes.[/green]")
        else:
            self._console.print("[red]no.[/red]")
        return result

    def run(self, lines: Iterable[str]) -> SessionStats:
        """Obsługuje kolejne linie aż do końca strumienia."""
        for line in lines:
            self.handle_line(line)
        log.debug("Koniec sesji: %s", self.stats)
        return self.stats
