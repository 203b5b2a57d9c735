"""Komenda: mlog repl — pętla zapytań nad wbudowaną bazą faktów."""

from __future__ import annotations

import argparse
import sys

from rich.console import Console

from mlog._settings import get_settings
from mlog._source import load_database
from mlog.session import Session, read_lines
from reader import ReadError
from solver import FailingEngine

settings = get_settings()
console  = Console(width=settings.console_width)


def run(args: argparse.Namespace) -> None:
    try:
        database = load_database(args.consult)
    except (OSError, ReadError) as e:
        console.print(f"[red]Błąd wczytywania bazy:[/red] {e}")
        raise SystemExit(1)

    interactive = sys.stdin.isatty()
    if interactive:
        console.print(
            f"minilog — baza: [bold]{len(database)}[/bold] klauzul "
            f"({', '.join(database.indicators())}). Ctrl-D kończy."
        )
        lines = read_lines(console, settings.prompt)
    else:
        lines = sys.stdin

    session = Session(database, FailingEngine(), console, echo=args.echo)
    try:
        stats = session.run(lines)
    except KeyboardInterrupt:
        console.print()
        stats = session.stats

    if interactive or args.echo:
        console.print(
            f"[dim]{stats.lines} linii, {stats.queries} zapytań, "
            f"{stats.succeeded} sukcesów, {stats.errors} błędów[/dim]"
        )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "repl",
        help="Czyta zapytania linia po linii i przekazuje je do silnika rezolucji.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Każda linia wejścia to jedna klauzula (fakt, reguła lub zapytanie).
Linie puste i komentarze (%) są pomijane. Błędna linia jest raportowana,
a sesja trwa dalej. Koniec wejścia (Ctrl-D) kończy sesję.

Przykłady:
  mlog repl
  echo "red(xff0000)." | mlog repl
  mlog repl --consult rodzina.pl --echo < zapytania.txt
        """,
    )
    p.add_argument(
        "--consult", "-c",
        metavar="PLIK",
        action="append",
        help="Plik programu dołączany do bazy po faktach wbudowanych. Można podać wielokrotnie.",
    )
    p.add_argument(
        "--echo",
        action="store_true",
        help="Wypisuj każdą wczytaną linię (przydatne przy wejściu z potoku).",
    )
    p.set_defaults(func=run)
