"""Komenda: mlog facts — listowanie bazy startowej (fakty wbudowane + consult)."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box

from data_model import format_clause
from mlog._settings import get_settings
from mlog._source import load_database
from reader import ReadError

console = Console(width=get_settings().console_width)


def run(args: argparse.Namespace) -> None:
    try:
        database = load_database(args.consult)
    except (OSError, ReadError) as e:
        console.print(f"[red]Błąd wczytywania bazy:[/red] {e}")
        raise SystemExit(1)

    entries = database.lookup(args.name, args.arity) if args.name else list(database)
    if not entries:
        console.print("[yellow]Brak klauzul.[/yellow]")
        return

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("WSKAŹNIK", style="bold cyan", no_wrap=True)
    table.add_column("KLAUZULA")
    for e in entries:
        table.add_row(e.indicator, format_clause(e))

    console.print(table)
    console.print(f"  [dim]{len(entries)} klauzul[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "facts",
        help="Listuje klauzule bazy startowej.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Przykłady:
  mlog facts
  mlog facts --name red --arity 1
  mlog facts --consult rodzina.pl
        """,
    )
    p.add_argument("--name", "-n", metavar="NAZWA", help="Filtr po nazwie predykatu głowy.")
    p.add_argument(
        "--arity", "-a",
        type=int,
        default=1,
        metavar="N",
        help="Arność dla --name (domyślnie: 1).",
    )
    p.add_argument(
        "--consult", "-c",
        metavar="PLIK",
        action="append",
        help="Plik programu dołączany do bazy. Można podać wielokrotnie.",
    )
    p.set_defaults(func=run)
