"""Komenda: mlog parse — parsowanie całego programu i wydruk klauzul."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box

from data_model import Clause, format_clause
from mlog._settings import get_settings
from mlog._source import read_source
from reader import ReadError, parse_program

console = Console(width=get_settings().console_width)


def run(args: argparse.Namespace) -> None:
    try:
        text = read_source(args.file)
    except OSError as e:
        console.print(f"[red]Błąd odczytu:[/red] {e}")
        raise SystemExit(1)

    try:
        clauses = parse_program(text)
    except ReadError as e:
        console.print(f"[red]Błąd parsowania:[/red] {e}")
        raise SystemExit(1)

    if args.plain:
        for clause in clauses:
            console.print(format_clause(clause), markup=False, highlight=False)
        return

    if not clauses:
        console.print("[yellow]Brak klauzul.[/yellow]")
        return

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("#",         style="dim", justify="right")
    table.add_column("RODZAJ",    no_wrap=True)
    table.add_column("WSKAŹNIK",  style="bold cyan", no_wrap=True)
    table.add_column("KLAUZULA")

    for i, clause in enumerate(clauses, 1):
        kind = "[yellow]reguła[/yellow]" if isinstance(clause, Clause) else "[green]fakt[/green]"
        table.add_row(str(i), kind, clause.indicator, format_clause(clause))

    console.print(table)
    n_rules = sum(isinstance(c, Clause) for c in clauses)
    console.print(f"  [dim]{len(clauses)} klauzul ({len(clauses) - n_rules} faktów, {n_rules} reguł)[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Parsuje program (plik lub stdin) i wyświetla klauzule.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Przykłady:
  mlog parse rodzina.pl
  mlog parse rodzina.pl --plain
  cat rodzina.pl | mlog parse -
        """,
    )
    p.add_argument("file", metavar="PLIK", help="Plik programu lub '-' dla stdin.")
    p.add_argument(
        "--plain",
        action="store_true",
        help="Wydrukuj klauzule jako tekst (po jednej na linię) zamiast tabeli.",
    )
    p.set_defaults(func=run)
