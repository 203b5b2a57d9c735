"""Komenda: mlog tokens — wydruk strumienia tokenów."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box

from data_model import TokenKind
from mlog._settings import get_settings
from mlog._source import read_source
from reader import LexError, tokenize

console = Console(width=get_settings().console_width)

KIND_STYLE: dict[TokenKind, str] = {
    TokenKind.ATOM:     "green",
    TokenKind.VARIABLE: "cyan",
    TokenKind.OP:       "yellow",
}


def run(args: argparse.Namespace) -> None:
    try:
        text = read_source(args.file)
    except OSError as e:
        console.print(f"[red]Błąd odczytu:[/red] {e}")
        raise SystemExit(1)

    try:
        tokens = tokenize(text)
    except LexError as e:
        console.print(f"[red]Błąd leksera:[/red] {e}")
        raise SystemExit(1)

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("POZ",    style="dim", justify="right")
    table.add_column("RODZAJ", no_wrap=True)
    table.add_column("TEKST",  no_wrap=True)

    for t in tokens:
        style = KIND_STYLE[t.kind]
        table.add_row(str(t.pos), f"[{style}]{t.kind}[/{style}]", t.text)

    console.print(table)
    console.print(f"  [dim]{len(tokens)} tokenów[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "tokens",
        help="Wyświetla tokeny tekstu (plik lub stdin).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Przykłady:
  mlog tokens rodzina.pl
  echo "daughter(X, Y) :- father(Y, X), female(X)." | mlog tokens -
        """,
    )
    p.add_argument("file", metavar="PLIK", help="Plik źródłowy lub '-' dla stdin.")
    p.set_defaults(func=run)
