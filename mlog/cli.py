"""
mlog — narzędzie CLI dla minilog.

Użycie:
  mlog <komenda> [opcje]

Komendy:
  repl     Pętla zapytań: linia → klauzula → silnik rezolucji.
  parse    Parsuje cały program i wyświetla klauzule.
  tokens   Wyświetla strumień tokenów.
  facts    Listuje bazę startową (fakty wbudowane + --consult).

Zmienne środowiskowe:
  MLOG_LOG_LEVEL       poziom logowania (domyślnie WARNING)
  MLOG_PROMPT          prompt trybu interaktywnego (domyślnie "?- ")
  MLOG_CONSOLE_WIDTH   szerokość konsoli (domyślnie 120)
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from mlog._logging import configure_logging
from mlog._settings import get_settings
from mlog.commands import facts as cmd_facts
from mlog.commands import parse as cmd_parse
from mlog.commands import repl as cmd_repl
from mlog.commands import tokens as cmd_tokens

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mlog",
        description="minilog — lekser, parser i pętla zapytań dla zredukowanego Prologu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"mlog {__version__}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_repl.add_parser(subparsers)
    cmd_parse.add_parser(subparsers)
    cmd_tokens.add_parser(subparsers)
    cmd_facts.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    configure_logging(get_settings().log_level)
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
