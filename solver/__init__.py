"""
solver — baza klauzul i granica silnika rezolucji dla minilog.

Publiczne API:
  ClauseDatabase                 niemutowalna baza klauzul
  BUILTIN_FACTS                  tekst wbudowanych faktów
  load_builtin_database()        → ClauseDatabase (raz na proces)
  ResolutionEngine               protokół evaluate(database, query) -> bool
  FailingEngine                  silnik domyślny (zawsze False)
"""

from .database import BUILTIN_FACTS, ClauseDatabase, load_builtin_database
from .engine import FailingEngine, ResolutionEngine

__all__ = [
    "BUILTIN_FACTS",
    "ClauseDatabase",
    "load_builtin_database",
    "FailingEngine",
    "ResolutionEngine",
]
