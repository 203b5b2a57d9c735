"""
solver/engine.py — granica silnika rezolucji.

Kontrakt::

    evaluate(database, query) -> bool

True oznacza, że zapytanie jest wyprowadzalne z bazy klauzul; False oznacza
brak wyprowadzenia. Unifikacja, nawroty, odcięcie i negacja nie są tu
zaimplementowane; dostarczany silnik domyślny (FailingEngine) zawsze zwraca False.
"""

from __future__ import annotations

import logging
from typing import Protocol

from data_model import Node

from .database import ClauseDatabase

log = logging.getLogger(__name__)


class ResolutionEngine(Protocol):
    """Silnik rozstrzygający wyprowadzalność zapytania z bazy klauzul."""

    def evaluate(self, database: ClauseDatabase, query: Node) -> bool: ...


class FailingEngine:
    """Silnik domyślny: każde zapytanie kończy się porażką."""

    def evaluate(self, database: ClauseDatabase, query: Node) -> bool:
        log.debug("evaluate(%s) wobec %d klauzul → False", query, len(database))
        return False
