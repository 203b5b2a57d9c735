import dataclasses

import pytest

from data_model import Atom, Clause, Predicate
from reader import ParseError
from solver import BUILTIN_FACTS, ClauseDatabase, load_builtin_database


def test_builtin_database_contains_colour_facts():
    db = load_builtin_database()
    assert db[0] == Predicate("red", (Atom("xff0000"),))
    assert db[1] == Predicate("green", (Atom("x00ff00"),))
    assert db[2] == Predicate("blue", (Atom("x0000ff"),))
    assert all(p.arity == 1 for p in db.facts())
    assert db.rules() == []


def test_builtin_database_is_parsed_once():
    assert load_builtin_database() is load_builtin_database()


def test_builtin_text_round_trips_through_parser():
    assert len(ClauseDatabase.from_text(BUILTIN_FACTS)) == len(load_builtin_database())


def test_database_is_immutable():
    db = load_builtin_database()
    with pytest.raises(dataclasses.FrozenInstanceError):
        db.clauses = ()


def test_extend_returns_new_database():
    db = load_builtin_database()
    size = len(db)
    bigger = db.extend(ClauseDatabase.from_text("warm(X) :- red(X)."))
    assert len(db) == size
    assert len(bigger) == size + 1
    assert isinstance(bigger[-1], Clause)
    assert list(bigger)[:size] == list(db)


def test_lookup_and_indicators():
    db = ClauseDatabase.from_text("p(a). q. p(b). p(a, b). q :- p(a).")
    assert [str(e) for e in db.lookup("p", 1)] == ["p(a)", "p(b)"]
    assert [str(e) for e in db.lookup("q", 0)] == ["q", "q :- p(a)"]
    assert db.lookup("r", 0) == []
    assert db.indicators() == ["p/1", "q/0", "p/2"]


def test_from_text_propagates_parse_errors():
    with pytest.raises(ParseError):
        ClauseDatabase.from_text("p(a")


def test_from_file(tmp_path):
    path = tmp_path / "prog.pl"
    path.write_text("likes(ann, tom).\n% koniec\n", encoding="utf-8")
    db = ClauseDatabase.from_file(path)
    assert list(db) == [Predicate("likes", (Atom("ann"), Atom("tom")))]
