import io

from rich.console import Console

from data_model import Atom, Clause, Predicate, Variable
from mlog.session import Session, read_lines
from solver import ClauseDatabase, FailingEngine, load_builtin_database


class RecordingEngine:
    """Silnik testowy: zapamiętuje wywołania, sukces dla faktów obecnych w bazie."""

    def __init__(self):
        self.calls = []

    def evaluate(self, database, query):
        self.calls.append((database, query))
        return query in database.clauses


def make_console():
    return Console(file=io.StringIO(), width=120, color_system=None)


def output(console):
    return console.file.getvalue()


def test_failing_engine_always_fails():
    engine = FailingEngine()
    db = load_builtin_database()
    assert engine.evaluate(db, db[0]) is False


def test_each_line_is_evaluated_against_unchanged_database():
    db = load_builtin_database()
    engine = RecordingEngine()
    session = Session(db, engine, make_console())

    stats = session.run(["red(xff0000).\n", "red(x000000).\n", "a :- b(X).\n"])

    assert [q for _, q in engine.calls] == [
        Predicate("red", (Atom("xff0000"),)),
        Predicate("red", (Atom("x000000"),)),
        Clause(Predicate("a"), (Predicate("b", (Variable("X"),)),)),
    ]
    assert all(d is db for d, _ in engine.calls)
    assert len(db) == len(load_builtin_database())
    assert (stats.lines, stats.queries, stats.succeeded, stats.errors) == (3, 3, 1, 0)


def test_malformed_line_is_reported_and_session_continues():
    console = make_console()
    engine = RecordingEngine()
    session = Session(ClauseDatabase(), engine, console)

    stats = session.run(["cat :- .\n", "p(a)\n", "a :x\n", "cat.\n"])

    assert stats.errors == 3
    assert stats.queries == 1
    assert engine.calls[0][1] == Predicate("cat")
    text = output(console)
    assert text.count("Błąd:") == 3
    assert "E_UNEXPECTED_TOKEN" in text
    assert "E_MISSING_TERMINATOR" in text
    assert "E_EXPECTED_DASH" in text
    assert text.rstrip().endswith("no.")


def test_blank_and_comment_lines_are_skipped():
    engine = RecordingEngine()
    session = Session(ClauseDatabase(), engine, make_console())
    stats = session.run(["\n", "% komentarz\n", "   \n"])
    assert engine.calls == []
    assert (stats.lines, stats.queries, stats.errors) == (3, 0, 0)


def test_empty_stream_ends_session_cleanly():
    stats = Session(ClauseDatabase(), FailingEngine(), make_console()).run([])
    assert stats.lines == 0


def test_output_renders_query_and_marker():
    console = make_console()
    Session(load_builtin_database(), FailingEngine(), console).run(["eq(A). % uwaga\n"])
    assert output(console).splitlines() == ["eq(A).", "no."]


def test_echo_prints_input_line():
    console = make_console()
    Session(ClauseDatabase(), FailingEngine(), console, echo=True).run(["cat.\n"])
    assert output(console).splitlines() == ["cat.", "cat.", "no."]


def test_handle_line_returns_engine_result():
    db = load_builtin_database()
    session = Session(db, RecordingEngine(), make_console())
    assert session.handle_line("blue(x0000ff).") is True
    assert session.handle_line("blue(xffffff).") is False
    assert session.handle_line("") is None
    assert session.handle_line("blue(") is None


def test_read_lines_stops_at_eof():
    answers = iter(["cat.", "dog."])

    class FakeConsole:
        def input(self, prompt):
            try:
                return next(answers)
            except StopIteration:
                raise EOFError

    assert list(read_lines(FakeConsole(), "?- ")) == ["cat.", "dog."]
