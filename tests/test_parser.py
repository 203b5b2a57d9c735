import pytest

from data_model import TRUE, Atom, Clause, Predicate, Variable
from reader import ErrorCode, LexError, ParseError, Parser, parse_program, parse_query


def test_zero_arity_fact():
    assert parse_query("cat.") == Predicate("cat", ())


def test_fact_with_atom_argument():
    assert parse_query("eq(a).") == Predicate("eq", (Atom("a"),))


def test_fact_with_variable_argument():
    assert parse_query("eq(A).") == Predicate("eq", (Variable("A"),))


def test_argument_order_is_preserved_without_unification():
    result = parse_query("add(X, e, X).")
    assert result == Predicate("add", (Variable("X"), Atom("e"), Variable("X")))


def test_rule_with_single_body_predicate():
    assert parse_query("a :- b(X).") == Clause(
        head=Predicate("a"),
        body=(Predicate("b", (Variable("X"),)),),
    )


def test_rule_with_conjunctive_body():
    result = parse_query("daughter(X, Y) :- father(Y, X), female(X).")
    assert isinstance(result, Clause)
    assert result.head == Predicate("daughter", (Variable("X"), Variable("Y")))
    assert [p.name for p in result.body] == ["father", "female"]
    assert str(result) == "daughter(X, Y) :- father(Y, X), female(X)"


def test_empty_body_is_rejected():
    with pytest.raises(ParseError) as exc:
        parse_query("cat :- .")
    assert exc.value.code is ErrorCode.UNEXPECTED_TOKEN


def test_empty_argument_list_is_rejected():
    with pytest.raises(ParseError) as exc:
        parse_query("p().")
    assert exc.value.code is ErrorCode.UNEXPECTED_TOKEN


@pytest.mark.parametrize("text", ["p(a,).", "p(a, ).", "a :- b, .", "a :- b,"])
def test_trailing_comma_is_rejected(text):
    with pytest.raises(ParseError):
        parse_query(text)


def test_unclosed_argument_list_is_rejected():
    with pytest.raises(ParseError) as exc:
        parse_query("p(a b).")
    assert exc.value.code is ErrorCode.EXPECTED_TOKEN
    assert exc.value.position == 4


@pytest.mark.parametrize("text", ["cat", "a :- b", "p(X)"])
def test_missing_terminator(text):
    with pytest.raises(ParseError) as exc:
        parse_query(text)
    assert exc.value.code is ErrorCode.MISSING_TERMINATOR
    assert exc.value.found is None


def test_compound_term_in_argument_is_rejected():
    with pytest.raises(ParseError) as exc:
        parse_query("p(f(a)).")
    assert exc.value.code is ErrorCode.EXPECTED_TOKEN


def test_trailing_comment_does_not_change_result():
    assert parse_query("eq(a). % a comment") == parse_query("eq(a).")


def test_comment_only_or_blank_line_yields_nothing():
    assert parse_query("% just a comment") is None
    assert parse_query("") is None
    assert parse_query("\n") is None
    assert parse_program("% nothing here\n") == []


def test_query_rejects_trailing_tokens():
    with pytest.raises(ParseError) as exc:
        parse_query("a. b.")
    assert exc.value.code is ErrorCode.UNEXPECTED_TOKEN


def test_query_starting_with_variable_is_rejected():
    with pytest.raises(ParseError):
        parse_query("X.")


def test_lex_errors_propagate_through_parser():
    with pytest.raises(LexError):
        parse_query("a :x b.")


def test_program_collects_clauses_in_order():
    program = parse_program(
        """
        % rodzina
        father(tom, ann).
        female(ann).
        daughter(X, Y) :- father(Y, X), female(X).
        """
    )
    assert [str(c) for c in program] == [
        "father(tom, ann)",
        "female(ann)",
        "daughter(X, Y) :- father(Y, X), female(X)",
    ]


def test_program_rejects_garbage_after_last_clause():
    with pytest.raises(ParseError):
        parse_program("a. (b).")


def test_parse_atom_leaves_buffer_untouched_on_mismatch():
    parser = Parser.from_text("X")
    assert parser.parse_atom() is None
    assert parser.lexer.peek_token() is not None


def test_parse_clause_returns_none_at_end():
    parser = Parser.from_text("a.")
    assert parser.parse_clause() == Predicate("a")
    assert parser.parse_clause() is None


def test_repeated_terms_are_shared():
    parser = Parser.from_text("p(X, a). q(a, X) :- r(X).")
    p, rule = parser.parse()
    assert p.args[0] is rule.head.args[1]
    assert p.args[1] is rule.head.args[0]
    assert rule.body[0].args[0] is p.args[0]


def test_grammar_never_produces_true():
    for clause in parse_program("a. b :- c. d(X) :- e(X), f."):
        assert clause is not TRUE
