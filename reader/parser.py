"""
reader/parser.py — parser zstępujący (recursive descent) nad tokenami leksera.

Gramatyka::

    Program        := Clause*
    Clause         := Predicate ( ":-" PredicateList )? "."
    Predicate      := Atom ( "(" TermList ")" )?
    PredicateList  := Predicate ( "," Predicate )*
    TermList       := Term ( "," Term )*
    Term           := Atom | Variable

Lista argumentów i ciało reguły muszą być niepuste: "p()" oraz "p :- ."
są błędne. Fakt zwracany jest jako Predicate, reguła jako Clause.

Publiczne API:
  Parser(lexer)          parser nad lekserem
  parse_program(text)    → list[Predicate | Clause]
  parse_query(text)      → Predicate | Clause | None  (jedna klauzula na jednostkę)
"""

from __future__ import annotations

from data_model import Atom, Clause, Predicate, Term, Token, TokenKind, Variable

from .errors import ParseError
from .lexer import Lexer

LPAREN = Token.op("(")
RPAREN = Token.op(")")
COMMA  = Token.op(",")
DOT    = Token.op(".")
NECK   = Token.op(":-")


class Parser:
    """
    Parser klauzul nad lekserem z podglądem jednego tokenu.

    Metody parse_* zwracające Optional sygnalizują None jako „brak
    dopasowania” (bufor nietknięty); pozostałe błędy to ParseError.

    Identyczne termy (Atom/Variable o tym samym tekście) są internowane:
    każde wystąpienie odczytane przez ten sam parser to ten sam obiekt.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._terms: dict[tuple[TokenKind, str], Term] = {}

    @classmethod
    def from_text(cls, text: str) -> Parser:
        return cls(Lexer(text))

    @property
    def lexer(self) -> Lexer:
        return self._lexer

    # ------------------------------------------------------------------
    # Termy
    # ------------------------------------------------------------------

    def _intern(self, token: Token) -> Term:
        key = (token.kind, token.text)
        term = self._terms.get(key)
        if term is None:
            term = Atom(token.text) if token.kind is TokenKind.ATOM else Variable(token.text)
            self._terms[key] = term
        return term

    def parse_atom(self) -> Atom | None:
        """Konsumuje atom tylko gdy jest następnym tokenem."""
        token = self._lexer.peek_token()
        if token is None or token.kind is not TokenKind.ATOM:
            return None
        self._lexer.pop_token()
        return self._intern(token)  # type: ignore[return-value]

    def parse_term(self) -> Term:
        """Konsumuje następny token bezwarunkowo; musi być atomem lub zmienną."""
        position = self._lexer.position
        token = self._lexer.pop_token()
        if token is None or not token.is_term:
            raise ParseError.unexpected_token("atomu lub zmiennej", token, position)
        return self._intern(token)

    def parse_term_list(self) -> list[Term]:
        terms = [self.parse_term()]
        while self._lexer.consume(COMMA):
            terms.append(self.parse_term())
        return terms

    # ------------------------------------------------------------------
    # Predykaty
    # ------------------------------------------------------------------

    def parse_predicate(self) -> Predicate | None:
        name = self.parse_atom()
        if name is None:
            return None
        if not self._lexer.consume(LPAREN):
            return Predicate(name.text)
        args = self.parse_term_list()
        self._lexer.expect(RPAREN)
        return Predicate(name.text, tuple(args))

    def _require_predicate(self) -> Predicate:
        position  = self._lexer.position
        predicate = self.parse_predicate()
        if predicate is None:
            raise ParseError.unexpected_token("predykatu", self._lexer.peek_token(), position)
        return predicate

    def parse_predicate_list(self) -> list[Predicate]:
        predicates = [self._require_predicate()]
        while self._lexer.consume(COMMA):
            predicates.append(self._require_predicate())
        return predicates

    # ------------------------------------------------------------------
    # Klauzule
    # ------------------------------------------------------------------

    def _expect_terminator(self) -> None:
        if not self._lexer.consume(DOT):
            raise ParseError.missing_terminator(self._lexer.peek_token(), self._lexer.position)

    def parse_clause(self) -> Predicate | Clause | None:
        """
        Parsuje jedną klauzulę.

        Returns:
            Predicate dla faktu, Clause dla reguły, None gdy nie ma głowy
            (koniec wejścia lub token, który nie może rozpocząć klauzuli).
        """
        head = self.parse_predicate()
        if head is None:
            return None
        if self._lexer.consume(NECK):
            body = self.parse_predicate_list()
            self._expect_terminator()
            return Clause(head, tuple(body))
        self._expect_terminator()
        return head

    def parse(self) -> list[Predicate | Clause]:
        """
        Parsuje cały program (ciąg klauzul).

        Podnosi ParseError gdy po ostatniej klauzuli zostają tokeny,
        które nie rozpoczynają klauzuli.
        """
        clauses: list[Predicate | Clause] = []
        while (clause := self.parse_clause()) is not None:
            clauses.append(clause)
        self.expect_end()
        return clauses

    def expect_end(self) -> None:
        token = self._lexer.peek_token()
        if token is not None:
            raise ParseError.unexpected_token("klauzuli lub końca wejścia", token)


def parse_program(text: str) -> list[Predicate | Clause]:
    """Parsuje tekst programu na listę klauzul (w kolejności wystąpienia)."""
    return Parser.from_text(text).parse()


def parse_query(text: str) -> Predicate | Clause | None:
    """
    Parsuje dokładnie jedną klauzulę z jednej jednostki wejścia (linii).

    Returns:
        Sparsowana klauzula lub None dla linii pustej / samego komentarza.

    Raises:
        LexError, ParseError, także gdy po klauzuli zostały dodatkowe tokeny.
    """
    parser = Parser.from_text(text)
    clause = parser.parse_clause()
    parser.expect_end()
    return clause
