"""
Tests for the formula parser.
"""

import pytest

from tableau.core.terms import (
    Function, INDIVIDUAL, TRUTH,
    Variable, Constant, Apply, Not, And, Or, Implies, Forall, Exists, Equals,
    apply_all, format_term,
)
from tableau.parser import parse, ParseError, resolve_symbol, PREDICATE


P = Constant("P", PREDICATE)
Q = Constant("Q", PREDICATE)
R = Constant("R", Function(INDIVIDUAL, PREDICATE))
f = Constant("f", Function(INDIVIDUAL, INDIVIDUAL))
A = Constant("A", TRUTH)
B = Constant("B", TRUTH)
C = Constant("C", TRUTH)
x = Variable("x")
y = Variable("y")


class TestSymbols:
    def test_propositions(self):
        assert resolve_symbol("A") == A
        assert resolve_symbol("Rain") == Constant("Rain", TRUTH)

    def test_predicates_and_functions(self):
        assert resolve_symbol("P") == P
        assert resolve_symbol("R") == R
        assert resolve_symbol("f") == f

    def test_variables_and_constants(self):
        assert resolve_symbol("x") == x
        assert resolve_symbol("c1") == Constant("c1", INDIVIDUAL)
        assert resolve_symbol("socrates") == Constant("socrates", INDIVIDUAL)


class TestConnectives:
    def test_atom(self):
        assert parse("A") == A

    def test_implication_is_right_associative(self):
        assert parse("A → B → C") == Implies(A, Implies(B, C))

    def test_precedence(self):
        assert parse("A ∨ B ∧ C") == Or(A, And(B, C))
        assert parse("A ∧ B → A") == Implies(And(A, B), A)
        assert parse("A → A ∨ B") == Implies(A, Or(A, B))

    def test_negation_binds_tightest(self):
        assert parse("¬A ∧ B") == And(Not(A), B)
        assert parse("¬¬A") == Not(Not(A))

    def test_parentheses(self):
        assert parse("(A → B) → (¬B → ¬A)") == Implies(Implies(A, B), Implies(Not(B), Not(A)))
        assert parse("¬(A ∨ B)") == Not(Or(A, B))

    def test_ascii_spellings(self):
        assert parse("~A | B & C -> A") == parse("¬A ∨ B ∧ C → A")


class TestFirstOrder:
    def test_application_forms(self):
        assert parse("P(x)") == Apply(P, x)
        assert parse("P x") == Apply(P, x)
        assert parse("R(x, y)") == apply_all(R, x, y)
        assert parse("P(f(x))") == Apply(P, Apply(f, x))

    def test_equality(self):
        assert parse("x = c1") == Equals(x, Constant("c1"))
        assert parse("¬x = c1") == Not(Equals(x, Constant("c1")))
        assert parse("¬f(x) = y") == Not(Equals(Apply(f, x), y))

    def test_quantifier_body_extends_right(self):
        assert parse("∀x:i. P(x) → P(x)") == Forall(
            "x", INDIVIDUAL, Implies(Apply(P, x), Apply(P, x)))

    def test_parenthesized_quantifier(self):
        assert parse("(∀x:i. P(x)) → P(a)") == Implies(
            Forall("x", INDIVIDUAL, Apply(P, x)), Apply(P, Variable("a")))

    def test_type_annotation_optional(self):
        assert parse("∃x. P(x)") == Exists("x", INDIVIDUAL, Apply(P, x))
        assert parse("∀p:o. p").type == TRUTH

    def test_nested_quantifiers(self):
        assert parse("∀x:i. ∃y:i. R(x, y)") == Forall(
            "x", INDIVIDUAL, Exists("y", INDIVIDUAL, apply_all(R, x, y)))

    def test_ascii_quantifiers(self):
        assert parse("!x:i. ?y:i. R(x, y)") == parse("∀x:i. ∃y:i. R(x, y)")

    def test_format_then_parse(self):
        goal = parse("∃x:i. (P(x) → ∀y:i. P(y))")
        assert parse(format_term(goal)) == goal


class TestErrors:
    @pytest.mark.parametrize("text", [
        "", "   ", "A &", "∀x. (", "A B )", "→ A", "P(x,", "$",
    ])
    def test_malformed(self, text):
        with pytest.raises(ParseError):
            parse(text)

    def test_unknown_type(self):
        with pytest.raises(ParseError, match="unknown type"):
            parse("∀x:z. P(x)")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse("∧")
