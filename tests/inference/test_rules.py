"""
Tests for rule matching and rule application.

Every expandable shape has exactly one rule, and every rule belongs to
the family that decides how many children it produces and whether the
expanded formula is kept.
"""

import pytest

from tableau.core.terms import (
    Function, INDIVIDUAL, TRUTH,
    Variable, Constant, Apply, Not, And, Or, Implies, Forall, Exists, Equals,
)
from tableau.core.state import TableauNode, TableauState, CLOSED, INTERMEDIATE, OPEN
from tableau.inference.rules import (
    ALPHA, BETA, GAMMA, DELTA, RULES, CLOSURE_RULE,
    RuleMatch, match_rule, is_expandable, fresh_constant, witness_key, apply_rule,
)


P = Constant("P", Function(INDIVIDUAL, TRUTH))
A = Constant("A", TRUTH)
B = Constant("B", TRUTH)
x = Variable("x")
c1 = Constant("c1")

ALL_X_P = Forall("x", INDIVIDUAL, Apply(P, x))
SOME_X_P = Exists("x", INDIVIDUAL, Apply(P, x))


# ── Matching ─────────────────────────────────────────────────────────────────

class TestMatchRule:
    @pytest.mark.parametrize("formula, rule, family", [
        (Not(Not(A)),           "¬¬ elimination",   ALPHA),
        (And(A, B),             "∧ decomposition",  ALPHA),
        (Not(Or(A, B)),         "¬∨ decomposition", ALPHA),
        (Not(Implies(A, B)),    "¬→ decomposition", ALPHA),
        (Implies(A, B),         "→ branching",      BETA),
        (Or(A, B),              "∨ branching",      BETA),
        (Not(And(A, B)),        "¬∧ branching",     BETA),
        (ALL_X_P,               "∀ elimination",    GAMMA),
        (Not(SOME_X_P),         "¬∃ elimination",   GAMMA),
        (SOME_X_P,              "∃ elimination",    DELTA),
        (Not(ALL_X_P),          "¬∀ elimination",   DELTA),
    ])
    def test_every_shape_has_its_rule(self, formula, rule, family):
        match = match_rule(formula)
        assert match.rule == rule
        assert match.kind == family
        assert match.formula == formula
        assert match.description == RULES[rule][1]

    @pytest.mark.parametrize("formula", [
        A, Not(A), Apply(P, x), Not(Apply(P, x)), Equals(x, c1), Not(Equals(x, c1)), x,
    ])
    def test_literals_do_not_expand(self, formula):
        assert match_rule(formula) is None
        assert not is_expandable(formula)

    def test_alpha_parts(self):
        assert match_rule(Not(Not(A))).parts == (A,)
        assert match_rule(Not(Or(A, B))).parts == (Not(A), Not(B))
        assert match_rule(Not(Implies(A, B))).parts == (A, Not(B))

    def test_beta_parts(self):
        assert match_rule(Implies(A, B)).parts == (Not(A), B)
        assert match_rule(Not(And(A, B))).parts == (Not(A), Not(B))

    def test_quantifier_bodies(self):
        assert match_rule(ALL_X_P).body == Apply(P, x)
        assert match_rule(ALL_X_P).keep_original
        assert match_rule(Not(SOME_X_P)).body == Not(Apply(P, x))
        assert not match_rule(Not(SOME_X_P)).keep_original
        assert match_rule(Not(ALL_X_P)).variable == "x"
        assert match_rule(Not(ALL_X_P)).type == INDIVIDUAL

    def test_rule_table_is_complete(self):
        assert len(RULES) == 11
        assert {family for family, _ in RULES.values()} == {ALPHA, BETA, GAMMA, DELTA}


# ── Witnesses ────────────────────────────────────────────────────────────────

class TestWitnesses:
    def test_minted_in_order(self):
        state = TableauState()
        first, inst = fresh_constant(state, "x", INDIVIDUAL)
        second, _ = fresh_constant(state, "y", INDIVIDUAL)
        assert (first.name, second.name) == ("c1", "c2")
        assert inst == ("x", "c1")
        assert state.witness_counter == 2

    def test_name_policy_reuses(self):
        state = TableauState()
        first, _ = fresh_constant(state, "x", INDIVIDUAL, ALL_X_P, ("root",))
        again, _ = fresh_constant(state, "x", INDIVIDUAL, Not(SOME_X_P), ("root", "left"))
        assert first is again
        assert state.witness_counter == 1

    def test_occurrence_policy_keys_by_formula_and_branch(self):
        state = TableauState(witness_policy="occurrence")
        first, _ = fresh_constant(state, "x", INDIVIDUAL, ALL_X_P, ("root",))
        same, _ = fresh_constant(state, "x", INDIVIDUAL, ALL_X_P, ("root",))
        other_branch, _ = fresh_constant(state, "x", INDIVIDUAL, ALL_X_P, ("root", "left"))
        other_formula, _ = fresh_constant(state, "x", INDIVIDUAL, SOME_X_P, ("root",))
        assert first is same
        assert len({first.name, other_branch.name, other_formula.name}) == 3

    def test_witness_key(self):
        assert witness_key(TableauState(), "x", ALL_X_P, ("root",)) == "x"
        key = witness_key(TableauState(witness_policy="occurrence"), "x", ALL_X_P,
                          ("root", "left"))
        assert key == "∀x:i.(P(x))@root/left"

    def test_witness_keeps_quantifier_type(self):
        state = TableauState()
        const, _ = fresh_constant(state, "p", TRUTH)
        assert const.type == TRUTH


# ── Application ──────────────────────────────────────────────────────────────

def expand(formulas, policy="name", node_id=0, branch_path=("root",)):
    state = TableauState(witness_policy=policy)
    node = TableauNode(formulas=tuple(formulas), id=node_id, branch_path=branch_path)
    match = match_rule(node.formulas[0])
    replacement, record = apply_rule(match, node, state, 1)
    return state, replacement, record


class TestApplyRule:
    def test_alpha_hangs_one_child(self):
        state, node, record = expand([And(A, B), Not(Apply(P, x))])
        assert node.node_type == INTERMEDIATE
        assert node.formulas == ()
        assert len(node.children) == 1
        child = node.children[0]
        assert child.formulas == (A, B, Not(Apply(P, x)))
        assert child.id == 1
        assert child.node_type == OPEN
        assert child.branch_path == ("root",)
        assert record.after_state == "A, B, ¬P(x)"
        assert record.before_state == "(A ∧ B), ¬P(x)"

    def test_alpha_closes_in_place(self):
        state, node, record = expand([Not(Implies(A, A))])
        assert node.closed
        assert node.node_type == CLOSED
        assert node.children == ()
        assert node.formulas == (A, Not(A))
        assert node.closure_reason == "A ∧ ¬A"
        assert node.id == 0
        assert state.node_counter == 1

    def test_beta_two_children(self):
        state, node, record = expand([Or(A, B), Not(A)])
        left, right = node.children
        assert left.formulas == (A, Not(A))
        assert left.closed and left.rule == CLOSURE_RULE
        assert left.branch_path == ("root", "left")
        assert right.formulas == (B, Not(A))
        assert not right.closed and right.rule is None
        assert right.branch_path == ("root", "right")
        assert (left.id, right.id) == (1, 2)
        assert record.after_state == "Left: A, ¬A | Right: B, ¬A"

    def test_universal_prepends_itself_and_instance(self):
        state, node, record = expand([ALL_X_P, A])
        child = node.children[0]
        assert child.formulas == (ALL_X_P, Apply(P, c1), A)
        assert child.instantiations == (("x", "c1"),)
        assert record.instantiations == (("x", "c1"),)
        assert record.formula == "∀x:i.(P(x))"

    def test_existential_replaces_itself(self):
        state, node, record = expand([SOME_X_P, Not(Apply(P, c1))])
        # first witness is c1, so the branch closes immediately
        assert node.closed
        assert node.formulas == (Apply(P, c1), Not(Apply(P, c1)))
        assert node.closure_reason == "P(c1) ∧ ¬P(c1)"
        assert node.instantiations == (("x", "c1"),)

    def test_negated_existential(self):
        state, node, record = expand([Not(SOME_X_P)])
        assert node.children[0].formulas == (Not(Apply(P, c1)),)

    def test_removes_only_first_occurrence(self):
        state, node, record = expand([And(A, B), And(A, B)])
        assert node.children[0].formulas == (A, B, And(A, B))

    def test_step_record_fields(self):
        state, node, record = expand([And(A, B)], node_id=7, branch_path=("root", "right"))
        assert record.num == 1
        assert record.rule == "∧ decomposition"
        assert record.node_id == 7
        assert record.branch_path == ("root", "right")
        assert record.formula == "(A ∧ B)"
        assert "gives A, B" in record.description

    def test_unknown_family_is_an_error(self):
        state = TableauState()
        node = TableauNode(formulas=(A,))
        RULES["bogus"] = ("epsilon", "not a rule")
        try:
            with pytest.raises(RuntimeError):
                apply_rule(RuleMatch("bogus", A), node, state, 1)
        finally:
            del RULES["bogus"]
