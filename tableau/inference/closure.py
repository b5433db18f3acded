"""
Branch closure: does a set of formulas contain a contradiction?

A branch closes when it holds some formula F and some negation ¬G such
that F and G unify. Only the existence of a unifier matters; the
substitution is thrown away and never applied to the rest of the branch.
"""

from typing import Optional

from ..core.terms import Not, format_term
from ..core.adapter import formulas_unifiable


def find_contradiction(formulas) -> Optional[str]:
    """
    Look for the first complementary pair, positives in order, then
    negatives in order. Returns a description like "P(c1) ∧ ¬P(c1)",
    or None if the formulas are consistent as far as unification can tell.
    """
    positives = [f for f in formulas if not isinstance(f, Not)]
    negatives = [f.body for f in formulas if isinstance(f, Not)]

    for pos in positives:
        for neg in negatives:
            if formulas_unifiable(pos, neg):
                shown = format_term(pos)
                return f"{shown} ∧ ¬{shown}"
    return None


def check_closure(formulas) -> tuple:
    """Returns (is_closed, reason)."""
    reason = find_contradiction(formulas)
    return reason is not None, reason
