"""
Tableau: a semantic tableau prover for first-order logic.

Negates the goal, expands it with alpha/beta/gamma/delta rules, closes
branches whose formulas unify with a negation, and keeps the whole
derivation as a tree plus a step log for display.

Usage:
    python -m tableau "(A → B) → (¬B → ¬A)"
    python -m tableau --problem universal_identity
    python -m tableau --list
    python -m tableau "∀x:i. P(x) → P(x)" --dot proof.dot --save proof.json
"""

from .core.terms import (
    Individual, Truth, Function, INDIVIDUAL, TRUTH,
    Variable, Constant, Apply, Not, And, Or, Implies, Forall, Exists, Equals,
    negate, format_term,
)
from .core.substitution import substitute
from .core.unification import unify
from .core.adapter import to_unifier, from_unifier
from .core.state import TableauNode, StepRecord, TableauState, MAX_STEPS
from .core.engine import make_initial_state, tableau_step, run_tableau, prove
from .core.proof import ProofResult, classify_tree, print_proof
from .inference.rules import match_rule, is_expandable
from .inference.closure import check_closure
from .parser import parse, ParseError
from .problems import PROBLEMS, load_problem
from .visualization import print_tree, print_steps, export_dot

__all__ = [
    "Individual", "Truth", "Function", "INDIVIDUAL", "TRUTH",
    "Variable", "Constant", "Apply", "Not", "And", "Or", "Implies",
    "Forall", "Exists", "Equals",
    "negate", "format_term",
    "substitute", "unify", "to_unifier", "from_unifier",
    "TableauNode", "StepRecord", "TableauState", "MAX_STEPS",
    "make_initial_state", "tableau_step", "run_tableau", "prove",
    "ProofResult", "classify_tree", "print_proof",
    "match_rule", "is_expandable", "check_closure",
    "parse", "ParseError",
    "PROBLEMS", "load_problem",
    "print_tree", "print_steps", "export_dot",
]
