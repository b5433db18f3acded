from .terms import (
    Individual, Truth, Function, INDIVIDUAL, TRUTH,
    Variable, Constant, Apply, Not, And, Or, Implies, Forall, Exists, Equals,
    negate, apply_all, format_term, format_type, format_formulas,
)
from .substitution import substitute, free_variables, occurs_free
from .unification import (
    Var, Atom, Fn, Pred, Connective, Opaque,
    occurs_in, apply_substitution, unify, unify_lists, unifiable,
)
from .adapter import to_unifier, from_unifier, formulas_unifiable
from .state import TableauNode, StepRecord, TableauState, MAX_STEPS
from .proof import ProofResult, classify_tree, collect_leaf_branches, print_proof
from .engine import make_initial_state, tableau_step, run_tableau, prove

__all__ = [
    "Individual", "Truth", "Function", "INDIVIDUAL", "TRUTH",
    "Variable", "Constant", "Apply", "Not", "And", "Or", "Implies",
    "Forall", "Exists", "Equals",
    "negate", "apply_all", "format_term", "format_type", "format_formulas",
    "substitute", "free_variables", "occurs_free",
    "Var", "Atom", "Fn", "Pred", "Connective", "Opaque",
    "occurs_in", "apply_substitution", "unify", "unify_lists", "unifiable",
    "to_unifier", "from_unifier", "formulas_unifiable",
    "TableauNode", "StepRecord", "TableauState", "MAX_STEPS",
    "ProofResult", "classify_tree", "collect_leaf_branches", "print_proof",
    "make_initial_state", "tableau_step", "run_tableau", "prove",
]
