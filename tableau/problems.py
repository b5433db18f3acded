"""
Problem registry.

Each problem is a dict describing a sample formula:
    formula:      str, in the syntax accepted by tableau.parser
    valid:        expected verdict, or None when the step limit decides
    description:  str
"""

from .parser import parse


PROBLEMS = {
    "identity": {
        "formula": "A → A",
        "valid": True,
        "description": "Simplest tautology: one alpha step closes the root",
    },
    "contraposition": {
        "formula": "(A → B) → (¬B → ¬A)",
        "valid": True,
        "description": "Contraposition: branches on A → B, both close",
    },
    "and_elimination": {
        "formula": "A ∧ B → A",
        "valid": True,
        "description": "Conjunction elimination",
    },
    "or_introduction": {
        "formula": "A → A ∨ B",
        "valid": True,
        "description": "Disjunction introduction",
    },
    "modus_ponens": {
        "formula": "(A → B) → (A → B)",
        "valid": True,
        "description": "An implication implies itself",
    },
    "excluded_middle": {
        "formula": "A ∨ ¬A",
        "valid": True,
        "description": "Law of excluded middle",
    },
    "disjunction": {
        "formula": "A ∨ B",
        "valid": False,
        "description": "Not a tautology: both branches stay open",
    },
    "universal_identity": {
        "formula": "∀x:i. P(x) → P(x)",
        "valid": True,
        "description": "First-order identity, needs one witness",
    },
    "quantifier_duality": {
        "formula": "(∃x:i. P(x)) → ¬∀x:i. ¬P(x)",
        "valid": True,
        "description": "An existential contradicts the universal negation",
    },
    "universal_instance": {
        "formula": "(∀x:i. P(x)) → P(a)",
        "valid": True,
        "description": "Universal instantiation, closed by unifying P(c1) with P(a)",
    },
    "drinker": {
        "formula": "∃x:i. (P(x) → ∀y:i. P(y))",
        "valid": False,
        "description": "Drinker paradox: classically valid, but ¬∃ is instantiated "
                       "only once, so a branch stays open",
    },
    "unbounded_universal": {
        "formula": "(∀x:i. P(x)) → Q(b)",
        "valid": None,
        "description": "The kept ∀ re-fires every step and nothing closes: "
                       "stops at the step limit, inconclusive",
    },
}


def load_problem(name: str):
    """Parse a registered problem's formula."""
    return parse(PROBLEMS[name]["formula"])
