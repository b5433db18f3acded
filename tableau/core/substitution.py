"""
Substitution of a term for a variable, used by the quantifier rules.

substitute() replaces free occurrences only. A binder with the same name
shadows the variable, so substitution stops there. Bound names are never
renamed: if the replacement itself contains a free variable that a binder
inside the term would capture, the capture happens. Inside the prover this
cannot occur because replacements are always witness constants.
"""

from .terms import (
    Variable, Constant, Apply, Not, Forall, Exists,
    BINARY_CONNECTIVES, QUANTIFIERS,
)


def substitute(term, name: str, replacement):
    """Replace every free occurrence of variable `name` in term."""
    if isinstance(term, Variable):
        return replacement if term.name == name else term
    if isinstance(term, Constant):
        return term
    if isinstance(term, Apply):
        return Apply(substitute(term.fn, name, replacement),
                     substitute(term.arg, name, replacement))
    if isinstance(term, Not):
        return Not(substitute(term.body, name, replacement))
    if isinstance(term, QUANTIFIERS):
        if term.name == name:
            return term  # shadowed
        return type(term)(term.name, term.type,
                          substitute(term.body, name, replacement))
    if isinstance(term, BINARY_CONNECTIVES):
        return type(term)(substitute(term.left, name, replacement),
                          substitute(term.right, name, replacement))
    raise TypeError(f"not a term: {term!r}")


def free_variables(term) -> frozenset:
    """Names of the variables occurring free in term."""
    if isinstance(term, Variable):
        return frozenset({term.name})
    if isinstance(term, Constant):
        return frozenset()
    if isinstance(term, Apply):
        return free_variables(term.fn) | free_variables(term.arg)
    if isinstance(term, Not):
        return free_variables(term.body)
    if isinstance(term, (Forall, Exists)):
        return free_variables(term.body) - {term.name}
    if isinstance(term, BINARY_CONNECTIVES):
        return free_variables(term.left) | free_variables(term.right)
    raise TypeError(f"not a term: {term!r}")


def occurs_free(term, name: str) -> bool:
    return name in free_variables(term)
