"""
The bridge between the term model and the unifier's term language.

    to_unifier    -- lower a formula so closure checks can unify it
    from_unifier  -- raise a unifier term back into the term model

to_unifier is the direction the prover depends on. from_unifier is lossy:
types are not recoverable, so variables and atoms come back as
individuals, function symbols as i → i and predicates as i → o. Use it
for display only.
"""

from .terms import (
    Variable, Constant, Apply, Not, And, Or, Implies, Forall, Exists, Equals,
    Function, INDIVIDUAL, TRUTH, apply_all,
)
from .unification import Var, Atom, Fn, Pred, Connective, Opaque, unifiable


_CONNECTIVES = {Not: "not", And: "and", Or: "or", Implies: "implies"}
_FROM_CONNECTIVE = {op: cls for cls, op in _CONNECTIVES.items()}


def to_unifier(term):
    """
    Lower a term-model value into the unifier's language.

    P(x) becomes Fn("P", (Var("x"),)); an application whose function side
    is not a symbol becomes Fn("app", (fn, arg)). Quantified formulas are
    kept opaque: they unify only with an identical formula.
    """
    if isinstance(term, Variable):
        return Var(term.name)
    if isinstance(term, Constant):
        return Atom(term.name)
    if isinstance(term, Apply):
        fn = to_unifier(term.fn)
        arg = to_unifier(term.arg)
        if isinstance(fn, Atom):
            return Fn(fn.name, (arg,))
        return Fn("app", (fn, arg))
    if isinstance(term, Equals):
        return Pred("=", (to_unifier(term.left), to_unifier(term.right)))
    if isinstance(term, Not):
        return Connective("not", (to_unifier(term.body),))
    if isinstance(term, (And, Or, Implies)):
        return Connective(_CONNECTIVES[type(term)],
                          (to_unifier(term.left), to_unifier(term.right)))
    if isinstance(term, (Forall, Exists)):
        return Opaque(term)
    raise TypeError(f"not a term: {term!r}")


def from_unifier(uterm):
    """Raise a unifier term back into the term model (display only)."""
    if isinstance(uterm, Var):
        return Variable(uterm.name, INDIVIDUAL)
    if isinstance(uterm, Atom):
        return Constant(uterm.name, INDIVIDUAL)
    if isinstance(uterm, Fn):
        args = [from_unifier(a) for a in uterm.args]
        if uterm.name == "app" and len(args) == 2:
            return Apply(args[0], args[1])
        return apply_all(Constant(uterm.name, Function(INDIVIDUAL, INDIVIDUAL)), *args)
    if isinstance(uterm, Pred):
        args = [from_unifier(a) for a in uterm.args]
        if uterm.name == "=" and len(args) == 2:
            return Equals(args[0], args[1])
        return apply_all(Constant(uterm.name, Function(INDIVIDUAL, TRUTH)), *args)
    if isinstance(uterm, Connective):
        cls = _FROM_CONNECTIVE[uterm.op]
        return cls(*(from_unifier(a) for a in uterm.args))
    if isinstance(uterm, Opaque):
        return uterm.term
    raise TypeError(f"not a unifier term: {uterm!r}")


def formulas_unifiable(f1, f2) -> bool:
    """Can two term-model formulas be made identical by some substitution?"""
    return unifiable(to_unifier(f1), to_unifier(f2))
