"""
Robinson unification algorithm with occurs check.

The prover only ever asks one question of this module: can these two
formulas be made identical? It works on its own small term language,
separate from the term model, so the algorithm stays generic. The
adapter module translates between the two.

Unifier terms:
    Var("x")                          variable
    Atom("c1")                        constant symbol
    Fn("f", (arg,))                   function application
    Pred("=", (a, b))                 predicate application
    Connective("and", (a, b))         ¬ ∧ ∨ → as "not" "and" "or" "implies"
    Opaque(term)                      anything else; equal-or-fail

Substitutions are plain dicts: {"x": Atom("c1"), "y": Fn("f", (Var("x"),))}
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Var:
    name: str


@dataclass(frozen=True)
class Atom:
    name: str


@dataclass(frozen=True)
class Fn:
    name: str
    args: tuple


@dataclass(frozen=True)
class Pred:
    name: str
    args: tuple


@dataclass(frozen=True)
class Connective:
    op: str
    args: tuple


@dataclass(frozen=True)
class Opaque:
    """A subformula the unifier does not look inside (quantified formulas)."""
    term: object


_COMPOUND = (Fn, Pred, Connective)


def is_variable(term) -> bool:
    return isinstance(term, Var)


def occurs_in(name: str, term) -> bool:
    """Does variable `name` occur anywhere in term? Prevents infinite terms."""
    if isinstance(term, Var):
        return term.name == name
    if isinstance(term, _COMPOUND):
        return any(occurs_in(name, arg) for arg in term.args)
    return False


def apply_substitution(sub: dict, term):
    """Apply a substitution dict to a unifier term. Follows chains."""
    if isinstance(term, Var):
        if term.name in sub:
            return apply_substitution(sub, sub[term.name])
        return term
    if isinstance(term, _COMPOUND):
        return type(term)(_head(term),
                          tuple(apply_substitution(sub, a) for a in term.args))
    return term


def _head(term):
    return term.op if isinstance(term, Connective) else term.name


def _bind(name: str, term, sub: dict):
    if occurs_in(name, term):
        return None  # occurs check: x unify f(x) is unsound
    sub = dict(sub)
    sub[name] = term
    return sub


def unify(t1, t2, sub=None):
    """
    Unify two unifier terms under substitution sub.

    Returns the updated substitution dict, or None if unification fails.
    The input substitution is never modified.
    """
    if sub is None:
        sub = {}

    t1 = apply_substitution(sub, t1)
    t2 = apply_substitution(sub, t2)

    if t1 == t2:
        return sub

    if is_variable(t1):
        return _bind(t1.name, t2, sub)

    if is_variable(t2):
        return _bind(t2.name, t1, sub)

    if isinstance(t1, Atom) and isinstance(t2, Atom):
        return None  # two different constants

    if isinstance(t1, _COMPOUND) and type(t1) is type(t2):
        if _head(t1) != _head(t2):
            return None  # different functor or connective
        return unify_lists(t1.args, t2.args, sub)

    return None


def unify_lists(args1, args2, sub=None):
    """Unify two argument lists pairwise, left to right, threading sub."""
    if len(args1) != len(args2):
        return None  # arity mismatch
    if sub is None:
        sub = {}
    for a1, a2 in zip(args1, args2):
        sub = unify(a1, a2, sub)
        if sub is None:
            return None
    return sub


def unifiable(t1, t2) -> bool:
    return unify(t1, t2) is not None
