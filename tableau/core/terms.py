"""
Term model: types and formulas of the first-order language.

Everything the prover manipulates is built from these values. They are
immutable and compare structurally, so two formulas built the same way
are equal and hash the same.

Types:
    Individual          i      objects of the domain
    Truth               o      truth values
    Function(a, b)      a → b  used for predicates and function symbols

Terms:
    Variable("x", i)                 x
    Constant("P", Function(i, o))    P
    Apply(P, x)                      P(x)
    Not, And, Or, Implies, Equals    ¬A, (A ∧ B), (A ∨ B), (A → B), (a = b)
    Forall("x", i, body)             ∀x:i.(body)
    Exists("x", i, body)             ∃x:i.(body)

A binder scopes only its own body. Nothing here renames bound variables;
see substitution.substitute for how capture is handled.
"""

from dataclasses import dataclass


# ── Types ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Individual:
    """Objects of the domain."""


@dataclass(frozen=True)
class Truth:
    """Truth values."""


@dataclass(frozen=True)
class Function:
    domain: object
    range: object


INDIVIDUAL = Individual()
TRUTH = Truth()


# ── Terms ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Variable:
    name: str
    type: object = INDIVIDUAL


@dataclass(frozen=True)
class Constant:
    name: str
    type: object = INDIVIDUAL


@dataclass(frozen=True)
class Apply:
    fn: object
    arg: object


@dataclass(frozen=True)
class Not:
    body: object


@dataclass(frozen=True)
class And:
    left: object
    right: object


@dataclass(frozen=True)
class Or:
    left: object
    right: object


@dataclass(frozen=True)
class Implies:
    left: object
    right: object


@dataclass(frozen=True)
class Forall:
    name: str
    type: object
    body: object


@dataclass(frozen=True)
class Exists:
    name: str
    type: object
    body: object


@dataclass(frozen=True)
class Equals:
    left: object
    right: object


BINARY_CONNECTIVES = (And, Or, Implies, Equals)
QUANTIFIERS = (Forall, Exists)

_SYMBOLS = {And: "∧", Or: "∨", Implies: "→", Equals: "="}


def negate(term):
    """Negate a formula, cancelling an outer negation: ¬A -> A, A -> ¬A."""
    if isinstance(term, Not):
        return term.body
    return Not(term)


def apply_all(fn, *args):
    """Curried application: apply_all(R, a, b) == Apply(Apply(R, a), b)."""
    term = fn
    for arg in args:
        term = Apply(term, arg)
    return term


def spine(term):
    """Split a curried application into (head, [args])."""
    args = []
    while isinstance(term, Apply):
        args.append(term.arg)
        term = term.fn
    args.reverse()
    return term, args


# ── Formatting ───────────────────────────────────────────────────────────────

def format_type(type_) -> str:
    if isinstance(type_, Individual):
        return "i"
    if isinstance(type_, Truth):
        return "o"
    if isinstance(type_, Function):
        return f"({format_type(type_.domain)} → {format_type(type_.range)})"
    return repr(type_)


def format_term(term) -> str:
    """
    Canonical text rendering used in closure reasons, step logs and by
    renderers.

    Applications headed by a symbol print as P(x) or R(x, y); any other
    application prints in juxtaposition form, (f x).
    """
    if isinstance(term, (Variable, Constant)):
        return term.name
    if isinstance(term, Apply):
        head, args = spine(term)
        if isinstance(head, (Variable, Constant)):
            return f"{head.name}({', '.join(format_term(a) for a in args)})"
        return f"({format_term(term.fn)} {format_term(term.arg)})"
    if isinstance(term, Not):
        return f"¬{format_term(term.body)}"
    if isinstance(term, BINARY_CONNECTIVES):
        symbol = _SYMBOLS[type(term)]
        return f"({format_term(term.left)} {symbol} {format_term(term.right)})"
    if isinstance(term, Forall):
        return f"∀{term.name}:{format_type(term.type)}.({format_term(term.body)})"
    if isinstance(term, Exists):
        return f"∃{term.name}:{format_type(term.type)}.({format_term(term.body)})"
    return repr(term)


def format_formulas(formulas) -> str:
    if not formulas:
        return "[empty]"
    return ", ".join(format_term(f) for f in formulas)


# ── Serialization ────────────────────────────────────────────────────────────

def type_to_dict(type_):
    if isinstance(type_, Individual):
        return "i"
    if isinstance(type_, Truth):
        return "o"
    return {"fn": [type_to_dict(type_.domain), type_to_dict(type_.range)]}


def type_from_dict(d):
    if d == "i":
        return INDIVIDUAL
    if d == "o":
        return TRUTH
    domain, range_ = d["fn"]
    return Function(type_from_dict(domain), type_from_dict(range_))


_TAGS = {
    Variable: "var", Constant: "const", Apply: "app", Not: "not",
    And: "and", Or: "or", Implies: "imp", Equals: "equals",
    Forall: "forall", Exists: "exists",
}
_BY_TAG = {tag: cls for cls, tag in _TAGS.items()}


def term_to_dict(term) -> dict:
    tag = _TAGS[type(term)]
    if isinstance(term, (Variable, Constant)):
        return {"tag": tag, "name": term.name, "type": type_to_dict(term.type)}
    if isinstance(term, Apply):
        return {"tag": tag, "fn": term_to_dict(term.fn), "arg": term_to_dict(term.arg)}
    if isinstance(term, Not):
        return {"tag": tag, "body": term_to_dict(term.body)}
    if isinstance(term, QUANTIFIERS):
        return {"tag": tag, "name": term.name, "type": type_to_dict(term.type),
                "body": term_to_dict(term.body)}
    return {"tag": tag, "left": term_to_dict(term.left),
            "right": term_to_dict(term.right)}


def term_from_dict(d):
    cls = _BY_TAG[d["tag"]]
    if cls in (Variable, Constant):
        return cls(d["name"], type_from_dict(d["type"]))
    if cls is Apply:
        return Apply(term_from_dict(d["fn"]), term_from_dict(d["arg"]))
    if cls is Not:
        return Not(term_from_dict(d["body"]))
    if cls in QUANTIFIERS:
        return cls(d["name"], type_from_dict(d["type"]), term_from_dict(d["body"]))
    return cls(term_from_dict(d["left"]), term_from_dict(d["right"]))
