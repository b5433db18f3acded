"""
Formula parser: text -> term model.

Accepted syntax, loosest binding first:

    A → B      A -> B        implication, right associative
    A ∨ B      A | B         disjunction
    A ∧ B      A & B         conjunction
    ¬A         ~A            negation, scoping over an equality:
                             ¬a = b is ¬(a = b)
    ∀x:i. F    !x:i. F       universal (":i" optional, defaults to i)
    ∃x:i. F    ?x:i. F       existential
    a = b                    equality, binds tighter than ¬
    P(x)  P x  R(x, y)       application

A quantifier's body extends as far to the right as possible, so
∀x:i. P(x) → P(x) is ∀x:i.(P(x) → P(x)).

Symbols: A, B, C are propositions; P and Q unary predicates; R a binary
predicate; f, g, h unary functions. Any other single lowercase letter is
a variable, other capitalised names are propositions and remaining names
are individual constants. Types only matter for display.
"""

from lark import Lark, Transformer, v_args
from lark.exceptions import LarkError, VisitError

from .core.terms import (
    Variable, Constant, Apply, Not, And, Or, Implies, Forall, Exists, Equals,
    Function, INDIVIDUAL, TRUTH, apply_all,
)


GRAMMAR = r"""
    ?start: implication

    ?implication: disjunction
                | disjunction _IMP implication          -> implies

    ?disjunction: conjunction
                | conjunction _OR disjunction           -> or_

    ?conjunction: unary
                | unary _AND conjunction                -> and_

    ?unary: _NOT unary                                  -> not_
          | quantified
          | equality

    quantified: _FORALL NAME [":" NAME] "." implication -> forall
               | _EXISTS NAME [":" NAME] "." implication -> exists

    ?equality: application
             | application "=" application              -> equals

    ?application: atomic
                | application atomic                    -> apply
                | application "(" implication ("," implication)+ ")" -> apply_many

    ?atomic: NAME                                       -> symbol
           | "(" implication ")"

    _IMP: "→" | "->"
    _OR: "∨" | "|"
    _AND: "∧" | "&"
    _NOT: "¬" | "~"
    _FORALL: "∀" | "!"
    _EXISTS: "∃" | "?"
    NAME: /[A-Za-z_][A-Za-z0-9_]*/

    %import common.WS
    %ignore WS
"""

PREDICATE = Function(INDIVIDUAL, TRUTH)
UNARY_FUNCTION = Function(INDIVIDUAL, INDIVIDUAL)

SYMBOL_TYPES = {
    "A": TRUTH, "B": TRUTH, "C": TRUTH,
    "P": PREDICATE, "Q": PREDICATE,
    "R": Function(INDIVIDUAL, PREDICATE),
    "f": UNARY_FUNCTION, "g": UNARY_FUNCTION, "h": UNARY_FUNCTION,
}

TYPE_NAMES = {"i": INDIVIDUAL, "o": TRUTH}


class ParseError(ValueError):
    """Raised for text that is not a well-formed formula."""


def resolve_symbol(name: str):
    if name in SYMBOL_TYPES:
        return Constant(name, SYMBOL_TYPES[name])
    if len(name) == 1 and name.islower():
        return Variable(name, INDIVIDUAL)
    if name[0].isupper():
        return Constant(name, TRUTH)
    return Constant(name, INDIVIDUAL)


def resolve_type(token):
    if token is None:
        return INDIVIDUAL
    if str(token) not in TYPE_NAMES:
        raise ParseError(f"unknown type {str(token)!r}; expected 'i' or 'o'")
    return TYPE_NAMES[str(token)]


@v_args(inline=True)
class FormulaBuilder(Transformer):
    """Turns the parse tree into term-model values."""

    def symbol(self, name):
        return resolve_symbol(str(name))

    def apply(self, fn, arg):
        return Apply(fn, arg)

    def apply_many(self, fn, *args):
        return apply_all(fn, *args)

    def equals(self, left, right):
        return Equals(left, right)

    def not_(self, body):
        return Not(body)

    def and_(self, left, right):
        return And(left, right)

    def or_(self, left, right):
        return Or(left, right)

    def implies(self, left, right):
        return Implies(left, right)

    def forall(self, name, type_, body):
        return Forall(str(name), resolve_type(type_), body)

    def exists(self, name, type_, body):
        return Exists(str(name), resolve_type(type_), body)


_parser = Lark(GRAMMAR, parser="lalr", maybe_placeholders=True)


def parse(text: str):
    """
    Parse a formula. Raises ParseError with a readable message on
    malformed input; the prover itself never sees such text.
    """
    if not text or not text.strip():
        raise ParseError("empty formula")
    try:
        tree = _parser.parse(text)
        return FormulaBuilder().transform(tree)
    except VisitError as e:
        raise ParseError(str(e.orig_exc)) from e
    except LarkError as e:
        raise ParseError(f"cannot parse {text!r}: {e}") from e
