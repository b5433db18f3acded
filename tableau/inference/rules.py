"""
Tableau expansion rules.

Every expandable formula shape belongs to one of four families:

    alpha   one child, the formula replaced by its components
    beta    two children, one component on each branch
    gamma   universal: instantiate with a witness (∀ is kept, ¬∃ is not)
    delta   existential: instantiate with a witness, formula dropped

match_rule() is the only place that knows which shapes expand and how.
The engine's expandability test and rule dispatch both go through it,
so a shape can never be expandable without a rule or the other way round.
"""

from dataclasses import dataclass, replace
from typing import Optional

from ..core.terms import (
    Constant, Not, And, Or, Implies, Forall, Exists,
    format_term, format_formulas,
)
from ..core.substitution import substitute
from ..core.state import (
    TableauNode, StepRecord, OPEN, CLOSED, INTERMEDIATE,
)
from .closure import check_closure


ALPHA = "alpha"
BETA = "beta"
GAMMA = "gamma"
DELTA = "delta"

# rule name -> (family, human description)
RULES = {
    "¬¬ elimination":    (ALPHA, "Double negation: ¬¬A becomes A"),
    "∧ decomposition":   (ALPHA, "Conjunction: A∧B becomes A, B"),
    "¬∨ decomposition":  (ALPHA, "De Morgan's law: ¬(A∨B) becomes ¬A, ¬B"),
    "¬→ decomposition":  (ALPHA, "Negated implication: ¬(A→B) becomes A, ¬B"),
    "→ branching":       (BETA,  "Implication: A→B becomes ¬A | B (branches)"),
    "∨ branching":       (BETA,  "Disjunction: A∨B creates two branches"),
    "¬∧ branching":      (BETA,  "De Morgan's law: ¬(A∧B) becomes ¬A | ¬B (branches)"),
    "∀ elimination":     (GAMMA, "Universal: ∀x P(x) instantiated to P(c), ∀x P(x) kept"),
    "¬∃ elimination":    (GAMMA, "Negated existential: ¬∃x P(x) becomes ¬P(c)"),
    "∃ elimination":     (DELTA, "Existential: ∃x P(x) instantiated to P(c)"),
    "¬∀ elimination":    (DELTA, "Negated universal: ¬∀x P(x) becomes ¬P(c)"),
}

CLOSURE_RULE = "Closure"
CLOSURE_DESCRIPTION = "Contradiction found"


@dataclass(frozen=True)
class RuleMatch:
    """
    A formula together with the rule that expands it.

    parts:  alpha -> the replacement formulas; beta -> (left, right)
    variable, type, body:  quantifier rules only. body is what gets
        instantiated, already negated for the ¬∃ and ¬∀ forms.
    keep_original:  True only for ∀, which stays available for
        re-instantiation.
    """
    rule: str
    formula: object
    parts: tuple = ()
    variable: Optional[str] = None
    type: object = None
    body: object = None
    keep_original: bool = False

    @property
    def kind(self) -> str:
        return RULES[self.rule][0]

    @property
    def description(self) -> str:
        return RULES[self.rule][1]


def match_rule(formula) -> Optional[RuleMatch]:
    """Which rule expands this formula? None for literals and atoms."""
    if isinstance(formula, Not):
        inner = formula.body
        if isinstance(inner, Not):
            return RuleMatch("¬¬ elimination", formula, (inner.body,))
        if isinstance(inner, Or):
            return RuleMatch("¬∨ decomposition", formula,
                             (Not(inner.left), Not(inner.right)))
        if isinstance(inner, Implies):
            return RuleMatch("¬→ decomposition", formula,
                             (inner.left, Not(inner.right)))
        if isinstance(inner, And):
            return RuleMatch("¬∧ branching", formula,
                             (Not(inner.left), Not(inner.right)))
        if isinstance(inner, Exists):
            return RuleMatch("¬∃ elimination", formula, variable=inner.name,
                             type=inner.type, body=Not(inner.body))
        if isinstance(inner, Forall):
            return RuleMatch("¬∀ elimination", formula, variable=inner.name,
                             type=inner.type, body=Not(inner.body))
        return None
    if isinstance(formula, And):
        return RuleMatch("∧ decomposition", formula, (formula.left, formula.right))
    if isinstance(formula, Implies):
        return RuleMatch("→ branching", formula, (Not(formula.left), formula.right))
    if isinstance(formula, Or):
        return RuleMatch("∨ branching", formula, (formula.left, formula.right))
    if isinstance(formula, Forall):
        return RuleMatch("∀ elimination", formula, variable=formula.name,
                         type=formula.type, body=formula.body, keep_original=True)
    if isinstance(formula, Exists):
        return RuleMatch("∃ elimination", formula, variable=formula.name,
                         type=formula.type, body=formula.body)
    return None


def is_expandable(formula) -> bool:
    return match_rule(formula) is not None


# ── Witnesses ────────────────────────────────────────────────────────────────

def witness_key(state, variable: str, formula, branch_path) -> str:
    if state.witness_policy == "occurrence":
        return f"{format_term(formula)}@{'/'.join(branch_path)}"
    return variable


def fresh_constant(state, variable: str, type_, formula=None, branch_path=()):
    """
    The witness constant for a quantifier instantiation.

    Looks the key up in state.witnesses and mints c1, c2, ... on a miss.
    Returns (constant, (variable, constant_name)) and updates the state's
    witness table and counter when a constant is minted.
    """
    key = witness_key(state, variable, formula, branch_path)
    const = state.witnesses.get(key)
    if const is None:
        state.witness_counter += 1
        const = Constant(f"c{state.witness_counter}", type_)
        state.witnesses[key] = const
    return const, (variable, const.name)


# ── Applying rules ───────────────────────────────────────────────────────────

def _without(formulas: tuple, target) -> tuple:
    """Drop the first occurrence of target."""
    i = formulas.index(target)
    return formulas[:i] + formulas[i + 1:]


def _extend(match, node, state, step_num, updated, instantiations):
    """Single-child rules: close the node in place or hang one open child."""
    is_closed, reason = check_closure(updated)
    if is_closed:
        return replace(
            node,
            formulas=updated,
            closed=True,
            closure_reason=reason,
            node_type=CLOSED,
            rule=match.rule,
            rule_description=match.description,
            instantiations=instantiations,
            original_formula=match.formula,
            step=step_num,
        )
    child = TableauNode(
        formulas=updated,
        id=state.next_id(),
        branch_path=node.branch_path,
        instantiations=instantiations,
        original_formula=match.formula,
        step=step_num,
    )
    return replace(
        node,
        formulas=(),
        children=(child,),
        node_type=INTERMEDIATE,
        rule=match.rule,
        rule_description=match.description,
        original_formula=match.formula,
        step=step_num,
    )


def _branch_child(state, node, match, formulas, direction, step_num):
    is_closed, reason = check_closure(formulas)
    return TableauNode(
        formulas=formulas,
        id=state.next_id(),
        closed=is_closed,
        closure_reason=reason,
        node_type=CLOSED if is_closed else OPEN,
        rule=CLOSURE_RULE if is_closed else None,
        rule_description=CLOSURE_DESCRIPTION if is_closed else None,
        branch_path=node.branch_path + (direction,),
        instantiations=node.instantiations,
        original_formula=match.formula,
        step=step_num,
    )


def apply_rule(match: RuleMatch, node: TableauNode, state, step_num: int):
    """
    Expand one formula of node.

    Returns (replacement, record): the node value that takes node's place
    in the tree, and the step log entry. Counters on state are advanced
    for every node id and witness handed out.
    """
    remaining = _without(node.formulas, match.formula)
    target = format_term(match.formula)
    kind = match.kind

    if kind == ALPHA:
        updated = match.parts + remaining
        replacement = _extend(match, node, state, step_num, updated,
                              node.instantiations)
        description = f"{match.description}: {target} gives {format_formulas(match.parts)}"
        after = format_formulas(updated)
        performed = ()

    elif kind == BETA:
        left, right = match.parts
        left_child = _branch_child(state, node, match, (left,) + remaining,
                                   "left", step_num)
        right_child = _branch_child(state, node, match, (right,) + remaining,
                                    "right", step_num)
        replacement = replace(
            node,
            formulas=(),
            children=(left_child, right_child),
            node_type=INTERMEDIATE,
            rule=match.rule,
            rule_description=match.description,
            original_formula=match.formula,
            step=step_num,
        )
        description = (f"{match.description}: {target} splits into "
                       f"{format_term(left)} | {format_term(right)}")
        after = (f"Left: {format_formulas(left_child.formulas)} | "
                 f"Right: {format_formulas(right_child.formulas)}")
        performed = ()

    elif kind in (GAMMA, DELTA):
        const, instantiation = fresh_constant(
            state, match.variable, match.type, match.formula, node.branch_path)
        instance = substitute(match.body, match.variable, const)
        if match.keep_original:
            updated = (match.formula, instance) + remaining
        else:
            updated = (instance,) + remaining
        replacement = _extend(match, node, state, step_num, updated,
                              node.instantiations + (instantiation,))
        description = (f"{match.description} [{match.variable} → {const.name}]: "
                       f"{target} gives {format_term(instance)}")
        after = format_formulas(updated)
        performed = (instantiation,)

    else:
        raise RuntimeError(f"no rule family {kind!r} for {target}")

    record = StepRecord(
        num=step_num,
        rule=match.rule,
        description=description,
        before_state=format_formulas(node.formulas),
        after_state=after,
        branch_path=node.branch_path,
        instantiations=performed,
        node_id=node.id,
        formula=target,
    )
    return replacement, record
