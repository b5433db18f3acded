"""
The tableau main loop.

Start from a single open node holding the negated goal. At each step,
find the first expandable formula (depth-first, a node's own formulas
before its children, closed nodes skipped), apply its rule, and swap the
expanded node for its new value. Stop when nothing is left to expand or
the global step budget runs out.
"""

from typing import Optional

from .state import TableauNode, TableauState, MAX_STEPS, replace_node
from .terms import negate, format_term
from .proof import build_result
from ..inference.rules import match_rule, apply_rule


def make_initial_state(goal, max_steps: int = MAX_STEPS,
                       witness_policy: str = "name") -> TableauState:
    """A fresh proof attempt: one open root holding ¬goal."""
    root = TableauNode(
        formulas=(negate(goal),),
        id=0,
        step=0,
        branch_path=("root",),
        original_formula=goal,
        rule_description="Negate goal for contradiction",
    )
    return TableauState(root=root, goal=goal, max_steps=max_steps,
                        witness_policy=witness_policy)


def find_next_expandable(node: TableauNode) -> Optional[tuple]:
    """First (node, RuleMatch) in depth-first order, or None."""
    if node.closed:
        return None
    for formula in node.formulas:
        match = match_rule(formula)
        if match is not None:
            return node, match
    for child in node.children:
        found = find_next_expandable(child)
        if found is not None:
            return found
    return None


def tableau_step(state: TableauState, verbose: bool = True) -> TableauState:
    """
    Execute one step of the tableau loop.

    One step = find the next expandable formula, apply its rule, replace
    the expanded node in the tree, log the step. Halts the state instead
    when no formula is expandable or max_steps rules have been applied.
    """
    found = find_next_expandable(state.root)
    if found is None:
        state.halted = True
        state.halt_reason = "no expandable formulas"
        return state

    if state.step >= state.max_steps:
        state.halted = True
        state.step_limit_reached = True
        state.halt_reason = "max steps reached"
        if verbose:
            print(f"  [step limit] {state.max_steps} steps used, "
                  f"branches left open are unresolved")
        return state

    node, match = found
    step_num = state.step + 1
    if verbose:
        print(f"\n--- Step {step_num}: {match.rule} on "
              f"{format_term(match.formula)} (node #{node.id}) ---")

    replacement, record = apply_rule(match, node, state, step_num)
    state.root = replace_node(state.root, node.id, replacement)
    state.steps.append(record)
    state.step = step_num

    if verbose:
        for child in replacement.children:
            status = "closed" if child.closed else "open"
            print(f"  [{status}] {child.name}")
        if replacement.closed:
            print(f"  [closed] {replacement.closure_reason}")
        for variable, const in record.instantiations:
            print(f"  [witness] {variable} := {const}")

    return state


def run_tableau(state: TableauState, save_path: Optional[str] = None,
                verbose: bool = True) -> TableauState:
    """
    Run the tableau loop until halted.

    Termination is guaranteed: every step either halts the state or
    applies one rule, and at most state.max_steps rules are applied.

    Args:
        state:      initial state (see make_initial_state)
        save_path:  if set, checkpoint state after each step
        verbose:    print progress
    """
    while not state.halted:
        state = tableau_step(state, verbose=verbose)
        if save_path:
            state.save(save_path)
    return state


def prove(goal, max_steps: int = MAX_STEPS, witness_policy: str = "name",
          verbose: bool = True):
    """
    Try to prove goal valid by refuting its negation.

    Returns a ProofResult with the verdict, the classified tree and the
    step log.
    """
    state = make_initial_state(goal, max_steps=max_steps,
                               witness_policy=witness_policy)
    state = run_tableau(state, verbose=verbose)
    return build_result(state)
