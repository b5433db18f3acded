"""
Proof classification and display.

After the tableau loop halts, these utilities label every node of the
final tree, collect the leaves into closed and open branches, and package
the verdict with the tree and step log for whoever renders it.
"""

from dataclasses import dataclass, field, replace
import json

from .state import (
    TableauNode, OPEN, CLOSED, INTERMEDIATE, node_to_dict,
)
from .terms import format_term, format_formulas


def classify_tree(node: TableauNode) -> TableauNode:
    """
    Label every node from its own shape: leaves are closed or open by
    their closed flag, nodes with children are intermediate. Running it
    on an already classified tree returns an equal tree.
    """
    children = tuple(classify_tree(c) for c in node.children)
    if children:
        node_type = INTERMEDIATE
    else:
        node_type = CLOSED if node.closed else OPEN
    if children == node.children and node_type == node.node_type:
        return node
    return replace(node, children=children, node_type=node_type)


def collect_leaf_branches(node: TableauNode) -> tuple:
    """Returns (closed_leaves, open_leaves), each in left-to-right order."""
    if not node.children:
        if node.closed:
            return [node], []
        return [], [node]
    closed, open_ = [], []
    for child in node.children:
        c, o = collect_leaf_branches(child)
        closed.extend(c)
        open_.extend(o)
    return closed, open_


@dataclass
class ProofResult:
    """
    The outcome of one proof attempt.

    is_valid is True when every branch closed. When the step budget ran
    out first, step_limit_reached is set and the remaining open branches
    say nothing about invalidity: check `inconclusive` before treating an
    open branch as a countermodel.
    """
    goal: object
    tree_root: TableauNode
    steps: list = field(default_factory=list)
    closed_branches: list = field(default_factory=list)
    open_branches: list = field(default_factory=list)
    step_limit_reached: bool = False
    witnesses: dict = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return len(self.open_branches) == 0

    @property
    def total_branches(self) -> int:
        return len(self.closed_branches) + len(self.open_branches)

    @property
    def inconclusive(self) -> bool:
        return self.step_limit_reached and not self.is_valid

    def summary(self) -> dict:
        return {
            "closed_branches": len(self.closed_branches),
            "open_branches": len(self.open_branches),
            "is_valid": self.is_valid,
            "total_branches": self.total_branches,
            "steps": len(self.steps),
            "step_limit_reached": self.step_limit_reached,
        }

    def to_dict(self):
        return {
            "goal": format_term(self.goal),
            "summary": self.summary(),
            "tree": node_to_dict(self.tree_root),
            "steps": [s.to_dict() for s in self.steps],
            "witnesses": {key: c.name for key, c in self.witnesses.items()},
        }

    def save(self, path="tableau_proof.json"):
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)


def build_result(state) -> ProofResult:
    """Classify the final tree of a halted state and collect its verdict."""
    root = classify_tree(state.root)
    closed, open_ = collect_leaf_branches(root)
    return ProofResult(
        goal=state.goal,
        tree_root=root,
        steps=list(state.steps),
        closed_branches=closed,
        open_branches=open_,
        step_limit_reached=state.step_limit_reached,
        witnesses=dict(state.witnesses),
    )


def print_proof(result: ProofResult):
    """Pretty-print the verdict and the branches."""
    print(f"\n{'='*60}")
    print(f"TABLEAU for {format_term(result.goal)}")
    print(f"{'='*60}")
    for leaf in result.closed_branches:
        path = " → ".join(leaf.branch_path)
        print(f"  [closed] {path}: {leaf.closure_reason}")
    for leaf in result.open_branches:
        path = " → ".join(leaf.branch_path)
        print(f"  [open]   {path}: {format_formulas(leaf.formulas)}")
    print(f"{'='*60}")
    s = result.summary()
    print(f"  Closed: {s['closed_branches']} | Open: {s['open_branches']} | "
          f"Steps: {s['steps']}")
    if result.is_valid:
        print("  VALID: every branch of the negated goal closed -> theorem holds.")
    elif result.inconclusive:
        print("  INCONCLUSIVE: step limit reached with branches still open.")
    else:
        print("  NOT PROVED: open branches remain after full expansion.")
