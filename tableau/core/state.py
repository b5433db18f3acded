"""
Core data structures: TableauNode, StepRecord, TableauState.

A proof attempt is a rooted tree of TableauNodes. Each node is owned by
exactly one parent and is never modified once built; the engine produces
a new tree for every rule it applies by copying the path from the root
down to the node being replaced (see replace_node). Nodes are addressed
by their id, which is unique within one proof.

Node types:
    open          a leaf that may still hold expandable formulas
    closed        a leaf whose formulas contain a contradiction
    intermediate  a node that has been expanded into one or two children
"""

from dataclasses import dataclass, field, replace
from typing import Optional
import json

from .terms import format_formulas, term_to_dict, term_from_dict


MAX_STEPS = 50

WITNESS_POLICIES = ("name", "occurrence")

OPEN = "open"
CLOSED = "closed"
INTERMEDIATE = "intermediate"


@dataclass(frozen=True)
class TableauNode:
    """A point in the proof tree."""
    formulas: tuple = ()
    closed: bool = False
    children: tuple = ()
    id: int = 0
    rule: Optional[str] = None
    rule_description: Optional[str] = None
    step: int = 0
    branch_path: tuple = ("root",)
    instantiations: tuple = ()
    node_type: str = OPEN
    closure_reason: Optional[str] = None
    original_formula: Optional[object] = None

    @property
    def is_leaf(self):
        return not self.children

    @property
    def name(self):
        return f"#{self.id} {format_formulas(self.formulas)}"

    def __repr__(self):
        return f"TableauNode({self.name}, {self.node_type})"


@dataclass(frozen=True)
class StepRecord:
    """One entry of the step log. Written by the engine, never read by it."""
    num: int
    rule: str
    description: str
    before_state: str
    after_state: str
    branch_path: tuple = ()
    instantiations: tuple = ()
    node_id: int = 0
    formula: str = ""

    def to_dict(self):
        return {
            "num": self.num,
            "rule": self.rule,
            "description": self.description,
            "before_state": self.before_state,
            "after_state": self.after_state,
            "branch_path": list(self.branch_path),
            "instantiations": [list(pair) for pair in self.instantiations],
            "node_id": self.node_id,
            "formula": self.formula,
        }

    @classmethod
    def from_dict(cls, d):
        return cls(
            num=d["num"], rule=d["rule"], description=d["description"],
            before_state=d["before_state"], after_state=d["after_state"],
            branch_path=tuple(d.get("branch_path", ())),
            instantiations=tuple(tuple(p) for p in d.get("instantiations", ())),
            node_id=d.get("node_id", 0), formula=d.get("formula", ""),
        )


# ── Tree helpers ─────────────────────────────────────────────────────────────

def iter_nodes(node):
    """Every node of the tree, depth-first, parents before children."""
    yield node
    for child in node.children:
        yield from iter_nodes(child)


def find_node(node, node_id: int) -> Optional[TableauNode]:
    for candidate in iter_nodes(node):
        if candidate.id == node_id:
            return candidate
    return None


def replace_node(node, node_id: int, replacement):
    """
    Return a new tree in which the node with node_id is replaced.

    Only the nodes on the path from the root to the target are copied;
    every other subtree is shared with the old tree. If no node has that
    id the original tree is returned unchanged.
    """
    if node.id == node_id:
        return replacement
    for i, child in enumerate(node.children):
        new_child = replace_node(child, node_id, replacement)
        if new_child is not child:
            children = node.children[:i] + (new_child,) + node.children[i + 1:]
            return replace(node, children=children)
    return node


def node_to_dict(node) -> dict:
    return {
        "id": node.id,
        "formulas": [term_to_dict(f) for f in node.formulas],
        "closed": node.closed,
        "children": [node_to_dict(c) for c in node.children],
        "rule": node.rule,
        "rule_description": node.rule_description,
        "step": node.step,
        "branch_path": list(node.branch_path),
        "instantiations": [list(pair) for pair in node.instantiations],
        "node_type": node.node_type,
        "closure_reason": node.closure_reason,
        "original_formula": (term_to_dict(node.original_formula)
                             if node.original_formula is not None else None),
    }


def node_from_dict(d) -> TableauNode:
    original = d.get("original_formula")
    return TableauNode(
        formulas=tuple(term_from_dict(f) for f in d["formulas"]),
        closed=d.get("closed", False),
        children=tuple(node_from_dict(c) for c in d.get("children", ())),
        id=d["id"],
        rule=d.get("rule"),
        rule_description=d.get("rule_description"),
        step=d.get("step", 0),
        branch_path=tuple(d.get("branch_path", ("root",))),
        instantiations=tuple(tuple(p) for p in d.get("instantiations", ())),
        node_type=d.get("node_type", OPEN),
        closure_reason=d.get("closure_reason"),
        original_formula=term_from_dict(original) if original is not None else None,
    )


# ── State ────────────────────────────────────────────────────────────────────

@dataclass
class TableauState:
    """
    Full state of one proof attempt, serializable for inspection.

    root:              current tree
    goal:              the formula being proved, as given (before negation)
    node_counter:      next node id to hand out
    witness_counter:   number of witness constants minted so far
    steps:             ordered log of StepRecords
    witnesses:         witness key -> minted Constant. With the "name"
                       policy the key is the bound variable's name, so every
                       quantifier binding x shares one witness; with
                       "occurrence" it is the quantified formula plus the
                       branch it was expanded on.
    step:              rule applications so far (bounded by max_steps)
    """
    root: TableauNode = field(default_factory=TableauNode)
    goal: Optional[object] = None
    node_counter: int = 1
    witness_counter: int = 0
    steps: list = field(default_factory=list)
    witnesses: dict = field(default_factory=dict)
    step: int = 0
    halted: bool = False
    halt_reason: str = ""
    step_limit_reached: bool = False
    max_steps: int = MAX_STEPS
    witness_policy: str = "name"

    def __post_init__(self):
        if self.max_steps < 0:
            raise ValueError(f"max_steps must be >= 0, got {self.max_steps}")
        if self.witness_policy not in WITNESS_POLICIES:
            raise ValueError(
                f"unknown witness policy {self.witness_policy!r}; "
                f"expected one of {', '.join(WITNESS_POLICIES)}"
            )

    def next_id(self) -> int:
        node_id = self.node_counter
        self.node_counter += 1
        return node_id

    def to_dict(self):
        return {
            "root": node_to_dict(self.root),
            "goal": term_to_dict(self.goal) if self.goal is not None else None,
            "node_counter": self.node_counter,
            "witness_counter": self.witness_counter,
            "steps": [s.to_dict() for s in self.steps],
            "witnesses": {key: term_to_dict(c) for key, c in self.witnesses.items()},
            "step": self.step,
            "halted": self.halted,
            "halt_reason": self.halt_reason,
            "step_limit_reached": self.step_limit_reached,
            "max_steps": self.max_steps,
            "witness_policy": self.witness_policy,
        }

    @classmethod
    def from_dict(cls, d):
        return cls(
            root=node_from_dict(d["root"]),
            goal=term_from_dict(d["goal"]) if d.get("goal") is not None else None,
            node_counter=d["node_counter"],
            witness_counter=d["witness_counter"],
            steps=[StepRecord.from_dict(s) for s in d["steps"]],
            witnesses={key: term_from_dict(c) for key, c in d["witnesses"].items()},
            step=d["step"],
            halted=d.get("halted", False),
            halt_reason=d.get("halt_reason", ""),
            step_limit_reached=d.get("step_limit_reached", False),
            max_steps=d.get("max_steps", MAX_STEPS),
            witness_policy=d.get("witness_policy", "name"),
        )

    def save(self, path="tableau_state.json"):
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, path="tableau_state.json"):
        with open(path, encoding="utf-8") as f:
            return cls.from_dict(json.load(f))
