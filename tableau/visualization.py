"""
Visualization and reporting utilities.

Text views of a finished proof plus a Graphviz DOT export. Layout,
colour schemes and HTML belong to whatever renders the DOT file or the
JSON written by ProofResult.save.
"""

from .core.state import CLOSED, OPEN
from .core.terms import format_term, format_formulas


def tree_lines(node, indent: str = "") -> list:
    """The tree as indented lines, one per node."""
    if node.children:
        label = f"{node.rule}: {format_term(node.original_formula)}"
    else:
        label = format_formulas(node.formulas)
    line = f"{indent}[{node.node_type}] #{node.id} {label}"
    if node.node_type == CLOSED and node.closure_reason:
        line += f"  ✗ {node.closure_reason}"
    lines = [line]
    for child in node.children:
        lines.extend(tree_lines(child, indent + "  "))
    return lines


def print_tree(root):
    """Print the proof tree, children indented under their parent."""
    print(f"\n{'='*60}")
    print("Proof tree:")
    print(f"{'='*60}")
    for line in tree_lines(root):
        print(f"  {line}")


def print_steps(steps):
    """Print the step log."""
    print(f"\n{'='*60}")
    print("Proof steps:")
    print(f"{'='*60}")
    if not steps:
        print("  (no rules applied)")
    for record in steps:
        path = " → ".join(record.branch_path)
        print(f"  Step {record.num}: {record.rule}  [{path}]")
        print(f"    {record.description}")
        print(f"    before: {record.before_state}")
        print(f"    after:  {record.after_state}")


def dot_source(root) -> str:
    """The proof tree as a DOT digraph, one box per node."""
    colors = {CLOSED: "lightpink", OPEN: "lightgreen"}
    out = ["digraph tableau {",
           "  rankdir=TB;",
           "  node [shape=box, style=rounded];"]

    def visit(node):
        if node.children:
            label = f"{node.rule}\\n{format_term(node.original_formula)}"
        else:
            label = format_formulas(node.formulas)
            if node.closure_reason:
                label += f"\\n✗ {node.closure_reason}"
        label = label.replace('"', '\\"')
        color = colors.get(node.node_type, "lightgray")
        out.append(f'  n{node.id} [label="{label}", fillcolor={color}, style=filled];')
        for child in node.children:
            out.append(f'  n{node.id} -> n{child.id};')
            visit(child)

    visit(root)
    out.append("}")
    return "\n".join(out) + "\n"


def export_dot(root, path="tableau.dot"):
    """Export the proof tree as a DOT file for Graphviz visualization."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(dot_source(root))
    print(f"Graph exported to {path}")
