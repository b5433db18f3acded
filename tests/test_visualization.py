"""
Tests for the text and DOT renderings of a proof.
"""

from tableau.core.engine import prove
from tableau.core.state import iter_nodes
from tableau.parser import parse
from tableau.visualization import (
    tree_lines, print_tree, print_steps, dot_source, export_dot,
)


def contraposition():
    return prove(parse("(A → B) → (¬B → ¬A)"), verbose=False)


class TestTreeLines:
    def test_one_line_per_node(self):
        result = contraposition()
        lines = tree_lines(result.tree_root)
        assert len(lines) == len(list(iter_nodes(result.tree_root)))

    def test_children_are_indented(self):
        lines = tree_lines(contraposition().tree_root)
        assert lines[0].startswith("[intermediate] #0 ¬→ decomposition")
        assert lines[1].startswith("  [intermediate] #1 → branching")

    def test_closed_leaf_shows_reason(self):
        lines = tree_lines(prove(parse("A → A"), verbose=False).tree_root)
        assert lines == ["[closed] #0 A, ¬A  ✗ A ∧ ¬A"]

    def test_open_leaf_shows_formulas(self):
        lines = tree_lines(prove(parse("A ∨ B"), verbose=False).tree_root)
        assert lines[-1] == "  [open] #1 ¬A, ¬B"


class TestPrinting:
    def test_print_tree(self, capsys):
        print_tree(contraposition().tree_root)
        out = capsys.readouterr().out
        assert "Proof tree:" in out
        assert "✗ A ∧ ¬A" in out
        assert "✗ B ∧ ¬B" in out

    def test_print_steps(self, capsys):
        print_steps(contraposition().steps)
        out = capsys.readouterr().out
        assert "Step 1: ¬→ decomposition" in out
        assert "Step 2: → branching" in out
        assert "[root → left]" in out

    def test_print_no_steps(self, capsys):
        print_steps([])
        assert "(no rules applied)" in capsys.readouterr().out


class TestDot:
    def test_every_node_and_edge(self):
        root = contraposition().tree_root
        source = dot_source(root)
        assert source.startswith("digraph tableau {")
        assert source.rstrip().endswith("}")
        for node in iter_nodes(root):
            assert f"  n{node.id} [label=" in source
            for child in node.children:
                assert f"  n{node.id} -> n{child.id};" in source

    def test_colours_follow_node_type(self):
        source = dot_source(prove(parse("A ∨ B"), verbose=False).tree_root)
        assert "fillcolor=lightgreen" in source
        assert "fillcolor=lightgray" in source
        assert "fillcolor=lightpink" not in source

    def test_export(self, tmp_path, capsys):
        root = contraposition().tree_root
        path = tmp_path / "proof.dot"
        export_dot(root, str(path))
        assert path.read_text(encoding="utf-8") == dot_source(root)
        assert "Graph exported to" in capsys.readouterr().out
