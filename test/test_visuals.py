import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

from door_tree import load_puzzle
from door_tree.visuals import render_tree, tree_positions


def test_hubs_sit_above_their_children():
    puzzle = load_puzzle("4 2\n1 2 O\n1 3 C\n3 4 O\n2 P\n4 M\n")
    positions = tree_positions(puzzle)
    assert positions[2] == (0.0, -1.0)
    assert positions[4] == (1.0, -2.0)
    assert positions[3] == (1.0, -1.0)
    assert positions[1] == (0.5, 0.0)


def test_render_writes_png(tmp_path):
    puzzle = load_puzzle("3 2\n1 2 O\n1 3 C\n2 P\n3 M\n")
    output = tmp_path / "tree.png"
    render_tree(puzzle, str(output), dpi=40)
    assert output.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
