import io

import pytest

from bintree.node import Node
from bintree.printing import print_tree, render


@pytest.fixture
def full_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def test_render_full_tree(full_tree):
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)"
    )
    assert render(full_tree) == expected


def test_render_after_insertions():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.right.insert_left(128)
    root.insert_left(54)
    expected = (
        "       .--(098)-------.\n"
        "  .--(054)       .--(402)\n"
        "(012)          (128)"
    )
    assert render(root) == expected


def test_render_single_node():
    assert render(Node(98)) == "(098)"


def test_render_empty_tree():
    assert render(None) == ""


def test_one_line_per_level(full_tree):
    full_tree.right.right.insert_left(1)
    lines = render(full_tree).split("\n")
    assert len(lines) == 4


def test_lines_have_no_trailing_spaces(full_tree):
    for line in render(full_tree).split("\n"):
        assert line == line.rstrip(" ")


def test_every_value_boxed_on_its_level(full_tree):
    lines = render(full_tree).split("\n")
    assert "(098)" in lines[0]
    assert "(012)" in lines[1] and "(402)" in lines[1]
    for box in ("(006)", "(016)", "(256)", "(512)"):
        assert box in lines[2]


def test_wide_values_are_boxed_in_full():
    root = Node(1234)
    root.insert_right(7)
    text = render(root)
    assert "(1234)" in text
    assert "(007)" in text


def test_print_tree_writes_render_with_newline(full_tree):
    buffer = io.StringIO()
    print_tree(full_tree, buffer)
    assert buffer.getvalue() == render(full_tree) + "\n"


def test_print_tree_none_writes_nothing():
    buffer = io.StringIO()
    print_tree(None, buffer)
    assert buffer.getvalue() == ""


def test_print_tree_defaults_to_stdout(capsys):
    print_tree(Node(98))
    assert capsys.readouterr().out == "(098)\n"