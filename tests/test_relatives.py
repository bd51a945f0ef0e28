from bintree.node import Node
from bintree.relatives import sibling, uncle


def _sample():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def test_sibling_pairs():
    root = _sample()
    assert sibling(root.left) is root.right
    assert sibling(root.right) is root.left
    assert sibling(root.right.left) is root.right.right
    assert sibling(root.left.right) is root.left.left


def test_sibling_is_symmetric():
    root = _sample()
    node = root.right.right.left
    assert sibling(sibling(node)) is node


def test_sibling_of_root_and_none():
    root = _sample()
    assert sibling(root) is None
    assert sibling(None) is None


def test_sibling_of_only_child():
    root = Node(1)
    child = root.insert_left(2)
    assert sibling(child) is None


def test_sibling_of_unattached_node():
    root = _sample()
    stray = Node(7, root)
    assert sibling(stray) is None


def test_uncle_found():
    root = _sample()
    assert uncle(root.right.left) is root.left
    assert uncle(root.left.right) is root.right
    assert uncle(root.right.right.left) is root.right.left


def test_uncle_missing():
    root = _sample()
    assert uncle(root.left) is None
    assert uncle(root) is None
    assert uncle(None) is None


def test_uncle_when_parent_is_only_child():
    root = Node(1)
    child = root.insert_right(2)
    grandchild = child.insert_left(3)
    assert uncle(grandchild) is None