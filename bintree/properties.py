"""Structural measurements and predicates on binary trees."""

from __future__ import annotations

from bintree.node import Node


def is_leaf(node: Node | None) -> bool:
    """Return True if node exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Node | None) -> bool:
    """Return True if node exists and has no parent."""
    return node is not None and node.parent is None


def height(tree: Node | None) -> int:
    """Number of nodes on the longest downward path from tree; 0 for None."""
    if tree is None:
        return 0
    return 1 + max(height(tree.left), height(tree.right))


def depth(tree: Node | None) -> int:
    """Number of edges from tree up to its root; 0 for None."""
    steps = 0
    if tree is None:
        return steps
    while tree.parent is not None:
        steps += 1
        tree = tree.parent
    return steps


def size(tree: Node | None) -> int:
    """Number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Node | None) -> int:
    """Number of leaf nodes in the tree."""
    if tree is None:
        return 0
    if is_leaf(tree):
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Node | None) -> int:
    """Number of nodes with at least one child."""
    if tree is None:
        return 0
    own = 0 if is_leaf(tree) else 1
    return own + internal_nodes(tree.left) + internal_nodes(tree.right)


def balance(tree: Node | None) -> int:
    """Height of the left subtree minus height of the right; 0 for None."""
    if tree is None:
        return 0
    return height(tree.left) - height(tree.right)


def is_full(tree: Node | None) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def _leaves_at(node: Node | None, target: int, level: int) -> bool:
    if node is None:
        return True
    if node.left is None and node.right is None:
        return level == target
    if node.left is None or node.right is None:
        return False
    return _leaves_at(node.left, target, level + 1) and _leaves_at(
        node.right, target, level + 1
    )


def is_perfect(tree: Node | None) -> bool:
    """Return True if every inner node has two children and every leaf lies
    exactly ``depth(tree)`` levels below tree.

    A lone root node qualifies; None does not.
    """
    if tree is None:
        return False
    return _leaves_at(tree, depth(tree), 0)