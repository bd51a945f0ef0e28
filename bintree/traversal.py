"""Depth-first traversals yielding node values."""

from __future__ import annotations

from collections.abc import Iterator

from bintree.node import Node


def preorder(tree: Node | None) -> Iterator[int]:
    """Yield values in pre-order: node, left subtree, right subtree."""
    if tree is None:
        return
    yield tree.value
    yield from preorder(tree.left)
    yield from preorder(tree.right)


def inorder(tree: Node | None) -> Iterator[int]:
    """Yield values in in-order: left subtree, node, right subtree."""
    if tree is None:
        return
    yield from inorder(tree.left)
    yield tree.value
    yield from inorder(tree.right)


def postorder(tree: Node | None) -> Iterator[int]:
    """Yield values in post-order: left subtree, right subtree, node."""
    if tree is None:
        return
    yield from postorder(tree.left)
    yield from postorder(tree.right)
    yield tree.value