"""Lookup of a node's sibling and uncle."""

from __future__ import annotations

from bintree.node import Node


def sibling(node: Node | None) -> Node | None:
    """Return the other child of node's parent, or None."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    if parent.left is node:
        return parent.right
    if parent.right is node:
        return parent.left
    return None


def uncle(node: Node | None) -> Node | None:
    """Return the sibling of node's parent, or None."""
    if node is None or node.parent is None or node.parent.parent is None:
        return None
    return sibling(node.parent)