"""Binary tree nodes with parent links."""

from __future__ import annotations


class Node:
    """A binary tree node holding an integer value.

    Creating a node only records its parent; attaching it as the parent's
    left or right child is up to the caller.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child moves under it."""
        node = Node(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child moves under it."""
        node = Node(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def delete(self) -> None:
        """Dismantle the subtree rooted here and detach it from its parent."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        pending = [self]
        while pending:
            node = pending.pop()
            pending.extend(child for child in (node.left, node.right) if child is not None)
            node.left = None
            node.right = None
            node.parent = None