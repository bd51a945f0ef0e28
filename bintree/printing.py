"""ASCII rendering of binary trees."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.node import Node


def _height(tree: Node) -> int:
    """Number of edges on the longest path from tree down to a leaf."""
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _put(row: list[str], start: int, text: str) -> None:
    end = start + len(text)
    if end > len(row):
        row.extend(" " * (end - len(row)))
    row[start:end] = text


def _fill(tree: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw tree into rows starting at column offset; return its width."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    box = f"({tree.value:03d})"
    width = len(box)
    left = _fill(tree.left, offset, depth + 1, rows)
    right = _fill(tree.right, offset + left + width, depth + 1, rows)
    _put(rows[depth], offset + left, box)
    if depth:
        above = rows[depth - 1]
        corner = offset + left + width // 2
        if is_left:
            _put(above, corner, "-" * (width + right))
        else:
            _put(above, offset - width // 2, "-" * (left + width))
        _put(above, corner, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return the tree drawn as lines of text, without a final newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(_height(tree) + 1)]
    _fill(tree, 0, 0, rows)
    return "\n".join("".join(row).rstrip(" ") for row in rows)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of tree to file (standard output by default)."""
    if tree is None:
        return
    out = sys.stdout if file is None else file
    out.write(render(tree) + "\n")