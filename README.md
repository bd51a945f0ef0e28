# bintree

A small library for binary trees whose nodes hold an integer and know their
parent. You can use it to build and edit trees, walk them, measure them, find a
node's relatives, and draw trees as ASCII art.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)              # parent defaults to None
root.left = Node(12, root)   # the caller attaches the child
root.right = Node(402, root)

root.left.insert_right(54)   # 54 becomes 12's right child
root.insert_right(128)       # 128 takes 402's place; 402 moves below it
```

A `Node` has the attributes `value`, `parent`, `left` and `right`. Creating a
node only records its parent. Attaching it to the parent is up to you.

`insert_left(value)` and `insert_right(value)` create a new node, place it
between the node and its current child on that side, and return it. The old
child becomes the new node's child on the same side.

`delete()` detaches the node from its parent. It then takes apart the subtree
below it by clearing every `left`, `right` and `parent` link in that subtree.

## Traversals

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))    # node, left subtree, right subtree
list(inorder(root))     # left subtree, node, right subtree
list(postorder(root))   # left subtree, right subtree, node
```

Each traversal is a generator of the stored values. Given `None`, it yields
nothing.

## Properties

```python
from bintree.properties import (
    is_leaf, is_root, height, depth, size, leaves,
    internal_nodes, balance, is_full, is_perfect,
)
```

| Function | Result |
|---|---|
| `is_leaf(node)` | `True` if the node exists and has no children |
| `is_root(node)` | `True` if the node exists and has no parent |
| `height(tree)` | number of nodes on the longest downward path; `0` for `None` |
| `depth(node)` | number of edges up to the root; `0` for `None` |
| `size(tree)` | number of nodes |
| `leaves(tree)` | number of nodes with no children |
| `internal_nodes(tree)` | number of nodes with at least one child |
| `balance(tree)` | height of the left subtree minus height of the right; `0` for `None` |
| `is_full(tree)` | `True` if every node has zero or two children; `False` for `None` |
| `is_perfect(tree)` | see below |

`is_perfect(tree)` returns `True` when every inner node has two children and
every leaf lies exactly `depth(tree)` levels below `tree`. It returns `False`
for `None`. For a root node the depth is 0, so on a root only a single-node
tree qualifies.

## Relatives

```python
from bintree.relatives import sibling, uncle

sibling(root.left)          # the other child of root, or None
uncle(root.left.right)      # the sibling of root.left, or None
```

Both return `None` when the node, or the parent or grandparent they need, is
missing.

## Drawing

```python
from bintree.printing import render, print_tree

text = render(root)         # the drawing as a string, no trailing newline
print_tree(root)            # writes the drawing plus a newline to stdout
print_tree(root, file=f)    # or to any text stream
```

Each node is drawn as its value, zero-padded to three digits, in parentheses.
Dashes and dots connect each node to its children. Trailing spaces are removed
from every line. `render(None)` returns an empty string, and
`print_tree(None)` writes nothing.

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

## What it does not do

This is a library only. It provides no command-line program. Trees live in
memory and are not saved or loaded. No ordering is kept: it has no
search-tree insertion or lookup by value.