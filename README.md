# bintree

A small library with no dependencies for building and inspecting binary trees
of integers.

## Installation

```
pip install .
```

## Building a tree

A `Node(value, parent=None)` holds a value and links to its parent and to its
left and right children. The constructor only records the parent. It does not
attach the new node to that parent. Use `insert_left` and `insert_right` to add
children. If the slot is already filled, the new node goes in between: the old
child becomes a child of the new node on the same side. Both methods return the
new node.

```python
from bintree.tree import Node

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)   # 128 takes the place of 402; 402 becomes 128's right child
```

Methods on a node:

- `is_leaf()`: `True` if the node has no children.
- `is_root()`: `True` if the node has no parent.
- `depth()`: the number of edges from the node up to the root.
- `sibling()`: the other child of the node's parent, or `None`.
- `uncle()`: the sibling of the node's parent, or `None`.
- `delete()`: detaches the node from its parent and unlinks every node in its
  subtree.

## Traversals

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))   # node, left subtree, right subtree
list(inorder(root))    # left subtree, node, right subtree
list(postorder(root))  # left subtree, right subtree, node
```

Each traversal is a generator that yields node values. An empty tree (`None`)
yields nothing.

## Measures

All measures take a node or `None`.

```python
from bintree.measures import (
    height, size, leaves, internal_nodes, balance, is_full, is_perfect,
)

height(root)          # edges on the longest downward path (0 for a leaf or None)
size(root)            # number of nodes
leaves(root)          # nodes with no children
internal_nodes(root)  # nodes with at least one child
balance(root)         # levels in the left subtree minus levels in the right (0 for None)
is_full(root)         # every node has zero or two children (False for None)
is_perfect(root)      # every level is completely filled (False for None)
```

## Rendering

```python
import sys
from bintree.render import render, print_tree

text = render(root)
print_tree(root)              # to standard output
print_tree(root, sys.stderr)  # to any text stream
```

`render` returns the tree drawn as ASCII art. There is one line per level, and
each line ends with a newline. Each value is shown as a zero-padded `(nnn)`
label. Dashes link each parent to its children, and a dot marks the point
above each child. An empty tree renders as an empty string. `print_tree` writes
the same drawing to the given stream.

## What this package does not do

`bintree` is a library only. It has no command-line tool. It does not store
trees on disk or read them back. It does not keep a tree sorted or balanced.
Every node is placed by hand with `insert_left` and `insert_right`.