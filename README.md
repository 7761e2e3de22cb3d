# nbtree

A non-binary (general) tree kept in a bounded table. Each node holds a single
character and links to its first son, its next brother and its parent, all
stored as indices into the table. The package provides the tree with its
traversals and queries in `nbtree.tree`, and an interactive console menu in
`nbtree.menu`.

## Installing

```
pip install .
```

## The menu

```
nbtree
```

(`python -m nbtree.menu` does the same.) The command takes no options apart
from `--help`. It shows a menu and reads a choice:

1. Build a new tree. Give the number of nodes (at most 20) and the root.
   Then, going through the nodes in level order, give each node's number of
   children and the children themselves, until the requested number of nodes
   is reached. If the input cannot make such a tree, the error is shown and
   the tree is left empty.
2. Pre-order traversal
3. In-order traversal
4. Post-order traversal
5. Level-order traversal
6. Print every table entry with its first son, next brother and parent, and
   the number of elements
7. Number of leaves
8. Search for a node
9. Level of a node (the root is at level 0)
10. Depth of the tree
11. The larger of two nodes
12. Exit

The menu also ends when its input runs out. `run_menu(stdin, stdout)` runs it
on any text streams, and `read_tree(node_count, stdin, stdout)` runs only the
tree-building prompts and returns the tree.

## Using the library

```python
from nbtree.tree import NonBinaryTree

tree = NonBinaryTree(capacity=20)
root = tree.set_root("A")                        # 0
b, c, d = tree.add_children(root, ["B", "C", "D"])
tree.add_children(b, ["E", "F"])

list(tree.preorder())     # ['A', 'B', 'E', 'F', 'C', 'D']
list(tree.inorder())      # ['E', 'B', 'F', 'A', 'C', 'D']
list(tree.postorder())    # ['E', 'F', 'B', 'C', 'D', 'A']
list(tree.level_order())  # ['A', 'B', 'C', 'D', 'E', 'F']

len(tree)              # 6
"E" in tree            # True
tree.leaf_count()      # 4
tree.level("E")        # 2
tree.depth()           # 2
tree.max_of("B", "E")  # 'E'
print(tree.describe())
```

Nodes are addressed by their index in the table: the root is 0 and each new
node takes the next index. `add_children` appends after any children the node
already has and returns the new indices. Iterating over a tree yields its
`Node` entries (`info`, `first_son`, `next_brother`, `parent`, with `None` for
a missing link) in table order. The traversal methods return iterators.

The same tree can be built in one step. `from_children` takes the root and a
sequence of child groups, where the n-th group holds the children of the node
at index n:

```python
tree = NonBinaryTree.from_children("A", [["B", "C", "D"], ["E", "F"]])
```

Errors are raised as exceptions, all subclasses of `TreeError`:

- `TreeFullError`: adding the nodes would exceed the tree's capacity.
- `NodeNotFoundError`: a node index or value is not in the tree (raised by
  `level`, `max_of` and `add_children`). It is also a `LookupError`.
- `TreeError` itself: for example, setting a root on a tree that already has one.

A node value that is not a single character raises `ValueError`.

## What it does not do

Nodes cannot be removed or changed once added, and the tree is kept only in
memory: the menu does not save or load trees, so a tree is lost when the menu
exits.

## Tests

```
pip install ".[test]"
pytest
```