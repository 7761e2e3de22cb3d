"""Non-binary tree stored in a bounded array with first-son, next-brother and parent links."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

DEFAULT_CAPACITY = 20
_RULE = "---------------------------------------\n"


class TreeError(Exception):
    """Base error for tree operations."""


class TreeFullError(TreeError):
    """Raised when adding nodes would exceed the tree's capacity."""


class NodeNotFoundError(TreeError, LookupError):
    """Raised when a node index or value is not in the tree."""


@dataclass
class Node:
    """One stored node; links are indices into the tree, or None."""

    info: str
    first_son: int | None = None
    next_brother: int | None = None
    parent: int | None = None


def _check_info(info: str) -> str:
    if not isinstance(info, str) or len(info) != 1 or info == "\0":
        raise ValueError(f"node info must be a single character, got {info!r}")
    return info


class NonBinaryTree:
    """A rooted tree whose nodes hold single characters and may have any number of children."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._nodes: list[Node] = []

    @classmethod
    def from_children(
        cls,
        root: str,
        children: Iterable[Sequence[str]] = (),
        capacity: int = DEFAULT_CAPACITY,
    ) -> NonBinaryTree:
        """Build a tree level by level: the n-th group holds the children of the n-th node."""
        tree = cls(capacity)
        tree.set_root(root)
        for parent, infos in enumerate(children):
            if parent >= len(tree._nodes):
                raise TreeError(f"children given for node {parent}, which does not exist")
            tree.add_children(parent, infos)
        return tree

    def set_root(self, info: str) -> int:
        """Place the root of an empty tree and return its index."""
        if self._nodes:
            raise TreeError("tree already has a root")
        self._nodes.append(Node(_check_info(info)))
        return 0

    def add_children(self, parent: int, infos: Iterable[str]) -> list[int]:
        """Append children to the node at index ``parent`` and return their indices."""
        parent_node = self._node(parent)
        new_infos = [_check_info(info) for info in infos]
        if len(self._nodes) + len(new_infos) > self.capacity:
            raise TreeFullError(
                f"adding {len(new_infos)} node(s) would exceed the capacity of {self.capacity}"
            )
        previous = None
        for child in self._children(parent):
            previous = child
        indices = []
        for info in new_infos:
            index = len(self._nodes)
            self._nodes.append(Node(info, parent=parent))
            if previous is None:
                parent_node.first_son = index
            else:
                self._nodes[previous].next_brother = index
            previous = index
            indices.append(index)
        return indices

    def is_empty(self) -> bool:
        return not self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __contains__(self, info: object) -> bool:
        return any(node.info == info for node in self._nodes)

    def _node(self, index: int) -> Node:
        if not isinstance(index, int) or not 0 <= index < len(self._nodes):
            raise NodeNotFoundError(f"no node at index {index!r}")
        return self._nodes[index]

    def _children(self, index: int) -> Iterator[int]:
        child = self._nodes[index].first_son
        while child is not None:
            yield child
            child = self._nodes[child].next_brother

    def _find(self, info: str) -> int:
        for index, node in enumerate(self._nodes):
            if node.info == info:
                return index
        raise NodeNotFoundError(f"node {info!r} is not in the tree")

    def preorder(self) -> Iterator[str]:
        """Yield node values: parent, then each child's subtree in order."""
        if self._nodes:
            yield from self._preorder(0)

    def _preorder(self, index: int) -> Iterator[str]:
        yield self._nodes[index].info
        for child in self._children(index):
            yield from self._preorder(child)

    def inorder(self) -> Iterator[str]:
        """Yield node values: first child's subtree, parent, then the other children's subtrees."""
        if self._nodes:
            yield from self._inorder(0)

    def _inorder(self, index: int) -> Iterator[str]:
        children = self._children(index)
        first = next(children, None)
        if first is not None:
            yield from self._inorder(first)
        yield self._nodes[index].info
        for child in children:
            yield from self._inorder(child)

    def postorder(self) -> Iterator[str]:
        """Yield node values: every child's subtree, then the parent."""
        if self._nodes:
            yield from self._postorder(0)

    def _postorder(self, index: int) -> Iterator[str]:
        for child in self._children(index):
            yield from self._postorder(child)
        yield self._nodes[index].info

    def level_order(self) -> Iterator[str]:
        """Yield node values breadth first."""
        if not self._nodes:
            return
        queue = deque([0])
        while queue:
            current = queue.popleft()
            yield self._nodes[current].info
            queue.extend(self._children(current))

    def describe(self) -> str:
        """Return a listing of every node with its first son, next brother and parent."""
        def label(index: int | None) -> str:
            return "0" if index is None else self._nodes[index].info

        parts = []
        for number, node in enumerate(self._nodes, start=1):
            parts.append(f"\n --> index ke-{number} \n")
            parts.append(_RULE)
            parts.append(f"info array ke-{number} : {node.info} \n")
            parts.append(f"First son array ke-{number} : {label(node.first_son)} \n")
            parts.append(f"next brother array ke-{number} : {label(node.next_brother)} \n")
            parts.append(f"Parent array ke-{number} : {label(node.parent)} \n")
            parts.append(_RULE)
        return "".join(parts)

    def leaf_count(self) -> int:
        return sum(1 for node in self._nodes if node.first_son is None)

    def level(self, info: str) -> int:
        """Return the level of the first node holding ``info``; the root is level 0."""
        index = self._find(info)
        level = 0
        parent = self._nodes[index].parent
        while parent is not None:
            level += 1
            parent = self._nodes[parent].parent
        return level

    def depth(self) -> int:
        """Return the height of the tree: 0 for an empty tree or a lone root."""
        if not self._nodes:
            return 0
        return self._depth(0)

    def _depth(self, index: int) -> int:
        return max((self._depth(child) + 1 for child in self._children(index)), default=0)

    def max_of(self, first: str, second: str) -> str:
        """Return the greater of two values, both of which must be in the tree."""
        missing = [info for info in (first, second) if info not in self]
        if missing:
            raise NodeNotFoundError(f"not in the tree: {', '.join(map(repr, missing))}")
        return max(first, second)