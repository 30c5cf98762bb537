"""Binary tree node types and level-based traversals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass(eq=False)
class Node:
    """A binary tree node that can also point at its right-hand neighbour."""

    val: int = 0
    left: Optional[Node] = None
    right: Optional[Node] = None
    next: Optional[Node] = field(default=None, repr=False)


_AnyNode = Union[TreeNode, Node]


def _levels(root: Optional[_AnyNode]) -> Iterator[List[_AnyNode]]:
    """Yield the nodes of each level, left to right, top to bottom."""
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True when both trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return (
        p.val == q.val
        and is_same_tree(p.right, q.right)
        and is_same_tree(p.left, q.left)
    )


def level_order(root: Optional[_AnyNode]) -> List[List[int]]:
    """Return node values grouped by level, from the root down."""
    return [[node.val for node in level] for level in _levels(root)]


def zigzag_level_order(root: Optional[_AnyNode]) -> List[List[int]]:
    """Return levels with every second level reversed, starting left to right."""
    return [
        values[::-1] if depth % 2 else values
        for depth, values in enumerate(level_order(root))
    ]


def level_order_bottom(root: Optional[_AnyNode]) -> List[List[int]]:
    """Return node values grouped by level, from the deepest level up."""
    return level_order(root)[::-1]


def connect(root: Optional[Node]) -> Optional[Node]:
    """Point each node's ``next`` at its right neighbour on the same level."""
    for level in _levels(root):
        for node, neighbour in zip(level, level[1:]):
            node.next = neighbour
    return root


def max_depth(root: Optional[_AnyNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def lca_deepest_leaves(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return the lowest common ancestor of all the deepest leaves."""
    depth = max_depth(root)

    def search(node: Optional[TreeNode], level: int) -> Optional[TreeNode]:
        if node is None:
            return None
        if level == depth:
            return node
        left = search(node.left, level + 1)
        right = search(node.right, level + 1)
        if left is not None and right is not None:
            return node
        return left if left is not None else right

    return search(root, 1)