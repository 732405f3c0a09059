"""Binary trees: construction, traversal and level-based operations."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: Any = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


@dataclass(eq=False, repr=False)
class LinkedTreeNode:
    """A binary tree node with a pointer to its right neighbour on the same level."""

    val: Any = 0
    left: Optional["LinkedTreeNode"] = None
    right: Optional["LinkedTreeNode"] = None
    next: Optional["LinkedTreeNode"] = None

    def __repr__(self) -> str:
        return f"LinkedTreeNode({self.val!r})"


_Node = TypeVar("_Node", TreeNode, LinkedTreeNode)


def _build(values: Iterable[Any], factory: Callable[[Any], _Node]) -> Optional[_Node]:
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = factory(first)
    queue = deque([root])
    while queue:
        parent = queue.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = factory(value)
                setattr(parent, side, child)
                queue.append(child)
    return root


def build_tree(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from level-order values, ``None`` marking a missing child."""
    return _build(values, TreeNode)


def build_linked_tree(values: Iterable[Any]) -> Optional[LinkedTreeNode]:
    """Like :func:`build_tree`, producing :class:`LinkedTreeNode` nodes."""
    return _build(values, LinkedTreeNode)


_MISSING = object()


def _shape(root) -> Iterator[Any]:
    """Preorder values with ``None`` marking every empty subtree."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            yield None
        else:
            yield node.val
            stack.append(node.right)
            stack.append(node.left)


def is_same_tree(p, q) -> bool:
    """Tell whether two trees have the same shape and values."""
    return all(a == b for a, b in zip_longest(_shape(p), _shape(q), fillvalue=_MISSING))


def max_depth(root) -> int:
    """Return the number of levels in the tree."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return depth


def connect(root: Optional[LinkedTreeNode]) -> Optional[LinkedTreeNode]:
    """Point every node's ``next`` at its right neighbour on the same level."""
    level = root
    while level is not None:
        dummy = LinkedTreeNode()
        tail = dummy
        node: Optional[LinkedTreeNode] = level
        while node is not None:
            for child in (node.left, node.right):
                if child is not None:
                    tail.next = child
                    tail = child
            node = node.next
        tail.next = None
        level = dummy.next
    return root


def deepest_leaves_sum(root) -> Any:
    """Return the sum of the values on the deepest level (0 for an empty tree)."""
    level = [root] if root is not None else []
    total = 0
    while level:
        total = sum(node.val for node in level)
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return total


def preorder_traversal(root) -> list:
    """Values in root, left, right order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder_traversal(root) -> list:
    """Values in left, root, right order."""
    result = []
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def postorder_traversal(root) -> list:
    """Values in left, right, root order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result