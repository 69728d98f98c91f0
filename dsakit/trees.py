"""Binary trees: AVL insertion, binary search trees, level order and symmetry."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = [
    "TreeNode",
    "AVLTree",
    "build_level_order",
    "search",
    "insert",
    "height",
    "level_order",
    "is_symmetric",
]


@dataclass(eq=False)
class TreeNode:
    """Binary tree node; ``height`` is maintained by the AVL tree."""

    key: Any
    left: TreeNode | None = None
    right: TreeNode | None = None
    height: int = 1


def _height(node: TreeNode | None) -> int:
    return node.height if node is not None else 0


def _update(node: TreeNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: TreeNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_ll(p: TreeNode) -> TreeNode:
    pl = p.left
    p.left = pl.right
    pl.right = p
    _update(p)
    _update(pl)
    return pl


def _rotate_rr(p: TreeNode) -> TreeNode:
    pr = p.right
    p.right = pr.left
    pr.left = p
    _update(p)
    _update(pr)
    return pr


def _rotate_lr(p: TreeNode) -> TreeNode:
    pl = p.left
    plr = pl.right
    pl.right = plr.left
    p.left = plr.right
    plr.left = pl
    plr.right = p
    _update(pl)
    _update(p)
    _update(plr)
    return plr


def _rotate_rl(p: TreeNode) -> TreeNode:
    pr = p.right
    prl = pr.left
    pr.left = prl.right
    p.right = prl.left
    prl.right = pr
    prl.left = p
    _update(pr)
    _update(p)
    _update(prl)
    return prl


class AVLTree:
    """Self-balancing binary search tree; duplicate keys are ignored."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None

    def _insert(self, node: TreeNode | None, key: Any) -> TreeNode:
        if node is None:
            return TreeNode(key)
        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        _update(node)
        factor = _balance(node)
        if factor == 2 and _balance(node.left) == 1:
            return _rotate_ll(node)
        if factor == 2 and _balance(node.left) == -1:
            return _rotate_lr(node)
        if factor == -2 and _balance(node.right) == -1:
            return _rotate_rr(node)
        if factor == -2 and _balance(node.right) == 1:
            return _rotate_rl(node)
        return node

    def insert(self, key: Any) -> None:
        """Insert ``key`` and rebalance along the insertion path."""
        self.root = self._insert(self.root, key)

    def __iter__(self) -> Iterator[Any]:
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right


def build_level_order(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from values listed level by level; None marks a missing child.

    The first value is the root; each node then takes the next two values as
    its left and right child. Building stops when the values run out.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def search(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Find the node holding ``key`` in a binary search tree, or None."""
    node = root
    while node is not None:
        if node.key == key:
            return node
        node = node.left if key < node.key else node.right
    return None


def insert(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Attach ``key`` as a new leaf of a binary search tree.

    Returns the new node (which is the root when ``root`` is None), or None
    when the key is already present.
    """
    if root is None:
        return TreeNode(key)
    parent = root
    node: TreeNode | None = root
    while node is not None:
        parent = node
        if node.key == key:
            return None
        node = node.left if key < node.key else node.right
    leaf = TreeNode(key)
    if key < parent.key:
        parent.left = leaf
    else:
        parent.right = leaf
    return leaf


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    best = 0
    stack = [(root, 1)]
    while stack:
        node, depth = stack.pop()
        best = max(best, depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return best


def level_order(root: TreeNode | None) -> list[Any]:
    """Return the keys level by level, left to right."""
    if root is None:
        return []
    keys = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        keys.append(node.key)
        for child in (node.left, node.right):
            if child is not None:
                queue.append(child)
    return keys


def is_symmetric(root: TreeNode | None) -> bool:
    """Return True if the tree is its own mirror image."""
    pending = [(root, root)]
    while pending:
        a, b = pending.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.key != b.key:
            return False
        pending.append((a.left, b.right))
        pending.append((a.right, b.left))
    return True