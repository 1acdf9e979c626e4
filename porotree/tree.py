"""A binary search tree of poros ordered by volume."""

from __future__ import annotations

import copy
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from porotree.poro import Poro
from porotree.vector import PoroVector


@dataclass
class _Node:
    item: Poro
    left: _Node | None = None
    right: _Node | None = None


def _clone(node: _Node | None) -> _Node | None:
    if node is None:
        return None
    return _Node(copy.copy(node.item), _clone(node.left), _clone(node.right))


def _height(node: _Node | None) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _count(node: _Node | None) -> int:
    if node is None:
        return 0
    return 1 + _count(node.left) + _count(node.right)


def _leaves(node: _Node | None) -> int:
    if node is None:
        return 0
    if node.left is None and node.right is None:
        return 1
    return _leaves(node.left) + _leaves(node.right)


def _inorder(node: _Node | None) -> Iterator[Poro]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.item
        yield from _inorder(node.right)


def _preorder(node: _Node | None) -> Iterator[Poro]:
    if node is not None:
        yield node.item
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: _Node | None) -> Iterator[Poro]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.item


def _remove(node: _Node | None, poro: Poro) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if poro.volume < node.item.volume:
        node.left, removed = _remove(node.left, poro)
        return node, removed
    if poro.volume > node.item.volume:
        node.right, removed = _remove(node.right, poro)
        return node, removed
    if node.item != poro:
        return node, False
    if node.left is None:
        return node.right, True
    if node.right is None:
        return node.left, True
    # Two children: take the largest poro of the left subtree.
    predecessor = node.left
    while predecessor.right is not None:
        predecessor = predecessor.right
    node.item = predecessor.item
    node.left, _ = _remove(node.left, predecessor.item)
    return node, True


class PoroTree:
    """A binary search tree of poros.

    Poros with a smaller volume go left, the others go right; a poro equal
    to one already on its search path is not inserted again.
    """

    __hash__ = None

    def __init__(self) -> None:
        self._root: _Node | None = None

    def copy(self) -> PoroTree:
        """Return an independent copy of the tree."""
        tree = PoroTree()
        tree._root = _clone(self._root)
        return tree

    def is_empty(self) -> bool:
        return self._root is None

    def insert(self, poro: Poro) -> bool:
        """Insert a copy of the poro; return False if it is already present."""
        new = _Node(copy.copy(poro))
        if self._root is None:
            self._root = new
            return True
        node = self._root
        while True:
            if poro == node.item:
                return False
            if poro.volume < node.item.volume:
                if node.left is None:
                    node.left = new
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return True
                node = node.right

    def remove(self, poro: Poro) -> bool:
        """Remove the poro; return False if it was not found."""
        self._root, removed = _remove(self._root, poro)
        return removed

    def __contains__(self, poro: object) -> bool:
        if not isinstance(poro, Poro):
            return False
        node = self._root
        while node is not None:
            if node.item == poro:
                return True
            node = node.left if poro.volume < node.item.volume else node.right
        return False

    def root(self) -> Poro:
        """Return a copy of the root poro, or an empty poro for an empty tree."""
        if self._root is None:
            return Poro()
        return copy.copy(self._root.item)

    def height(self) -> int:
        return _height(self._root)

    def node_count(self) -> int:
        return _count(self._root)

    def leaf_count(self) -> int:
        return _leaves(self._root)

    def inorder(self) -> PoroVector:
        return PoroVector.from_poros(_inorder(self._root))

    def preorder(self) -> PoroVector:
        return PoroVector.from_poros(_preorder(self._root))

    def postorder(self) -> PoroVector:
        return PoroVector.from_poros(_postorder(self._root))

    def levels(self) -> PoroVector:
        """Return the poros level by level, left to right."""
        order: list[Poro] = []
        pending = deque([self._root] if self._root is not None else [])
        while pending:
            node = pending.popleft()
            order.append(node.item)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return PoroVector.from_poros(order)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PoroTree):
            return NotImplemented
        return self.inorder() == other.inorder()

    def __add__(self, other: PoroTree) -> PoroTree:
        result = self.copy()
        for poro in other.inorder():
            if not poro.is_empty():
                result.insert(poro)
        return result

    def __sub__(self, other: PoroTree) -> PoroTree:
        result = self.copy()
        for poro in other.inorder():
            if not poro.is_empty():
                result.remove(poro)
        return result

    def __str__(self) -> str:
        return str(self.levels())