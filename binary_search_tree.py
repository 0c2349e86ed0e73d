"""
Generic Binary Search Tree
==========================

An ordered container of items compared through a key function.

Invariant (holds after every mutation):
    for every node N, keys in N.left are < key(N.item),
    keys in N.right are >= key(N.item).

Equal keys descend to the right, so the raw tree tolerates duplicates.
Uniqueness is the job of whatever wraps the tree (see recipe_book.RecipeBook).

Descent (add/search/remove) and all traversals are iterative, so a tree
built from already-sorted input (height == size) stays usable at any size.

Usage:
    from binary_search_tree import BinarySearchTree, TraversalOrder

    tree = BinarySearchTree(key=lambda pair: pair[0])
    tree.add(("m", 1))
    tree.add(("b", 2))
    node = tree.search("b")
    list(tree.traverse(TraversalOrder.PREORDER))  # [("m", 1), ("b", 2)]
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


def _identity(item: Any) -> Any:
    return item


class TraversalOrder(str, Enum):
    """Visitation orders supported by BinarySearchTree.traverse()."""
    PREORDER = "preorder"    # node, left, right
    INORDER = "inorder"      # left, node, right
    POSTORDER = "postorder"  # left, right, node


class BinaryNode(Generic[T]):
    """A tree cell holding one item and owning up to two children."""

    __slots__ = ("item", "left", "right")

    def __init__(self, item: T, left: Optional["BinaryNode[T]"] = None,
                 right: Optional["BinaryNode[T]"] = None):
        self.item = item
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"BinaryNode({self.item!r})"


class BinarySearchTree(Generic[T]):
    """
    Binary search tree over items of type T.

    Args:
        key: Maps an item to its comparison key. Defaults to the item itself.
            search() and remove() take a key, not an item.
    """

    def __init__(self, key: Callable[[T], Any] = None):
        self._key = key or _identity
        self._root: Optional[BinaryNode[T]] = None
        self._size = 0

    # -------------------------------------------------------------------------
    # Structure access
    # -------------------------------------------------------------------------

    @property
    def root(self) -> Optional[BinaryNode[T]]:
        return self._root

    @root.setter
    def root(self, node: Optional[BinaryNode[T]]):
        self._root = node
        self._size = sum(1 for _ in self._iter_nodes(TraversalOrder.PREORDER))

    def key_of(self, item: T) -> Any:
        return self._key(item)

    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return self._size

    def get_number_of_nodes(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[T]:
        return self.inorder()

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add(self, item: T) -> bool:
        """
        Insert item at the empty slot its key leads to. O(h).

        No duplicate check. Always returns True.
        """
        new_node = BinaryNode(item)
        if self._root is None:
            self._root = new_node
            self._size += 1
            return True

        item_key = self._key(item)
        current = self._root
        while True:
            if item_key < self._key(current.item):
                if current.left is None:
                    current.left = new_node
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = new_node
                    break
                current = current.right

        self._size += 1
        return True

    def remove(self, key: Any) -> bool:
        """
        Remove the node whose key equals `key`. O(h).

        Returns:
            True if a node was removed, False if the key is absent
        """
        parent, node = self._find_with_parent(key)
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            # Two children: take the in-order successor's item, then unlink
            # the successor. It has no left child by construction.
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.item = successor.item
            self._replace_child(successor_parent, successor, successor.right)
        else:
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, node, child)

        self._size -= 1
        return True

    def clear(self):
        """Release the whole node graph."""
        self._root = None
        self._size = 0

    def _replace_child(self, parent: Optional[BinaryNode[T]], old: BinaryNode[T],
                       new: Optional[BinaryNode[T]]):
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def search(self, key: Any) -> Optional[BinaryNode[T]]:
        """Return the node whose key equals `key`, or None. O(h)."""
        return self._find_with_parent(key)[1]

    def contains(self, key: Any) -> bool:
        return self.search(key) is not None

    def _find_with_parent(self, key: Any) -> Tuple[Optional[BinaryNode[T]], Optional[BinaryNode[T]]]:
        parent = None
        current = self._root
        while current is not None:
            current_key = self._key(current.item)
            if key == current_key:
                return parent, current
            parent = current
            current = current.left if key < current_key else current.right
        return parent, None

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def traverse(self, order: TraversalOrder = TraversalOrder.INORDER) -> Iterator[T]:
        """
        Lazily yield items in the given order.

        Each call returns a fresh generator, so a traversal can be restarted.
        The tree must not be mutated while a traversal is in progress.
        """
        order = TraversalOrder(order)
        return (node.item for node in self._iter_nodes(order))

    def preorder(self) -> Iterator[T]:
        return self.traverse(TraversalOrder.PREORDER)

    def inorder(self) -> Iterator[T]:
        return self.traverse(TraversalOrder.INORDER)

    def postorder(self) -> Iterator[T]:
        return self.traverse(TraversalOrder.POSTORDER)

    def preorder_traverse(self, visit: Callable[[T], Any]):
        for item in self.preorder():
            visit(item)

    def inorder_traverse(self, visit: Callable[[T], Any]):
        for item in self.inorder():
            visit(item)

    def postorder_traverse(self, visit: Callable[[T], Any]):
        for item in self.postorder():
            visit(item)

    def _iter_nodes(self, order: TraversalOrder) -> Iterator[BinaryNode[T]]:
        if order is TraversalOrder.PREORDER:
            return self._preorder_nodes()
        if order is TraversalOrder.INORDER:
            return self._inorder_nodes()
        return self._postorder_nodes()

    def _preorder_nodes(self) -> Iterator[BinaryNode[T]]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            # Right pushed first so left is visited first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _inorder_nodes(self) -> Iterator[BinaryNode[T]]:
        stack: List[BinaryNode[T]] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right

    def _postorder_nodes(self) -> Iterator[BinaryNode[T]]:
        stack: List[BinaryNode[T]] = []
        last_visited = None
        current = self._root
        while stack or current is not None:
            if current is not None:
                stack.append(current)
                current = current.left
                continue
            peek = stack[-1]
            if peek.right is not None and last_visited is not peek.right:
                current = peek.right
            else:
                yield peek
                last_visited = stack.pop()

    # -------------------------------------------------------------------------
    # Shape
    # -------------------------------------------------------------------------

    def get_height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0
        height = 0
        level = deque([self._root])
        while level:
            height += 1
            for _ in range(len(level)):
                node = level.popleft()
                if node.left is not None:
                    level.append(node.left)
                if node.right is not None:
                    level.append(node.right)
        return height

    def _subtree_heights(self) -> Dict[int, int]:
        """Height of every subtree, keyed by node id. Computed bottom-up."""
        heights: Dict[int, int] = {}
        for node in self._postorder_nodes():
            left = heights[id(node.left)] if node.left is not None else 0
            right = heights[id(node.right)] if node.right is not None else 0
            heights[id(node)] = 1 + max(left, right)
        return heights

    def is_balanced(self) -> bool:
        """True when every node's left and right subtree heights differ by at most 1."""
        heights = self._subtree_heights()
        for node in self._preorder_nodes():
            left = heights[id(node.left)] if node.left is not None else 0
            right = heights[id(node.right)] if node.right is not None else 0
            if abs(left - right) > 1:
                return False
        return True
