"""Recursive node algebra for searchtreelib.

Every operation descends by calling itself on the chosen child and
returning the link that child slot should hold afterwards. Stack depth
equals tree height, so a degenerate (sorted-input) tree deeper than the
interpreter's recursion limit raises RecursionError. Teardown never
recurses: it goes through the shared explicit-stack ``dismantle``.
"""

from typing import Any, List, Optional, Tuple

from .._common.algebra import NodeAlgebra
from .._common.node import Link, Node, ValueHandle, compare
from .._common.outcomes import InsertOutcome, RemoveOutcome


class RecursiveNodeAlgebra(NodeAlgebra):
    """Self-referential node algebra."""

    name = "recursive"

    def insert(self, root: Link, value: Any) -> Tuple[Link, InsertOutcome]:
        if root is None:
            return Node(value), InsertOutcome.INSERTED

        order = compare(value, root.value)
        if order == 0:
            return root, InsertOutcome.REJECTED
        if order < 0:
            root.left, outcome = self.insert(root.left, value)
        else:
            root.right, outcome = self.insert(root.right, value)
        return root, outcome

    def contains(self, root: Link, value: Any) -> bool:
        return self._find(root, value) is not None

    def retrieve(self, root: Link, value: Any) -> Optional[Any]:
        node = self._find(root, value)
        return node.value if node is not None else None

    def retrieve_as_mut(self, root: Link, value: Any) -> Optional[ValueHandle]:
        node = self._find(root, value)
        return ValueHandle(node) if node is not None else None

    def remove(self, root: Link, value: Any) -> Tuple[Link, RemoveOutcome]:
        if root is None:
            return None, RemoveOutcome.NOT_FOUND

        order = compare(value, root.value)
        if order < 0:
            root.left, outcome = self.remove(root.left, value)
            return root, outcome
        if order > 0:
            root.right, outcome = self.remove(root.right, value)
            return root, outcome

        if root.left is not None and root.right is not None:
            root.right, root.value = self.remove_min(root.right)
            return root, RemoveOutcome.REMOVED

        replacement = root.left if root.left is not None else root.right
        root.detach()
        return replacement, RemoveOutcome.REMOVED

    def min(self, root: Link) -> Optional[Any]:
        if root is None:
            return None
        if root.left is None:
            return root.value
        return self.min(root.left)

    def max(self, root: Link) -> Optional[Any]:
        if root is None:
            return None
        if root.right is None:
            return root.value
        return self.max(root.right)

    def remove_min(self, root: Link) -> Tuple[Link, Optional[Any]]:
        if root is None:
            return None, None
        if root.left is not None:
            root.left, value = self.remove_min(root.left)
            return root, value
        replacement = root.right
        root.detach()
        return replacement, root.value

    def remove_max(self, root: Link) -> Tuple[Link, Optional[Any]]:
        if root is None:
            return None, None
        if root.right is not None:
            root.right, value = self.remove_max(root.right)
            return root, value
        replacement = root.left
        root.detach()
        return replacement, root.value

    def height(self, root: Link) -> int:
        # Absent subtrees count -1 so a leaf comes out as 0
        if root is None:
            return -1
        return 1 + max(self.height(root.left), self.height(root.right))

    # Borrowing traversals

    def pre_order(self, root: Link) -> List[Any]:
        elements: List[Any] = []
        self._pre_order_into(root, elements)
        return elements

    def in_order(self, root: Link) -> List[Any]:
        elements: List[Any] = []
        self._in_order_into(root, elements)
        return elements

    def post_order(self, root: Link) -> List[Any]:
        elements: List[Any] = []
        self._post_order_into(root, elements)
        return elements

    def level_order(self, root: Link) -> List[Any]:
        """Collect one depth at a time, from 0 down to the tree's height."""
        elements: List[Any] = []
        for depth in range(self.height(root) + 1):
            self._level_into(root, depth, elements)
        return elements

    def _pre_order_into(self, node: Link, elements: List[Any]) -> None:
        if node is not None:
            elements.append(node.value)
            self._pre_order_into(node.left, elements)
            self._pre_order_into(node.right, elements)

    def _in_order_into(self, node: Link, elements: List[Any]) -> None:
        if node is not None:
            self._in_order_into(node.left, elements)
            elements.append(node.value)
            self._in_order_into(node.right, elements)

    def _post_order_into(self, node: Link, elements: List[Any]) -> None:
        if node is not None:
            self._post_order_into(node.left, elements)
            self._post_order_into(node.right, elements)
            elements.append(node.value)

    def _level_into(self, node: Link, depth: int, elements: List[Any]) -> None:
        if node is None:
            return
        if depth == 0:
            elements.append(node.value)
        else:
            self._level_into(node.left, depth - 1, elements)
            self._level_into(node.right, depth - 1, elements)

    # Consuming traversals
    # Read the whole walk, then tear down with the explicit-stack drain. A
    # RecursionError during the read leaves every link intact.

    def consume_pre_order(self, root: Link) -> List[Any]:
        elements = self.pre_order(root)
        self.dismantle(root)
        return elements

    def consume_in_order(self, root: Link) -> List[Any]:
        elements = self.in_order(root)
        self.dismantle(root)
        return elements

    def consume_post_order(self, root: Link) -> List[Any]:
        elements = self.post_order(root)
        self.dismantle(root)
        return elements

    def consume_level_order(self, root: Link) -> List[Any]:
        elements = self.level_order(root)
        self.dismantle(root)
        return elements

    def _find(self, node: Link, value: Any) -> Optional[Node]:
        if node is None:
            return None
        order = compare(value, node.value)
        if order == 0:
            return node
        return self._find(node.left if order < 0 else node.right, value)
