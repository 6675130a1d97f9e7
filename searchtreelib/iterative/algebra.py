"""Iterative node algebra for searchtreelib.

Every operation is a loop. Descent walks a cursor down the tree while
remembering which slot (parent plus side) it came through, which is all the
"parent pointer" deletion needs. Traversals use explicit stacks and queues,
so stack usage is constant whatever the tree's shape.
"""

from collections import deque
from typing import Any, Deque, List, Optional, Tuple

from .._common.algebra import NodeAlgebra
from .._common.node import Link, Node, ValueHandle, compare
from .._common.outcomes import InsertOutcome, RemoveOutcome


class IterativeNodeAlgebra(NodeAlgebra):
    """Loop-based node algebra. The recommended default."""

    name = "iterative"

    def insert(self, root: Link, value: Any) -> Tuple[Link, InsertOutcome]:
        if root is None:
            return Node(value), InsertOutcome.INSERTED

        node = root
        while True:
            order = compare(value, node.value)
            if order == 0:
                return root, InsertOutcome.REJECTED
            side = 'left' if order < 0 else 'right'
            child = getattr(node, side)
            if child is None:
                setattr(node, side, Node(value))
                return root, InsertOutcome.INSERTED
            node = child

    def contains(self, root: Link, value: Any) -> bool:
        return self._find(root, value) is not None

    def retrieve(self, root: Link, value: Any) -> Optional[Any]:
        node = self._find(root, value)
        return node.value if node is not None else None

    def retrieve_as_mut(self, root: Link, value: Any) -> Optional[ValueHandle]:
        node = self._find(root, value)
        return ValueHandle(node) if node is not None else None

    def remove(self, root: Link, value: Any) -> Tuple[Link, RemoveOutcome]:
        parent: Optional[Node] = None
        side = None
        node = root

        while node is not None:
            order = compare(value, node.value)
            if order == 0:
                break
            parent = node
            if order < 0:
                side, node = 'left', node.left
            else:
                side, node = 'right', node.right
        else:
            return root, RemoveOutcome.NOT_FOUND

        if node.left is not None and node.right is not None:
            # Node stays; its value is replaced by the in-order successor
            node.right, node.value = self.remove_min(node.right)
            return root, RemoveOutcome.REMOVED

        replacement = node.left if node.left is not None else node.right
        node.detach()
        if parent is None:
            return replacement, RemoveOutcome.REMOVED
        setattr(parent, side, replacement)
        return root, RemoveOutcome.REMOVED

    def min(self, root: Link) -> Optional[Any]:
        node = root
        while node is not None:
            if node.left is None:
                return node.value
            node = node.left
        return None

    def max(self, root: Link) -> Optional[Any]:
        node = root
        while node is not None:
            if node.right is None:
                return node.value
            node = node.right
        return None

    def remove_min(self, root: Link) -> Tuple[Link, Optional[Any]]:
        if root is None:
            return None, None

        parent: Optional[Node] = None
        node = root
        while node.left is not None:
            parent, node = node, node.left

        # The leftmost node can only have a right child
        if parent is None:
            root = node.right
        else:
            parent.left = node.right
        node.detach()
        return root, node.value

    def remove_max(self, root: Link) -> Tuple[Link, Optional[Any]]:
        if root is None:
            return None, None

        parent: Optional[Node] = None
        node = root
        while node.right is not None:
            parent, node = node, node.right

        if parent is None:
            root = node.left
        else:
            parent.right = node.left
        node.detach()
        return root, node.value

    def height(self, root: Link) -> int:
        """Count levels breadth-first."""
        height = -1
        if root is None:
            return height

        level: List[Node] = [root]
        while level:
            next_level: List[Node] = []
            for node in level:
                if node.left is not None:
                    next_level.append(node.left)
                if node.right is not None:
                    next_level.append(node.right)
            level = next_level
            height += 1
        return height

    # Borrowing traversals

    def pre_order(self, root: Link) -> List[Any]:
        elements: List[Any] = []
        stack: List[Node] = [root] if root is not None else []
        while stack:
            node = stack.pop()
            elements.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return elements

    def in_order(self, root: Link) -> List[Any]:
        elements: List[Any] = []
        stack: List[Node] = []
        node = root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                elements.append(node.value)
                node = node.right
        return elements

    def post_order(self, root: Link) -> List[Any]:
        # Two stacks: the second ends up holding node, right, left reversed
        elements: List[Any] = []
        stack_one: List[Node] = [root] if root is not None else []
        stack_two: List[Node] = []
        while stack_one:
            node = stack_one.pop()
            if node.left is not None:
                stack_one.append(node.left)
            if node.right is not None:
                stack_one.append(node.right)
            stack_two.append(node)
        while stack_two:
            elements.append(stack_two.pop().value)
        return elements

    def level_order(self, root: Link) -> List[Any]:
        elements: List[Any] = []
        queue: Deque[Node] = deque([root] if root is not None else [])
        while queue:
            node = queue.popleft()
            elements.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return elements

    # Consuming traversals

    def consume_pre_order(self, root: Link) -> List[Any]:
        elements: List[Any] = []
        stack: List[Node] = [root] if root is not None else []
        while stack:
            node = stack.pop()
            left, right = node.left, node.right
            node.detach()
            elements.append(node.value)
            if right is not None:
                stack.append(right)
            if left is not None:
                stack.append(left)
        return elements

    def consume_in_order(self, root: Link) -> List[Any]:
        elements: List[Any] = []
        stack: List[Node] = [root] if root is not None else []
        while stack:
            node = stack.pop()
            if node.left is not None:
                # Take the left subtree, revisit this node once it is drained
                left, node.left = node.left, None
                stack.append(node)
                stack.append(left)
            else:
                right, node.right = node.right, None
                elements.append(node.value)
                if right is not None:
                    stack.append(right)
        return elements

    def consume_post_order(self, root: Link) -> List[Any]:
        elements: List[Any] = []
        stack_one: List[Node] = [root] if root is not None else []
        stack_two: List[Node] = []
        while stack_one:
            node = stack_one.pop()
            left, right = node.left, node.right
            node.detach()
            if left is not None:
                stack_one.append(left)
            if right is not None:
                stack_one.append(right)
            stack_two.append(node)
        while stack_two:
            elements.append(stack_two.pop().value)
        return elements

    def consume_level_order(self, root: Link) -> List[Any]:
        elements: List[Any] = []
        queue: Deque[Node] = deque([root] if root is not None else [])
        while queue:
            node = queue.popleft()
            left, right = node.left, node.right
            node.detach()
            elements.append(node.value)
            if left is not None:
                queue.append(left)
            if right is not None:
                queue.append(right)
        return elements

    def _find(self, root: Link, value: Any) -> Optional[Node]:
        node = root
        while node is not None:
            order = compare(value, node.value)
            if order == 0:
                return node
            node = node.left if order < 0 else node.right
        return None
