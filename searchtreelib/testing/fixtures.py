"""Test fixtures for searchtreelib consumers.

These fixtures provide controlled access to a tree's internal links for
testing purposes without exposing them as part of the public API.
"""

from typing import Any, Dict, List, Optional, Tuple

from .._common.node import Node, compare
from .._common.tree import BinarySearchTree


class TreeInspector:
    """Public test fixture for verifying tree structure.

    This class gives test suites a stable way to look at the shape of a
    tree and check its invariants without reaching into private
    attributes themselves.

    Example:
        tree = IterativeBST([4, 2, 6])
        inspector = TreeInspector(tree)

        assert inspector.violations() == []
        assert inspector.children_of(4) == (2, 6)
    """

    def __init__(self, tree: BinarySearchTree):
        """Initialize with the tree to inspect.

        Args:
            tree: Any BinarySearchTree (iterative or recursive)
        """
        self._tree = tree

    @property
    def root(self) -> Optional[Node]:
        return self._tree._root

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - reported_size: what size() claims
            - reachable_nodes: nodes actually reachable from the root
            - leaves: nodes without children
            - root_value: value at the root, or None
            - strategy: name of the node algebra
        """
        nodes = self._nodes()
        return {
            'reported_size': self._tree._size,
            'reachable_nodes': len(nodes),
            'leaves': sum(1 for node in nodes if node.is_leaf()),
            'root_value': self.root.value if self.root is not None else None,
            'strategy': self._tree.algebra.name,
        }

    def shape(self) -> Optional[Tuple]:
        """Nested ``(value, left, right)`` tuples, None for absent links.

        Recursive, so only meant for the small trees tests build.
        """
        def _shape(node: Optional[Node]) -> Optional[Tuple]:
            if node is None:
                return None
            return (node.value, _shape(node.left), _shape(node.right))

        return _shape(self.root)

    def node_for(self, value: Any) -> Optional[Node]:
        """Node currently holding ``value``, or None."""
        node = self.root
        while node is not None:
            order = compare(value, node.value)
            if order == 0:
                return node
            node = node.left if order < 0 else node.right
        return None

    def children_of(self, value: Any) -> Optional[Tuple[Any, Any]]:
        """Values of the left and right child of ``value``'s node.

        Returns:
            (left value or None, right value or None), or None if absent
        """
        node = self.node_for(value)
        if node is None:
            return None
        return (
            node.left.value if node.left is not None else None,
            node.right.value if node.right is not None else None,
        )

    def depth_of(self, value: Any) -> Optional[int]:
        """Edges from the root down to ``value``, or None if absent."""
        depth = 0
        node = self.root
        while node is not None:
            order = compare(value, node.value)
            if order == 0:
                return depth
            node = node.left if order < 0 else node.right
            depth += 1
        return None

    def violations(self) -> List[str]:
        """Check the ordering and size invariants.

        Returns:
            List of problems found (empty if the tree is well formed)
        """
        problems = []
        nodes = 0
        seen = set()
        # Each entry carries the open (low, high) bounds inherited from ancestors
        stack: List[Tuple[Node, Any, Any]] = []
        if self.root is not None:
            stack.append((self.root, None, None))

        while stack:
            node, low, high = stack.pop()
            if id(node) in seen:
                problems.append(f"node {node.value!r} reachable twice")
                continue
            seen.add(id(node))
            nodes += 1

            if low is not None and not low < node.value:
                problems.append(f"{node.value!r} is not greater than ancestor {low!r}")
            if high is not None and not node.value < high:
                problems.append(f"{node.value!r} is not less than ancestor {high!r}")

            if node.left is not None:
                stack.append((node.left, low, node.value))
            if node.right is not None:
                stack.append((node.right, node.value, high))

        if nodes != self._tree._size:
            problems.append(
                f"size() reports {self._tree._size} but {nodes} nodes are reachable"
            )
        return problems

    def _nodes(self) -> List[Node]:
        nodes: List[Node] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            nodes.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return nodes
