"""Node storage for searchtreelib.

A Node is a plain data holder: a value plus two child links. All structural
logic lives in the NodeAlgebra implementations, which is what lets the
iterative and recursive strategies share one node type.
"""

from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """A single tree node.

    The value acts as both key and payload. Each node is owned by exactly
    one parent slot (or the tree's root slot); links never point upwards.
    """

    __slots__ = ("value", "left", "right")

    def __init__(self, value: T):
        self.value: T = value
        self.left: Optional["Node[T]"] = None
        self.right: Optional["Node[T]"] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def detach(self) -> None:
        """Drop both child links, leaving an empty shell."""
        self.left = None
        self.right = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


# Optional ownership handle to a subtree; None is the absent subtree.
Link = Optional[Node]


def compare(a: Any, b: Any) -> int:
    """Three-way compare using only ``<``.

    Returns:
        -1 if a < b, 1 if b < a, 0 when neither is less (equal keys)
    """
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


class ValueHandle(Generic[T]):
    """Writable view onto the value slot of one node.

    Returned by ``retrieve_as_mut``. Assigning ``handle.value`` replaces the
    stored object in place without touching the tree's shape. The new value
    must compare equal to the old one (or at least stay between the same
    ancestors), otherwise later searches will miss it.
    """

    __slots__ = ("_node",)

    def __init__(self, node: Node[T]):
        self._node = node

    @property
    def value(self) -> T:
        return self._node.value

    @value.setter
    def value(self, new_value: T) -> None:
        if new_value is None:
            raise TypeError("None cannot be stored in a search tree")
        self._node.value = new_value

    def __repr__(self) -> str:
        return f"ValueHandle({self._node.value!r})"
