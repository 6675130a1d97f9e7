"""Node algebra contract for searchtreelib.

A NodeAlgebra implements every structural operation on a linked tree of
Nodes. Containers never touch links themselves; they call an algebra and
adjust their bookkeeping from the outcome it reports.

Mutating operations take the link of a subtree and return the link that
should occupy that slot afterwards. Python has no mutable reference to a
slot, so "replace the slot" is expressed as "return the new occupant and
let the caller store it".
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

from .node import Link, ValueHandle
from .outcomes import InsertOutcome, RemoveOutcome

logger = logging.getLogger(__name__)


class NodeAlgebra(ABC):
    """Abstract base class for node algebra strategies.

    Implementations must agree on every observable result: the same
    sequence of operations yields the same shape, the same traversals and
    the same outcomes regardless of strategy.
    """

    name: str = "abstract"

    # -- point operations -------------------------------------------------

    @abstractmethod
    def insert(self, root: Link, value: Any) -> Tuple[Link, InsertOutcome]:
        """Insert ``value`` below ``root``.

        Returns:
            (new root link, INSERTED) or (root unchanged, REJECTED)
        """
        pass

    @abstractmethod
    def contains(self, root: Link, value: Any) -> bool:
        pass

    @abstractmethod
    def retrieve(self, root: Link, value: Any) -> Optional[Any]:
        """Return the stored object equal to ``value``, or None."""
        pass

    @abstractmethod
    def retrieve_as_mut(self, root: Link, value: Any) -> Optional[ValueHandle]:
        """Return a writable handle onto the node holding ``value``, or None."""
        pass

    @abstractmethod
    def remove(self, root: Link, value: Any) -> Tuple[Link, RemoveOutcome]:
        """Remove ``value`` from the subtree at ``root``.

        A node with two children keeps its place; its value is replaced by
        the smallest value of its right subtree, and that value's node is
        the one unlinked.

        Returns:
            (new root link, REMOVED) or (root unchanged, NOT_FOUND)
        """
        pass

    @abstractmethod
    def min(self, root: Link) -> Optional[Any]:
        pass

    @abstractmethod
    def max(self, root: Link) -> Optional[Any]:
        pass

    @abstractmethod
    def remove_min(self, root: Link) -> Tuple[Link, Optional[Any]]:
        """Unlink the leftmost node.

        Returns:
            (new root link, extracted value) or (None, None) when empty
        """
        pass

    @abstractmethod
    def remove_max(self, root: Link) -> Tuple[Link, Optional[Any]]:
        """Unlink the rightmost node.

        Returns:
            (new root link, extracted value) or (None, None) when empty
        """
        pass

    @abstractmethod
    def height(self, root: Link) -> int:
        """Edge count from ``root`` to its deepest leaf, -1 for an absent tree."""
        pass

    # -- borrowing traversals ---------------------------------------------

    @abstractmethod
    def pre_order(self, root: Link) -> List[Any]:
        pass

    @abstractmethod
    def in_order(self, root: Link) -> List[Any]:
        pass

    @abstractmethod
    def post_order(self, root: Link) -> List[Any]:
        pass

    @abstractmethod
    def level_order(self, root: Link) -> List[Any]:
        pass

    # -- consuming traversals ---------------------------------------------
    # Every node has its links cleared by the time the walk returns; the
    # caller must drop its own reference to ``root`` afterwards. A walk that
    # raises must leave the links untouched.

    @abstractmethod
    def consume_pre_order(self, root: Link) -> List[Any]:
        pass

    @abstractmethod
    def consume_in_order(self, root: Link) -> List[Any]:
        pass

    @abstractmethod
    def consume_post_order(self, root: Link) -> List[Any]:
        pass

    @abstractmethod
    def consume_level_order(self, root: Link) -> List[Any]:
        pass

    # -- shared -----------------------------------------------------------

    def dismantle(self, root: Link) -> int:
        """Tear a subtree down with an explicit stack.

        Clears every node's links so no deep chain of references is left
        for the garbage collector to unwind recursively.

        Returns:
            Number of nodes released
        """
        released = 0
        stack = [root] if root is not None else []
        while stack:
            node = stack.pop()
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
            node.detach()
            released += 1
        if released:
            logger.debug("%s algebra released %d nodes", self.name, released)
        return released

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
