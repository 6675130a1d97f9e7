"""Traversal cursors for searchtreelib.

A cursor presents an already materialized traversal as a forward-only,
single-pass iterator. Calling the traversal method again builds a new
cursor from a new materialization; cursors themselves never rewind.
"""

from collections import deque
from typing import Any, Deque, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class TraversalCursor(Generic[T]):
    """Read-only cursor over a borrowing traversal.

    The yielded objects are the ones stored in the tree. The cursor is only
    valid while the tree is not mutated: it remembers the tree's mutation
    version and raises RuntimeError on the next pull after a change, the
    same way a dict complains when it changes size during iteration.
    """

    def __init__(self, elements: List[T], owner: Optional[Any] = None):
        """Initialize cursor.

        Args:
            elements: Materialized traversal, in visiting order
            owner: Tree the elements came from (None disables the check)
        """
        self._elements = elements
        self._index = 0
        self._owner = owner
        self._version = owner.version if owner is not None else None

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._index >= len(self._elements):
            raise StopIteration
        if self._owner is not None and self._owner.version != self._version:
            # Stay exhausted after reporting the mutation
            self._index = len(self._elements)
            raise RuntimeError("search tree mutated during iteration")
        element = self._elements[self._index]
        self._index += 1
        return element

    def __length_hint__(self) -> int:
        return len(self._elements) - self._index

    def remaining(self) -> int:
        """Number of elements not yet yielded."""
        return self.__length_hint__()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(remaining={self.remaining()})"


class ConsumingCursor(Generic[T]):
    """One-shot cursor that owns the values of a drained tree.

    Each value is released by the cursor as it is yielded. Once the cursor
    reports exhaustion it keeps doing so for every further pull.
    """

    def __init__(self, elements: Iterable[T]):
        self._elements: Deque[T] = deque(elements)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self._elements:
            raise StopIteration
        return self._elements.popleft()

    def __length_hint__(self) -> int:
        return len(self._elements)

    def remaining(self) -> int:
        """Number of values not yet yielded."""
        return len(self._elements)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(remaining={self.remaining()})"
