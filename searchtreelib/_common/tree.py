"""Search tree container base for searchtreelib.

The container owns the root link and the element count. Every public
operation is translated into NodeAlgebra calls; the count changes only
when the algebra reports that it actually inserted or removed something.
"""

import functools
import logging
from copy import deepcopy
from dataclasses import replace
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, TypeVar, Union

from .algebra import NodeAlgebra
from .config import Strategy, TraversalOrder, TreeConfig, parse_order
from .cursor import ConsumingCursor, TraversalCursor
from .errors import ConfigurationError, ConsumedTreeError
from .node import Link, ValueHandle

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _live(method: Callable) -> Callable:
    """Refuse to run ``method`` on a tree drained by a consuming traversal."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        if self._consumed:
            raise ConsumedTreeError(
                f"{self.__class__.__name__} was consumed by a consuming traversal"
            )
        return method(self, *args, **kwargs)
    return wrapper


class BinarySearchTree(ABC, Generic[T]):
    """Unbalanced binary search tree without duplicates.

    Subclasses only choose the node algebra. Values must support ``<``
    against each other; ``None`` cannot be stored because it is the
    "absent" answer of every query.

    Shape depends purely on insertion order. Sorted input produces a chain,
    which makes every point operation O(n) and makes the recursive strategy
    recurse n levels deep.
    """

    strategy: Strategy

    def __init__(self, values: Iterable[T] = (), config: Optional[TreeConfig] = None):
        """Create a tree, optionally seeded from ``values``.

        Duplicates in ``values`` are dropped without reaching the policy.

        Args:
            values: Values inserted in iteration order
            config: Tree configuration (defaults to TreeConfig for this strategy)

        Raises:
            ConfigurationError: If config is invalid or names another strategy
        """
        if config is None:
            config = TreeConfig(strategy=self.strategy)

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )
        if config.strategy is not self.strategy:
            raise ConfigurationError(
                f"{self.__class__.__name__} uses the {self.strategy.value} strategy, "
                f"config asks for {config.strategy.value}"
            )

        self._config = config
        self._root: Link = None
        self._size = 0
        self._version = 0
        self._consumed = False

        for value in values:
            self._insert_value(value)

    @property
    @abstractmethod
    def algebra(self) -> NodeAlgebra:
        """Node algebra used for every structural operation."""
        pass

    # Construction helpers

    @classmethod
    def from_value(cls, value: T, config: Optional[TreeConfig] = None) -> 'BinarySearchTree[T]':
        """Create a tree holding a single value."""
        return cls((value,), config=config)

    @classmethod
    def from_iterable(cls, values: Iterable[T], config: Optional[TreeConfig] = None) -> 'BinarySearchTree[T]':
        """Create a tree from values, dropping duplicates."""
        return cls(values, config=config)

    # Bookkeeping

    @property
    def config(self) -> TreeConfig:
        return self._config

    @property
    def version(self) -> int:
        """Mutation counter, bumped by every structural change."""
        return self._version

    @property
    def consumed(self) -> bool:
        """True once a consuming traversal has drained this tree."""
        return self._consumed

    @_live
    def size(self) -> int:
        return self._size

    @_live
    def is_empty(self) -> bool:
        return self._size == 0

    @_live
    def is_not_empty(self) -> bool:
        return self._size != 0

    # Mutation

    @_live
    def insert(self, value: T) -> bool:
        """Insert a value.

        Returns:
            True if inserted, False if an equal value was already present
        """
        if self._insert_value(value):
            return True
        logger.debug("insert(%r) rejected: duplicate", value)
        self._config.policy.on_duplicate(value)
        return False

    @_live
    def extend(self, values: Iterable[T]) -> int:
        """Insert every value in order.

        Returns:
            Number of values actually inserted
        """
        inserted = 0
        for value in values:
            if self.insert(value):
                inserted += 1
        return inserted

    @_live
    def remove(self, value: T) -> bool:
        """Remove a value.

        Returns:
            True if removed, False if the value was not present
        """
        self._root, outcome = self.algebra.remove(self._root, value)
        if outcome.succeeded:
            self._size -= 1
            self._version += 1
            return True
        logger.debug("remove(%r) found nothing", value)
        self._config.policy.on_missing(value)
        return False

    @_live
    def remove_min(self) -> Optional[T]:
        """Remove and return the smallest value, or None if empty."""
        if self._root is None:
            self._config.policy.on_empty("remove_min")
            return None
        self._root, value = self.algebra.remove_min(self._root)
        self._size -= 1
        self._version += 1
        return value

    @_live
    def remove_max(self) -> Optional[T]:
        """Remove and return the largest value, or None if empty."""
        if self._root is None:
            self._config.policy.on_empty("remove_max")
            return None
        self._root, value = self.algebra.remove_max(self._root)
        self._size -= 1
        self._version += 1
        return value

    @_live
    def clear(self) -> None:
        """Remove every value. Teardown uses an explicit stack."""
        self.algebra.dismantle(self._root)
        self._root = None
        self._size = 0
        self._version += 1

    def _insert_value(self, value: T) -> bool:
        if value is None:
            raise TypeError("None cannot be stored in a search tree")
        self._root, outcome = self.algebra.insert(self._root, value)
        if outcome.succeeded:
            self._size += 1
            self._version += 1
            return True
        return False

    # Queries

    @_live
    def contains(self, value: T) -> bool:
        return self.algebra.contains(self._root, value)

    @_live
    def retrieve(self, value: T) -> Optional[T]:
        """Return the stored value equal to ``value``, or None."""
        return self.algebra.retrieve(self._root, value)

    @_live
    def retrieve_as_mut(self, value: T) -> Optional[ValueHandle]:
        """Return a writable handle onto the stored value, or None.

        Whatever is assigned through the handle must keep the same position
        in the ordering; the tree does not re-check it.
        """
        return self.algebra.retrieve_as_mut(self._root, value)

    @_live
    def min(self) -> Optional[T]:
        return self.algebra.min(self._root)

    @_live
    def max(self) -> Optional[T]:
        return self.algebra.max(self._root)

    @_live
    def height(self) -> Optional[int]:
        """Edges from root to deepest leaf; 0 for one node, None when empty."""
        if self._root is None:
            return None
        return self.algebra.height(self._root)

    # Borrowing traversals

    @_live
    def asc_order_list(self) -> List[T]:
        return self.algebra.in_order(self._root)

    @_live
    def pre_order_list(self) -> List[T]:
        return self.algebra.pre_order(self._root)

    @_live
    def in_order_list(self) -> List[T]:
        return self.algebra.in_order(self._root)

    @_live
    def post_order_list(self) -> List[T]:
        return self.algebra.post_order(self._root)

    @_live
    def level_order_list(self) -> List[T]:
        return self.algebra.level_order(self._root)

    @_live
    def traverse(self, order: Optional[Union[TraversalOrder, str]] = None) -> TraversalCursor[T]:
        """Cursor over a fresh traversal in ``order`` (config default if None)."""
        order = parse_order(order) or self._config.default_order
        walk = self._borrowing_walks()[order]
        return TraversalCursor(walk(self._root), owner=self)

    def asc_order_iter(self) -> TraversalCursor[T]:
        return self.traverse(TraversalOrder.IN_ORDER)

    def pre_order_iter(self) -> TraversalCursor[T]:
        return self.traverse(TraversalOrder.PRE_ORDER)

    def in_order_iter(self) -> TraversalCursor[T]:
        return self.traverse(TraversalOrder.IN_ORDER)

    def post_order_iter(self) -> TraversalCursor[T]:
        return self.traverse(TraversalOrder.POST_ORDER)

    def level_order_iter(self) -> TraversalCursor[T]:
        return self.traverse(TraversalOrder.LEVEL_ORDER)

    # Consuming traversals

    @_live
    def into_traverse(self, order: Optional[Union[TraversalOrder, str]] = None) -> ConsumingCursor[T]:
        """Drain the tree into a one-shot cursor. The tree is unusable afterwards."""
        order = parse_order(order) or self._config.default_order
        return ConsumingCursor(self._drain(order))

    def into_sorted_list(self) -> List[T]:
        return list(self.into_traverse(TraversalOrder.IN_ORDER))

    def into_asc_order_iter(self) -> ConsumingCursor[T]:
        return self.into_traverse(TraversalOrder.IN_ORDER)

    def into_pre_order_iter(self) -> ConsumingCursor[T]:
        return self.into_traverse(TraversalOrder.PRE_ORDER)

    def into_in_order_iter(self) -> ConsumingCursor[T]:
        return self.into_traverse(TraversalOrder.IN_ORDER)

    def into_post_order_iter(self) -> ConsumingCursor[T]:
        return self.into_traverse(TraversalOrder.POST_ORDER)

    def into_level_order_iter(self) -> ConsumingCursor[T]:
        return self.into_traverse(TraversalOrder.LEVEL_ORDER)

    def _drain(self, order: TraversalOrder) -> List[T]:
        consume = self._consuming_walks()[order]
        # Bookkeeping only changes once the walk has returned
        elements = consume(self._root)
        self._root = None
        logger.debug("Drained %d values from %s in %s order",
                     len(elements), self.__class__.__name__, order.name)
        self._size = 0
        self._version += 1
        self._consumed = True
        return elements

    def _borrowing_walks(self) -> Dict[TraversalOrder, Callable[[Link], List[T]]]:
        return {
            TraversalOrder.PRE_ORDER: self.algebra.pre_order,
            TraversalOrder.IN_ORDER: self.algebra.in_order,
            TraversalOrder.POST_ORDER: self.algebra.post_order,
            TraversalOrder.LEVEL_ORDER: self.algebra.level_order,
        }

    def _consuming_walks(self) -> Dict[TraversalOrder, Callable[[Link], List[T]]]:
        return {
            TraversalOrder.PRE_ORDER: self.algebra.consume_pre_order,
            TraversalOrder.IN_ORDER: self.algebra.consume_in_order,
            TraversalOrder.POST_ORDER: self.algebra.consume_post_order,
            TraversalOrder.LEVEL_ORDER: self.algebra.consume_level_order,
        }

    # Python protocol

    @_live
    def copy(self) -> 'BinarySearchTree[T]':
        """Shallow copy with the same shape (rebuilt from pre-order).

        The copy gets its own copy of the outcome policy, so recorded events
        and threshold counts are not shared with this tree.
        """
        config = replace(self._config, policy=deepcopy(self._config.policy))
        return self.__class__(self.pre_order_list(), config=config)

    def __copy__(self) -> 'BinarySearchTree[T]':
        return self.copy()

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self.is_not_empty()

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __iter__(self) -> TraversalCursor[T]:
        return self.traverse()

    def __eq__(self, other: object) -> bool:
        """Trees are equal when their ascending sequences are equal.

        A consumed tree only equals itself.
        """
        if not isinstance(other, BinarySearchTree):
            return NotImplemented
        if self._consumed or other._consumed:
            return self is other
        return self.asc_order_list() == other.asc_order_list()

    __hash__ = None  # Mutable container

    def __str__(self) -> str:
        if self._consumed:
            return "[]"
        return str(self.asc_order_list())

    def __repr__(self) -> str:
        if self._consumed:
            return f"{self.__class__.__name__}(<consumed>)"
        return f"{self.__class__.__name__}({self.asc_order_list()!r})"
