"""Configuration system for searchtreelib.

This module defines how users pick a strategy, how non-success outcomes are
reported and which traversal order plain iteration uses.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from .policies import OutcomePolicy, SilentPolicy, StrictPolicy


class Strategy(Enum):
    """Which node algebra backs a tree.

    Both produce identical results; they differ in how they use the stack.
    """
    ITERATIVE = "iterative"   # Loops and explicit stacks (default)
    RECURSIVE = "recursive"   # Self-referential descent, depth = tree height


class TraversalOrder(Enum):
    """Order in which a traversal visits nodes."""
    PRE_ORDER = "pre"       # Node, left, right
    IN_ORDER = "in"         # Left, node, right (ascending)
    POST_ORDER = "post"     # Left, right, node
    LEVEL_ORDER = "level"   # Breadth-first, left before right
    ASCENDING = "in"        # Alias of IN_ORDER


@dataclass
class TreeConfig:
    """Complete configuration for a search tree.

    Trees built without a config use ``TreeConfig()``: iterative strategy,
    silent outcomes and in-order iteration.
    """

    # Node algebra
    strategy: Strategy = Strategy.ITERATIVE

    # Reporting of duplicate/missing/empty outcomes
    policy: OutcomePolicy = field(default_factory=SilentPolicy)

    # Order used by iter(tree) and traverse() without arguments
    default_order: TraversalOrder = TraversalOrder.IN_ORDER

    @classmethod
    def strict(cls, strategy: Union[Strategy, str] = Strategy.ITERATIVE) -> 'TreeConfig':
        """Create config that raises on duplicates and missing values.

        Args:
            strategy: Node algebra to use

        Returns:
            TreeConfig using StrictPolicy
        """
        return cls(strategy=parse_strategy(strategy), policy=StrictPolicy())

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, Strategy):
            errors.append(f"strategy must be a Strategy, got {self.strategy!r}")

        if not isinstance(self.policy, OutcomePolicy):
            errors.append(f"policy must be an OutcomePolicy, got {self.policy!r}")

        if not isinstance(self.default_order, TraversalOrder):
            errors.append(f"default_order must be a TraversalOrder, got {self.default_order!r}")

        return errors


def parse_strategy(strategy: Union[Strategy, str]) -> Strategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        Strategy enum value
    """
    if isinstance(strategy, Strategy):
        return strategy

    strategy_map = {
        'iterative': Strategy.ITERATIVE,
        'iter': Strategy.ITERATIVE,
        'loop': Strategy.ITERATIVE,
        'recursive': Strategy.RECURSIVE,
        'rec': Strategy.RECURSIVE,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown tree strategy: {strategy}")


def parse_order(order: Optional[Union[TraversalOrder, str]]) -> Optional[TraversalOrder]:
    """Parse traversal order from string or enum.

    Args:
        order: Order as enum, string or None

    Returns:
        TraversalOrder enum value, or None if order was None
    """
    if order is None or isinstance(order, TraversalOrder):
        return order

    order_map = {
        'pre': TraversalOrder.PRE_ORDER,
        'pre_order': TraversalOrder.PRE_ORDER,
        'preorder': TraversalOrder.PRE_ORDER,
        'in': TraversalOrder.IN_ORDER,
        'in_order': TraversalOrder.IN_ORDER,
        'inorder': TraversalOrder.IN_ORDER,
        'asc': TraversalOrder.IN_ORDER,
        'ascending': TraversalOrder.IN_ORDER,
        'sorted': TraversalOrder.IN_ORDER,
        'post': TraversalOrder.POST_ORDER,
        'post_order': TraversalOrder.POST_ORDER,
        'postorder': TraversalOrder.POST_ORDER,
        'level': TraversalOrder.LEVEL_ORDER,
        'level_order': TraversalOrder.LEVEL_ORDER,
        'bfs': TraversalOrder.LEVEL_ORDER,
    }

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in order_map:
        return order_map[order_lower]

    raise ValueError(f"Unknown traversal order: {order}")
