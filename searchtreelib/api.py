"""High-level API for searchtreelib.

This module provides simple functional entry points for building trees.
They wrap the class constructors so callers can pick a strategy by name.
"""

from typing import Any, Dict, Iterable, Optional, Type, Union

from ._common.config import Strategy, TreeConfig, parse_strategy
from ._common.errors import ConfigurationError
from ._common.tree import BinarySearchTree
from .iterative import IterativeBST
from .recursive import RecursiveBST

_TREE_CLASSES: Dict[Strategy, Type[BinarySearchTree]] = {
    Strategy.ITERATIVE: IterativeBST,
    Strategy.RECURSIVE: RecursiveBST,
}


def tree_class(strategy: Union[Strategy, str]) -> Type[BinarySearchTree]:
    """Return the tree class implementing ``strategy``."""
    return _TREE_CLASSES[parse_strategy(strategy)]


def create_tree(
    strategy: Union[Strategy, str] = Strategy.ITERATIVE,
    values: Iterable[Any] = (),
    config: Optional[TreeConfig] = None,
) -> BinarySearchTree:
    """Create a tree for a strategy name.

    Args:
        strategy: Strategy as enum or string (iterative, recursive)
        values: Values to insert in order; duplicates are dropped
        config: Optional config; its strategy must match ``strategy``

    Returns:
        IterativeBST or RecursiveBST

    Example:
        >>> tree = create_tree("recursive", [4, 6, 2])
        >>> tree.level_order_list()
        [4, 2, 6]
    """
    strategy = parse_strategy(strategy)
    if config is not None and config.strategy is not strategy:
        raise ConfigurationError(
            f"strategy {strategy.value!r} conflicts with config strategy "
            f"{config.strategy.value!r}"
        )
    return _TREE_CLASSES[strategy](values, config=config)


def tree_from_config(config: TreeConfig, values: Iterable[Any] = ()) -> BinarySearchTree:
    """Create a tree using the strategy named by ``config``."""
    errors = config.validate()
    if errors:
        raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")
    return _TREE_CLASSES[config.strategy](values, config=config)


def bst(*values: Any, strategy: Union[Strategy, str] = Strategy.ITERATIVE) -> BinarySearchTree:
    """Literal construction: ``bst(3, 2, 5)``.

    Sugar for inserting each value in argument order.
    """
    return create_tree(strategy, values)
