"""Iterative search tree for searchtreelib."""

from typing import TypeVar

from .._common.config import Strategy
from .._common.tree import BinarySearchTree
from .algebra import IterativeNodeAlgebra

T = TypeVar("T")


class IterativeBST(BinarySearchTree[T]):
    """Binary search tree backed by the loop-based node algebra.

    Stack usage stays constant however unbalanced the tree gets, which is
    why this is the strategy to prefer.

    Example:
        >>> tree = IterativeBST([4, 6, 2])
        >>> tree.insert(4)
        False
        >>> tree.pre_order_list()
        [4, 2, 6]
    """

    strategy = Strategy.ITERATIVE
    algebra = IterativeNodeAlgebra()
