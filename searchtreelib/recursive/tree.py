"""Recursive search tree for searchtreelib."""

from typing import TypeVar

from .._common.config import Strategy
from .._common.tree import BinarySearchTree
from .algebra import RecursiveNodeAlgebra

T = TypeVar("T")


class RecursiveBST(BinarySearchTree[T]):
    """Binary search tree backed by the recursive node algebra.

    Results are identical to IterativeBST. Point operations and traversals
    recurse once per level, so a chain longer than ``sys.getrecursionlimit()``
    (sorted input, for example) raises RecursionError. ``clear()`` and the
    level-order drain are always iterative.
    """

    strategy = Strategy.RECURSIVE
    algebra = RecursiveNodeAlgebra()
