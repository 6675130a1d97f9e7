"""Recursive implementation of searchtreelib.

Every structural operation descends by calling itself on a child link.
Behaves exactly like the iterative implementation, but uses one stack
frame per tree level.
"""

from .algebra import RecursiveNodeAlgebra
from .tree import RecursiveBST

__all__ = [
    'RecursiveNodeAlgebra',
    'RecursiveBST',
]
