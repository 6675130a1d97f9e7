"""Iterative implementation of searchtreelib.

Every structural operation is a loop over child links with explicit
stacks and queues. This is the default strategy.
"""

from .algebra import IterativeNodeAlgebra
from .tree import IterativeBST

__all__ = [
    'IterativeNodeAlgebra',
    'IterativeBST',
]
