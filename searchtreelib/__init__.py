"""searchtreelib - Unbalanced binary search trees, two ways.

searchtreelib provides an ordered, duplicate-free container backed by a
plain binary search tree, with insertion, lookup, deletion, min/max
extraction and pre/in/post/level order traversals.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Iterative (recommended):
    from searchtreelib.iterative import IterativeBST

Recursive:
    from searchtreelib.recursive import RecursiveBST
━━━━━━━━━━━━━━━━━━━━━━━━━━

Both implementations give identical results for identical operations.
The recursive one uses a stack frame per tree level, so deep unbalanced
trees can exhaust the interpreter's recursion limit.
"""

__version__ = "0.1.0"

from . import iterative
from . import recursive

from .iterative import IterativeBST
from .recursive import RecursiveBST
from ._common import (
    BinarySearchTree,
    TreeConfig,
    Strategy,
    TraversalOrder,
    InsertOutcome,
    RemoveOutcome,
    ValueHandle,
    TraversalCursor,
    ConsumingCursor,
    OutcomePolicy,
    SilentPolicy,
    StrictPolicy,
    RecordingPolicy,
    ThresholdPolicy,
    SearchTreeError,
    DuplicateValueError,
    ValueNotFoundError,
    EmptyTreeError,
    ConsumedTreeError,
    ConfigurationError,
)
from .api import create_tree, tree_from_config, tree_class, bst

__all__ = [
    "__version__",
    "iterative",
    "recursive",
    # Trees
    "BinarySearchTree",
    "IterativeBST",
    "RecursiveBST",
    # Config
    "TreeConfig",
    "Strategy",
    "TraversalOrder",
    # Results
    "InsertOutcome",
    "RemoveOutcome",
    "ValueHandle",
    "TraversalCursor",
    "ConsumingCursor",
    # Policies
    "OutcomePolicy",
    "SilentPolicy",
    "StrictPolicy",
    "RecordingPolicy",
    "ThresholdPolicy",
    # Errors
    "SearchTreeError",
    "DuplicateValueError",
    "ValueNotFoundError",
    "EmptyTreeError",
    "ConsumedTreeError",
    "ConfigurationError",
    # API
    "create_tree",
    "tree_from_config",
    "tree_class",
    "bst",
]
