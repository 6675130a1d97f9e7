"""Common components shared between the iterative and recursive strategies.

This internal package contains everything that does not depend on how the
node algebra walks the tree. It should NOT be imported directly by users.

Components here include:
- Node storage and the three-way compare
- Outcomes, errors and outcome policies
- Configuration classes (TreeConfig)
- The NodeAlgebra contract and the container base class
- Traversal cursors

Important: This package must NEVER import from iterative or recursive to
avoid circular dependencies.
"""

from .node import Node, Link, ValueHandle, compare
from .outcomes import InsertOutcome, RemoveOutcome
from .errors import (
    SearchTreeError,
    DuplicateValueError,
    ValueNotFoundError,
    EmptyTreeError,
    ConsumedTreeError,
    ConfigurationError,
)
from .policies import (
    OutcomePolicy,
    SilentPolicy,
    StrictPolicy,
    RecordingPolicy,
    ThresholdPolicy,
    create_policy,
)
from .config import (
    Strategy,
    TraversalOrder,
    TreeConfig,
    parse_strategy,
    parse_order,
)
from .algebra import NodeAlgebra
from .cursor import TraversalCursor, ConsumingCursor
from .tree import BinarySearchTree

__all__ = [
    'Node',
    'Link',
    'ValueHandle',
    'compare',
    'InsertOutcome',
    'RemoveOutcome',
    'SearchTreeError',
    'DuplicateValueError',
    'ValueNotFoundError',
    'EmptyTreeError',
    'ConsumedTreeError',
    'ConfigurationError',
    'OutcomePolicy',
    'SilentPolicy',
    'StrictPolicy',
    'RecordingPolicy',
    'ThresholdPolicy',
    'create_policy',
    'Strategy',
    'TraversalOrder',
    'TreeConfig',
    'parse_strategy',
    'parse_order',
    'NodeAlgebra',
    'TraversalCursor',
    'ConsumingCursor',
    'BinarySearchTree',
]
