"""Local outcomes reported by the node algebra.

The algebra never raises for a duplicate insert or a missing value. It
reports one of these outcomes and lets the container decide what to do.
"""

from enum import Enum


class InsertOutcome(Enum):
    """Result of inserting a value."""
    INSERTED = "inserted"   # New leaf created
    REJECTED = "rejected"   # Value already present, tree untouched

    @property
    def succeeded(self) -> bool:
        return self is InsertOutcome.INSERTED


class RemoveOutcome(Enum):
    """Result of removing a value."""
    REMOVED = "removed"       # Value unlinked or spliced out
    NOT_FOUND = "not_found"   # Value absent, tree untouched

    @property
    def succeeded(self) -> bool:
        return self is RemoveOutcome.REMOVED
