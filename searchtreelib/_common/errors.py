"""Exception hierarchy for searchtreelib.

None of these are raised by the default configuration for duplicates or
missing values; those are reported as outcomes. They exist for
StrictPolicy-style reporting, consumed trees and bad configuration.
"""


class SearchTreeError(Exception):
    """Base exception for all searchtreelib errors."""
    pass


class DuplicateValueError(SearchTreeError):
    """Raised when a policy refuses a duplicate insert."""

    def __init__(self, value):
        super().__init__(f"Value already present: {value!r}")
        self.value = value


class ValueNotFoundError(SearchTreeError, KeyError):
    """Raised when a policy refuses to ignore a missing value."""

    def __init__(self, value):
        super().__init__(f"Value not found: {value!r}")
        self.value = value

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class EmptyTreeError(SearchTreeError):
    """Raised when a policy refuses an extraction from an empty tree."""

    def __init__(self, operation: str):
        super().__init__(f"{operation}() on empty tree")
        self.operation = operation


class ConsumedTreeError(SearchTreeError):
    """Raised when a tree is used after a consuming traversal drained it."""
    pass


class ConfigurationError(SearchTreeError):
    """Raised when a TreeConfig fails validation."""
    pass
