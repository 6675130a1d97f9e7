"""Testing utilities for searchtreelib consumers."""

from .fixtures import TreeInspector

__all__ = ['TreeInspector']
