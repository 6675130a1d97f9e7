"""
Outcome policies for searchtreelib.

The node algebra reports duplicate inserts and missing values as outcomes.
A tree hands each non-success outcome to its policy, which decides whether
the caller just gets ``False``/``None`` back, or whether something else
happens (an exception, a recorded event, a log line).
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .errors import DuplicateValueError, EmptyTreeError, SearchTreeError, ValueNotFoundError

logger = logging.getLogger(__name__)


class OutcomePolicy(ABC):
    """
    Base class for outcome policies.

    Subclasses implement different strategies for reporting the two
    recoverable outcomes (duplicate, not found) plus extraction from an
    empty tree. Hooks are called after the tree has confirmed that nothing
    was mutated.
    """

    @abstractmethod
    def on_duplicate(self, value: Any) -> None:
        """Called when ``insert`` was rejected because ``value`` exists."""
        pass

    @abstractmethod
    def on_missing(self, value: Any) -> None:
        """Called when ``remove`` found no node holding ``value``."""
        pass

    @abstractmethod
    def on_empty(self, operation: str) -> None:
        """Called when ``remove_min``/``remove_max`` ran on an empty tree."""
        pass


class SilentPolicy(OutcomePolicy):
    """
    Policy that reports nothing.

    This is the default: the caller sees ``False`` from insert/remove and
    ``None`` from remove_min/remove_max, and that's it.
    """

    def on_duplicate(self, value: Any) -> None:
        pass

    def on_missing(self, value: Any) -> None:
        pass

    def on_empty(self, operation: str) -> None:
        pass


class StrictPolicy(OutcomePolicy):
    """
    Policy that raises on every non-success outcome.

    Useful when a duplicate or a missing value means the calling code has
    a bug and silently carrying on would hide it.
    """

    def on_duplicate(self, value: Any) -> None:
        raise DuplicateValueError(value)

    def on_missing(self, value: Any) -> None:
        raise ValueNotFoundError(value)

    def on_empty(self, operation: str) -> None:
        raise EmptyTreeError(operation)


class RecordingPolicy(OutcomePolicy):
    """
    Policy that records events and carries on.

    Events are collected for later inspection. With ``verbose=True`` each
    event is also logged as a warning.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize the policy.

        Args:
            verbose: If True, log a warning for every recorded event
        """
        self.events: List[Dict[str, Any]] = []
        self.verbose = verbose

    def on_duplicate(self, value: Any) -> None:
        self._record("duplicate", "insert", value)

    def on_missing(self, value: Any) -> None:
        self._record("missing", "remove", value)

    def on_empty(self, operation: str) -> None:
        self._record("empty", operation, None)

    def _record(self, kind: str, operation: str, value: Any) -> None:
        self.events.append({
            'kind': kind,
            'operation': operation,
            'value': value,
        })
        if self.verbose:
            if kind == "empty":
                logger.warning("%s() called on empty tree", operation)
            else:
                logger.warning("%s(%r) had no effect: value %s", operation, value, kind)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get counts of recorded events.

        Returns:
            Dictionary with per-kind counts and the full event list
        """
        return {
            'total_events': len(self.events),
            'duplicates': sum(1 for e in self.events if e['kind'] == 'duplicate'),
            'missing': sum(1 for e in self.events if e['kind'] == 'missing'),
            'empty': sum(1 for e in self.events if e['kind'] == 'empty'),
            'events': self.events,
        }

    def clear(self) -> None:
        self.events.clear()


class ThresholdPolicy(OutcomePolicy):
    """
    Policy that tolerates rejections up to a threshold, then fails.

    Useful when a few duplicates are expected in bulk input but many of
    them indicate the input is wrong.
    """

    def __init__(self, max_events: int = 10):
        """
        Initialize threshold policy.

        Args:
            max_events: Number of rejections tolerated before raising
        """
        if max_events < 0:
            raise ValueError("max_events must be >= 0")
        self.max_events = max_events
        self.event_count = 0

    def on_duplicate(self, value: Any) -> None:
        self._count(DuplicateValueError(value))

    def on_missing(self, value: Any) -> None:
        self._count(ValueNotFoundError(value))

    def on_empty(self, operation: str) -> None:
        self._count(EmptyTreeError(operation))

    def _count(self, error: SearchTreeError) -> None:
        self.event_count += 1
        if self.event_count > self.max_events:
            raise SearchTreeError(
                f"Rejection threshold exceeded ({self.max_events} events)"
            ) from error
        logger.debug("Tolerated rejection %d/%d: %s",
                     self.event_count, self.max_events, error)


def create_policy(name: str, **kwargs) -> OutcomePolicy:
    """Create a policy instance by name.

    Args:
        name: One of silent, strict, record, threshold
        **kwargs: Passed to the policy constructor

    Returns:
        OutcomePolicy instance

    Raises:
        ValueError: If the policy name is not recognized
    """
    policies = {
        'silent': SilentPolicy,
        'strict': StrictPolicy,
        'record': RecordingPolicy,
        'recording': RecordingPolicy,
        'threshold': ThresholdPolicy,
    }

    name_lower = name.lower()
    if name_lower not in policies:
        raise ValueError(
            f"Unknown outcome policy: {name}. "
            f"Choose from: {', '.join(policies.keys())}"
        )

    return policies[name_lower](**kwargs)
