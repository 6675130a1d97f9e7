"""Shared pytest configuration for the searchtreelib test suite."""

import pytest

from searchtreelib import IterativeBST, RecursiveBST

# Insertion order used throughout: a complete tree of height 2
#         4
#       /   \
#      2     6
#     / \   / \
#    1   3 5   7
BALANCED_SEVEN = [4, 6, 2, 7, 5, 3, 1]


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running tests (run with -m slow)")


@pytest.fixture(params=[IterativeBST, RecursiveBST], ids=["iterative", "recursive"])
def tree_cls(request):
    """Each test using this fixture runs once per strategy."""
    return request.param


@pytest.fixture
def seven(tree_cls):
    return tree_cls(BALANCED_SEVEN)
