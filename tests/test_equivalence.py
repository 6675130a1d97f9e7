"""Property tests: both strategies against each other and against a set model."""

import random

import pytest
from hypothesis import given, settings, strategies as st

from searchtreelib import IterativeBST, RecursiveBST
from searchtreelib.testing import TreeInspector

BOTH = pytest.mark.parametrize("cls", [IterativeBST, RecursiveBST],
                               ids=["iterative", "recursive"])

values = st.integers(min_value=-50, max_value=50)

operations = st.lists(
    st.one_of(
        st.tuples(st.just("insert"), values),
        st.tuples(st.just("remove"), values),
        st.tuples(st.just("remove_min"), st.none()),
        st.tuples(st.just("remove_max"), st.none()),
    ),
    max_size=80,
)


def apply(tree, operation, value):
    if value is None:
        return getattr(tree, operation)()
    return getattr(tree, operation)(value)


@BOTH
@given(xs=st.lists(values))
def test_in_order_is_sorted_and_deduplicated(cls, xs):
    tree = cls(xs)
    assert tree.asc_order_list() == sorted(set(xs))
    assert tree.size() == len(set(xs))
    assert TreeInspector(tree).violations() == []


@BOTH
@given(xs=st.lists(values))
def test_into_sorted_list_round_trip(cls, xs):
    assert cls(xs).into_sorted_list() == sorted(set(xs))


@BOTH
@given(xs=st.lists(values))
def test_traversals_are_permutations(cls, xs):
    tree = cls(xs)
    expected = sorted(set(xs))
    for walk in (tree.pre_order_list, tree.post_order_list, tree.level_order_list):
        assert sorted(walk()) == expected


@BOTH
@given(xs=st.lists(values, unique=True, min_size=1))
def test_pre_order_rebuilds_same_shape(cls, xs):
    tree = cls(xs)
    rebuilt = cls(tree.pre_order_list())
    assert TreeInspector(rebuilt).shape() == TreeInspector(tree).shape()


@BOTH
@given(xs=st.lists(values, min_size=1))
def test_height_bounds(cls, xs):
    tree = cls(xs)
    size = tree.size()
    assert size.bit_length() - 1 <= tree.height() <= size - 1


@BOTH
@given(xs=st.lists(values), ops=operations)
def test_matches_set_model(cls, xs, ops):
    tree = cls(xs)
    model = set(xs)
    for operation, value in ops:
        result = apply(tree, operation, value)
        if operation == "insert":
            assert result == (value not in model)
            model.add(value)
        elif operation == "remove":
            assert result == (value in model)
            model.discard(value)
        elif operation == "remove_min":
            assert result == (min(model) if model else None)
            model.discard(result)
        else:
            assert result == (max(model) if model else None)
            model.discard(result)
        assert tree.size() == len(model)
    assert tree.asc_order_list() == sorted(model)
    assert tree.min() == (min(model) if model else None)
    assert tree.max() == (max(model) if model else None)
    assert TreeInspector(tree).violations() == []


@given(xs=st.lists(values), ops=operations)
def test_strategies_agree_step_by_step(xs, ops):
    iterative = IterativeBST(xs)
    recursive = RecursiveBST(xs)
    for operation, value in ops:
        assert apply(iterative, operation, value) == apply(recursive, operation, value)
        assert TreeInspector(iterative).shape() == TreeInspector(recursive).shape()
    assert iterative.height() == recursive.height()
    assert iterative.level_order_list() == recursive.level_order_list()
    assert iterative.post_order_list() == recursive.post_order_list()


@settings(max_examples=50)
@given(xs=st.lists(values))
def test_consuming_matches_borrowing(xs):
    for cls in (IterativeBST, RecursiveBST):
        for order in ("pre", "in", "post", "level"):
            tree = cls(xs)
            borrowed = list(tree.traverse(order))
            assert list(tree.into_traverse(order)) == borrowed


@BOTH
def test_seeded_random_workload(cls):
    rng = random.Random(20240601)
    tree = cls()
    model = set()
    for _ in range(2000):
        value = rng.randrange(500)
        if rng.random() < 0.6:
            assert tree.insert(value) == (value not in model)
            model.add(value)
        else:
            assert tree.remove(value) == (value in model)
            model.discard(value)
    assert tree.asc_order_list() == sorted(model)
    assert TreeInspector(tree).violations() == []
