from __future__ import annotations

"""
Unit tests for the Size Query Engine.

Verifies the bounded-sum and minimal-sufficient queries, deficit
computation, idempotence and the invariant failure path.
"""

import pytest

from shelltree.core.analysis.queries import bounded_sum, compute_deficit, minimal_sufficient
from shelltree.domain.errors import StructuralInvariantError
from shelltree.domain.tree_models import Directory, File


def test_bounded_sum_canonical_example(sample_tree):
    assert bounded_sum(sample_tree, 100000) == 95437


def test_bounded_sum_ceiling_is_exclusive():
    tree = Directory("/", [File("a", 10)])
    assert bounded_sum(tree, 10) == 0
    assert bounded_sum(tree, 11) == 10


def test_bounded_sum_includes_root_and_counts_nested_twice():
    tree = Directory("/", [File("a", 1)], [Directory("x", [File("b", 2)])])
    assert bounded_sum(tree, 100) == 3 + 2


def test_compute_deficit():
    assert compute_deficit(48381165, 70000000, 30000000) == 8381165
    assert compute_deficit(100, 70000000, 30000000) == 0


def test_minimal_sufficient_canonical_example(sample_tree):
    deficit = compute_deficit(sample_tree.total_size, 70000000, 30000000)
    assert minimal_sufficient(sample_tree, deficit) == 24933642


def test_minimal_sufficient_exact_match_qualifies(sample_tree):
    assert minimal_sufficient(sample_tree, 94853) == 94853


def test_minimal_sufficient_zero_deficit_returns_smallest(sample_tree):
    assert minimal_sufficient(sample_tree, 0) == 584


def test_minimal_sufficient_without_candidate_raises(sample_tree):
    with pytest.raises(StructuralInvariantError):
        minimal_sufficient(sample_tree, sample_tree.total_size + 1)


def test_queries_are_idempotent(sample_tree):
    first = (bounded_sum(sample_tree, 100000), minimal_sufficient(sample_tree, 8381165))
    second = (bounded_sum(sample_tree, 100000), minimal_sufficient(sample_tree, 8381165))
    assert first == second
