from __future__ import annotations

"""
Unit tests for the Directory Tree Walker.
"""

from shelltree.core.analysis.walker import (
    directory_sizes,
    fold_directories,
    iter_directories,
    tree_depth,
)
from shelltree.domain.tree_models import Directory


def test_iter_directories_is_pre_order_in_listing_order(sample_tree):
    assert [d.name for d in iter_directories(sample_tree)] == ["/", "a", "e", "d"]


def test_iter_directories_visits_each_node_once(sample_tree):
    nodes = list(iter_directories(sample_tree))
    assert len(nodes) == len({id(n) for n in nodes}) == 4


def test_fold_threads_accumulator(sample_tree):
    names = fold_directories(sample_tree, lambda acc, d: acc + [d.name], [])
    assert names == ["/", "a", "e", "d"]


def test_directory_sizes(sample_tree):
    assert directory_sizes(sample_tree) == [48381165, 94853, 584, 24933642]


def test_walker_handles_depth_beyond_recursion_limit():
    node = Directory("leaf")
    for i in range(5000):
        node = Directory(f"d{i}", subdirectories=[node])

    assert fold_directories(node, lambda acc, _d: acc + 1, 0) == 5001


def test_tree_depth(sample_tree):
    assert tree_depth(sample_tree) == 3
    assert tree_depth(Directory("/")) == 1
