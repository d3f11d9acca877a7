from __future__ import annotations

"""
Size Query Engine.

Read-only aggregate queries over a built Directory tree. Each query walks
the whole tree once and never mutates it, so repeated calls agree.
"""

import logging

from shelltree.core.analysis.walker import directory_sizes, fold_directories
from shelltree.domain.errors import StructuralInvariantError
from shelltree.domain.tree_models import Directory

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def bounded_sum(root: Directory, ceiling: int) -> int:
    """
    Sum the sizes of all directories strictly smaller than `ceiling`.

    Nested directories are counted on their own and again inside every
    qualifying ancestor. The root is eligible.

    Args:
        root: Tree to query.
        ceiling: Exclusive upper bound on a directory's total size.

    Returns:
        int: Sum of the qualifying total sizes.
    """
    def _add_if_small(acc: int, node: Directory) -> int:
        return acc + node.total_size if node.total_size < ceiling else acc

    return fold_directories(root, _add_if_small, 0)


def compute_deficit(used: int, capacity: int, headroom: int) -> int:
    """
    Space that must be freed so that `headroom` bytes are available.

    Args:
        used: Space currently used (the root's total size).
        capacity: Total device capacity.
        headroom: Free space required.

    Returns:
        int: Bytes to free, clamped to zero when enough space is free.
    """
    return max(0, used - (capacity - headroom))


def minimal_sufficient(root: Directory, deficit: int) -> int:
    """
    Find the smallest directory whose deletion frees at least `deficit`.

    Args:
        root: Tree to query.
        deficit: Minimum total size a candidate must reach.

    Returns:
        int: Total size of the smallest qualifying directory.

    Raises:
        StructuralInvariantError: If no directory qualifies.
    """
    for size in sorted(directory_sizes(root)):
        if size >= deficit:
            return size

    logger.error(f"No directory reaches {deficit}; root totals {root.total_size}")
    raise StructuralInvariantError(
        f"No directory is at least {deficit} in size (root is {root.total_size})"
    )
