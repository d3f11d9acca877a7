from __future__ import annotations

"""
Directory Tree Walker.

Iterative traversal helpers over a built Directory tree. An explicit work
stack replaces recursion so traversal cost never depends on the interpreter
call-stack limit.
"""

from typing import Callable, Iterator, List, Tuple, TypeVar

from shelltree.domain.tree_models import Directory

T = TypeVar("T")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def iter_directories(root: Directory) -> Iterator[Directory]:
    """
    Yield every directory of the tree in pre-order.

    Siblings are visited in the order the transcript listed them.

    Args:
        root: Tree to traverse.

    Yields:
        Directory: Each node exactly once, root first.
    """
    stack: List[Directory] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.subdirectories))


def fold_directories(
        root: Directory,
        func: Callable[[T, Directory], T],
        initial: T,
) -> T:
    """
    Reduce the tree to a single value.

    Args:
        root: Tree to traverse.
        func: Combines the running accumulator with one directory.
        initial: Starting accumulator.

    Returns:
        T: The final accumulator after every directory was visited.
    """
    acc = initial
    for node in iter_directories(root):
        acc = func(acc, node)
    return acc


def directory_sizes(root: Directory) -> List[int]:
    """Collect the total size of every directory in pre-order."""
    return [node.total_size for node in iter_directories(root)]


def tree_depth(root: Directory) -> int:
    """Number of levels in the tree, the root counting as 1."""
    deepest = 0
    stack: List[Tuple[Directory, int]] = [(root, 1)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in node.subdirectories)
    return deepest
