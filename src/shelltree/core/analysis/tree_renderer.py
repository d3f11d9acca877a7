from __future__ import annotations

"""
Tree Renderer.

Converts a Directory tree into an ASCII representation annotated with
sizes. Entries keep their transcript order: files first, then
subdirectories, as each `ls` block and its nested `cd` blocks appear.
"""

from typing import List, Optional

from shelltree.domain.tree_models import Directory

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: Directory) -> List[str]:
    """
    Render the whole tree, root line included.

    Returns:
        List[str]: Visual lines of the tree.
    """
    lines = [f"{root.name} (dir, size={root.total_size})"]
    render_tree_structure(root, lines)
    return lines


def render_tree_structure(
        directory: Directory,
        lines: Optional[List[str]] = None,
        prefix: str = "",
) -> List[str]:
    """
    Recursively append the children of `directory` to `lines`.

    Uses standard ASCII connectors (├──, └──) and manages indentation
    levels for nested directories.

    Args:
        directory: Node whose entries are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.

    Returns:
        List[str]: The accumulator.
    """
    if lines is None:
        lines = []

    entries = list(directory.files) + list(directory.subdirectories)
    total = len(entries)

    for i, node in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        if isinstance(node, Directory):
            lines.append(f"{prefix}{connector}{node.name} (dir, size={node.total_size})")
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree_structure(node, lines, prefix=new_prefix)
            continue

        lines.append(f"{prefix}{connector}{node.name} (file, size={node.size})")

    return lines
