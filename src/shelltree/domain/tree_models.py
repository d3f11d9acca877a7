from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the immutable recursive node types reconstructed from a shell
transcript. Every Directory carries the total size of its subtree, fixed
at construction time from its own files and its already-built children.
"""

from dataclasses import dataclass, field
from typing import Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class File:
    """
    Represents a leaf entry (file) reported by an `ls` listing.

    Attributes:
        name: Entry name exactly as printed in the listing.
        size: Size in bytes.
    """
    name: str
    size: int


@dataclass(frozen=True)
class Directory:
    """
    Represents a directory node and the subtree it exclusively owns.

    Files and subdirectories keep the order in which the transcript
    reported them. Entries sharing a name are kept as distinct entries.

    Attributes:
        name: Directory name taken from the `cd <name>` command.
        files: Files listed directly inside this directory.
        subdirectories: Child directories, in the order they were visited.
        total_size: Sum of every file size in the subtree.
    """
    name: str
    files: Tuple[File, ...] = ()
    subdirectories: Tuple["Directory", ...] = ()
    total_size: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        # Accept any sequence from callers but store tuples only
        object.__setattr__(self, "files", tuple(self.files))
        object.__setattr__(self, "subdirectories", tuple(self.subdirectories))

        total = self.own_size + sum(d.total_size for d in self.subdirectories)
        object.__setattr__(self, "total_size", total)

    @property
    def own_size(self) -> int:
        """Size of the files listed directly in this directory."""
        return sum(f.size for f in self.files)

