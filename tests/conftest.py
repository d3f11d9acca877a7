from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures holding the canonical seven-directory transcript and
   the tree it describes.
"""

import os
import sys

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from shelltree.domain.tree_models import Directory, File  # noqa: E402

SAMPLE_TRANSCRIPT = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_transcript() -> str:
    """Return the canonical transcript describing directories /, a, e and d."""
    return SAMPLE_TRANSCRIPT


@pytest.fixture
def sample_tree() -> Directory:
    """
    Return the tree described by the canonical transcript, built by hand.

    Structure:
    /
      b.txt, c.dat
      /a
        f, g, h.lst
        /e
          i
      /d
        j, d.log, d.ext, k
    """
    e = Directory("e", [File("i", 584)])
    a = Directory("a", [File("f", 29116), File("g", 2557), File("h.lst", 62596)], [e])
    d = Directory(
        "d",
        [
            File("j", 4060174),
            File("d.log", 8033020),
            File("d.ext", 5626152),
            File("k", 7214296),
        ],
    )
    return Directory("/", [File("b.txt", 14848514), File("c.dat", 8504156)], [a, d])
