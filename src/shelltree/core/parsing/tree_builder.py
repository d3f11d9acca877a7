from __future__ import annotations

"""
Transcript Tree Builder.

Reconstructs the directory hierarchy from a transcript of `cd` and `ls`
commands. The transcript is a pre-order walk of the tree with explicit
ascent markers, so each call of the directory rule owns exactly one
`cd <name>` ... `cd ..` bracket and recurses once per nested `cd <name>`.
Recursion depth therefore equals directory nesting depth and is capped by
`max_depth`, itself never above what the interpreter stack can hold.
"""

import logging
import sys
from typing import List, Tuple

from shelltree.core.analysis.walker import fold_directories, tree_depth
from shelltree.core.parsing.listing import parse_listing, parse_ls_command
from shelltree.core.parsing.primitives import (
    at_end,
    horizontal_space,
    rest_of_line,
    skip_blank_lines,
    tag,
)
from shelltree.domain.constants import ASCENT_MARKER, CD_COMMAND, DEFAULT_MAX_DEPTH
from shelltree.domain.errors import ParseError
from shelltree.domain.tree_models import Directory

logger = logging.getLogger(__name__)

_cd_tag = tag(CD_COMMAND)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def max_supported_depth() -> int:
    """Deepest nesting the recursive parser can handle on this interpreter."""
    return sys.getrecursionlimit() // 2


def parse_tree(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Directory:
    """
    Parse a complete transcript into its root Directory.

    Leading and trailing blank lines are ignored. Any other input left over
    once the root block is closed is an error.

    Args:
        text: Full transcript, starting with `$ cd <root>`.
        max_depth: Maximum directory nesting accepted, the root counting as 1.
                   Values above `max_supported_depth()` are lowered to it.

    Returns:
        Directory: Root of the reconstructed tree, sizes already aggregated.

    Raises:
        ParseError: On any grammar violation. No partial tree is produced.
    """
    limit = min(max_depth, max_supported_depth())
    if limit < max_depth:
        logger.debug(f"Nesting limit {max_depth} lowered to {limit}")

    pos = skip_blank_lines(text, 0)
    root, pos = parse_directory(text, pos, depth=1, max_depth=limit)

    pos = skip_blank_lines(text, pos)
    if not at_end(text, pos):
        raise ParseError(text, pos, "end of input")

    count = fold_directories(root, lambda acc, _d: acc + 1, 0)
    logger.debug(
        f"Transcript parsed: {count} directories, depth {tree_depth(root)}, "
        f"root '{root.name}' totals {root.total_size}"
    )
    return root


def parse_directory(
        text: str,
        pos: int,
        depth: int = 1,
        max_depth: int = DEFAULT_MAX_DEPTH,
) -> Tuple[Directory, int]:
    """
    Parse one `cd <name>` block, its listing and all nested blocks.

    The block ends at its own `cd ..` (consumed) or at the end of input.

    Args:
        text: Full transcript.
        pos: Offset of the `$ cd <name>` line opening this block.
        depth: Nesting level of the directory being parsed.
        max_depth: Nesting ceiling; exceeding it is a parse failure.

    Returns:
        Tuple[Directory, int]: The assembled node and the offset after its block.
    """
    if depth > max_depth:
        raise ParseError(text, pos, f"at most {max_depth} nested directories")

    name, pos = _parse_cd_into(text, pos)
    _, pos = parse_ls_command(text, pos)
    files, pos = parse_listing(text, pos)

    subdirectories: List[Directory] = []
    while True:
        rest = skip_blank_lines(text, pos)
        if at_end(text, rest):
            pos = rest
            break

        # Lookahead: only a non-ascent cd opens a nested block
        target, after_cd = _parse_cd_line(text, pos)
        if target == ASCENT_MARKER:
            pos = after_cd
            break

        child, pos = parse_directory(text, pos, depth + 1, max_depth)
        subdirectories.append(child)

    return Directory(name=name, files=files, subdirectories=subdirectories), pos

# -----------------------------------------------------------------------------
# COMMAND RULES
# -----------------------------------------------------------------------------

def _parse_cd_line(text: str, pos: int) -> Tuple[str, int]:
    """Consume a `$ cd <target>` line and return its target."""
    try:
        _, p = _cd_tag(text, pos)
        _, p = horizontal_space(text, p)
    except ParseError:
        raise ParseError(text, pos, "'$ cd <name>'") from None

    target, nxt = rest_of_line(text, p)
    target = target.rstrip()
    if not target:
        raise ParseError(text, p, "a directory name")
    return target, nxt


def _parse_cd_into(text: str, pos: int) -> Tuple[str, int]:
    """Consume a `$ cd <name>` line whose target is not the ascent marker."""
    name, nxt = _parse_cd_line(text, pos)
    if name == ASCENT_MARKER:
        raise ParseError(text, pos, "'$ cd <name>' entering a directory")
    return name, nxt
