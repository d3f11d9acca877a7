from __future__ import annotations

"""
Listing Parser.

Consumes the output block of an `ls` command. File entries are captured
in order; `dir <name>` entries are recognized and dropped because their
content is rediscovered when the transcript descends into them.
"""

import logging
from typing import List, Optional, Tuple

from shelltree.core.parsing.primitives import (
    at_end,
    horizontal_space,
    peek_line,
    rest_of_line,
    tag,
    unsigned_int,
)
from shelltree.domain.constants import COMMAND_PROMPT, DIR_PREFIX, LS_COMMAND
from shelltree.domain.errors import ParseError
from shelltree.domain.tree_models import File

logger = logging.getLogger(__name__)

_ls_tag = tag(LS_COMMAND)
_dir_tag = tag(DIR_PREFIX)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_ls_command(text: str, pos: int) -> Tuple[None, int]:
    """
    Consume the `$ ls` command line.

    Raises:
        ParseError: If the line at the cursor is not exactly `$ ls`.
    """
    _, pos = _ls_tag(text, pos)
    trailing, nxt = rest_of_line(text, pos)
    if trailing.strip():
        raise ParseError(text, pos, "end of line after '$ ls'")
    return None, nxt


def parse_listing(text: str, pos: int) -> Tuple[Tuple[File, ...], int]:
    """
    Consume `ls` output lines until the next command or end of input.

    The line that ends the listing (a `$` command or a blank line) is left
    unconsumed.

    Args:
        text: Full transcript.
        pos: Offset of the first line after `$ ls`.

    Returns:
        Tuple[Tuple[File, ...], int]: Captured files in listing order and the
                                      offset of the first unconsumed line.

    Raises:
        ParseError: If a line is neither `dir <name>` nor `<size> <name>`.
    """
    files: List[File] = []
    while _listing_continues(text, pos):
        entry, pos = _parse_entry(text, pos)
        if entry is not None:
            files.append(entry)

    logger.debug(f"Listing captured {len(files)} file(s)")
    return tuple(files), pos

# -----------------------------------------------------------------------------
# ENTRY RULES
# -----------------------------------------------------------------------------

def _listing_continues(text: str, pos: int) -> bool:
    if at_end(text, pos) or text.startswith(COMMAND_PROMPT, pos):
        return False
    return bool(peek_line(text, pos).strip())


def _parse_entry(text: str, pos: int) -> Tuple[Optional[File], int]:
    """Try the file shape first, then backtrack to the directory shape."""
    try:
        return _parse_file(text, pos)
    except ParseError:
        pass

    try:
        return _parse_dir(text, pos)
    except ParseError:
        raise ParseError(text, pos, "'dir <name>' or '<size> <name>'") from None


def _parse_file(text: str, pos: int) -> Tuple[File, int]:
    size, p = unsigned_int(text, pos)
    _, p = horizontal_space(text, p)
    name, nxt = rest_of_line(text, p)
    if not name:
        raise ParseError(text, p, "a file name")
    return File(name=name, size=size), nxt


def _parse_dir(text: str, pos: int) -> Tuple[None, int]:
    _, p = _dir_tag(text, pos)
    _, p = horizontal_space(text, p)
    name, nxt = rest_of_line(text, p)
    if not name:
        raise ParseError(text, p, "a directory name")
    return None, nxt
