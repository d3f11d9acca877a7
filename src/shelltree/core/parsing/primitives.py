from __future__ import annotations

"""
Primitive Lexical Parsers.

Atomic recognizers shared by the listing and tree-building rules. Every
primitive takes the full transcript and a cursor offset, and returns the
recognized value together with the offset just past the consumed prefix.
A primitive that cannot match raises ParseError and consumes nothing.
"""

from typing import Callable, Tuple

from shelltree.domain.errors import ParseError

_HORIZONTAL_SPACE = " \t"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def at_end(text: str, pos: int) -> bool:
    """Return True when the cursor sits at the end of the transcript."""
    return pos >= len(text)


def unsigned_int(text: str, pos: int) -> Tuple[int, int]:
    """
    Consume an unsigned decimal integer.

    Raises:
        ParseError: If no digit is present at the cursor.
    """
    end = pos
    while end < len(text) and text[end] in "0123456789":
        end += 1
    if end == pos:
        raise ParseError(text, pos, "an unsigned integer")
    return int(text[pos:end]), end


def horizontal_space(text: str, pos: int) -> Tuple[str, int]:
    """Consume a non-empty run of spaces and tabs."""
    end = pos
    while end < len(text) and text[end] in _HORIZONTAL_SPACE:
        end += 1
    if end == pos:
        raise ParseError(text, pos, "whitespace")
    return text[pos:end], end


def line_ending(text: str, pos: int) -> Tuple[str, int]:
    """
    Consume a line terminator (LF or CRLF).

    The end of the transcript is accepted as the terminator of its last
    line and consumes nothing.
    """
    if text.startswith("\r\n", pos):
        return "\r\n", pos + 2
    if text.startswith("\n", pos):
        return "\n", pos + 1
    if at_end(text, pos):
        return "", pos
    raise ParseError(text, pos, "end of line")


def rest_of_line(text: str, pos: int) -> Tuple[str, int]:
    """
    Consume everything up to the line terminator, then the terminator.

    Returns:
        Tuple[str, int]: Line content without its terminator, and the offset
                         of the next line.
    """
    end = text.find("\n", pos)
    if end == -1:
        end = len(text)
    content = text[pos:end]
    if content.endswith("\r"):
        content = content[:-1]
    _, nxt = line_ending(text, pos + len(content))
    return content, nxt


def tag(literal: str) -> Callable[[str, int], Tuple[str, int]]:
    """
    Build a parser that matches `literal` exactly.

    Args:
        literal: Text that must appear verbatim at the cursor.

    Returns:
        Callable: Parser returning the literal and the advanced offset.
    """
    def _parse(text: str, pos: int) -> Tuple[str, int]:
        if not text.startswith(literal, pos):
            raise ParseError(text, pos, f"'{literal}'")
        return literal, pos + len(literal)

    return _parse


def peek_line(text: str, pos: int) -> str:
    """Return the line at the cursor without consuming it."""
    content, _ = rest_of_line(text, pos)
    return content


def skip_blank_lines(text: str, pos: int) -> int:
    """Advance past any whitespace-only lines."""
    while not at_end(text, pos):
        content, nxt = rest_of_line(text, pos)
        if content.strip():
            break
        pos = nxt
    return pos
