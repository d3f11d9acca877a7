from __future__ import annotations

"""
Domain Error Types.

Defines the fatal failures raised by the parsing and query layers. Nothing
inside the core recovers from these; they propagate to the interface layer.
"""

from typing import Tuple


class ParseError(ValueError):
    """
    Raised when the transcript does not match the expected grammar.

    Attributes:
        position: 0-based character offset of the failure.
        line: 1-based line number of the failure.
        column: 1-based column of the failure.
        expected: Human-readable description of what the parser expected.
        fragment: Offending input, clipped to the end of the current line.
    """

    def __init__(self, text: str, position: int, expected: str) -> None:
        self.position = position
        self.expected = expected
        self.line, self.column = _line_and_column(text, position)
        self.fragment = _fragment_at(text, position)
        found = f"'{self.fragment}'" if self.fragment else "end of input"
        super().__init__(
            f"line {self.line}, column {self.column}: expected {expected}, found {found}"
        )


class StructuralInvariantError(RuntimeError):
    """Raised when a query finds no candidate on a well-formed tree."""


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _line_and_column(text: str, position: int) -> Tuple[int, int]:
    line = text.count("\n", 0, position) + 1
    line_start = text.rfind("\n", 0, position) + 1
    return line, position - line_start + 1


def _fragment_at(text: str, position: int, limit: int = 40) -> str:
    end = text.find("\n", position)
    if end == -1:
        end = len(text)
    return text[position:min(end, position + limit)].rstrip("\r")
