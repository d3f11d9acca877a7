from __future__ import annotations

"""
Solve Result Data Models.

Defines the result object passed from the solver to the interface layer,
and its factory functions.
"""

from dataclasses import dataclass

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SolveResult:
    """
    Outcome of answering one query over one transcript.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        part: Query identifier ('one' or 'two').
        answer: Decimal answer string, empty on failure.
        root_size: Total size of the root directory.
        directory_count: Number of directories in the tree.
    """
    ok: bool
    error: str
    part: str
    answer: str = ""
    root_size: int = 0
    directory_count: int = 0

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(
        part: str,
        answer: str,
        root_size: int,
        directory_count: int,
) -> SolveResult:
    """Build the result of a successful query."""
    return SolveResult(
        ok=True,
        error="",
        part=part,
        answer=answer,
        root_size=root_size,
        directory_count=directory_count,
    )


def create_error_result(part: str, error: str) -> SolveResult:
    """Build the result of a failed query."""
    return SolveResult(ok=False, error=error, part=part)
