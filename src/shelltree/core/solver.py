from __future__ import annotations

"""
Transcript Solver.

Public entry points of the core: each takes the raw transcript text and
returns the decimal answer string. Parsing and query failures propagate
to the caller unchanged.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional

from shelltree.core.analysis.queries import bounded_sum, compute_deficit, minimal_sufficient
from shelltree.core.analysis.walker import fold_directories
from shelltree.core.parsing.tree_builder import parse_tree
from shelltree.domain.config import get_default_config
from shelltree.domain.constants import (
    DEFAULT_CAPACITY,
    DEFAULT_CEILING,
    DEFAULT_HEADROOM,
    DEFAULT_MAX_DEPTH,
)
from shelltree.domain.result_models import SolveResult, create_success_result
from shelltree.domain.tree_models import Directory

logger = logging.getLogger(__name__)


class Part(str, Enum):
    """Which of the two queries to answer."""
    ONE = "one"
    TWO = "two"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def solve_part_1(
        transcript: str,
        ceiling: int = DEFAULT_CEILING,
        max_depth: int = DEFAULT_MAX_DEPTH,
) -> str:
    """
    Sum of the sizes of every directory smaller than `ceiling`.

    Raises:
        ParseError: If the transcript is malformed.
    """
    tree = parse_tree(transcript, max_depth=max_depth)
    return answer_part_1(tree, ceiling)


def solve_part_2(
        transcript: str,
        capacity: int = DEFAULT_CAPACITY,
        headroom: int = DEFAULT_HEADROOM,
        max_depth: int = DEFAULT_MAX_DEPTH,
) -> str:
    """
    Size of the smallest directory whose deletion frees enough space.

    Raises:
        ParseError: If the transcript is malformed.
        StructuralInvariantError: If no directory frees enough space.
    """
    tree = parse_tree(transcript, max_depth=max_depth)
    return answer_part_2(tree, capacity, headroom)


def answer_part_1(tree: Directory, ceiling: int = DEFAULT_CEILING) -> str:
    total = bounded_sum(tree, ceiling)
    logger.info(f"Directories under {ceiling} sum to {total}")
    return f"{total}"


def answer_part_2(
        tree: Directory,
        capacity: int = DEFAULT_CAPACITY,
        headroom: int = DEFAULT_HEADROOM,
) -> str:
    deficit = compute_deficit(tree.total_size, capacity, headroom)
    logger.debug(f"Used {tree.total_size} of {capacity}; must free {deficit}")

    size = minimal_sufficient(tree, deficit)
    logger.info(f"Smallest directory freeing {deficit} has size {size}")
    return f"{size}"


SOLVERS: Dict[Part, Callable[..., str]] = {
    Part.ONE: solve_part_1,
    Part.TWO: solve_part_2,
}


def solve(
        transcript: str,
        part: Part,
        config: Optional[Dict[str, Any]] = None,
        tree: Optional[Directory] = None,
) -> SolveResult:
    """
    Answer one query and package the outcome for the interface layer.

    Args:
        transcript: Raw transcript text.
        part: Query to answer.
        config: Validated configuration; defaults are used when omitted.
        tree: Already parsed tree for `transcript`, to avoid parsing twice.

    Returns:
        SolveResult: Answer together with tree statistics.

    Raises:
        ParseError: If the transcript is malformed.
        StructuralInvariantError: If part two finds no qualifying directory.
    """
    cfg = config or get_default_config()
    if tree is None:
        tree = parse_tree(transcript, max_depth=cfg["max_depth"])

    if part is Part.ONE:
        answer = answer_part_1(tree, cfg["ceiling"])
    else:
        answer = answer_part_2(tree, cfg["capacity"], cfg["headroom"])

    count = fold_directories(tree, lambda acc, _node: acc + 1, 0)
    return create_success_result(
        part=part.value,
        answer=answer,
        root_size=tree.total_size,
        directory_count=count,
    )
