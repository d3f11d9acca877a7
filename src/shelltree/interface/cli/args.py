from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

PART_CHOICES = ("one", "two", "both")


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the shelltree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="shelltree",
        description=(
            "Rebuild a directory tree from a transcript of 'cd'/'ls' commands "
            "and answer directory size queries."
        ),
    )

    # --- Input ---
    p.add_argument(
        "transcript",
        help="Path to the transcript file, or '-' to read standard input.",
    )
    p.add_argument(
        "-p", "--part",
        choices=PART_CHOICES,
        default="both",
        help="Query to answer: 'one' (bounded sum), 'two' (minimal sufficient) or 'both'.",
    )

    # --- Query Thresholds ---
    p.add_argument(
        "--ceiling",
        type=int,
        default=None,
        help="Exclusive size ceiling for the bounded-sum query.",
    )
    p.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="Total device capacity for the minimal-sufficient query.",
    )
    p.add_argument(
        "--headroom",
        type=int,
        default=None,
        help="Free space required for the minimal-sufficient query.",
    )
    p.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        help="Maximum directory nesting accepted by the parser.",
    )

    # --- Configuration Sources ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON file with configuration overrides.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore configuration files and start from built-in defaults.",
    )

    # --- Output and Diagnostics ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the reconstructed tree before the answers.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit results as JSON.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration override dict.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides; unset options map to None.
    """
    return {
        "ceiling": args.ceiling,
        "capacity": args.capacity,
        "headroom": args.headroom,
        "max_depth": args.max_depth,
    }
