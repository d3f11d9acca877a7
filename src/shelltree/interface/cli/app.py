from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration
resolution (defaults, JSON file, command-line overrides), transcript
loading, solving, and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from shelltree.core.analysis.tree_renderer import render_tree
from shelltree.core.parsing.tree_builder import parse_tree
from shelltree.core.solver import Part, solve
from shelltree.core.validator import validate_config
from shelltree.domain.config import get_default_config, load_config
from shelltree.domain.errors import ParseError, StructuralInvariantError
from shelltree.domain.result_models import SolveResult, create_error_result
from shelltree.infra.fs import read_transcript
from shelltree.infra.logging import LoggingConfig, configure_logging, get_logger
from shelltree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 solve failure, 2 bad input).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional file)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Configuration hierarchy
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 4. Transcript loading
    try:
        transcript = read_transcript(args.transcript)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read transcript '{args.transcript}': {e}")
        print(f"ERROR: cannot read transcript '{args.transcript}': {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    # 5. Parse once, answer each requested part
    parts = [Part.ONE, Part.TWO] if args.part == "both" else [Part(args.part)]
    results: List[SolveResult] = []
    try:
        tree = parse_tree(transcript, max_depth=conf["max_depth"])
        if args.print_tree and not args.json_output:
            print("\n".join(render_tree(tree)))
        for part in parts:
            results.append(solve(transcript, part, conf, tree=tree))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except (ParseError, StructuralInvariantError) as e:
        logger.error(f"Failed to solve transcript: {e}")
        for part in parts[len(results):]:
            results.append(create_error_result(part.value, str(e)))

    # 6. Output rendering
    if args.json_output:
        print(json.dumps([asdict(r) for r in results], indent=2))
    else:
        _print_human_summary(results)

    return EXIT_OK if all(r.ok for r in results) else EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Merge non-None override values into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(results: List[SolveResult]) -> None:
    for result in results:
        if not result.ok:
            print(f"ERROR: {result.error}", file=sys.stderr)
            continue
        print(f"The puzzle solution (part {result.part}) is:\n{result.answer}")


if __name__ == "__main__":
    sys.exit(main())
